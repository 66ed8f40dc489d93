from dataclasses import dataclass, replace
from typing import Tuple

from chaosgame.exceptions import ConstructionError, EmptyTransformSetError
from chaosgame.transforms import Transform2D
from chaosgame.vectors import Vector2D


def validate_bounds(min_coords, max_coords, error=ConstructionError):
    if min_coords.x0 >= max_coords.x0 or min_coords.x1 >= max_coords.x1:
        raise error(
            f"Min coordinates {min_coords} must be less than max coordinates {max_coords} on both axes"
        )


@dataclass(frozen=True)
class ChaosGameDescription:
    transforms: Tuple[Transform2D, ...]
    min_coords: Vector2D
    max_coords: Vector2D

    def __post_init__(self):
        object.__setattr__(self, "transforms", tuple(self.transforms))
        if not self.transforms:
            raise EmptyTransformSetError("A chaos game description needs at least one transform")
        kinds = {transform.kind for transform in self.transforms}
        if len(kinds) > 1:
            raise ConstructionError(f"Cannot mix transform kinds in one description: {sorted(kinds)}")
        validate_bounds(self.min_coords, self.max_coords)

    @property
    def kind(self):
        """``"Affine2D"`` or ``"Julia"``."""
        return self.transforms[0].kind

    @property
    def center(self):
        return Vector2D(
            (self.min_coords.x0 + self.max_coords.x0) / 2,
            (self.min_coords.x1 + self.max_coords.x1) / 2,
        )

    def with_transforms(self, transforms):
        return replace(self, transforms=tuple(transforms))

    def with_bounds(self, min_coords, max_coords):
        return replace(self, min_coords=min_coords, max_coords=max_coords)
