"""
Point mappings used by the chaos game.

Transform2D is a plain union of the two variants below. Both are frozen
dataclasses exposing ``transform(point)``; the orbit kernels in
``chaosgame.orbit`` use ``pack_transforms`` to get the same parameters as
numpy arrays.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from chaosgame.exceptions import ConstructionError
from chaosgame.vectors import Complex, Matrix2x2, Vector2D

AFFINE = "Affine2D"
JULIA = "Julia"


@dataclass(frozen=True)
class AffineTransform2D:
    matrix: Matrix2x2
    vector: Vector2D

    kind = AFFINE

    def transform(self, point: Vector2D) -> Vector2D:
        return self.matrix.multiply(point).add(self.vector)


@dataclass(frozen=True)
class JuliaTransform:
    point: Complex
    sign: int

    kind = JULIA

    def __post_init__(self):
        if self.sign not in (1, -1):
            raise ConstructionError(f"Julia sign must be 1 or -1, got {self.sign}")

    def transform(self, point: Vector2D) -> Vector2D:
        """sign * sqrt(z - c), principal branch."""
        z = Complex(point.x0, point.x1)
        root = z.subtract(self.point).sqrt()
        return Vector2D(self.sign * root.x0, self.sign * root.x1)


Transform2D = Union[AffineTransform2D, JuliaTransform]


def julia_pair(constant: Complex) -> Tuple[JuliaTransform, JuliaTransform]:
    """Both square-root branches for one constant, negative sign first."""
    return JuliaTransform(constant, -1), JuliaTransform(constant, 1)


def pack_transforms(transforms: Sequence[Transform2D]):
    """
    Pack transforms of a single kind into numpy arrays.

    Affine sets give ``(matrices, vectors)`` with shapes (n, 2, 2) and (n, 2).
    Julia sets give ``(constants, signs)`` with shapes (n,) complex and (n,) float.
    """
    kind = transforms[0].kind
    if kind == AFFINE:
        matrices = np.array([t.matrix.to_array() for t in transforms], dtype=np.float64)
        vectors = np.array([t.vector.to_array() for t in transforms], dtype=np.float64)
        return matrices, vectors

    constants = np.array([t.point.to_complex() for t in transforms], dtype=np.complex128)
    signs = np.array([t.sign for t in transforms], dtype=np.float64)
    return constants, signs
