"""
Built-in chaos game descriptions and their name registry
"""

from chaosgame.description import ChaosGameDescription
from chaosgame.transforms import AffineTransform2D, julia_pair
from chaosgame.vectors import Complex, Matrix2x2, Vector2D


def sierpinski():
    half = Matrix2x2(0.5, 0.0, 0.0, 0.5)
    return ChaosGameDescription(
        transforms=(
            AffineTransform2D(half, Vector2D(0.0, 0.0)),
            AffineTransform2D(half, Vector2D(0.25, 0.5)),
            AffineTransform2D(half, Vector2D(0.5, 0.0)),
        ),
        min_coords=Vector2D(0.0, 0.0),
        max_coords=Vector2D(1.0, 1.0),
    )


def barnsley():
    return ChaosGameDescription(
        transforms=(
            AffineTransform2D(Matrix2x2(0.0, 0.0, 0.0, 0.16), Vector2D(0.0, 0.0)),
            AffineTransform2D(Matrix2x2(0.85, 0.04, -0.04, 0.85), Vector2D(0.0, 1.6)),
            AffineTransform2D(Matrix2x2(0.2, -0.26, 0.23, 0.22), Vector2D(0.0, 1.6)),
            AffineTransform2D(Matrix2x2(-0.15, 0.28, 0.26, 0.24), Vector2D(0.0, 0.44)),
        ),
        min_coords=Vector2D(-2.65, 0.0),
        max_coords=Vector2D(2.65, 10.0),
    )


def julia_set():
    return ChaosGameDescription(
        transforms=julia_pair(Complex(-0.74543, 0.11301)),
        min_coords=Vector2D(-1.6, -1.0),
        max_coords=Vector2D(1.6, 1.0),
    )


# available presets registry
AVAILABLE_PRESETS = {
    "sierpinski": sierpinski,
    "barnsley": barnsley,
    "julia": julia_set,
}


def get_preset(name):
    """Build a preset description by case-insensitive name."""
    try:
        factory = AVAILABLE_PRESETS[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}', choose from {sorted(AVAILABLE_PRESETS)}") from None
    return factory()
