"""
Shared fixtures for the chaos game tests.
"""
import pytest

from chaosgame.canvas import ChaosCanvas
from chaosgame.presets import barnsley, julia_set, sierpinski
from chaosgame.vectors import Vector2D


SIERPINSKI_TEXT = """\
Affine2D                        # Type of transform
0, 0                            # Lower left
1, 1                            # Upper right
0.5, 0, 0, 0.5, 0, 0            # 1st transform (a00, a01, a10, a11, b0, b1)
0.5, 0, 0, 0.5, .25, .5         # 2nd transform
0.5, 0, 0, 0.5, .5, 0           # 3rd transform
"""

JULIA_TEXT = """\
# Julia set with c = -0.74543 + 0.11301i
Julia
-1.6, -1

1.6, 1
-.74543, .11301                 # Real and imaginary parts of c
"""


@pytest.fixture
def canvas():
    return ChaosCanvas(100, 100, Vector2D(0, 0), Vector2D(200, 200))


@pytest.fixture
def sierpinski_description():
    return sierpinski()


@pytest.fixture
def barnsley_description():
    return barnsley()


@pytest.fixture
def julia_description():
    return julia_set()
