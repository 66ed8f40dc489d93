import cmath
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2D:
    x0: float
    x1: float

    def add(self, other):
        return Vector2D(self.x0 + other.x0, self.x1 + other.x1)

    def subtract(self, other):
        return Vector2D(self.x0 - other.x0, self.x1 - other.x1)

    def to_array(self):
        return np.array([self.x0, self.x1], dtype=np.float64)


@dataclass(frozen=True)
class Matrix2x2:
    a00: float
    a01: float
    a10: float
    a11: float

    def multiply(self, vector):
        """Apply the linear map to a vector."""
        return Vector2D(
            self.a00 * vector.x0 + self.a01 * vector.x1,
            self.a10 * vector.x0 + self.a11 * vector.x1,
        )

    def to_array(self):
        return np.array([[self.a00, self.a01], [self.a10, self.a11]], dtype=np.float64)


@dataclass(frozen=True)
class Complex(Vector2D):
    """A Vector2D read as real (x0) and imaginary (x1) parts."""

    @property
    def real(self):
        return self.x0

    @property
    def imaginary(self):
        return self.x1

    def subtract(self, other):
        return Complex(self.x0 - other.x0, self.x1 - other.x1)

    def sqrt(self):
        """Principal square root."""
        root = cmath.sqrt(complex(self.x0, self.x1))
        return Complex(root.real, root.imag)

    def to_complex(self):
        return complex(self.x0, self.x1)
