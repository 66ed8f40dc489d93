import dataclasses

import numpy as np
import pytest

from chaosgame.vectors import Complex, Matrix2x2, Vector2D


def test_vector_add_and_subtract():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(0.5, -1.0)
    assert a.add(b) == Vector2D(1.5, 1.0)
    assert a.subtract(b) == Vector2D(0.5, 3.0)


def test_vector_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Vector2D(1.0, 2.0).x0 = 3.0


def test_matrix_multiply():
    matrix = Matrix2x2(1.0, 2.0, 3.0, 4.0)
    assert matrix.multiply(Vector2D(1.0, 1.0)) == Vector2D(3.0, 7.0)


def test_to_array():
    np.testing.assert_array_equal(Vector2D(1.0, 2.0).to_array(), [1.0, 2.0])
    np.testing.assert_array_equal(Matrix2x2(1.0, 2.0, 3.0, 4.0).to_array(), [[1.0, 2.0], [3.0, 4.0]])


def test_complex_parts():
    c = Complex(-0.74543, 0.11301)
    assert c.real == -0.74543
    assert c.imaginary == 0.11301
    assert c.to_complex() == complex(-0.74543, 0.11301)


def test_complex_sqrt_is_principal_root():
    assert Complex(3.0, 4.0).sqrt() == Complex(2.0, 1.0)
    assert Complex(-4.0, 0.0).sqrt() == Complex(0.0, 2.0)
    root = Complex(0.0, -2.0).sqrt()
    assert root.real == pytest.approx(1.0)
    assert root.imaginary == pytest.approx(-1.0)


def test_complex_subtract_stays_complex():
    assert isinstance(Complex(1.0, 1.0).subtract(Complex(0.5, 0.5)), Complex)
