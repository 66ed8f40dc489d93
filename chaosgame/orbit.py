import cmath

import numpy as np
from numba import njit


@njit
def iterate_affine(matrices, vectors, choices, x0, x1):
    """
    Follow an orbit through affine maps, one map per entry in ``choices``.
    Returns every visited point as an (n, 2) array.
    """
    n_steps = choices.shape[0]
    points = np.empty((n_steps, 2), dtype=np.float64)

    for k in range(n_steps):
        i = choices[k]
        new_x0 = matrices[i, 0, 0] * x0 + matrices[i, 0, 1] * x1 + vectors[i, 0]
        new_x1 = matrices[i, 1, 0] * x0 + matrices[i, 1, 1] * x1 + vectors[i, 1]
        x0 = new_x0
        x1 = new_x1
        points[k, 0] = x0
        points[k, 1] = x1

    return points


@njit
def iterate_julia(constants, signs, choices, x0, x1):
    """
    Follow an orbit through z -> sign * sqrt(z - c), one (c, sign) pair per
    entry in ``choices``. Returns every visited point as an (n, 2) array.
    """
    n_steps = choices.shape[0]
    points = np.empty((n_steps, 2), dtype=np.float64)
    z = complex(x0, x1)

    for k in range(n_steps):
        i = choices[k]
        z = signs[i] * cmath.sqrt(z - constants[i])
        points[k, 0] = z.real
        points[k, 1] = z.imag

    return points
