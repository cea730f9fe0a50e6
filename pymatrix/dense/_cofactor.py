"""
Cofactor kernels on raw ndarrays.

These operate on 2D arrays and know nothing about the Matrix type, so the
recursion in the determinant does not construct a Matrix per level.
Callers are responsible for shape checks.

The determinant is cofactor expansion along the first row and costs O(n!).
It is meant for small matrices only.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pymatrix.core.precision import to_compute

# Sizes above this trigger a RuntimeWarning in Matrix.determinant()
COFACTOR_WARN_SIZE = 8


def minor_of(grid: NDArray[Any], row: int, col: int) -> NDArray[Any]:
    """Submatrix of grid with the given row and column removed (a copy)."""
    return np.delete(np.delete(grid, row, axis=0), col, axis=1)


def cofactor_determinant(grid: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by recursive cofactor expansion along row 0.

    Arithmetic is done in double precision. No rounding happens between
    recursion levels.

    Args:
        grid: Square 2D array, at least 1x1

    Returns:
        Determinant as a Python float
    """
    a = to_compute(grid)
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    total = 0.0
    for x in range(n):
        total += float(a[0, x]) * cofactor_determinant(minor_of(a, 0, x)) * (-1) ** x
    return total


def adjugate_values(grid: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """
    Adjugate of a square grid, flattened row-major.

    Minors are taken from the transpose in row-major order and the sign of
    each cofactor is (-1) ** i for the flat index i of that minor. For odd
    sizes this equals the (row + col) checkerboard; for even sizes it does
    not.

    Args:
        grid: Square 2D array, at least 2x2

    Returns:
        1D float64 array of length n * n
    """
    transposed = to_compute(grid).T
    n = transposed.shape[0]
    result = np.empty(n * n, dtype=np.float64)
    i = 0
    for y in range(n):
        for x in range(n):
            result[i] = cofactor_determinant(minor_of(transposed, y, x)) * (-1) ** i
            i += 1
    return result
