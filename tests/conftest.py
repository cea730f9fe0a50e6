"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix, matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m31():
    return matrix(3, 1)(1, 2, 3)


@pytest.fixture
def m32():
    """
    |1, 2|
    |3, 4|
    |5, 6|
    """
    return matrix(3, 2)(1, 2, 3, 4, 5, 6)


@pytest.fixture
def m33():
    """Singular 3x3 (rows in arithmetic progression)."""
    return matrix(3, 3)(1, 2, 3, 4, 5, 6, 7, 8, 9)


@pytest.fixture
def invertible():
    """3x3 with determinant 1 and an integer inverse."""
    return matrix(3, 3)(1, 2, 3, 0, 1, 4, 5, 6, 0)


@pytest.fixture
def random_matrix(rng):
    """Factory for small-integer random matrices of a given shape."""
    def make(row_count, col_count):
        values = rng.integers(-9, 10, size=row_count * col_count)
        return Matrix(row_count, col_count, values)
    return make
