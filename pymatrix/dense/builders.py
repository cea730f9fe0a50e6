"""
Shorthand builders for matrices.

    matrix(2, 3)(1, 2, 3, 4, 5, 6) =>
      |1, 2, 3|
      |4, 5, 6|

    identity(3) =>
      |1, 0, 0|
      |0, 1, 0|
      |0, 0, 1|
"""

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.validation import check_1d, check_array, check_dimension, check_scalar
from pymatrix.dense.matrix_type import Matrix


def matrix(row_count: int, col_count: int) -> Callable[..., Matrix]:
    """
    Builder bound to fixed dimensions.

    The dimensions are validated here; the value count is validated when
    the returned function is called.

    Args:
        row_count: Number of rows
        col_count: Number of columns

    Returns:
        Function taking the values as positional arguments and returning
        a row_count x col_count Matrix

    Examples:
        >>> m = matrix(3, 1)(1, 2, 3)
        >>> m.shape
        (3, 1)
    """
    row_count = check_dimension(row_count, 'row_count')
    col_count = check_dimension(col_count, 'col_count')

    def build(*values: float) -> Matrix:
        return Matrix(row_count, col_count, list(values))

    build.__name__ = f"matrix_{row_count}x{col_count}"
    return build


def identity(size: int) -> Matrix:
    """size x size matrix with 1 on the main diagonal and 0 elsewhere."""
    size = check_dimension(size, 'size')
    return Matrix(size, size, np.eye(size).reshape(-1))


def scalar(row_count: int, col_count: int, value: float) -> Matrix:
    """
    Matrix with every element set to value.

        scalar(2, 3, 5) =>
          |5, 5, 5|
          |5, 5, 5|
    """
    row_count = check_dimension(row_count, 'row_count')
    col_count = check_dimension(col_count, 'col_count')
    value = check_scalar(value, 'value')
    return Matrix(row_count, col_count, np.full(row_count * col_count, value))


def vector(values: ArrayLike) -> Matrix:
    """
    Column matrix from a flat sequence.

        vector([1, 2, 3]) =>
          |1|
          |2|
          |3|
    """
    array = check_array(values, 'values')
    check_1d(array, 'values')
    return Matrix(array.shape[0], 1, array)
