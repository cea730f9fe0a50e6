"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral, Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Object dtype input
    is widened to float64 when every element is a real number (e.g. Python
    ints too large for int64) and rejected otherwise. Complex input is
    rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with real numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        # Python ints beyond int64 land here alongside genuinely bad input
        if not all(
            isinstance(v, Real) and not isinstance(v, (bool, np.bool_))
            for v in result.flat
        ):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        try:
            result = result.astype(np.float64)
        except OverflowError as e:
            raise ValidationError(f"{name}: value too large for a float: {e}") from e

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer (bools rejected)
        DimensionError: If value < 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise DimensionError(f"{name}: must be at least 1, got {value}")
    return int(value)


def check_length(
    array: NDArray[Any],
    row_count: int,
    col_count: int,
    name: str
) -> None:
    """
    Verify a flat value array fills a row_count x col_count matrix exactly.

    Args:
        array: 1D array of values
        row_count: Number of rows
        col_count: Number of columns
        name: Parameter name for error messages

    Raises:
        DimensionError: If there are too few or too many values
    """
    expected = row_count * col_count
    n = array.shape[0]
    if n < expected:
        raise DimensionError(
            f"{name}: not enough values for a {row_count}x{col_count} matrix "
            f"(expected {expected}, got {n})"
        )
    if n > expected:
        raise DimensionError(
            f"{name}: too many values for a {row_count}x{col_count} matrix "
            f"(expected {expected}, got {n})"
        )


def check_square(row_count: int, col_count: int, operation: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        row_count: Number of rows
        col_count: Number of columns
        operation: Operation name for error messages

    Raises:
        NotSquareError: If row_count != col_count
    """
    if row_count != col_count:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {row_count}x{col_count}",
            row_count=row_count,
            col_count=col_count,
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a row or column index lies in [0, bound).

    Negative indices are rejected; there is no wrap-around.

    Args:
        index: Candidate index
        bound: Number of rows or columns
        axis: 'row' or 'col', used in the error message

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer (bools rejected)
        IndexOutOfRangeError: If index < 0 or index >= bound
    """
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise ValidationError(
            f"{axis}: expected an integer index, got {type(index).__name__} {index!r}"
        )
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
            axis=axis,
        )
    return int(index)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a real number.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number (bools rejected)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)
