"""
Numerical precision constants and utilities.

Matrices store IEEE single precision values. Arithmetic inside an operation
runs in double precision on those stored values and the result is rounded
back to single precision once, when it is stored.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any


# Element storage
STORAGE_DTYPE = np.float32

# Intermediate arithmetic
COMPUTE_DTYPE = np.float64


def to_single(value: float) -> float:
    """
    Round a scalar to the nearest single precision value.

    Args:
        value: Any real number

    Returns:
        Python float holding a value exactly representable in float32

    Examples:
        >>> to_single(0.1)
        0.10000000149011612
        >>> to_single(74.0)
        74.0
    """
    return float(np.float32(value))


def to_storage(values: ArrayLike) -> NDArray[np.float32]:
    """
    Round an array to single precision storage.

    Always returns a new array, never a view of the input.
    """
    return np.array(values, dtype=STORAGE_DTYPE, copy=True)


def to_compute(values: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """Widen stored values for double precision arithmetic."""
    return np.asarray(values, dtype=COMPUTE_DTYPE)


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    a = np.asarray(a, dtype=COMPUTE_DTYPE)
    b = np.asarray(b, dtype=COMPUTE_DTYPE)
    return np.abs(a - b) <= atol + rtol * np.abs(b)
