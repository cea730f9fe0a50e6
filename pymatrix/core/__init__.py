"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the dense
matrix type.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage/compute dtypes and single precision rounding
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.core.tolerances import (
    ToleranceTier,
    SINGLE_PRECISION,
)

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    # Tolerances
    "ToleranceTier",
    "SINGLE_PRECISION",
]
