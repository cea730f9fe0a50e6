"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    values, non-integer dimensions, unsupported multiplication operands.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when the number of values does not match row_count * col_count,
    when the inner dimensions of a product disagree, or when an operation
    would produce a matrix with a zero dimension.
    """
    pass


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by determinant, adjugate and inverse.

    Attributes:
        row_count: Number of rows of the offending matrix
        col_count: Number of columns of the offending matrix
    """

    def __init__(
        self,
        message: str,
        row_count: int | None = None,
        col_count: int | None = None
    ):
        super().__init__(message)
        self.row_count = row_count
        self.col_count = col_count


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the matrix.

    Also an IndexError so that callers using the builtin exception keep
    working.

    Attributes:
        index: The rejected index
        bound: Exclusive upper bound for the index
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by inverse() when the determinant is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
