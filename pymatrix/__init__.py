"""
PyMatrix: a small dense matrix value type for Python.

Immutable single precision matrices with structural transforms
(transpose, rotate, mirror) and cofactor-based linear algebra
(determinant, adjugate, inverse) for small matrices.

Submodules:
    core: Exceptions, validation, precision and tolerances
    dense: The Matrix type and its builders
"""

__version__ = "0.1.0"

from pymatrix.dense import Matrix, matrix, identity, scalar, vector
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Matrix",
    "matrix",
    "identity",
    "scalar",
    "vector",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
]
