"""
Dense matrix module.

Provides a small immutable matrix type with structural transforms and
cofactor-based linear algebra, intended for small matrices.

Public API:
    Matrix(rows, cols, values)  - The matrix value type
    matrix(rows, cols)(*values) - Shorthand builder
    identity(size)              - Identity matrix
    scalar(rows, cols, value)   - Constant-filled matrix
    vector(values)              - Column matrix
"""

from pymatrix.dense.matrix_type import Matrix
from pymatrix.dense.builders import (
    matrix,
    identity,
    scalar,
    vector,
)

__all__ = [
    "Matrix",
    "matrix",
    "identity",
    "scalar",
    "vector",
]
