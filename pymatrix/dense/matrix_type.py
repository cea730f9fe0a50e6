"""
Dense matrix value type.

A Matrix is a fixed-size, row-major grid of single precision values:

    Matrix(2, 3, [1, 2, 3, 4, 5, 6]) =>
      |1, 2, 3|
      |4, 5, 6|

Instances are immutable. Every transform returns a new Matrix with its own
buffer; nothing is shared between a matrix and the matrices derived from it.

Arithmetic runs in double precision on the stored values and each result is
rounded to single precision once, when it is stored.
"""

from __future__ import annotations

import functools
import warnings
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.precision import is_close, to_compute, to_single, to_storage
from pymatrix.core.tolerances import SINGLE_PRECISION, ToleranceTier
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_scalar,
    check_square,
)
from pymatrix.dense._cofactor import (
    COFACTOR_WARN_SIZE,
    adjugate_values,
    cofactor_determinant,
    minor_of,
)

_MISSING = object()


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Immutable dense matrix of float32 values in row-major order.

    The element at (row, col) is stored at values[row * col_count + col].

    Attributes:
        row_count: Number of rows (>= 1)
        col_count: Number of columns (>= 1)
        values: Read-only 1D float32 array of length row_count * col_count

    Raises:
        ValidationError: If a dimension is not an integer or values are
            not numeric
        DimensionError: If a dimension is < 1 or the number of values
            does not equal row_count * col_count
    """
    row_count: int
    col_count: int
    values: NDArray[np.float32]

    def __post_init__(self) -> None:
        row_count = check_dimension(self.row_count, 'row_count')
        col_count = check_dimension(self.col_count, 'col_count')

        values = self.values
        if isinstance(values, Iterable) and not isinstance(values, (np.ndarray, Sequence)):
            # generators and other one-shot iterables
            values = list(values)
        values = check_array(values, 'values')
        check_1d(values, 'values')
        check_length(values, row_count, col_count, 'values')

        storage = to_storage(values)
        storage.flags.writeable = False

        object.__setattr__(self, 'row_count', row_count)
        object.__setattr__(self, 'col_count', col_count)
        object.__setattr__(self, 'values', storage)

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Construct from a nested sequence of rows or a 2D array.

            Matrix.from_rows([[1, 2, 3], [4, 5, 6]]) =>
              |1, 2, 3|
              |4, 5, 6|

        Raises:
            ValidationError: If rows are ragged or non-numeric
            DimensionError: If the input is not 2D
        """
        grid = check_array(rows, 'rows')
        check_2d(grid, 'rows')
        return cls._from_grid(grid)

    @classmethod
    def _from_grid(cls, grid: NDArray[Any]) -> Matrix:
        return cls(grid.shape[0], grid.shape[1], grid.reshape(-1))

    @property
    def _grid(self) -> NDArray[np.float32]:
        """Read-only 2D view of the storage."""
        return self.values.reshape(self.row_count, self.col_count)

    # === Accessors ===

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, col_count)."""
        return (self.row_count, self.col_count)

    @property
    def is_square(self) -> bool:
        return self.row_count == self.col_count

    def get(self, row: int, col: int) -> float:
        """
        Element at (row, col).

        Raises:
            IndexOutOfRangeError: If row or col is negative or past the end
        """
        row = check_index(row, self.row_count, 'row')
        col = check_index(col, self.col_count, 'col')
        return float(self.values[row * self.col_count + col])

    def to_numpy(self) -> NDArray[np.float32]:
        """Writable 2D float32 copy of the matrix."""
        return np.array(self._grid, copy=True)

    def tolist(self) -> list[list[float]]:
        """Nested lists of Python floats, one list per row."""
        return self._grid.tolist()

    # === Equality ===

    def equals(self, other: Any) -> bool:
        """
        Exact structural equality.

        False if the shapes differ. Otherwise True iff every stored element
        compares equal, with no tolerance. NaN is never equal to anything and
        -0.0 equals 0.0.
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.all(self.values == other.values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.row_count, self.col_count, tuple(self.values.tolist())))

    def allclose(self, other: Matrix, tier: ToleranceTier = SINGLE_PRECISION) -> bool:
        """
        Approximate equality within a tolerance tier.

        Unlike equals(), this tolerates rounding differences. Shapes must
        still match exactly.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self.values, other.values, tier.rtol, tier.atol)))

    # === Structural transforms ===

    def transpose(self) -> Matrix:
        """
        Flips the matrix over its diagonal.

            |1, 2, 3| => |1, 4|
            |4, 5, 6|    |2, 5|
                         |3, 6|
        """
        return Matrix._from_grid(self._grid.T)

    def rotate(self) -> Matrix:
        """
        Rotates the matrix 90 degrees clockwise.

        Output row x is source column x read from the bottom row up.

            |1, 2, 3| => |4, 1|
            |4, 5, 6|    |5, 2|
                         |6, 3|
        """
        return Matrix._from_grid(self._grid[::-1].T)

    def mirror(self) -> Matrix:
        """
        Reverses the values of each row.

            |1, 2| => |2, 1|
            |3, 4|    |4, 3|
        """
        return Matrix._from_grid(self._grid[:, ::-1])

    def row(self, y: int) -> Matrix:
        """Row y as a 1 x col_count matrix."""
        y = check_index(y, self.row_count, 'row')
        return Matrix._from_grid(self._grid[y:y + 1, :])

    def col(self, x: int) -> Matrix:
        """Column x as a row_count x 1 matrix."""
        x = check_index(x, self.col_count, 'col')
        return Matrix._from_grid(self._grid[:, x:x + 1])

    # === Multiplication ===

    def scale(self, factor: float) -> Matrix:
        """
        Multiplies every element by a scalar.

        The factor is rounded to single precision before multiplying.

            |1, 2| * 2 => |2, 4|
            |3, 4|        |6, 8|

        Raises:
            ValidationError: If factor is not a real number
        """
        factor = to_single(check_scalar(factor, 'factor'))
        return Matrix(self.row_count, self.col_count, to_compute(self.values) * factor)

    def matmul(self, operand: Matrix) -> Matrix:
        """
        Matrix product.

        m x n times n x j gives m x j. Element (y, x) is the sum over z of
        self(y, z) * operand(z, x), accumulated in double precision from 0
        in order of increasing z.

            |1, 2| @ |1, 2| => |7, 10|
                     |3, 4|

        Raises:
            ValidationError: If operand is not a Matrix
            DimensionError: If self.col_count != operand.row_count
        """
        if not isinstance(operand, Matrix):
            raise ValidationError(
                f"matmul: expected a Matrix, got {type(operand).__name__}"
            )
        if self.col_count != operand.row_count:
            raise DimensionError(
                f"matmul: cannot multiply {self.row_count}x{self.col_count} by "
                f"{operand.row_count}x{operand.col_count}, inner dimensions "
                f"{self.col_count} and {operand.row_count} differ"
            )
        left = to_compute(self._grid)
        right = to_compute(operand._grid)
        product = np.zeros((self.row_count, operand.col_count), dtype=np.float64)
        # z ascending, one multiply and one add per term (no BLAS reordering)
        for z in range(self.col_count):
            product += left[:, z:z + 1] * right[z:z + 1, :]
        return Matrix._from_grid(product)

    def multiply(self, operand: float | Matrix) -> Matrix:
        """
        Multiplies by a scalar or by another matrix.

        Dispatches to scale() for real numbers and matmul() for matrices.

        Raises:
            ValidationError: If operand is neither a real number nor a Matrix
            DimensionError: If matrix inner dimensions differ
        """
        if isinstance(operand, Matrix):
            return self.matmul(operand)
        if isinstance(operand, Real) and not isinstance(operand, (bool, np.bool_)):
            return self.scale(operand)
        raise ValidationError(
            f"multiply: expected a real number or Matrix, got {type(operand).__name__}"
        )

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, (bool, np.bool_)) or not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    # === Minors and cofactors ===

    def minor(self, row: int, col: int) -> Matrix:
        """
        Submatrix with the given row and column removed.

            |1, 2, 3|.minor(0, 0) => |5, 6|
            |4, 5, 6|

        Raises:
            DimensionError: If the matrix has a single row or column
            IndexOutOfRangeError: If row or col is out of range
        """
        if self.row_count < 2 or self.col_count < 2:
            raise DimensionError(
                f"minor: a {self.row_count}x{self.col_count} matrix has no minors"
            )
        row = check_index(row, self.row_count, 'row')
        col = check_index(col, self.col_count, 'col')
        return Matrix._from_grid(minor_of(self._grid, row, col))

    def minors(self) -> tuple[Matrix, ...]:
        """Every minor(y, x), rows outer and columns inner."""
        return tuple(
            self.minor(y, x)
            for y in range(self.row_count)
            for x in range(self.col_count)
        )

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Costs O(n!); warns above COFACTOR_WARN_SIZE.

            |1, 2| => 1*4 - 2*3 => -2
            |3, 4|

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.row_count, self.col_count, 'determinant')
        self._warn_if_large('determinant')
        return to_single(cofactor_determinant(self._grid))

    def adjugate(self) -> Matrix:
        """
        Adjugate: cofactors of the transpose.

        The cofactor sign is (-1) ** i where i is the position of the minor
        in minors() of the transpose. The adjugate of a 1x1 matrix is [1].

            |1, 2, 3| => |-3,   6, -3|
            |4, 5, 6|    | 6, -12,  6|
            |7, 8, 9|    |-3,   6, -3|

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.row_count, self.col_count, 'adjugate')
        self._warn_if_large('adjugate')
        return Matrix(self.row_count, self.col_count, self._adjugate_values())

    def inverse(self) -> Matrix:
        """
        Inverse as adjugate / determinant.

        The zero test and the division use the double precision determinant,
        so a matrix whose determinant() rounds to 0.0 in single precision
        can still be inverted.

            |1, 2, 3|    |-24,  18,  5|
            |0, 1, 4| => | 20, -15, -4|
            |5, 6, 0|    | -5,   4,  1|

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero
        """
        check_square(self.row_count, self.col_count, 'inverse')
        self._warn_if_large('inverse')
        det = cofactor_determinant(self._grid)
        if det == 0.0:
            raise SingularMatrixError(
                f"inverse: {self.row_count}x{self.col_count} matrix is singular "
                f"(determinant is 0)",
                matrix_name=repr(self),
                determinant=to_single(det),
            )
        adjugate = to_storage(self._adjugate_values())
        return Matrix(self.row_count, self.col_count, to_compute(adjugate) / det)

    def _adjugate_values(self) -> NDArray[np.float64]:
        if self.row_count == 1:
            return np.ones(1, dtype=np.float64)
        return adjugate_values(self._grid)

    def _warn_if_large(self, operation: str) -> None:
        if self.row_count > COFACTOR_WARN_SIZE:
            warnings.warn(
                f"{operation}: cofactor expansion of a {self.row_count}x"
                f"{self.col_count} matrix costs O(n!) and may be very slow",
                RuntimeWarning,
                stacklevel=3,
            )

    # === Functional helpers ===

    def map(self, fn: Callable[[float], float]) -> Matrix:
        """Applies fn to every element in row-major order."""
        return Matrix(self.row_count, self.col_count, [fn(v) for v in self.values.tolist()])

    def reduce(self, fn: Callable[[Any, float], Any], initial: Any = _MISSING) -> Any:
        """
        Left fold over the elements in row-major order.

        Without an initial value the fold starts from the first element.
        """
        if initial is _MISSING:
            return functools.reduce(fn, self.values.tolist())
        return functools.reduce(fn, self.values.tolist(), initial)

    # === Presentation ===

    def __repr__(self) -> str:
        return f"Matrix({self.row_count}, {self.col_count}, {self.values.tolist()})"

    def __str__(self) -> str:
        return "\n".join(
            "|" + ", ".join(f"{v:g}" for v in row) + "|"
            for row in self.tolist()
        )
