"""
Tests for multiplication, minors, determinant, adjugate and inverse.

Reference values come from hand expansion; random cases are checked
against numpy.linalg.
"""

import warnings

import numpy as np
import pytest

from pymatrix import (
    DimensionError,
    IndexOutOfRangeError,
    Matrix,
    NotSquareError,
    SingularMatrixError,
    ValidationError,
    identity,
    matrix,
)
from pymatrix.core.tolerances import SINGLE_PRECISION


def unimodular(rng, size):
    """Integer matrix with determinant 1, so its inverse is integer too."""
    lower = np.tril(rng.integers(-2, 3, size=(size, size)), -1) + np.eye(size, dtype=int)
    upper = np.triu(rng.integers(-2, 3, size=(size, size)), 1) + np.eye(size, dtype=int)
    return Matrix.from_rows(lower @ upper)


# ═══════════════════════════════════════════════════════════════════════
# Multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestScale:

    def test_multiply_by_scalar(self, m32):
        assert m32.multiply(2) == matrix(3, 2)(2, 4, 6, 8, 10, 12)

    def test_scale(self, m32):
        assert m32.scale(0.5) == matrix(3, 2)(0.5, 1, 1.5, 2, 2.5, 3)

    def test_operators(self, m32):
        expected = matrix(3, 2)(3, 6, 9, 12, 15, 18)
        assert m32 * 3 == expected
        assert 3 * m32 == expected

    def test_shape_preserved(self, m31):
        assert m31.multiply(-1).shape == (3, 1)

    def test_factor_rounded_to_single(self):
        assert matrix(1, 1)(1).scale(0.1) == matrix(1, 1)(0.1)

    def test_bool_rejected(self, m32):
        with pytest.raises(ValidationError):
            m32.multiply(True)

    def test_string_rejected(self, m32):
        with pytest.raises(ValidationError, match="real number or Matrix"):
            m32.multiply("2")

    def test_star_between_matrices_unsupported(self, m32):
        with pytest.raises(TypeError):
            m32 * m32


class TestMatmul:

    def test_3x2_by_2x1(self, m32):
        assert m32.multiply(matrix(2, 1)(1, 2)) == matrix(3, 1)(5, 11, 17)

    def test_3x1_by_1x2(self, m31):
        assert m31.multiply(matrix(1, 2)(1, 2)) == matrix(3, 2)(1, 2, 2, 4, 3, 6)

    def test_1x2_by_2x2(self):
        assert matrix(1, 2)(1, 2) @ matrix(2, 2)(1, 2, 3, 4) == matrix(1, 2)(7, 10)

    def test_identity_left_and_right(self, m32):
        assert identity(3).multiply(m32) == m32
        assert m32.multiply(identity(2)) == m32

    def test_inner_dimension_mismatch(self, m32):
        with pytest.raises(DimensionError, match="inner dimensions 2 and 3"):
            m32.multiply(m32)

    def test_matmul_rejects_scalar(self, m32):
        with pytest.raises(ValidationError):
            m32.matmul(2)

    def test_matches_numpy(self, random_matrix):
        a = random_matrix(3, 4)
        b = random_matrix(4, 2)
        np.testing.assert_array_equal((a @ b).to_numpy(), a.to_numpy() @ b.to_numpy())

    def test_result_rounded_to_single(self):
        a = matrix(1, 2)(0.1, 0.2)
        b = matrix(2, 1)(1, 1)
        expected = np.float32(np.float64(np.float32(0.1)) + np.float64(np.float32(0.2)))
        assert (a @ b).get(0, 0) == float(expected)

    def test_sums_in_order_of_inner_index(self):
        """(big + 1) - big: the 1 is absorbed before big cancels."""
        big = float(np.float32(1e16))
        a = matrix(1, 3)(big, 1, -big)
        b = matrix(3, 1)(1, 1, 1)
        assert (a @ b).get(0, 0) == 0.0
        assert (b.transpose() @ matrix(3, 1)(big, -big, 1)).get(0, 0) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Minors
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_square(self, m33):
        assert m33.minor(0, 0) == matrix(2, 2)(5, 6, 8, 9)
        assert m33.minor(1, 1) == matrix(2, 2)(1, 3, 7, 9)
        assert m33.minor(2, 2) == matrix(2, 2)(1, 2, 4, 5)

    def test_rectangular(self):
        assert matrix(2, 3)(1, 2, 3, 4, 5, 6).minor(0, 0) == matrix(1, 2)(5, 6)

    def test_single_row_has_no_minor(self):
        with pytest.raises(DimensionError):
            matrix(1, 3)(1, 2, 3).minor(0, 0)

    def test_1x1_has_no_minor(self):
        with pytest.raises(DimensionError):
            matrix(1, 1)(7).minor(0, 0)

    def test_index_out_of_range(self, m33):
        with pytest.raises(IndexOutOfRangeError):
            m33.minor(0, 3)


class TestMinors:

    def test_row_major_order(self, m33):
        assert m33.minors() == (
            matrix(2, 2)(5, 6, 8, 9),
            matrix(2, 2)(4, 6, 7, 9),
            matrix(2, 2)(4, 5, 7, 8),
            matrix(2, 2)(2, 3, 8, 9),
            matrix(2, 2)(1, 3, 7, 9),
            matrix(2, 2)(1, 2, 7, 8),
            matrix(2, 2)(2, 3, 5, 6),
            matrix(2, 2)(1, 3, 4, 6),
            matrix(2, 2)(1, 2, 4, 5),
        )

    def test_length(self, m32):
        assert len(m32.minors()) == 6

    def test_restartable(self, m33):
        minors = m33.minors()
        assert list(minors) == list(minors)

    def test_degenerate(self, m31):
        with pytest.raises(DimensionError):
            m31.minors()


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_3x3(self):
        assert matrix(3, 3)(1, 5, 3, 2, 4, 7, 4, 6, 2).determinant() == 74

    def test_invertible_fixture(self, invertible):
        assert invertible.determinant() == 1

    def test_singular(self, m33):
        assert m33.determinant() == 0

    def test_2x2(self):
        assert matrix(2, 2)(1, 2, 3, 4).determinant() == -2

    def test_1x1(self):
        assert matrix(1, 1)(5).determinant() == 5

    def test_identity(self):
        assert identity(4).determinant() == 1

    def test_returns_python_float(self, invertible):
        assert type(invertible.determinant()) is float

    def test_not_square(self, m32):
        with pytest.raises(NotSquareError) as exc_info:
            m32.determinant()
        assert exc_info.value.row_count == 3
        assert exc_info.value.col_count == 2

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_matches_numpy(self, random_matrix, size):
        m = random_matrix(size, size)
        expected = np.linalg.det(m.to_numpy().astype(np.float64))
        np.testing.assert_allclose(m.determinant(), expected, rtol=1e-6, atol=1e-6)

    def test_large_matrix_warns(self, monkeypatch, invertible):
        monkeypatch.setattr("pymatrix.dense.matrix_type.COFACTOR_WARN_SIZE", 2)
        with pytest.warns(RuntimeWarning, match="O\\(n!\\)"):
            invertible.determinant()

    def test_small_matrix_does_not_warn(self, invertible):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            invertible.determinant()


# ═══════════════════════════════════════════════════════════════════════
# Adjugate
# ═══════════════════════════════════════════════════════════════════════


class TestAdjugate:

    def test_invertible(self, invertible):
        assert invertible.adjugate() == matrix(3, 3)(-24, 18, 5, 20, -15, -4, -5, 4, 1)

    def test_singular_3x3(self, m33):
        assert m33.adjugate() == matrix(3, 3)(-3, 6, -3, 6, -12, 6, -3, 6, -3)

    def test_sign_follows_flattened_minor_index(self):
        """For even sizes the sign alternates along the flat minor sequence."""
        assert matrix(2, 2)(1, 2, 3, 4).adjugate() == matrix(2, 2)(4, -2, 3, -1)

    def test_1x1(self):
        assert matrix(1, 1)(7).adjugate() == matrix(1, 1)(1)

    def test_not_square(self, m32):
        with pytest.raises(NotSquareError):
            m32.adjugate()

    def test_times_matrix_is_det_identity_odd_size(self, rng):
        m = Matrix.from_rows(rng.integers(-5, 6, size=(3, 3)))
        det = m.determinant()
        assert m.adjugate() @ m == identity(3).scale(det)


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_integer_inverse(self, invertible):
        assert invertible.inverse() == matrix(3, 3)(-24, 18, 5, 20, -15, -4, -5, 4, 1)

    def test_round_trip(self, invertible):
        assert invertible.inverse().multiply(invertible) == identity(3)

    @pytest.mark.parametrize("size", [3, 5])
    def test_round_trip_unimodular(self, rng, size):
        m = unimodular(rng, size)
        assert m.determinant() == 1
        assert m.inverse() @ m == identity(size)
        assert m @ m.inverse() == identity(size)

    def test_non_integer_inverse(self):
        m = matrix(3, 3)(4, 7, 2, 3, 6, 1, 2, 5, 3)
        expected = Matrix.from_rows(np.linalg.inv(m.to_numpy().astype(np.float64)))
        assert m.determinant() == 9
        assert m.inverse().allclose(expected, SINGLE_PRECISION)

    def test_1x1(self):
        assert matrix(1, 1)(4).inverse() == matrix(1, 1)(0.25)

    def test_singular(self, m33):
        with pytest.raises(SingularMatrixError) as exc_info:
            m33.inverse()
        assert exc_info.value.determinant == 0.0

    def test_singular_2x2(self):
        with pytest.raises(SingularMatrixError):
            matrix(2, 2)(2, 2, 4, 4).inverse()

    def test_tiny_determinant_still_invertible(self):
        """det = 1e-60 underflows single precision but is not zero."""
        tiny = float(np.float32(1e-20))
        m = matrix(3, 3)(1e-20, 0, 0, 0, 1e-20, 0, 0, 0, 1e-20)
        assert m.determinant() == 0.0
        np.testing.assert_allclose(
            m.inverse().to_numpy(), np.diag([1 / tiny] * 3), rtol=1e-4
        )

    def test_divides_by_unrounded_determinant(self):
        """det = 4097**2 = 2**24 + 8193, which float32 rounds to 2**24 + 8192."""
        m = matrix(3, 3)(4097, 0, 0, 0, 4097, 0, 0, 0, 1)
        assert m.determinant() == 2**24 + 8192
        assert m.inverse().get(0, 0) == float(np.float32(1 / 4097))
        assert m.inverse().get(1, 1) == float(np.float32(1 / 4097))

    def test_not_square(self, m32):
        with pytest.raises(NotSquareError):
            m32.inverse()

    def test_receiver_unchanged(self, invertible):
        before = invertible.tolist()
        invertible.inverse()
        assert invertible.tolist() == before
