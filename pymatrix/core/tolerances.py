"""
Tolerance tiers for approximate matrix comparison.

Matrix equality is exact. A tier exists for callers (and the test suite)
that need to compare results whose values are not exactly representable,
e.g. the inverse of a matrix whose determinant is not a power of two.
Callers with looser needs pass their own ToleranceTier to Matrix.allclose.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Element storage precision
SINGLE_PRECISION = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision storage, a few ulps of float32',
)
