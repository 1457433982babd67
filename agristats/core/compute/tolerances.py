"""
Tolerance tiers for numerical validation.

Used by the test suite when comparing against scipy reference values
and when checking algebraic identities such as SSB + SSW == SST.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision reference path
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, exact up to rounding',
)

# Sums of squares built by subtraction (two-way error term)
CPU_FP64_RESIDUAL = ToleranceTier(
    rtol=1e-8,
    atol=1e-9,
    name='cpu_fp64_residual',
    description='CPU double precision, quantities obtained by subtraction',
)
