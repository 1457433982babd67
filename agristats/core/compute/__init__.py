"""
Compute utilities: timing, sample moments and numerical tolerances.
"""

from agristats.core.compute.timing import Timer
from agristats.core.compute.moments import sample_mean, sample_variance, sum_sq_dev
from agristats.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_RESIDUAL,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_RESIDUAL",
    "sample_mean",
    "sample_variance",
    "sum_sq_dev",
]
