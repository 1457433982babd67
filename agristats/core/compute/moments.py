"""
Scalar sample moments shared by the descriptive, hypothesis and anova
modules.

Degenerate samples never raise: the mean of an empty sample is 0 and the
variance of a sample with fewer than 2 observations is 0.
"""

import numpy as np
from numpy.typing import NDArray


def sample_mean(x: NDArray) -> float:
    """Arithmetic mean; 0.0 for an empty sample."""
    n = len(x)
    return float(np.sum(x)) / n if n > 0 else 0.0


def sum_sq_dev(x: NDArray, center: float) -> float:
    """Sum of squared deviations from ``center``."""
    return float(np.sum((x - center) ** 2))


def sample_variance(x: NDArray) -> float:
    """Unbiased (n - 1) sample variance; 0.0 when n < 2."""
    n = len(x)
    if n < 2:
        return 0.0
    return sum_sq_dev(x, sample_mean(x)) / (n - 1)
