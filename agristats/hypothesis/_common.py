"""
Common types for two-sample t-tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for a two-sample t-test.

    Attributes
    ----------
    t_statistic : float
        0.0 when the standard error is 0.
    p_value : float
        Two-tailed p-value; 1.0 when degrees of freedom are not positive.
    degrees_of_freedom : float
        n - 1 (paired) or Welch-Satterthwaite (independent, fractional).
    mean_difference : float
        mean(x - y) for paired, mean(x) - mean(y) for independent.
    ci_lower, ci_upper : float
        95% confidence interval for the mean difference.
    is_significant : bool
        p_value < 0.05.
    paired : bool
        Which branch produced the result.
    """
    t_statistic: float
    p_value: float
    degrees_of_freedom: float
    mean_difference: float
    ci_lower: float
    ci_upper: float
    is_significant: bool
    paired: bool
