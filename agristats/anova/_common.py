"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
Floats and tuples only, so two runs on the same input compare equal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaSource:
    """One row of an ANOVA table."""
    term: str
    sum_of_squares: float
    degrees_of_freedom: int
    mean_square: float
    f_statistic: float | None    # None for within / error / total rows
    p_value: float | None        # None for within / error / total rows


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    total.sum_of_squares is between + within by construction.
    """
    between: AnovaSource
    within: AnovaSource
    total: AnovaSource
    r_squared: float
    is_significant_05: bool
    is_significant_01: bool
    group_means: tuple[float, ...]
    group_sizes: tuple[int, ...]
    grand_mean: float
    n_obs: int
    labels: tuple[str, ...]


@dataclass(frozen=True)
class TwoWayAnovaParams:
    """
    Parameter payload for two-way (factorial) ANOVA.

    error.sum_of_squares is obtained by subtraction and may be slightly
    negative.
    """
    factor_a: AnovaSource
    factor_b: AnovaSource
    interaction: AnovaSource
    error: AnovaSource
    total: AnovaSource
    factor_a_means: tuple[float, ...]
    factor_b_means: tuple[float, ...]
    cell_means: dict[tuple[int, int], float]
    grand_mean: float
    n_obs: int
    replication: int
    levels_a: int
    levels_b: int


@dataclass(frozen=True)
class LSDComparison:
    """
    One pairwise contrast of the least-significant-difference test.

    is_significant compares |mean_difference| against lsd_threshold and is
    computed independently of p_value.
    """
    group_i: int
    group_j: int
    mean_difference: float      # mean_i - mean_j
    std_error: float
    t_statistic: float
    p_value: float
    lsd_threshold: float
    is_significant: bool


@dataclass(frozen=True)
class LSDParams:
    """Parameter payload for LSD post-hoc comparisons."""
    comparisons: tuple[LSDComparison, ...]
    mse: float
    df_error: float
    t_critical: float
    group_means: tuple[float, ...]
    group_sizes: tuple[int, ...]
    labels: tuple[str, ...]
