"""
ANOVA solver dispatch.

Public API:
    anova_oneway(groups, ...) -> AnovaSolution
    anova_twoway(cells, levels_a, levels_b) -> TwoWayAnovaSolution
    lsd_test(groups, mse, df_error, ...) -> LSDSolution
    anova_posthoc(anova_result, ...) -> LSDSolution
    anova_with_lsd(groups, ...) -> AnovaLSDSolution
"""

import warnings
from typing import Any, Mapping, Sequence

from agristats.core.compute.timing import Timer
from agristats.core.result import Result
from agristats.anova._oneway import oneway_anova
from agristats.anova._twoway import twoway_anova
from agristats.anova._posthoc import lsd_comparisons
from agristats.anova.design import AnovaDesign, TwoWayDesign, check_error_term
from agristats.anova.solution import (
    AnovaSolution,
    AnovaLSDSolution,
    LSDSolution,
    TwoWayAnovaSolution,
)


def anova_oneway(
    groups: Sequence[Any],
    *,
    labels: Sequence[Any] | None = None,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of k independent groups are equal by splitting
    the total sum of squares into between-group and within-group parts.

    Args:
        groups: Sequence of 1D samples, one per treatment. Order determines
            group numbering only.
        labels: Optional display names for the groups

    Returns:
        AnovaSolution with the between / within / total rows, R^2,
        significance flags at 0.05 and 0.01, group means and sizes

    Examples:
        >>> result = anova_oneway([[4.1, 4.3, 3.9], [5.2, 5.0, 5.4]])
        >>> print(result.summary())
        >>> result.between.f_statistic
    """
    timer = Timer()
    timer.start()

    design = AnovaDesign.for_oneway(groups, labels=labels)
    with timer.section('sums_of_squares'):
        params, warnings_list = oneway_anova(design)

    timer.stop()

    result = Result(
        params=params,
        info={'design_type': 'oneway', 'k': design.k},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return AnovaSolution(_result=result, _design=design)


def anova_twoway(
    cells: Mapping[tuple[int, int], Any],
    levels_a: int,
    levels_b: int,
) -> TwoWayAnovaSolution:
    """
    Two-way factorial ANOVA with interaction.

    Uses the cell-means method under a balanced-design assumption: the
    replicate count of the first non-empty cell is applied to every cell.
    Unbalanced layouts are accepted without correction; they are recorded
    in ``warnings`` and a RuntimeWarning is emitted.

    Args:
        cells: {(a, b): 1D sample} with zero-based factor level indices.
            Missing combinations are treated as empty cells.
        levels_a: Number of levels of factor A
        levels_b: Number of levels of factor B

    Returns:
        TwoWayAnovaSolution with factor_a, factor_b, interaction, error and
        total rows, marginal means and cell means

    Examples:
        >>> cells = {(0, 0): [10, 11], (0, 1): [14, 15],
        ...          (1, 0): [12, 13], (1, 1): [16, 17]}
        >>> result = anova_twoway(cells, 2, 2)
        >>> result.interaction.f_statistic
    """
    timer = Timer()
    timer.start()

    design = TwoWayDesign.for_twoway(cells, levels_a, levels_b)
    with timer.section('sums_of_squares'):
        params, warnings_list = twoway_anova(design)

    timer.stop()

    if not design.is_balanced:
        warnings.warn(
            "Two-way ANOVA on an unbalanced layout: sums of squares assume "
            f"{params.replication} replicates in every cell and are biased.",
            RuntimeWarning,
            stacklevel=2,
        )

    result = Result(
        params=params,
        info={
            'design_type': 'twoway',
            'levels': (design.levels_a, design.levels_b),
            'n_cells': len(design.cells),
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return TwoWayAnovaSolution(_result=result)


def lsd_test(
    groups: Sequence[Any],
    mse: float,
    df_error: float,
    *,
    labels: Sequence[Any] | None = None,
) -> LSDSolution:
    """
    Least-significant-difference pairwise comparisons.

    Requires the error term of a one-way ANOVA run on the same groups;
    see anova_posthoc() to take it from an AnovaSolution directly.

    Args:
        groups: The groups passed to anova_oneway()
        mse: Within-group mean square of that ANOVA
        df_error: Within-group degrees of freedom of that ANOVA
        labels: Optional display names for the groups

    Returns:
        LSDSolution with k(k-1)/2 comparisons ordered by (i, j), i < j
    """
    timer = Timer()
    timer.start()

    design = AnovaDesign.for_lsd(groups, labels=labels)
    mse_f, df_f = check_error_term(mse, df_error)
    with timer.section('comparisons'):
        params, warnings_list = lsd_comparisons(design, mse_f, df_f)

    timer.stop()

    result = Result(
        params=params,
        info={'method': 'lsd', 'k': design.k},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return LSDSolution(_result=result)


def anova_posthoc(
    anova_result: AnovaSolution,
    groups: Sequence[Any] | None = None,
) -> LSDSolution:
    """
    LSD comparisons following a one-way ANOVA.

    Args:
        anova_result: Result from anova_oneway()
        groups: Groups to compare. Defaults to the groups the ANOVA was
            computed on.

    Returns:
        LSDSolution using the ANOVA's within mean square and df

    Examples:
        >>> result = anova_oneway(groups)
        >>> posthoc = anova_posthoc(result)
        >>> print(posthoc.summary())
    """
    within = anova_result.within
    if groups is None:
        groups = anova_result._design.groups
        labels = anova_result.labels
    else:
        labels = None
    return lsd_test(
        groups,
        within.mean_square,
        within.degrees_of_freedom,
        labels=labels,
    )


def anova_with_lsd(
    groups: Sequence[Any],
    *,
    labels: Sequence[Any] | None = None,
    always: bool = False,
) -> AnovaLSDSolution:
    """
    One-way ANOVA, followed by LSD comparisons when it is significant.

    Args:
        groups: Sequence of 1D samples
        labels: Optional display names for the groups
        always: Run the LSD step even when the ANOVA is not significant
            at 0.05

    Returns:
        AnovaLSDSolution; ``lsd`` is None when the follow-up was skipped
    """
    anova_result = anova_oneway(groups, labels=labels)
    lsd = None
    if always or anova_result.is_significant_05:
        lsd = anova_posthoc(anova_result)
    return AnovaLSDSolution(anova=anova_result, lsd=lsd)
