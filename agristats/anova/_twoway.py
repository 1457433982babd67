"""
Two-way factorial ANOVA by the cell-means method.

Assumes a balanced design (the same number of replicates r in every
cell):

    SS_A   = sum_a n_per_a (mean_a - grand)^2,  n_per_a = N_A // levels_a
    SS_B   = sum_b n_per_b (mean_b - grand)^2,  n_per_b = N_B // levels_b
    SS_AB  = sum_{a,b} r (cell_ab - (mean_a + mean_b - grand))^2
    SS_tot = sum (x - grand)^2
    SS_err = SS_tot - SS_A - SS_B - SS_AB

No correction is made for unequal cell sizes; the sums of squares are then
biased and a warning is recorded. SS_err is a residual and can come out
slightly negative; it is reported as is.
"""

from __future__ import annotations

import numpy as np

from agristats.anova._common import AnovaSource, TwoWayAnovaParams
from agristats.anova._oneway import f_ratio, mean_square
from agristats.anova.design import TwoWayDesign
from agristats.core.compute.moments import sum_sq_dev
from agristats.core.distributions import f_p_value


def _marginal_means(sums: np.ndarray, counts: np.ndarray) -> tuple[float, ...]:
    return tuple(
        float(s) / int(c) if c > 0 else 0.0 for s, c in zip(sums, counts)
    )


def twoway_anova(design: TwoWayDesign) -> tuple[TwoWayAnovaParams, list[str]]:
    la, lb = design.levels_a, design.levels_b
    warnings_list: list[str] = []

    a_sums = np.zeros(la)
    b_sums = np.zeros(lb)
    a_n = np.zeros(la, dtype=np.int64)
    b_n = np.zeros(lb, dtype=np.int64)
    cell_means: dict[tuple[int, int], float] = {}
    grand_sum = 0.0
    n_total = 0

    for (a, b), values in design.cells.items():
        n = len(values)
        s = float(values.sum())
        grand_sum += s
        n_total += n
        a_sums[a] += s
        b_sums[b] += s
        a_n[a] += n
        b_n[b] += n
        if n > 0:
            cell_means[(a, b)] = s / n

    grand_mean = grand_sum / n_total if n_total > 0 else 0.0
    a_means = _marginal_means(a_sums, a_n)
    b_means = _marginal_means(b_sums, b_n)

    n_per_a = int(a_n.sum()) // la
    n_per_b = int(b_n.sum()) // lb
    ss_a = sum(n_per_a * (m - grand_mean) ** 2 for m in a_means)
    ss_b = sum(n_per_b * (m - grand_mean) ** 2 for m in b_means)

    ss_total = sum(
        (sum_sq_dev(v, grand_mean) for v in design.cells.values()), 0.0,
    )

    sizes = [len(v) for v in design.cells.values() if len(v) > 0]
    r = sizes[0] if sizes else 1
    if not design.is_balanced:
        warnings_list.append(
            f"unbalanced design (non-empty cells: {len(sizes)} of {la * lb}, "
            f"sizes {sorted(set(sizes))}); sums of squares assume "
            f"{r} replicates per cell"
        )

    ss_ab = 0.0
    for a in range(la):
        for b in range(lb):
            cell_mean = cell_means.get((a, b))
            if cell_mean is not None:
                expected = a_means[a] + b_means[b] - grand_mean
                ss_ab += r * (cell_mean - expected) ** 2

    ss_error = ss_total - ss_a - ss_b - ss_ab
    if ss_error < 0.0:
        warnings_list.append(
            f"error sum of squares is negative ({ss_error:.6g})"
        )

    df_a = la - 1
    df_b = lb - 1
    df_ab = df_a * df_b
    df_error = n_total - la * lb
    df_total = n_total - 1

    ms_a = mean_square(ss_a, df_a)
    ms_b = mean_square(ss_b, df_b)
    ms_ab = mean_square(ss_ab, df_ab)
    ms_error = mean_square(ss_error, df_error)

    f_a = f_ratio(ms_a, ms_error)
    f_b = f_ratio(ms_b, ms_error)
    f_ab = f_ratio(ms_ab, ms_error)

    def testable(term: str, ss: float, df: int, ms: float, f: float) -> AnovaSource:
        return AnovaSource(
            term=term,
            sum_of_squares=ss,
            degrees_of_freedom=df,
            mean_square=ms,
            f_statistic=f,
            p_value=f_p_value(f, df, df_error),
        )

    return TwoWayAnovaParams(
        factor_a=testable('A', ss_a, df_a, ms_a, f_a),
        factor_b=testable('B', ss_b, df_b, ms_b, f_b),
        interaction=testable('A:B', ss_ab, df_ab, ms_ab, f_ab),
        error=AnovaSource(
            term='Error',
            sum_of_squares=ss_error,
            degrees_of_freedom=df_error,
            mean_square=ms_error,
            f_statistic=None,
            p_value=None,
        ),
        total=AnovaSource(
            term='Total',
            sum_of_squares=ss_total,
            degrees_of_freedom=df_total,
            mean_square=0.0,
            f_statistic=None,
            p_value=None,
        ),
        factor_a_means=a_means,
        factor_b_means=b_means,
        cell_means=cell_means,
        grand_mean=grand_mean,
        n_obs=n_total,
        replication=r,
        levels_a=la,
        levels_b=lb,
    ), warnings_list
