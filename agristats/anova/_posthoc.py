"""
Least-significant-difference (LSD) pairwise comparisons.

Uses the pooled error term (mse, df_error) of a preceding one-way ANOVA.
For every pair i < j:

    se  = sqrt(mse * (1/n_i + 1/n_j))
    t   = (mean_i - mean_j) / se
    lsd = t_{0.975, df_error} * se

A pair is significant when |mean_i - mean_j| > lsd. The two-tailed p-value
of t is reported alongside but does not decide significance; the two
criteria agree at alpha = 0.05 up to rounding at the boundary.

No multiplicity adjustment is applied.
"""

from __future__ import annotations

import math

from agristats.anova._common import LSDComparison, LSDParams
from agristats.anova.design import AnovaDesign
from agristats.core.compute.moments import sample_mean
from agristats.core.distributions import t_critical, t_p_value


def lsd_comparisons(
    design: AnovaDesign,
    mse: float,
    df_error: float,
) -> tuple[LSDParams, list[str]]:
    warnings_list: list[str] = []
    means = tuple(sample_mean(g) for g in design.groups)
    sizes = tuple(len(g) for g in design.groups)
    k = design.k

    if not df_error > 0:
        warnings_list.append(
            f"df_error={df_error:g} is not positive; p-values set to 1 "
            f"and critical value to 1.96"
        )
    if any(n == 0 for n in sizes):
        warnings_list.append(
            "comparisons involving an empty group have infinite standard error"
        )

    t_crit = t_critical(df_error)

    comparisons: list[LSDComparison] = []
    for i in range(k):
        for j in range(i + 1, k):
            n1, n2 = sizes[i], sizes[j]
            diff = means[i] - means[j]

            if n1 > 0 and n2 > 0:
                se = math.sqrt(mse * (1.0 / n1 + 1.0 / n2))
            else:
                se = math.inf
            t_stat = diff / se if se > 0.0 else 0.0

            p_val = t_p_value(t_stat, df_error)
            lsd = t_crit * se

            comparisons.append(LSDComparison(
                group_i=i,
                group_j=j,
                mean_difference=diff,
                std_error=se,
                t_statistic=t_stat,
                p_value=p_val,
                lsd_threshold=lsd,
                is_significant=abs(diff) > lsd,
            ))

    return LSDParams(
        comparisons=tuple(comparisons),
        mse=mse,
        df_error=df_error,
        t_critical=t_crit,
        group_means=means,
        group_sizes=sizes,
        labels=design.labels,
    ), warnings_list
