"""
One-way ANOVA by direct sums-of-squares decomposition.

    SSB = sum_i n_i (mean_i - grand_mean)^2
    SSW = sum_i sum_{x in group i} (x - mean_i)^2
    SST = SSB + SSW

SST is never computed from the raw data so the partition holds exactly.
"""

from __future__ import annotations

from agristats.anova._common import AnovaParams, AnovaSource
from agristats.anova.design import AnovaDesign
from agristats.core.compute.moments import sample_mean, sum_sq_dev
from agristats.core.constants import ALPHA, ALPHA_STRICT
from agristats.core.distributions import f_p_value


def mean_square(ss: float, df: int) -> float:
    return ss / df if df > 0 else 0.0


def f_ratio(ms_effect: float, ms_error: float) -> float:
    return ms_effect / ms_error if ms_error > 0.0 else 0.0


def oneway_anova(design: AnovaDesign) -> tuple[AnovaParams, list[str]]:
    groups = design.groups
    k = design.k
    warnings_list: list[str] = []

    group_means = tuple(sample_mean(g) for g in groups)
    group_sizes = tuple(len(g) for g in groups)
    n_total = sum(group_sizes)
    grand_sum = sum(float(g.sum()) for g in groups)
    grand_mean = grand_sum / n_total if n_total > 0 else 0.0

    empty = [design.labels[i] for i, n in enumerate(group_sizes) if n == 0]
    if empty:
        warnings_list.append(f"empty groups contribute nothing: {empty}")

    ssb = sum(n * (m - grand_mean) ** 2 for n, m in zip(group_sizes, group_means))
    ssw = sum(sum_sq_dev(g, m) for g, m in zip(groups, group_means))
    sst = ssb + ssw

    df_between = k - 1
    df_within = n_total - k
    df_total = n_total - 1

    msb = mean_square(ssb, df_between)
    msw = mean_square(ssw, df_within)

    f_stat = f_ratio(msb, msw)
    if msw <= 0.0:
        warnings_list.append(
            "within-group mean square is zero; F statistic set to 0"
        )
    if df_between <= 0 or df_within <= 0:
        warnings_list.append(
            f"degrees of freedom not positive (between={df_between}, "
            f"within={df_within}); p-value set to 1"
        )
    p_value = f_p_value(f_stat, df_between, df_within)

    r_squared = ssb / sst if sst > 0.0 else 0.0

    return AnovaParams(
        between=AnovaSource(
            term='Between',
            sum_of_squares=ssb,
            degrees_of_freedom=df_between,
            mean_square=msb,
            f_statistic=f_stat,
            p_value=p_value,
        ),
        within=AnovaSource(
            term='Within',
            sum_of_squares=ssw,
            degrees_of_freedom=df_within,
            mean_square=msw,
            f_statistic=None,
            p_value=None,
        ),
        total=AnovaSource(
            term='Total',
            sum_of_squares=sst,
            degrees_of_freedom=df_total,
            mean_square=0.0,
            f_statistic=None,
            p_value=None,
        ),
        r_squared=r_squared,
        is_significant_05=p_value < ALPHA,
        is_significant_01=p_value < ALPHA_STRICT,
        group_means=group_means,
        group_sizes=group_sizes,
        grand_mean=grand_mean,
        n_obs=n_total,
        labels=design.labels,
    ), warnings_list
