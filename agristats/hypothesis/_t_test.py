"""
Two-sample t-test: paired and Welch.

The confidence interval back-derives the standard error as
mean_difference / t_statistic instead of recomputing it, so a zero
t statistic collapses the interval to the point estimate.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from agristats.core.compute.moments import sample_mean, sample_variance
from agristats.core.constants import ALPHA
from agristats.core.distributions import t_critical, t_p_value
from agristats.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from agristats.hypothesis.design import TTestDesign


def neutral_result(paired: bool) -> TTestParams:
    """All-zero, non-significant result with p = 1."""
    return TTestParams(
        t_statistic=0.0,
        p_value=1.0,
        degrees_of_freedom=0.0,
        mean_difference=0.0,
        ci_lower=0.0,
        ci_upper=0.0,
        is_significant=False,
        paired=paired,
    )


def t_paired(design: TTestDesign) -> tuple[TTestParams, list[str]]:
    """Paired t-test on the per-index differences x_i - y_i."""
    warnings_list: list[str] = []

    if not design.lengths_match:
        warnings_list.append(
            f"paired samples differ in length "
            f"(len(x)={len(design.x)}, len(y)={len(design.y)}); "
            f"returning neutral result"
        )
        return neutral_result(paired=True), warnings_list

    d = design.x - design.y
    n = len(d)
    mean_d = sample_mean(d)
    se_d = math.sqrt(sample_variance(d) / n) if n > 0 else 0.0

    if se_d > 0.0:
        t_stat = mean_d / se_d
    else:
        warnings_list.append("differences are essentially constant")
        t_stat = 0.0

    return _finish(t_stat, float(n - 1), mean_d, paired=True), warnings_list


def t_welch(design: TTestDesign) -> tuple[TTestParams, list[str]]:
    """Independent two-sample t-test with Welch-Satterthwaite df."""
    x, y = design.x, design.y
    warnings_list: list[str] = []

    n1, n2 = len(x), len(y)
    mean1, mean2 = sample_mean(x), sample_mean(y)
    v1 = sample_variance(x) / n1 if n1 > 0 else 0.0
    v2 = sample_variance(y) / n2 if n2 > 0 else 0.0

    se = math.sqrt(v1 + v2)
    if n1 < 2 or n2 < 2:
        warnings_list.append(
            f"sample variance undefined (n1={n1}, n2={n2}); t statistic set to 0"
        )
        t_stat = 0.0
    elif se > 0.0:
        t_stat = (mean1 - mean2) / se
    else:
        warnings_list.append("data are essentially constant")
        t_stat = 0.0

    # Welch-Satterthwaite (fractional, not rounded)
    num = (v1 + v2) ** 2
    denom = 0.0
    if n1 > 1:
        denom += v1 ** 2 / (n1 - 1)
    if n2 > 1:
        denom += v2 ** 2 / (n2 - 1)
    df = num / denom if denom > 0.0 else float(n1 + n2 - 2)

    mean_diff = mean1 - mean2 if n1 > 0 and n2 > 0 else 0.0
    return _finish(t_stat, df, mean_diff, paired=False), warnings_list


def _finish(
    t_stat: float,
    df: float,
    mean_diff: float,
    *,
    paired: bool,
) -> TTestParams:
    p_value = t_p_value(t_stat, df)
    t_crit = t_critical(df)

    se = mean_diff / t_stat if t_stat != 0.0 else 0.0

    return TTestParams(
        t_statistic=float(t_stat),
        p_value=float(p_value),
        degrees_of_freedom=float(df),
        mean_difference=float(mean_diff),
        ci_lower=float(mean_diff - t_crit * se),
        ci_upper=float(mean_diff + t_crit * se),
        is_significant=bool(p_value < ALPHA),
        paired=paired,
    )
