"""
Distribution primitives: F and Student's t.

Thin wrappers over scipy.stats exposing the two capabilities the
inferential components need, cdf(x) and inverse_cdf(p). Construction
validates the degrees of freedom and raises DistributionError; the
module-level helpers catch it and return conservative fallbacks:

    f_p_value   -> 1.0    (no evidence of significance)
    t_p_value   -> 1.0
    t_critical  -> 1.96   (standard-normal asymptote)

p-values are computed as 1 - cdf rather than with the survival function,
so results agree with the textbook formulas term for term.
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats

from agristats.core.constants import (
    CI_PROBABILITY,
    FALLBACK_P_VALUE,
    FALLBACK_T_CRITICAL,
)
from agristats.core.exceptions import DistributionError


def _check_df(value: float, name: str, distribution: str) -> float:
    """Degrees of freedom must be finite and strictly positive."""
    try:
        df = float(value)
    except (TypeError, ValueError) as e:
        raise DistributionError(
            f"{name}: cannot convert {value!r} to float",
            distribution=distribution,
        ) from e
    if not math.isfinite(df) or df <= 0.0:
        raise DistributionError(
            f"{name}: degrees of freedom must be finite and > 0, got {df}",
            distribution=distribution,
            parameters=(df,),
        )
    return df


class FDistribution:
    """Fisher-Snedecor F distribution with (dfn, dfd) degrees of freedom."""

    def __init__(self, dfn: float, dfd: float):
        self.dfn = _check_df(dfn, "dfn", "F")
        self.dfd = _check_df(dfd, "dfd", "F")
        self._dist = sp_stats.f(self.dfn, self.dfd)

    def cdf(self, x: float) -> float:
        return float(self._dist.cdf(x))

    def inverse_cdf(self, p: float) -> float:
        return float(self._dist.ppf(p))

    def __repr__(self) -> str:
        return f"FDistribution(dfn={self.dfn:g}, dfd={self.dfd:g})"


class StudentT:
    """Student's t distribution, location 0 and scale 1."""

    def __init__(self, df: float):
        self.df = _check_df(df, "df", "t")
        self._dist = sp_stats.t(self.df)

    def cdf(self, x: float) -> float:
        return float(self._dist.cdf(x))

    def inverse_cdf(self, p: float) -> float:
        return float(self._dist.ppf(p))

    def __repr__(self) -> str:
        return f"StudentT(df={self.df:g})"


def f_p_value(f: float, df1: float, df2: float) -> float:
    """
    Upper-tail p-value of an F statistic: 1 - F_cdf(f; df1, df2).

    Returns 1.0 when either df is non-positive or the distribution
    cannot be constructed.
    """
    if not (df1 > 0 and df2 > 0):
        return FALLBACK_P_VALUE
    try:
        dist = FDistribution(df1, df2)
    except DistributionError:
        return FALLBACK_P_VALUE
    return 1.0 - dist.cdf(f)


def t_p_value(t: float, df: float) -> float:
    """
    Two-tailed p-value of a t statistic: 2 * (1 - t_cdf(|t|; df)).

    Returns 1.0 when df is non-positive or invalid.
    """
    if not df > 0:
        return FALLBACK_P_VALUE
    try:
        dist = StudentT(df)
    except DistributionError:
        return FALLBACK_P_VALUE
    return 2.0 * (1.0 - dist.cdf(abs(t)))


def t_critical(df: float, prob: float = CI_PROBABILITY) -> float:
    """
    Quantile of the t distribution, by default the two-tailed 95% value.

    Returns 1.96 when df is non-positive or invalid.
    """
    try:
        dist = StudentT(df)
    except DistributionError:
        return FALLBACK_T_CRITICAL
    return dist.inverse_cdf(prob)
