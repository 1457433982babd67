"""
User-facing ANOVA solution types.

Each solution wraps a Result[Params] and provides convenient accessors,
formatted summary output and a plain-dict export for callers that
serialise results.
"""

from dataclasses import dataclass, asdict
from typing import Any

import numpy as np

from agristats.core.result import Result
from agristats.anova._common import (
    AnovaParams,
    AnovaSource,
    LSDComparison,
    LSDParams,
    TwoWayAnovaParams,
)
from agristats.anova.design import AnovaDesign


# =====================================================================
# AnovaSolution  (one-way)
# =====================================================================


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[AnovaParams]
    _design: AnovaDesign

    @property
    def params(self) -> AnovaParams:
        return self._result.params

    @property
    def between(self) -> AnovaSource:
        return self._result.params.between

    @property
    def within(self) -> AnovaSource:
        return self._result.params.within

    @property
    def total(self) -> AnovaSource:
        return self._result.params.total

    @property
    def table(self) -> tuple[AnovaSource, ...]:
        """ANOVA table rows: between, within, total."""
        p = self._result.params
        return (p.between, p.within, p.total)

    @property
    def f_statistic(self) -> float:
        return self._result.params.between.f_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.between.p_value

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def eta_squared(self) -> float:
        """SSB / SST; identical to r_squared for a one-way layout."""
        return self._result.params.r_squared

    @property
    def is_significant_05(self) -> bool:
        return self._result.params.is_significant_05

    @property
    def is_significant_01(self) -> bool:
        return self._result.params.is_significant_01

    @property
    def group_means(self) -> tuple[float, ...]:
        return self._result.params.group_means

    @property
    def group_sizes(self) -> tuple[int, ...]:
        return self._result.params.group_sizes

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def labels(self) -> tuple[str, ...]:
        return self._result.params.labels

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        return asdict(self._result.params)

    def summary(self) -> str:
        """Generate an ANOVA summary table."""
        p = self._result.params
        lines = [
            "One-Way Analysis of Variance",
            "=" * 72,
            f"Groups: {len(p.group_sizes)}    Observations: {p.n_obs}",
            "",
        ]
        lines.extend(_format_table(self.table))
        lines.append("")
        lines.append(
            f"R^2 = {p.r_squared:.4f}    "
            f"significant at 0.05: {_yes_no(p.is_significant_05)}    "
            f"at 0.01: {_yes_no(p.is_significant_01)}"
        )
        lines.append("")
        lines.append(f"{'Group':<20} {'n':>6} {'Mean':>14}")
        for label, n, mean in zip(p.labels, p.group_sizes, p.group_means):
            lines.append(f"{label:<20} {n:>6} {mean:>14.4f}")
        lines.append(f"{'Grand mean':<20} {p.n_obs:>6} {p.grand_mean:>14.4f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"AnovaSolution(k={len(p.group_sizes)}, n={p.n_obs}, "
            f"F={p.between.f_statistic:.4g}, p={p.between.p_value:.4g})"
        )


# =====================================================================
# TwoWayAnovaSolution
# =====================================================================


@dataclass
class TwoWayAnovaSolution:
    """
    User-facing result for two-way factorial ANOVA.

    Produced by anova_twoway().
    """
    _result: Result[TwoWayAnovaParams]

    @property
    def params(self) -> TwoWayAnovaParams:
        return self._result.params

    @property
    def factor_a(self) -> AnovaSource:
        return self._result.params.factor_a

    @property
    def factor_b(self) -> AnovaSource:
        return self._result.params.factor_b

    @property
    def interaction(self) -> AnovaSource:
        return self._result.params.interaction

    @property
    def error(self) -> AnovaSource:
        return self._result.params.error

    @property
    def total(self) -> AnovaSource:
        return self._result.params.total

    @property
    def table(self) -> tuple[AnovaSource, ...]:
        """ANOVA table rows: A, B, A:B, error, total."""
        p = self._result.params
        return (p.factor_a, p.factor_b, p.interaction, p.error, p.total)

    @property
    def factor_a_means(self) -> tuple[float, ...]:
        return self._result.params.factor_a_means

    @property
    def factor_b_means(self) -> tuple[float, ...]:
        return self._result.params.factor_b_means

    @property
    def cell_means(self) -> dict[tuple[int, int], float]:
        return self._result.params.cell_means

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def replication(self) -> int:
        """Replicates per cell assumed by the sums of squares."""
        return self._result.params.replication

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """
        Plain-dict export. cell_means becomes a list of
        {'a', 'b', 'mean'} records because JSON has no tuple keys.
        """
        d = asdict(self._result.params)
        d['cell_means'] = [
            {'a': a, 'b': b, 'mean': mean}
            for (a, b), mean in self._result.params.cell_means.items()
        ]
        return d

    def summary(self) -> str:
        p = self._result.params
        lines = [
            "Two-Way Analysis of Variance (cell-means method)",
            "=" * 72,
            f"Levels: A={p.levels_a}, B={p.levels_b}    "
            f"Observations: {p.n_obs}    Replicates/cell: {p.replication}",
            "",
        ]
        lines.extend(_format_table(self.table))
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TwoWayAnovaSolution(levels=({p.levels_a}, {p.levels_b}), "
            f"n={p.n_obs})"
        )


# =====================================================================
# LSDSolution
# =====================================================================


@dataclass
class LSDSolution:
    """
    User-facing result for LSD post-hoc comparisons.

    Produced by lsd_test() and anova_posthoc().
    """
    _result: Result[LSDParams]

    @property
    def params(self) -> LSDParams:
        return self._result.params

    @property
    def comparisons(self) -> tuple[LSDComparison, ...]:
        """One entry per pair (i, j), i < j, in lexicographic order."""
        return self._result.params.comparisons

    @property
    def mse(self) -> float:
        return self._result.params.mse

    @property
    def df_error(self) -> float:
        return self._result.params.df_error

    @property
    def t_critical(self) -> float:
        return self._result.params.t_critical

    @property
    def significant_pairs(self) -> tuple[tuple[int, int], ...]:
        return tuple(
            (c.group_i, c.group_j) for c in self.comparisons if c.is_significant
        )

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        return asdict(self._result.params)

    def summary(self) -> str:
        p = self._result.params
        lines = [
            "Least Significant Difference (LSD) Comparisons",
            "=" * 78,
            f"MSE = {p.mse:.4f}    df = {p.df_error:g}    "
            f"t(0.975) = {p.t_critical:.4f}",
            "",
            f"{'Comparison':<20} {'diff':>10} {'SE':>10} {'t':>9} "
            f"{'p':>11} {'LSD':>10}  sig",
            "-" * 78,
        ]
        for c in p.comparisons:
            label = f"{p.labels[c.group_i]}-{p.labels[c.group_j]}"
            lines.append(
                f"{label:<20} {c.mean_difference:>10.4f} {c.std_error:>10.4f} "
                f"{c.t_statistic:>9.4f} {c.p_value:>11.4e} "
                f"{c.lsd_threshold:>10.4f}  {'*' if c.is_significant else ''}"
            )
        lines.append("-" * 78)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LSDSolution(n_comparisons={len(self.comparisons)}, "
            f"n_significant={len(self.significant_pairs)})"
        )


# =====================================================================
# AnovaLSDSolution  (ANOVA followed by LSD)
# =====================================================================


@dataclass
class AnovaLSDSolution:
    """
    One-way ANOVA together with its LSD follow-up.

    Produced by anova_with_lsd(). ``lsd`` is None when the ANOVA was not
    significant at 0.05 and the follow-up was not forced.
    """
    anova: AnovaSolution
    lsd: LSDSolution | None

    def to_dict(self) -> dict[str, Any]:
        return {
            'anova': self.anova.to_dict(),
            'lsd_comparisons': (
                None if self.lsd is None
                else [asdict(c) for c in self.lsd.comparisons]
            ),
        }

    def summary(self) -> str:
        parts = [self.anova.summary()]
        if self.lsd is not None:
            parts.append("")
            parts.append(self.lsd.summary())
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"AnovaLSDSolution(anova={self.anova!r}, lsd={self.lsd!r})"


# =====================================================================
# Helpers
# =====================================================================


def _format_table(rows: tuple[AnovaSource, ...]) -> list[str]:
    lines = [
        f"{'Source':<14} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} "
        f"{'F value':>10} {'Pr(>F)':>12}",
        "-" * 72,
    ]
    for row in rows:
        if row.f_statistic is not None:
            lines.append(
                f"{row.term:<14} {row.degrees_of_freedom:>6} "
                f"{row.sum_of_squares:>14.4f} {row.mean_square:>14.4f} "
                f"{row.f_statistic:>10.4f} {row.p_value:>12.4e} "
                f"{_significance_stars(row.p_value)}"
            )
        elif row.term == 'Total':
            lines.append(
                f"{row.term:<14} {row.degrees_of_freedom:>6} "
                f"{row.sum_of_squares:>14.4f}"
            )
        else:
            lines.append(
                f"{row.term:<14} {row.degrees_of_freedom:>6} "
                f"{row.sum_of_squares:>14.4f} {row.mean_square:>14.4f}"
            )
    lines.append("-" * 72)
    return lines


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or np.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
