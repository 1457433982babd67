"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from agristats.core.result import Result

if TYPE_CHECKING:
    from agristats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics of one sample.

    An empty sample yields n=0 and every other field 0.0.
    """
    n: int
    mean: float
    std_dev: float
    std_error: float
    min: float
    max: float
    median: float
    q1: float
    q3: float
    variance: float     # Bessel-corrected (n - 1)
    cv: float           # coefficient of variation, percent


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def std_dev(self) -> float:
        """Sample standard deviation (square root of the n - 1 variance)."""
        return self._result.params.std_dev

    @property
    def std_error(self) -> float:
        """Standard error of the mean, std_dev / sqrt(n)."""
        return self._result.params.std_error

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def q1(self) -> float:
        return self._result.params.q1

    @property
    def q3(self) -> float:
        return self._result.params.q3

    @property
    def iqr(self) -> float:
        return self._result.params.q3 - self._result.params.q1

    @property
    def variance(self) -> float:
        return self._result.params.variance

    @property
    def cv(self) -> float:
        """Coefficient of variation in percent (0 when the mean is 0)."""
        return self._result.params.cv

    @property
    def quantile_type(self) -> int:
        return self._design.quantile_type

    # --- Metadata ---

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
        """Plain-Python representation of the statistics."""
        return asdict(self._result.params)

    def summary(self) -> str:
        """Formatted summary table."""
        p = self._result.params
        lines = [
            "Descriptive Statistics",
            "=" * 40,
            f"{'n':<16} {p.n:>22d}",
            f"{'Mean':<16} {p.mean:>22.4f}",
            f"{'Std. Dev.':<16} {p.std_dev:>22.4f}",
            f"{'Std. Error':<16} {p.std_error:>22.4f}",
            f"{'Variance':<16} {p.variance:>22.4f}",
            f"{'CV (%)':<16} {p.cv:>22.2f}",
            "-" * 40,
            f"{'Min':<16} {p.min:>22.4f}",
            f"{'Q1':<16} {p.q1:>22.4f}",
            f"{'Median':<16} {p.median:>22.4f}",
            f"{'Q3':<16} {p.q3:>22.4f}",
            f"{'Max':<16} {p.max:>22.4f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.n}, mean={p.mean:.4g}, "
            f"sd={p.std_dev:.4g})"
        )
