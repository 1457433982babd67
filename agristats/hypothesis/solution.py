"""
t-test solution types.

TTestSolution wraps Result[TTestParams] and formats an htest-style report.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from agristats.core.result import Result
from agristats.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from agristats.hypothesis.design import TTestDesign


@dataclass
class TTestSolution:
    """
    User-facing two-sample t-test results.

    All fields of TTestParams are available as properties.
    """
    _result: Result[TTestParams]
    _design: 'TTestDesign | None'

    @property
    def params(self) -> TTestParams:
        return self._result.params

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def degrees_of_freedom(self) -> float:
        return self._result.params.degrees_of_freedom

    @property
    def mean_difference(self) -> float:
        return self._result.params.mean_difference

    @property
    def ci_lower(self) -> float:
        return self._result.params.ci_lower

    @property
    def ci_upper(self) -> float:
        return self._result.params.ci_upper

    @property
    def conf_int(self) -> tuple[float, float]:
        """95% confidence interval as (lower, upper)."""
        p = self._result.params
        return (p.ci_lower, p.ci_upper)

    @property
    def is_significant(self) -> bool:
        """p_value < 0.05."""
        return self._result.params.is_significant

    @property
    def paired(self) -> bool:
        return self._result.params.paired

    @property
    def method(self) -> str:
        return "Paired t-test" if self.paired else "Welch Two Sample t-test"

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
        return asdict(self._result.params)

    def summary(self) -> str:
        """
        Format in the style of R's print.htest:

            Welch Two Sample t-test

        t = 2.2345, df = 17.43, p-value = 0.03891
        95 percent confidence interval:
         0.1234567  4.5678901
        mean difference: 2.345678
        """
        p = self._result.params
        lines = [
            f"\t{self.method}",
            "",
            f"t = {p.t_statistic:.5g}, df = {p.degrees_of_freedom:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}",
            "95 percent confidence interval:",
            f" {p.ci_lower:.7g}  {p.ci_upper:.7g}",
            f"mean difference: {p.mean_difference:.7g}",
            f"significant at 0.05: {'yes' if p.is_significant else 'no'}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(method={self.method!r}, t={p.t_statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
