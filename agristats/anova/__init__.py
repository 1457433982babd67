"""
Analysis of Variance (ANOVA).

Public API:
    anova_oneway(groups, ...) -> AnovaSolution
    anova_twoway(cells, levels_a, levels_b) -> TwoWayAnovaSolution
    lsd_test(groups, mse, df_error) -> LSDSolution      # LSD post-hoc
    anova_posthoc(result, ...) -> LSDSolution            # LSD from an ANOVA
    anova_with_lsd(groups, ...) -> AnovaLSDSolution      # ANOVA + LSD if significant
"""

from agristats.anova.solvers import (
    anova_oneway,
    anova_posthoc,
    anova_twoway,
    anova_with_lsd,
    lsd_test,
)
from agristats.anova._common import (
    AnovaParams,
    AnovaSource,
    LSDComparison,
    LSDParams,
    TwoWayAnovaParams,
)
from agristats.anova.solution import (
    AnovaSolution,
    AnovaLSDSolution,
    LSDSolution,
    TwoWayAnovaSolution,
)

__all__ = [
    "anova_oneway",
    "anova_twoway",
    "anova_posthoc",
    "anova_with_lsd",
    "lsd_test",
    "AnovaParams",
    "AnovaSource",
    "LSDComparison",
    "LSDParams",
    "TwoWayAnovaParams",
    "AnovaSolution",
    "AnovaLSDSolution",
    "LSDSolution",
    "TwoWayAnovaSolution",
]
