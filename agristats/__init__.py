"""
AgriStats: inferential statistics for agronomic field trials.

Turns raw experimental measurements (plant height, yield, assay results,
organised by treatment and block) into descriptive summaries, ANOVA tables,
two-sample t-tests and LSD post-hoc comparisons.

Submodules:
    descriptive: One-sample summaries (mean, sd, quartiles, CV)
    hypothesis: Two-sample t-tests (paired and Welch)
    anova: One-way and two-way ANOVA, LSD post-hoc comparisons
"""

__version__ = "0.1.0"

from agristats import descriptive
from agristats import hypothesis
from agristats import anova

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "anova",
]
