"""
Core infrastructure for AgriStats.

Shared abstractions used by all domain-specific submodules
(descriptive, hypothesis, anova).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    distributions: F and Student's t primitives with conservative fallbacks
    constants: Significance levels and fallback values
"""

from agristats.core.result import Result
from agristats.core.exceptions import (
    AgriStatsError,
    ValidationError,
    DimensionError,
    DistributionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "AgriStatsError",
    "ValidationError",
    "DimensionError",
    "DistributionError",
]
