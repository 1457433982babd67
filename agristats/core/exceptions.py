"""
Exception hierarchy for AgriStats.

All exceptions inherit from AgriStatsError to allow catching any
library-specific error.

Only structurally invalid input raises. Statistically undefined conditions
(zero variance, non-positive degrees of freedom, empty samples) degrade to
conservative defaults and are reported through Result.warnings instead.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class AgriStatsError(Exception):
    """Base exception for all AgriStats errors."""
    pass


class ValidationError(AgriStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class DistributionError(ValidationError):
    """
    Distribution parameters are invalid.

    Raised when an F or t distribution is constructed with non-positive or
    non-finite degrees of freedom. The p-value and critical-value helpers in
    agristats.core.distributions catch this and return fallback values.

    Attributes:
        distribution: Name of the distribution ('F' or 't')
        parameters: The offending degrees of freedom
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        parameters: tuple[float, ...] | None = None,
    ):
        super().__init__(message)
        self.distribution = distribution
        self.parameters = parameters
