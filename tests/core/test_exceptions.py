"""
Tests for the AgriStats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via AgriStatsError)
    - Diagnostic attributes on DistributionError
"""

import pytest

from agristats.core.exceptions import (
    AgriStatsError,
    DimensionError,
    DistributionError,
    ValidationError,
)


class TestInheritance:
    """Every exception is catchable via AgriStatsError."""

    def test_validation_error_is_agristats_error(self):
        with pytest.raises(AgriStatsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_distribution_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DistributionError("bad df")


class TestDistributionErrorAttributes:

    def test_defaults_are_none(self):
        err = DistributionError("bad df")
        assert err.distribution is None
        assert err.parameters is None
        assert str(err) == "bad df"

    def test_attributes_stored(self):
        err = DistributionError("bad df", distribution="t", parameters=(-1.0,))
        assert err.distribution == "t"
        assert err.parameters == (-1.0,)
