"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from agristats.core.result import Result


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(warnings=()):
    return Result(
        params=FakeParams(value=42.0),
        info={"method": "test"},
        timing={"total_seconds": 0.01},
        backend_name="cpu",
        warnings=warnings,
    )


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _make()
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        result = Result(
            params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu",
        )
        assert result.warnings == ()
        assert result.timing is None


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=0.0)

    def test_payload_is_frozen(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params.value = 0.0


class TestHasWarning:

    def test_substring_match(self):
        result = _make(warnings=("unbalanced design (sizes [2, 3])",))
        assert result.has_warning("unbalanced")
        assert not result.has_warning("empty")

    def test_no_warnings(self):
        assert not _make().has_warning("anything")
