"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def variety_trial():
    """Grain yield of three wheat varieties, one clearly ahead."""
    return [
        [4.2, 4.5, 4.1, 4.4, 4.3],
        [4.6, 4.4, 4.8, 4.5, 4.7],
        [6.1, 6.4, 5.9, 6.2, 6.3],
    ]


@pytest.fixture
def no_effect_groups():
    """Four groups drawn from the same distribution."""
    rng = np.random.default_rng(7)
    return [rng.normal(10.0, 2.0, size=6) for _ in range(4)]


@pytest.fixture
def additive_cells():
    """Balanced 2x2 layout with no interaction (cell means 11, 15, 13, 17)."""
    return {
        (0, 0): [10.0, 12.0],
        (0, 1): [14.0, 16.0],
        (1, 0): [12.0, 14.0],
        (1, 1): [16.0, 18.0],
    }
