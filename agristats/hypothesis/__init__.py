"""
Hypothesis testing module.

Public API:
    t_test(x, y, paired=False) - two-sample t-test (paired or Welch)
"""

from agristats.hypothesis.solvers import t_test
from agristats.hypothesis.design import TTestDesign
from agristats.hypothesis._common import TTestParams
from agristats.hypothesis.solution import TTestSolution

__all__ = [
    "t_test",
    "TTestDesign",
    "TTestParams",
    "TTestSolution",
]
