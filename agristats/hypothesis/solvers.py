"""
Solver dispatch for two-sample t-tests.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from agristats.core.compute.timing import Timer
from agristats.core.result import Result
from agristats.hypothesis._t_test import t_paired, t_welch
from agristats.hypothesis.design import TTestDesign
from agristats.hypothesis.solution import TTestSolution


def t_test(
    x: ArrayLike | TTestDesign,
    y: ArrayLike | None = None,
    *,
    paired: bool = False,
) -> TTestSolution:
    """
    Two-sample t-test, paired or Welch (unequal variances).

    Parameters
    ----------
    x : array-like or TTestDesign
        First sample (1D, finite).
    y : array-like
        Second sample. Required unless x is a TTestDesign.
    paired : bool
        If True, test the per-index differences x - y. Samples of unequal
        length produce a neutral result (t = 0, p = 1, not significant)
        and a warning rather than an error.

    Returns
    -------
    TTestSolution
        t statistic, df, two-tailed p-value, mean difference, 95% CI
        and is_significant (p < 0.05).
    """
    if isinstance(x, TTestDesign):
        design = x
    else:
        if y is None:
            raise TypeError("t_test() requires a second sample y")
        design = TTestDesign.for_t_test(x, y, paired=paired)

    timer = Timer()
    timer.start()
    with timer.section(design.test_type):
        if design.paired:
            params, warnings_list = t_paired(design)
        else:
            params, warnings_list = t_welch(design)
    timer.stop()

    result = Result(
        params=params,
        info={'test_type': design.test_type},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return TTestSolution(_result=result, _design=design)
