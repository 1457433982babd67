"""
Hyndman & Fan (1996) sample quantile definitions, types 1-9.

Types 1-3 are discontinuous (step functions of the order statistics).
Types 4-9 interpolate linearly between adjacent order statistics and
differ only in the plotting position

    p(k) = (k - a) / (n + 1 - a - b)

Type 7 is the numpy / spreadsheet default; type 8 (a = b = 1/3) is
approximately median-unbiased regardless of the parent distribution and
is what describe() uses for the median and quartiles.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from agristats.core.exceptions import ValidationError

# (a, b) plotting-position constants of the continuous types
_CONTINUOUS_AB: dict[int, tuple[float, float]] = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# Guards floor() against representation error, e.g. 0.75 * 4 = 2.9999...
_FUZZ = 4.0 * np.finfo(np.float64).eps


def check_quantile_type(qtype: int) -> int:
    if isinstance(qtype, bool) or qtype not in range(1, 10):
        raise ValidationError(f"quantile_type must be 1-9, got {qtype!r}")
    return int(qtype)


def _discontinuous(x: NDArray, p: float, qtype: int) -> float:
    n = len(x)
    nppm = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(nppm + _FUZZ))
    on_boundary = abs(nppm - j) < _FUZZ

    if qtype == 1:
        h = 0.0 if on_boundary else 1.0
    elif qtype == 2:
        h = 0.5 if on_boundary else 1.0
    else:
        # type 3: nearest even order statistic on ties
        h = 0.0 if (on_boundary and j % 2 == 0) else 1.0

    # x is padded with its first and last element at both ends
    lo = min(max(j - 1, 0), n - 1)
    hi = min(max(j, 0), n - 1)
    return float((1.0 - h) * x[lo] + h * x[hi])


def _continuous(x: NDArray, p: float, qtype: int) -> float:
    n = len(x)
    a, b = _CONTINUOUS_AB[qtype]
    nppm = a + p * (n + 1.0 - a - b)
    j = int(math.floor(nppm + _FUZZ))
    h = nppm - j
    if abs(h) < _FUZZ:
        h = 0.0

    if j < 1:
        return float(x[0])
    if j >= n:
        return float(x[n - 1])
    return float((1.0 - h) * x[j - 1] + h * x[j])


def sample_quantiles(
    sorted_x: NDArray,
    probs: tuple[float, ...],
    qtype: int,
) -> tuple[float, ...]:
    """
    Quantiles of an already sorted, finite 1D sample.

    Args:
        sorted_x: Sample sorted ascending
        probs: Probabilities in [0, 1]
        qtype: Hyndman & Fan type 1-9

    Returns:
        One quantile per probability. 0.0 for an empty sample, the single
        value for a one-element sample.
    """
    qtype = check_quantile_type(qtype)
    n = len(sorted_x)
    if n == 0:
        return tuple(0.0 for _ in probs)
    if n == 1:
        return tuple(float(sorted_x[0]) for _ in probs)

    compute = _discontinuous if qtype <= 3 else _continuous
    return tuple(compute(sorted_x, float(p), qtype) for p in probs)
