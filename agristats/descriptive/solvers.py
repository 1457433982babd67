"""
Solver dispatch for descriptive statistics.

Provides describe() as the single entry point.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from agristats.core.compute.timing import Timer
from agristats.core.constants import DEFAULT_QUANTILE_TYPE
from agristats.core.result import Result
from agristats.descriptive._moments import describe_sample
from agristats.descriptive.design import DescriptiveDesign
from agristats.descriptive.solution import DescriptiveSolution


def _ensure_design(
    data: ArrayLike | DescriptiveDesign,
    quantile_type: int,
) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_values(data, quantile_type=quantile_type)


def describe(
    values: ArrayLike | DescriptiveDesign,
    *,
    quantile_type: int = DEFAULT_QUANTILE_TYPE,
) -> DescriptiveSolution:
    """
    Compute descriptive statistics for one sample.

    Computes: n, mean, Bessel-corrected variance, standard deviation,
    standard error, min, max, median, first and third quartiles and the
    coefficient of variation.

    Parameters
    ----------
    values : array-like or DescriptiveDesign
        1D sample of finite observations. May be empty.
    quantile_type : int
        Hyndman & Fan quantile type (1-9) for median and quartiles.
        Default 8. Ignored when a DescriptiveDesign is passed.

    Returns
    -------
    DescriptiveSolution
        An empty sample returns n=0 with every statistic 0 (no error).

    Examples
    --------
    >>> result = describe([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    >>> result.mean
    5.0
    """
    design = _ensure_design(values, quantile_type)

    timer = Timer()
    timer.start()
    with timer.section('describe'):
        params, warnings_list = describe_sample(design)
    timer.stop()

    result = Result(
        params=params,
        info={'quantile_type': design.quantile_type},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result, _design=design)
