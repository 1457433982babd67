"""
Single-sample summary computation.

variance is Bessel-corrected (divide by n - 1) and falls back to 0 when
n < 2. Order statistics come from a sorted copy of the sample.
"""

from __future__ import annotations

import math

import numpy as np

from agristats.core.compute.moments import sample_mean, sample_variance
from agristats.descriptive._quantile_types import sample_quantiles
from agristats.descriptive.design import DescriptiveDesign
from agristats.descriptive.solution import DescriptiveParams


def empty_params() -> DescriptiveParams:
    return DescriptiveParams(
        n=0,
        mean=0.0,
        std_dev=0.0,
        std_error=0.0,
        min=0.0,
        max=0.0,
        median=0.0,
        q1=0.0,
        q3=0.0,
        variance=0.0,
        cv=0.0,
    )


def describe_sample(design: DescriptiveDesign) -> tuple[DescriptiveParams, list[str]]:
    x = design.values
    n = design.n
    warnings_list: list[str] = []

    if n == 0:
        warnings_list.append("empty sample: all statistics set to 0")
        return empty_params(), warnings_list
    if n == 1:
        warnings_list.append(
            "single observation: variance and standard deviation set to 0"
        )

    mean = sample_mean(x)
    variance = sample_variance(x)
    std_dev = math.sqrt(variance)
    std_error = std_dev / math.sqrt(n)

    sorted_x = np.sort(x)
    q1, median, q3 = sample_quantiles(
        sorted_x, (0.25, 0.5, 0.75), design.quantile_type,
    )

    cv = (std_dev / mean) * 100.0 if mean != 0.0 else 0.0

    return DescriptiveParams(
        n=n,
        mean=mean,
        std_dev=std_dev,
        std_error=std_error,
        min=float(sorted_x[0]),
        max=float(sorted_x[-1]),
        median=median,
        q1=q1,
        q3=q3,
        variance=variance,
        cv=cv,
    ), warnings_list
