"""
Descriptive statistics module.

Public API:
    describe(values) - n, mean, sd, se, min/max, median, quartiles,
                       variance, coefficient of variation
"""

from agristats.descriptive.design import DescriptiveDesign
from agristats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from agristats.descriptive.solvers import describe

__all__ = [
    "describe",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
