"""
DescriptiveDesign: validated single-sample input for describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from agristats.core.constants import DEFAULT_QUANTILE_TYPE
from agristats.core.validation import check_sample
from agristats.descriptive._quantile_types import check_quantile_type


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps one 1D sample. Empty samples are valid and produce the all-zero
    record. Immutable after construction.

    Construction:
        DescriptiveDesign.from_values(values)
    """
    _values: NDArray[np.floating[Any]]
    _quantile_type: int

    @classmethod
    def from_values(
        cls,
        values: ArrayLike,
        *,
        quantile_type: int = DEFAULT_QUANTILE_TYPE,
    ) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from a 1D array-like.

        Parameters
        ----------
        values : array-like
            Observations. Must be 1D and finite; may be empty.
        quantile_type : int
            Hyndman & Fan quantile type 1-9 used for median and quartiles.
        """
        arr = check_sample(values, "values")
        return cls(
            _values=arr,
            _quantile_type=check_quantile_type(quantile_type),
        )

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self._values

    @property
    def n(self) -> int:
        return len(self._values)

    @property
    def quantile_type(self) -> int:
        return self._quantile_type
