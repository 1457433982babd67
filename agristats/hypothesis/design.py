"""
TTestDesign: validated inputs for the two-sample t-test.

Both samples must be 1D and finite. Length mismatch in paired mode is
not a validation error: the test returns a neutral result instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from agristats.core.validation import check_sample


@dataclass(frozen=True)
class TTestDesign:
    """
    Design for two-sample t-tests.

    Do not construct directly; use TTestDesign.for_t_test().
    """
    test_type: str      # 't_paired' or 't_welch'
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _paired: bool

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def paired(self) -> bool:
        return self._paired

    @property
    def lengths_match(self) -> bool:
        return len(self._x) == len(self._y)

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        paired: bool = False,
    ) -> TTestDesign:
        """Build design for t_test()."""
        x_arr = check_sample(x, "x")
        y_arr = check_sample(y, "y")
        return cls(
            test_type="t_paired" if paired else "t_welch",
            _x=x_arr,
            _y=y_arr,
            _paired=bool(paired),
        )
