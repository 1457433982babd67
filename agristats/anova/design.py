"""
ANOVA design object.

Wraps validated groups / factorial cells for ANOVA computation.
Factory methods handle the different designs (one-way, two-way, LSD).
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
from numpy.typing import NDArray

from agristats.core.validation import check_positive_int, check_sample
from agristats.core.exceptions import ValidationError


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA and LSD.

    Created via factory methods, not directly. Groups keep the caller's
    order; the position of a group is its index in every result.
    """
    groups: tuple[NDArray[np.floating[Any]], ...]
    labels: tuple[str, ...]
    n: int
    design_type: str   # 'oneway', 'lsd'

    @property
    def k(self) -> int:
        return len(self.groups)

    @staticmethod
    def for_oneway(
        groups: Sequence[Any],
        *,
        labels: Sequence[Any] | None = None,
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: Sequence of 1D samples, one per treatment. Empty
                samples are allowed.
            labels: Optional display names, one per group

        Returns:
            AnovaDesign for one-way ANOVA
        """
        validated = _validate_groups(groups)
        return AnovaDesign(
            groups=validated,
            labels=_validate_labels(labels, len(validated)),
            n=sum(len(g) for g in validated),
            design_type='oneway',
        )

    @staticmethod
    def for_lsd(
        groups: Sequence[Any],
        *,
        labels: Sequence[Any] | None = None,
    ) -> 'AnovaDesign':
        """Create design for LSD post-hoc comparisons."""
        validated = _validate_groups(groups)
        return AnovaDesign(
            groups=validated,
            labels=_validate_labels(labels, len(validated)),
            n=sum(len(g) for g in validated),
            design_type='lsd',
        )


@dataclass(frozen=True)
class TwoWayDesign:
    """
    Validated sparse factorial layout for two-way ANOVA.

    cells maps (a, b) with 0 <= a < levels_a and 0 <= b < levels_b to a
    sample. Missing combinations are simply absent. Insertion order of the
    caller's mapping is preserved.
    """
    cells: dict[tuple[int, int], NDArray[np.floating[Any]]]
    levels_a: int
    levels_b: int
    n: int

    @property
    def is_balanced(self) -> bool:
        """Every one of the levels_a x levels_b cells has the same non-zero size."""
        sizes = {len(v) for v in self.cells.values()}
        return (
            len(self.cells) == self.levels_a * self.levels_b
            and len(sizes) == 1
            and 0 not in sizes
        )

    @staticmethod
    def for_twoway(
        cells: Mapping[tuple[int, int], Any],
        levels_a: int,
        levels_b: int,
    ) -> 'TwoWayDesign':
        """
        Create design for two-way ANOVA.

        Args:
            cells: {(a, b): 1D sample}
            levels_a: Number of levels of factor A (>= 1)
            levels_b: Number of levels of factor B (>= 1)

        Returns:
            TwoWayDesign
        """
        levels_a = check_positive_int(levels_a, "levels_a")
        levels_b = check_positive_int(levels_b, "levels_b")

        if not isinstance(cells, Mapping):
            raise ValidationError(
                f"cells: expected a mapping of (a, b) -> sample, "
                f"got {type(cells).__name__}"
            )

        validated: dict[tuple[int, int], NDArray] = {}
        for key, values in cells.items():
            if not (isinstance(key, tuple) and len(key) == 2):
                raise ValidationError(
                    f"cells: key {key!r} is not an (a, b) pair"
                )
            a, b = key
            if not _is_index(a) or not 0 <= a < levels_a:
                raise ValidationError(
                    f"cells: factor A index {a!r} outside [0, {levels_a})"
                )
            if not _is_index(b) or not 0 <= b < levels_b:
                raise ValidationError(
                    f"cells: factor B index {b!r} outside [0, {levels_b})"
                )
            validated[(int(a), int(b))] = check_sample(values, f"cells[{a}, {b}]")

        return TwoWayDesign(
            cells=validated,
            levels_a=levels_a,
            levels_b=levels_b,
            n=sum(len(v) for v in validated.values()),
        )


def check_error_term(mse: Any, df_error: Any) -> tuple[float, float]:
    """
    Validate the ANOVA error term handed to LSD.

    mse must be finite and >= 0. df_error only has to be numeric: invalid
    degrees of freedom degrade to p = 1 and a 1.96 critical value.
    """
    try:
        mse_f = float(mse)
        df_f = float(df_error)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"mse/df_error: expected numbers: {e}") from e
    if not math.isfinite(mse_f) or mse_f < 0.0:
        raise ValidationError(f"mse: must be finite and >= 0, got {mse_f}")
    return mse_f, df_f


def _validate_groups(groups: Sequence[Any]) -> tuple[NDArray, ...]:
    if isinstance(groups, np.ndarray):
        groups = list(groups)
    elif isinstance(groups, (str, bytes)) or not isinstance(groups, Sequence):
        raise ValidationError(
            f"groups: expected a sequence of samples, got {type(groups).__name__}"
        )
    if len(groups) == 0:
        raise ValidationError("groups: need at least 1 group, got 0")
    return tuple(check_sample(g, f"groups[{i}]") for i, g in enumerate(groups))


def _validate_labels(labels: Sequence[Any] | None, k: int) -> tuple[str, ...]:
    if labels is None:
        return tuple(str(i) for i in range(k))
    labels_t = tuple(str(v) for v in labels)
    if len(labels_t) != k:
        raise ValidationError(
            f"labels: length {len(labels_t)} doesn't match number of groups {k}"
        )
    return labels_t


def _is_index(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
