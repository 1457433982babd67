"""
Input validation utilities for AgriStats.

Structural problems in the input (non-numeric data, NaN/Inf, wrong
dimensions, out-of-range indices) fail fast with a ValidationError.
Statistically degenerate but well-formed input (empty samples, a single
observation, constant data) is accepted; the solvers handle it with
documented fallback values.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from agristats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # An empty list converts to float64 already; bool and int are upcast
    if result.size > 0 and not np.issubdtype(result.dtype, np.number):
        if result.dtype != np.bool_:
            raise ValidationError(
                f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
            )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_sample(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert a sample to a validated 1D float64 array.

    Empty samples are allowed.

    Raises:
        ValidationError: If the sample is non-numeric, not 1D or not finite
    """
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)
