"""
Input validation utilities for statlab.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statlab.core.exceptions import ValidationError, DimensionError
from statlab.core.methods import ALL_METHODS


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged nesting, mixed types or
    non-numeric data).

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
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
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


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a square 2D matrix.

    Raises:
        DimensionError: If array is not 2D or not square
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_sample(x: ArrayLike, name: str, min_samples: int = 1) -> NDArray[np.floating[Any]]:
    """
    Convert a Sample to a validated 1D float64 array.

    A Sample is a flat sequence of finite reals. Returns a copy so that
    later computation never aliases the caller's buffer.
    """
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    check_min_samples(arr, min_samples, name)
    return arr.copy()


def check_in_range(
    value: float,
    low: float,
    high: float,
    name: str,
    *,
    inclusive: bool = True,
) -> float:
    """
    Verify a scalar lies within [low, high] (or (low, high)).

    Raises:
        ValidationError: If value is outside the range or not a real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if inclusive:
        ok = low <= value <= high
        bounds = f"[{low}, {high}]"
    else:
        ok = low < value < high
        bounds = f"({low}, {high})"
    if not ok:
        raise ValidationError(f"{name}: must be in {bounds}, got {value}")
    return value


def check_probability(value: float, name: str) -> float:
    """Verify a scalar is a probability in [0, 1]."""
    return check_in_range(value, 0.0, 1.0, name)


def check_alpha(value: float, name: str = "alpha") -> float:
    """Verify a significance or confidence level lies strictly in (0, 1)."""
    return check_in_range(value, 0.0, 1.0, name, inclusive=False)


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar is a finite, strictly positive real number.

    Raises:
        ValidationError: If value is not > 0
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be positive, got {value}")
    return value


def check_integer(value: int, name: str, minimum: int | None = None) -> int:
    """
    Verify a scalar is an integer, optionally with a lower bound.

    Floats with an integral value (e.g. 10.0) are accepted.

    Raises:
        ValidationError: If value is not integral or below minimum
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    if isinstance(value, Integral):
        result = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        result = int(value)
    else:
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    if minimum is not None and result < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {result}")
    return result


def check_method(method: str) -> str:
    """
    Verify the computation method string.

    Raises:
        ValidationError: If method is not one of ALL_METHODS
    """
    if method not in ALL_METHODS:
        raise ValidationError(
            f"method must be one of {sorted(ALL_METHODS)}, got {method!r}"
        )
    return method


def check_real(value: float, name: str) -> float:
    """
    Verify a scalar is a finite real number.

    Raises:
        ValidationError: If value is not real, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value


def check_rectangular(table: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    Inputs whose rows have no length (flat sequences, scalars) are left
    to the dimensionality checks.

    Raises:
        DimensionError: If the rows differ in length
    """
    try:
        lengths = [len(row) for row in table]
    except TypeError:
        return
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: ragged rows with lengths {sorted(set(lengths))}"
        )
