"""
Kernel functions for sample statistics.

All functions take an already-validated 1D float64 array and do no
validation of their own; the public solvers check sizes first. Division
by zero for degenerate data (constant samples in skewness/kurtosis,
constant y in the correlation) yields NaN rather than a warning.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def sample_mean(x: NDArray[np.floating[Any]]) -> float:
    return float(np.sum(x) / x.shape[0])


def sample_median(x: NDArray[np.floating[Any]]) -> float:
    s = np.sort(x)
    n = s.shape[0]
    middle = n // 2
    if n % 2 == 0:
        return float((s[middle - 1] + s[middle]) / 2.0)
    return float(s[middle])


def sample_mode(x: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    """Every value sharing the maximum frequency, in ascending order."""
    values, counts = np.unique(x, return_counts=True)
    return tuple(float(v) for v in values[counts == counts.max()])


def sample_variance(x: NDArray[np.floating[Any]]) -> float:
    """Bessel-corrected (n - 1) variance."""
    m = sample_mean(x)
    return float(np.sum((x - m) ** 2) / (x.shape[0] - 1))


def sample_skewness(x: NDArray[np.floating[Any]]) -> float:
    """
    Adjusted Fisher-Pearson skewness.

        G1 = n / ((n-1)(n-2)) * sum(((x - mean) / sd)^3)

    with sd the n-1 standard deviation.
    """
    n = x.shape[0]
    m = sample_mean(x)
    s = np.sqrt(sample_variance(x))
    with np.errstate(divide='ignore', invalid='ignore'):
        z = (x - m) / s
        return float(n / ((n - 1) * (n - 2)) * np.sum(z ** 3))


def sample_kurtosis(x: NDArray[np.floating[Any]]) -> float:
    """
    Bias-corrected excess kurtosis.

        G2 = n(n+1) / ((n-1)(n-2)(n-3)) * sum(z^4) - 3(n-1)^2 / ((n-2)(n-3))
    """
    n = x.shape[0]
    m = sample_mean(x)
    s = np.sqrt(sample_variance(x))
    with np.errstate(divide='ignore', invalid='ignore'):
        z = (x - m) / s
        lead = n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
        tail = 3.0 * (n - 1) ** 2 / ((n - 2) * (n - 3))
        return float(lead * np.sum(z ** 4) - tail)


def histogram_counts(
    x: NDArray[np.floating[Any]],
    bins: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.int64]]:
    """
    Equal-width binning between min(x) and max(x).

    Returns:
        (edges, counts): edges has bins + 1 entries, counts has bins.

    A value whose computed index equals `bins` (the maximum) is folded
    into the last bin. Constant data has zero bin width and every value
    lands in the first bin.
    """
    lo = float(np.min(x))
    hi = float(np.max(x))
    width = (hi - lo) / bins
    edges = lo + np.arange(bins + 1) * width

    if width == 0.0:
        idx = np.zeros(x.shape[0], dtype=np.int64)
    else:
        idx = np.floor((x - lo) / width).astype(np.int64)
        idx = np.minimum(idx, bins - 1)

    counts = np.bincount(idx, minlength=bins)
    return edges, counts


def simple_regression_sums(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> tuple[float, float, float]:
    """
    Closed-form least squares via sums of products.

    Returns:
        (slope, intercept, correlation)
    """
    n = x.shape[0]
    sum_x = np.sum(x)
    sum_y = np.sum(y)
    sum_xy = np.sum(x * y)
    sum_xx = np.sum(x * x)
    sum_yy = np.sum(y * y)

    sxy = n * sum_xy - sum_x * sum_y
    sxx = n * sum_xx - sum_x * sum_x
    syy = n * sum_yy - sum_y * sum_y

    slope = sxy / sxx
    intercept = (sum_y - slope * sum_x) / n
    with np.errstate(divide='ignore', invalid='ignore'):
        correlation = sxy / np.sqrt(sxx * syy)

    return float(slope), float(intercept), float(correlation)
