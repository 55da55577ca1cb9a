"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
functions returning plain floats: mean(), median(), mode(), minimum(),
maximum(), data_range(), variance(), sd(), skewness(), kurtosis(), and
the structured histogram(), linear_regression() and boxplot_stats().

Individual functions validate eagerly: a sample too small for the
statistic raises ValidationError instead of returning inf or NaN.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from statlab.core.exceptions import ValidationError
from statlab.core.validation import (
    check_sample,
    check_consistent_length,
    check_integer,
)
from statlab.descriptive.design import SampleDesign
from statlab.descriptive.solution import (
    DescriptiveSolution,
    HistogramBin,
    SimpleRegression,
    BoxPlotStats,
)
from statlab.descriptive.backends.cpu import (
    CPUDescriptiveBackend,
    MIN_N_VARIANCE,
    MIN_N_SKEWNESS,
    MIN_N_KURTOSIS,
)
from statlab.descriptive._moments import (
    sample_mean,
    sample_median,
    sample_mode,
    sample_variance,
    sample_skewness,
    sample_kurtosis,
    histogram_counts,
    simple_regression_sums,
)

MIN_N_BOXPLOT = 5


def describe(data: ArrayLike | SampleDesign) -> DescriptiveSolution:
    """
    Compute every summary statistic of a sample.

    Computes: count, mean, median, mode, min, max, range, variance,
    standard deviation, skewness and excess kurtosis.

    Parameters
    ----------
    data : array-like or SampleDesign
        Flat sequence of finite reals, at least one value.

    Returns
    -------
    DescriptiveSolution
        Statistics needing more observations than available are NaN;
        see ``.warnings``.
    """
    if isinstance(data, SampleDesign):
        design = data
    else:
        design = SampleDesign.from_array(data)

    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def mean(x: ArrayLike) -> float:
    """Arithmetic mean."""
    return sample_mean(check_sample(x, 'x', min_samples=1))


def median(x: ArrayLike) -> float:
    """Middle value, or the average of the two middle values for even n."""
    return sample_median(check_sample(x, 'x', min_samples=1))


def mode(x: ArrayLike) -> tuple[float, ...]:
    """
    Most frequent value(s).

    Returns every value sharing the maximum frequency, ascending. When
    all values are distinct that is the whole (deduplicated) sample.
    """
    return sample_mode(check_sample(x, 'x', min_samples=1))


def minimum(x: ArrayLike) -> float:
    return float(np.min(check_sample(x, 'x', min_samples=1)))


def maximum(x: ArrayLike) -> float:
    return float(np.max(check_sample(x, 'x', min_samples=1)))


def data_range(x: ArrayLike) -> float:
    """max(x) - min(x)."""
    return float(np.ptp(check_sample(x, 'x', min_samples=1)))


def variance(x: ArrayLike) -> float:
    """Sample variance with n - 1 denominator. Requires n >= 2."""
    return sample_variance(check_sample(x, 'x', min_samples=MIN_N_VARIANCE))


def sd(x: ArrayLike) -> float:
    """Sample standard deviation, sqrt(variance). Requires n >= 2."""
    return float(np.sqrt(variance(x)))


def skewness(x: ArrayLike) -> float:
    """
    Adjusted Fisher-Pearson skewness. Requires n >= 3.

    Constant data has zero standard deviation and gives NaN.
    """
    return sample_skewness(check_sample(x, 'x', min_samples=MIN_N_SKEWNESS))


def kurtosis(x: ArrayLike) -> float:
    """
    Bias-corrected excess kurtosis. Requires n >= 4.

    Constant data has zero standard deviation and gives NaN.
    """
    return sample_kurtosis(check_sample(x, 'x', min_samples=MIN_N_KURTOSIS))


def histogram(x: ArrayLike, bins: int = 10) -> tuple[HistogramBin, ...]:
    """
    Equal-width frequency distribution.

    Bins span [min(x), max(x)]; the last bin is closed on the right so
    the maximum is counted. Counts always sum to len(x).

    Parameters
    ----------
    x : array-like
        Sample values.
    bins : int
        Number of bins, >= 1. Default 10.

    Returns
    -------
    tuple of HistogramBin
        label ("start-end" to one decimal), start, end, count and
        relative frequency for each bin.
    """
    arr = check_sample(x, 'x', min_samples=1)
    bins = check_integer(bins, 'bins', minimum=1)

    edges, counts = histogram_counts(arr, bins)
    n = arr.shape[0]

    return tuple(
        HistogramBin(
            label=f"{edges[i]:.1f}-{edges[i + 1]:.1f}",
            start=float(edges[i]),
            end=float(edges[i + 1]),
            count=int(counts[i]),
            frequency=float(counts[i] / n),
        )
        for i in range(bins)
    )


def linear_regression(x: ArrayLike, y: ArrayLike) -> SimpleRegression:
    """
    Simple least squares line through (x, y).

    Slope and intercept come from the closed-form sum-of-products
    formulas; correlation is Pearson's r and r_squared = r^2.

    Raises:
        DimensionError: If x and y differ in length
        ValidationError: If fewer than 2 points or x is constant
    """
    x_arr = check_sample(x, 'x', min_samples=2)
    y_arr = check_sample(y, 'y', min_samples=2)
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))

    if np.ptp(x_arr) == 0.0:
        raise ValidationError("x: all values are identical, slope is undefined")

    slope, intercept, r = simple_regression_sums(x_arr, y_arr)
    return SimpleRegression(
        slope=slope,
        intercept=intercept,
        r_squared=r * r,
        correlation=r,
        n=int(x_arr.shape[0]),
    )


def boxplot_stats(x: ArrayLike) -> BoxPlotStats:
    """
    Quartiles, IQR, 1.5 IQR fences and outliers. Requires n >= 5.

    q1 and q3 are the sorted values at indices floor(0.25 n) and
    floor(0.75 n); the median is the usual (averaged) median.
    """
    arr = check_sample(x, 'x', min_samples=MIN_N_BOXPLOT)
    s = np.sort(arr)
    n = s.shape[0]

    q1 = float(s[int(np.floor(n * 0.25))])
    q3 = float(s[int(np.floor(n * 0.75))])
    iqr = q3 - q1
    lower_fence = q1 - 1.5 * iqr
    upper_fence = q3 + 1.5 * iqr
    outliers = s[(s < lower_fence) | (s > upper_fence)]

    return BoxPlotStats(
        minimum=float(s[0]),
        q1=q1,
        median=sample_median(s),
        q3=q3,
        maximum=float(s[-1]),
        iqr=iqr,
        lower_fence=lower_fence,
        upper_fence=upper_fence,
        outliers=tuple(float(v) for v in outliers),
    )
