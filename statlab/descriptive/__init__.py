"""
Descriptive statistics module.

Public API:
    describe(x)              - All summary statistics at once
    mean, median, mode       - Location
    minimum, maximum, data_range
    variance, sd             - Dispersion (n - 1 denominator)
    skewness, kurtosis       - Shape (bias-adjusted)
    histogram(x, bins)       - Equal-width frequency distribution
    linear_regression(x, y)  - Least squares line and Pearson r
    boxplot_stats(x)         - Quartiles, fences and outliers
"""

from statlab.descriptive.design import SampleDesign
from statlab.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    HistogramBin,
    SimpleRegression,
    BoxPlotStats,
)
from statlab.descriptive.solvers import (
    describe,
    mean,
    median,
    mode,
    minimum,
    maximum,
    data_range,
    variance,
    sd,
    skewness,
    kurtosis,
    histogram,
    linear_regression,
    boxplot_stats,
)

__all__ = [
    "describe",
    "mean",
    "median",
    "mode",
    "minimum",
    "maximum",
    "data_range",
    "variance",
    "sd",
    "skewness",
    "kurtosis",
    "histogram",
    "linear_regression",
    "boxplot_stats",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "HistogramBin",
    "SimpleRegression",
    "BoxPlotStats",
]
