"""
Confidence intervals for a mean and for a proportion.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from statlab.core.methods import DEFAULT_METHOD
from statlab.intervals.design import IntervalDesign
from statlab.intervals.solution import IntervalSolution
from statlab.intervals.backends.cpu import CPUIntervalBackend


def confidence_interval_mean(
    x: ArrayLike,
    conf_level: float = 0.95,
    *,
    method: str = DEFAULT_METHOD,
) -> IntervalSolution:
    """
    Confidence interval for a population mean, mean +/- c * s / sqrt(n).

    Parameters
    ----------
    x : array-like
        Sample, at least 2 finite values.
    conf_level : float
        Confidence level in (0, 1). Default 0.95.
    method : str
        'exact' (default): c = t quantile at 1 - (1 - conf_level)/2 with
        n - 1 df. 'compat': c from the 1.96 / 2.576 / 1.645 table.

    Returns
    -------
    IntervalSolution
        lower <= estimate <= upper always holds.
    """
    design = IntervalDesign.for_mean(x, conf_level, method=method)
    result = CPUIntervalBackend().solve(design)
    return IntervalSolution(_result=result, _design=design)


def confidence_interval_proportion(
    successes: int,
    n: int,
    conf_level: float = 0.95,
    *,
    method: str = DEFAULT_METHOD,
) -> IntervalSolution:
    """
    Wald interval for a population proportion, p +/- z * sqrt(p(1-p)/n).

    Bounds are clamped to [0, 1]. The interpretation quotes the unclamped
    bounds as percentages.

    Raises:
        ValidationError: If n < 1 or successes is outside 0..n
    """
    design = IntervalDesign.for_proportion(successes, n, conf_level, method=method)
    result = CPUIntervalBackend().solve(design)
    return IntervalSolution(_result=result, _design=design)
