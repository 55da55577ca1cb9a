"""
Confidence intervals.

Public API:
    confidence_interval_mean(x, conf_level)               - t (or table) interval
    confidence_interval_proportion(successes, n, conf_level) - Wald interval
"""

from statlab.intervals.design import IntervalDesign
from statlab.intervals.solution import IntervalParams, IntervalSolution
from statlab.intervals.solvers import (
    confidence_interval_mean,
    confidence_interval_proportion,
)

__all__ = [
    "confidence_interval_mean",
    "confidence_interval_proportion",
    "IntervalDesign",
    "IntervalParams",
    "IntervalSolution",
]
