"""
Descriptive statistics solution types.

Contains the parameter payload, the user-facing solution wrapper, and
the small value objects returned by histogram(), linear_regression()
and boxplot_stats().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from statlab.core.result import Result

if TYPE_CHECKING:
    from statlab.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Statistics whose minimum sample size is not met are NaN
    (variance/sd need n >= 2, skewness n >= 3, kurtosis n >= 4).
    """
    count: int
    mean: float
    median: float
    mode: tuple[float, ...]
    minimum: float
    maximum: float
    range: float
    variance: float
    sd: float
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class HistogramBin:
    """One equal-width histogram bin."""
    label: str
    start: float
    end: float
    count: int
    frequency: float


@dataclass(frozen=True)
class SimpleRegression:
    """
    Least squares line y = intercept + slope * x.

    r_squared is the square of the Pearson correlation.
    """
    slope: float
    intercept: float
    r_squared: float
    correlation: float
    n: int

    def predict(self, x: ArrayLike):
        """Fitted value(s) at x."""
        values = self.intercept + self.slope * np.asarray(x, dtype=np.float64)
        if np.ndim(x) == 0:
            return float(values)
        return values


@dataclass(frozen=True)
class BoxPlotStats:
    """
    Five-number summary with Tukey fences.

    Quartiles are order statistics at floor(0.25 n) and floor(0.75 n)
    of the sorted sample; outliers lie strictly outside the fences.
    """
    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float
    iqr: float
    lower_fence: float
    upper_fence: float
    outliers: tuple[float, ...]


def skewness_label(value: float) -> str:
    """Plain-language reading of a skewness value."""
    if np.isnan(value):
        return "Undefined"
    if abs(value) < 0.5:
        return "Approximately symmetric"
    if value > 0.5:
        return "Right-skewed (positive)"
    return "Left-skewed (negative)"


def kurtosis_label(value: float) -> str:
    """Plain-language reading of an excess kurtosis value."""
    if np.isnan(value):
        return "Undefined"
    if value > 0:
        return "Heavier tails than normal"
    if value < 0:
        return "Lighter tails than normal"
    return "Similar to normal distribution"


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...]:
        """All values sharing the maximum frequency."""
        return self._result.params.mode

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def variance(self) -> float:
        """Sample variance (n - 1 denominator)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis (bias-corrected)."""
        return self._result.params.kurtosis

    @property
    def skewness_interpretation(self) -> str:
        return skewness_label(self.skewness)

    @property
    def kurtosis_interpretation(self) -> str:
        return kurtosis_label(self.kurtosis)

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of every statistic, for tables and exports."""
        p = self._result.params
        return {
            'count': p.count,
            'mean': p.mean,
            'median': p.median,
            'mode': list(p.mode),
            'min': p.minimum,
            'max': p.maximum,
            'range': p.range,
            'variance': p.variance,
            'sd': p.sd,
            'skewness': p.skewness,
            'kurtosis': p.kurtosis,
        }

    def summary(self) -> str:
        """Two-column text summary."""
        p = self._result.params
        mode_str = ", ".join(f"{v:g}" for v in p.mode[:10])
        if len(p.mode) > 10:
            mode_str += f", ... ({len(p.mode)} values)"

        rows = [
            ("Count", f"{p.count}"),
            ("Mean", f"{p.mean:.6g}"),
            ("Median", f"{p.median:.6g}"),
            ("Mode", mode_str),
            ("Min.", f"{p.minimum:.6g}"),
            ("Max.", f"{p.maximum:.6g}"),
            ("Range", f"{p.range:.6g}"),
            ("Variance", f"{p.variance:.6g}"),
            ("Std. Dev.", f"{p.sd:.6g}"),
            ("Skewness", f"{p.skewness:.6g}  ({self.skewness_interpretation})"),
            ("Kurtosis", f"{p.kurtosis:.6g}  ({self.kurtosis_interpretation})"),
        ]
        width = max(len(label) for label, _ in rows)
        lines = [f"Descriptive statistics: {self._design.name}", ""]
        lines.extend(f"{label.ljust(width)}  {value}" for label, value in rows)
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.count}, mean={p.mean:.4g}, "
            f"sd={p.sd:.4g})"
        )
