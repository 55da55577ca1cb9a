"""
Confidence interval solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from statlab.core.result import Result

if TYPE_CHECKING:
    from statlab.intervals.design import IntervalDesign


@dataclass(frozen=True)
class IntervalParams:
    """
    Parameter payload for a confidence interval.

    For proportions, lower and upper are clamped to [0, 1]; the
    interpretation text quotes the unclamped bounds.
    """
    parameter: str            # 'mean' or 'proportion'
    estimate: float
    lower: float
    upper: float
    margin_of_error: float
    standard_error: float
    critical_value: float
    conf_level: float
    n: int
    method: str
    interpretation: str


@dataclass
class IntervalSolution:
    """User-facing confidence interval."""
    _result: Result[IntervalParams]
    _design: 'IntervalDesign'

    @property
    def parameter(self) -> str:
        return self._result.params.parameter

    @property
    def estimate(self) -> float:
        """Sample mean or sample proportion."""
        return self._result.params.estimate

    @property
    def lower(self) -> float:
        return self._result.params.lower

    @property
    def upper(self) -> float:
        return self._result.params.upper

    @property
    def bounds(self) -> tuple[float, float]:
        return (self._result.params.lower, self._result.params.upper)

    @property
    def margin_of_error(self) -> float:
        return self._result.params.margin_of_error

    @property
    def standard_error(self) -> float:
        return self._result.params.standard_error

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

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

    def summary(self) -> str:
        p = self._result.params
        pct = f"{p.conf_level * 100:g}"
        return "\n".join([
            f"{pct} percent confidence interval for the {p.parameter}:",
            f" {p.lower:.7g}  {p.upper:.7g}",
            f"estimate: {p.estimate:.7g}  (SE {p.standard_error:.5g}, "
            f"margin {p.margin_of_error:.5g}, critical {p.critical_value:.5g}, "
            f"method {p.method})",
            p.interpretation,
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"IntervalSolution({p.parameter}={p.estimate:.4g}, "
            f"[{p.lower:.4g}, {p.upper:.4g}], conf_level={p.conf_level:g})"
        )
