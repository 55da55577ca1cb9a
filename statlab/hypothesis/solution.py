"""
Hypothesis test solution types.

TestSolution wraps Result[TestParams] and renders a plain-text report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statlab.core.result import Result
from statlab.hypothesis._common import TestParams

if TYPE_CHECKING:
    from statlab.hypothesis.design import HypothesisDesign


@dataclass
class TestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[TestParams]. All TestParams fields are available as
    properties; summary() gives a short text report.
    """
    __test__ = False

    _result: Result[TestParams]
    _design: 'HypothesisDesign | None'

    @property
    def test_name(self) -> str:
        return self._result.params.test_name

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic ('t', 'z', 'F', 'X-squared')."""
        return self._result.params.statistic_name

    @property
    def df(self) -> float | None:
        """Degrees of freedom (numerator df for ANOVA, None for z)."""
        return self._result.params.df

    @property
    def df_detail(self) -> dict[str, float]:
        return self._result.params.df_detail

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def reject(self) -> bool:
        """Whether H0 is rejected at alpha."""
        return self._result.params.reject

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def method(self) -> str:
        """'exact' or 'compat'."""
        return self._result.params.method

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any]:
        return self._result.params.extras

    @property
    def mean_difference(self) -> float | None:
        """For two-sample and paired t-tests."""
        return self.extras.get('mean_difference')

    @property
    def expected(self) -> NDArray | None:
        """For chi-squared tests: expected counts under H0."""
        return self.extras.get('expected')

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as a short text report.

        Produces output like:
            Welch's t-Test (Unequal Variance)

        t = 2.2345, df = 17.43, p-value = 0.03891
        critical value = 2.1098 (alpha = 0.05, method = exact)
        decision: reject H0
        Reject H0: The means are significantly different
        """
        p = self._result.params
        lines = [f"\t{p.test_name}", ""]

        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.statistic_name == "F":
            parts.append(
                f"df = {p.df_detail['between']:g}, {p.df_detail['within']:g}"
            )
        elif p.df is not None:
            parts.append(f"df = {p.df:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(
            f"critical value = {p.critical_value:.5g} "
            f"(alpha = {p.alpha:g}, method = {p.method})"
        )
        lines.append(f"decision: {'reject' if p.reject else 'fail to reject'} H0")
        lines.append(p.interpretation)

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TestSolution(test_name={p.test_name!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, reject={p.reject})"
        )


def _format_pvalue(p: float) -> str:
    """Format a p-value, collapsing tiny values to "< 2.2e-16"."""
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
