"""
CPU backend for confidence intervals.

The exact method uses t and normal quantiles from scipy.stats. The
compat method looks the multiplier up in a three-entry table: 1.96 at
95%, 2.576 at 99% and 1.645 for every other level.
"""

from __future__ import annotations

import warnings

import numpy as np
from scipy import stats as sp_stats

from statlab.core.compute.timing import Timer
from statlab.core.methods import (
    METHOD_EXACT,
    COMPAT_CONF_CRITICAL,
    COMPAT_CONF_FALLBACK,
    COMPAT_CONF_LEVELS,
)
from statlab.core.result import Result
from statlab.intervals.design import IntervalDesign
from statlab.intervals.solution import IntervalParams

# user code -> solvers -> solve() -> _compat_critical()
_WARN_STACKLEVEL = 4


def _compat_critical(conf_level: float, warnings_list: list[str]) -> float:
    if conf_level not in COMPAT_CONF_LEVELS:
        msg = (
            f"conf_level={conf_level:g} is not tabulated in compat mode; "
            f"using the 90% multiplier {COMPAT_CONF_FALLBACK}"
        )
        warnings_list.append(msg)
        warnings.warn(msg, UserWarning, stacklevel=_WARN_STACKLEVEL)
    return COMPAT_CONF_CRITICAL.get(conf_level, COMPAT_CONF_FALLBACK)


def _mean_interval(design: IntervalDesign, warnings_list: list[str]) -> IntervalParams:
    n = design.n
    conf_level = design.conf_level
    mean = float(np.mean(design.x))
    se = float(np.std(design.x, ddof=1) / np.sqrt(n))

    if design.method == METHOD_EXACT:
        critical = float(sp_stats.t.ppf(1.0 - (1.0 - conf_level) / 2.0, n - 1))
    else:
        critical = _compat_critical(conf_level, warnings_list)

    margin = critical * se
    lower = mean - margin
    upper = mean + margin

    return IntervalParams(
        parameter='mean',
        estimate=mean,
        lower=lower,
        upper=upper,
        margin_of_error=margin,
        standard_error=se,
        critical_value=critical,
        conf_level=conf_level,
        n=n,
        method=design.method,
        interpretation=(
            f"We are {conf_level * 100:.0f}% confident that the true population "
            f"mean lies between {lower:.3f} and {upper:.3f}"
        ),
    )


def _proportion_interval(design: IntervalDesign, warnings_list: list[str]) -> IntervalParams:
    n = design.n
    conf_level = design.conf_level
    p_hat = design.successes / n
    se = float(np.sqrt(p_hat * (1.0 - p_hat) / n))

    if design.method == METHOD_EXACT:
        critical = float(sp_stats.norm.ppf(1.0 - (1.0 - conf_level) / 2.0))
    else:
        critical = _compat_critical(conf_level, warnings_list)

    margin = critical * se
    raw_lower = p_hat - margin
    raw_upper = p_hat + margin

    # Bounds are clamped; the interpretation quotes the raw ones
    return IntervalParams(
        parameter='proportion',
        estimate=p_hat,
        lower=max(0.0, raw_lower),
        upper=min(1.0, raw_upper),
        margin_of_error=margin,
        standard_error=se,
        critical_value=critical,
        conf_level=conf_level,
        n=n,
        method=design.method,
        interpretation=(
            f"We are {conf_level * 100:.0f}% confident that the true population "
            f"proportion is between {raw_lower * 100:.2f}% and {raw_upper * 100:.2f}%"
        ),
    )


class CPUIntervalBackend:
    """CPU backend for confidence intervals."""

    @property
    def name(self) -> str:
        return 'cpu_intervals'

    def solve(self, design: IntervalDesign) -> Result[IntervalParams]:
        """Dispatch on design.interval_type."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(design.interval_type):
            if design.interval_type == "mean":
                params = _mean_interval(design, warnings_list)
                info = {'n': design.n, 'df': design.n - 1}
            elif design.interval_type == "proportion":
                params = _proportion_interval(design, warnings_list)
                info = {'n': design.n, 'successes': design.successes}
            else:
                raise ValueError(f"Unknown interval_type: {design.interval_type!r}")

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
