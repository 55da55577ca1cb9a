"""
t-test implementations.

One-sample, two-sample (pooled and Welch) and paired tests, all
two-sided.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statlab.core.methods import METHOD_EXACT
from statlab.hypothesis._common import TestParams, t_critical, t_p_value

if TYPE_CHECKING:
    from statlab.hypothesis.design import HypothesisDesign


def _t_statistic(estimate: float, se: float, warnings_list: list[str]) -> float:
    if se == 0.0:
        warnings_list.append("data are essentially constant")
        return float('nan')
    return float(estimate / se)


def t_one_sample(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """One-sample t-test: H0: mean(x) = mu0."""
    x = design.x
    mu0 = design.mu0
    alpha = design.alpha
    method = design.method
    warnings_list: list[str] = []

    n = len(x)
    mean_x = float(np.mean(x))
    sd_x = float(np.std(x, ddof=1))
    se = sd_x / np.sqrt(n)
    df = float(n - 1)

    t_stat = _t_statistic(mean_x - mu0, se, warnings_list)
    p_value = t_p_value(t_stat, df, method)
    critical = t_critical(alpha, df, method)

    if method == METHOD_EXACT:
        reject = bool(p_value < alpha)
    else:
        reject = bool(abs(t_stat) > critical)

    if reject:
        interpretation = f"Reject H0: The population mean differs significantly from {mu0:g}"
    else:
        interpretation = f"Fail to reject H0: No significant difference from {mu0:g}"

    return TestParams(
        test_name="One-Sample t-Test",
        statistic=t_stat,
        statistic_name="t",
        df=df,
        df_detail={"df": df},
        p_value=p_value,
        critical_value=critical,
        reject=reject,
        alpha=alpha,
        method=method,
        interpretation=interpretation,
        extras={
            "mean": mean_x,
            "sd": sd_x,
            "n": n,
            "standard_error": float(se),
            "mu0": mu0,
        },
    ), warnings_list


def t_two_sample(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """Two-sample t-test: pooled (default) or Welch."""
    x = design.x
    y = design.y
    alpha = design.alpha
    method = design.method
    warnings_list: list[str] = []

    n1, n2 = len(x), len(y)
    mean1, mean2 = float(np.mean(x)), float(np.mean(y))
    var1, var2 = float(np.var(x, ddof=1)), float(np.var(y, ddof=1))
    diff = mean1 - mean2

    if design.equal_variance:
        df = float(n1 + n2 - 2)
        pooled = ((n1 - 1) * var1 + (n2 - 1) * var2) / df
        se = float(np.sqrt(pooled * (1.0 / n1 + 1.0 / n2)))
        test_name = "Two-Sample t-Test (Equal Variance)"
    else:
        v1 = var1 / n1
        v2 = var2 / n2
        se = float(np.sqrt(v1 + v2))
        # Welch-Satterthwaite (fractional, not rounded)
        if se == 0.0:
            df = float('nan')
        else:
            df = (v1 + v2) ** 2 / (v1 ** 2 / (n1 - 1) + v2 ** 2 / (n2 - 1))
        test_name = "Welch's t-Test (Unequal Variance)"

    t_stat = _t_statistic(diff, se, warnings_list)
    p_value = t_p_value(t_stat, df, method)
    critical = t_critical(alpha, df, method)
    reject = bool(p_value < alpha)

    return TestParams(
        test_name=test_name,
        statistic=t_stat,
        statistic_name="t",
        df=df,
        df_detail={"df": df},
        p_value=p_value,
        critical_value=critical,
        reject=reject,
        alpha=alpha,
        method=method,
        interpretation=(
            "Reject H0: The means are significantly different"
            if reject
            else "Fail to reject H0: No significant difference in means"
        ),
        extras={
            "mean_difference": diff,
            "sample1_mean": mean1,
            "sample2_mean": mean2,
            "standard_error": se,
        },
    ), warnings_list


def t_paired(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """Paired t-test: H0: mean(after - before) = 0.

    Note: design.x already contains the paired differences.
    """
    d = design.x
    alpha = design.alpha
    method = design.method
    warnings_list: list[str] = []

    n = len(d)
    mean_d = float(np.mean(d))
    sd_d = float(np.std(d, ddof=1))
    se = sd_d / np.sqrt(n)
    df = float(n - 1)

    t_stat = _t_statistic(mean_d, se, warnings_list)
    p_value = t_p_value(t_stat, df, method)
    critical = t_critical(alpha, df, method)
    reject = bool(p_value < alpha)

    return TestParams(
        test_name="Paired t-Test",
        statistic=t_stat,
        statistic_name="t",
        df=df,
        df_detail={"df": df},
        p_value=p_value,
        critical_value=critical,
        reject=reject,
        alpha=alpha,
        method=method,
        interpretation=(
            "Reject H0: Significant difference between paired observations"
            if reject
            else "Fail to reject H0: No significant difference between pairs"
        ),
        extras={
            "mean_difference": mean_d,
            "sd_difference": sd_d,
            "n": n,
        },
    ), warnings_list
