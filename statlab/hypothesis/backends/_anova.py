"""
One-way between-subjects ANOVA.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statlab.core.methods import METHOD_EXACT
from statlab.hypothesis._common import TestParams, f_critical, f_p_value

if TYPE_CHECKING:
    from statlab.hypothesis.design import HypothesisDesign


def anova_oneway(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """F = MSB / MSW with df (k - 1, N - k)."""
    groups = design.groups
    alpha = design.alpha
    method = design.method
    warnings_list: list[str] = []

    k = len(groups)
    all_data = np.concatenate(groups)
    n_total = all_data.shape[0]
    grand_mean = float(np.mean(all_data))
    group_means = [float(np.mean(g)) for g in groups]

    ss_between = float(sum(
        len(g) * (m - grand_mean) ** 2 for g, m in zip(groups, group_means)
    ))
    ss_within = float(sum(
        np.sum((g - m) ** 2) for g, m in zip(groups, group_means)
    ))

    df_between = k - 1
    df_within = n_total - k
    df_total = n_total - 1

    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    if ms_within == 0.0:
        warnings_list.append("within-group variance is zero; F is undefined")
    with np.errstate(divide='ignore', invalid='ignore'):
        f_stat = float(np.float64(ms_between) / np.float64(ms_within))

    p_value = f_p_value(f_stat, df_between, df_within, method)
    critical = f_critical(alpha, df_between, df_within, method)
    if method == METHOD_EXACT:
        reject = bool(p_value < alpha)
    else:
        reject = bool(f_stat > critical)

    return TestParams(
        test_name="One-Way ANOVA",
        statistic=f_stat,
        statistic_name="F",
        df=float(df_between),
        df_detail={
            "between": df_between,
            "within": df_within,
            "total": df_total,
        },
        p_value=p_value,
        critical_value=critical,
        reject=reject,
        alpha=alpha,
        method=method,
        interpretation=(
            "Reject H0: At least one group mean is significantly different"
            if reject
            else "Fail to reject H0: No significant difference among group means"
        ),
        extras={
            "ss_between": ss_between,
            "ss_within": ss_within,
            "ms_between": ms_between,
            "ms_within": ms_within,
            "grand_mean": grand_mean,
            "group_means": tuple(group_means),
            "group_sizes": tuple(len(g) for g in groups),
        },
    ), warnings_list
