"""
Common types for hypothesis testing.

Defines TestParams, the single result payload every test returns, and
the critical-value and p-value policy shared by the test kernels.

Two policies exist (see statlab.core.methods):

    exact   Quantiles and survival functions from scipy.stats.
            reject = p_value < alpha for every test.
    compat  The fixed critical values and coarse p-values of the
            reference calculator, reproduced bit for bit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from scipy import stats as sp_stats

from statlab.core.compute.special import normal_cdf
from statlab.core.methods import (
    METHOD_EXACT,
    COMPAT_T_CRITICAL,
    COMPAT_Z_CRITICAL,
    COMPAT_CHISQ_CRITICAL,
    COMPAT_F_CRITICAL,
    COMPAT_T_CDF_FALLBACK,
    COMPAT_P_SIGNIFICANT,
    COMPAT_P_NOT_SIGNIFICANT,
)


@dataclass(frozen=True)
class TestParams:
    """
    Parameter payload for hypothesis tests.

    Attributes
    ----------
    test_name : str
        Human-readable name, e.g. "Welch's t-Test (Unequal Variance)".
    statistic : float
        Test statistic value. NaN when the data give a zero standard error.
    statistic_name : str
        "t", "z", "F" or "X-squared".
    df : float or None
        Degrees of freedom of the reference distribution (numerator df for
        ANOVA). None for the z-test.
    df_detail : dict
        Named degrees of freedom, e.g. {"between": 2, "within": 12, "total": 14}.
    p_value : float
        p-value under the chosen method.
    critical_value : float
        Rejection threshold on the statistic's scale.
    reject : bool
        Whether H0 is rejected at alpha.
    alpha : float
        Significance level.
    method : str
        "exact" or "compat".
    interpretation : str
        One-sentence decision in words.
    extras : dict
        Test-specific outputs (means, sums of squares, expected counts, ...).
    """
    __test__ = False

    test_name: str
    statistic: float
    statistic_name: str
    df: float | None
    df_detail: dict[str, float]
    p_value: float
    critical_value: float
    reject: bool
    alpha: float
    method: str
    interpretation: str
    extras: dict[str, Any] = field(default_factory=dict)


def coarse_p_value(exceeds: bool) -> float:
    """Compat-mode p-value: 0.01 past the critical value, else 0.1."""
    return COMPAT_P_SIGNIFICANT if exceeds else COMPAT_P_NOT_SIGNIFICANT


def t_critical(alpha: float, df: float, method: str) -> float:
    """Two-sided t critical value."""
    if method == METHOD_EXACT:
        return float(sp_stats.t.ppf(1.0 - alpha / 2.0, df))
    return COMPAT_T_CRITICAL


def t_p_value(t_stat: float, df: float, method: str) -> float:
    """
    Two-sided t p-value.

    The compat method has no t CDF; it substitutes 0.5, giving p = 1.
    """
    if np.isnan(t_stat):
        return float('nan')
    if method == METHOD_EXACT:
        return float(2.0 * sp_stats.t.sf(abs(t_stat), df))
    return 2.0 * (1.0 - COMPAT_T_CDF_FALLBACK)


def z_critical(alpha: float, method: str) -> float:
    """Two-sided standard normal critical value."""
    if method == METHOD_EXACT:
        return float(sp_stats.norm.ppf(1.0 - alpha / 2.0))
    return COMPAT_Z_CRITICAL


def z_p_value(z_stat: float, method: str) -> float:
    """Two-sided normal p-value; compat uses the erf approximation."""
    if method == METHOD_EXACT:
        return float(2.0 * sp_stats.norm.sf(abs(z_stat)))
    return float(2.0 * (1.0 - normal_cdf(abs(z_stat))))


def chisq_critical(alpha: float, df: float, method: str) -> float:
    """Upper-tail chi-squared critical value (compat: 7.815 for any df)."""
    if method == METHOD_EXACT:
        return float(sp_stats.chi2.ppf(1.0 - alpha, df))
    return COMPAT_CHISQ_CRITICAL


def chisq_p_value(statistic: float, df: float, method: str) -> float:
    if method == METHOD_EXACT:
        return float(sp_stats.chi2.sf(statistic, df))
    return coarse_p_value(statistic > COMPAT_CHISQ_CRITICAL)


def f_critical(alpha: float, df1: float, df2: float, method: str) -> float:
    """Upper-tail F critical value (compat: 3.0 for any df)."""
    if method == METHOD_EXACT:
        return float(sp_stats.f.ppf(1.0 - alpha, df1, df2))
    return COMPAT_F_CRITICAL


def f_p_value(statistic: float, df1: float, df2: float, method: str) -> float:
    if np.isnan(statistic):
        return float('nan')
    if method == METHOD_EXACT:
        return float(sp_stats.f.sf(statistic, df1, df2))
    return coarse_p_value(statistic > COMPAT_F_CRITICAL)
