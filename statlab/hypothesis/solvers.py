"""
Solver dispatch for hypothesis tests.

Provides one_sample_t_test(), z_test(), chisq_gof(), two_sample_t_test(),
paired_t_test(), anova_oneway() and chisq_independence().

Every test accepts method='exact' (scipy.stats quantiles and survival
functions, the default) or method='compat' (the fixed critical values
1.96 / 7.815 / 3.0 and coarse p-values of the reference calculator).
"""

from __future__ import annotations

from typing import Sequence
from numpy.typing import ArrayLike

from statlab.core.methods import DEFAULT_METHOD
from statlab.hypothesis.design import HypothesisDesign
from statlab.hypothesis.solution import TestSolution
from statlab.hypothesis.backends.cpu import CPUHypothesisBackend


def _solve(design: HypothesisDesign) -> TestSolution:
    result = CPUHypothesisBackend().solve(design)
    return TestSolution(_result=result, _design=design)


def one_sample_t_test(
    x: ArrayLike | HypothesisDesign,
    mu0: float = 0.0,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    One-sample t-test of H0: mean(x) = mu0 (two-sided).

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample, at least 2 finite values.
    mu0 : float
        Hypothesized mean.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    method : str
        'exact' (default): t quantile critical value, p from the t
        distribution, reject when p < alpha.
        'compat': critical value fixed at 1.96, reject when |t| > 1.96,
        and p-value 1.0 (no t CDF is available in that mode).

    Returns
    -------
    TestSolution
        statistic t = (mean - mu0) / (s / sqrt(n)) with df = n - 1.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_one_sample_t(x, mu0, alpha=alpha, method=method)
    return _solve(design)


def z_test(
    x: ArrayLike | HypothesisDesign,
    mu0: float = 0.0,
    sigma: float = 1.0,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    One-sample z-test with known population sd sigma (two-sided).

    The compat method evaluates the p-value with the erf-based normal
    CDF and rejects when |z| > 1.96.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_z_test(x, mu0, sigma, alpha=alpha, method=method)
    return _solve(design)


def chisq_gof(
    observed: ArrayLike | HypothesisDesign,
    expected: ArrayLike | None = None,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    Chi-squared goodness-of-fit test of observed against expected counts.

    Cells with expected <= 0 are skipped. df = k - 1.

    Raises:
        DimensionError: If observed and expected differ in length
    """
    if isinstance(observed, HypothesisDesign):
        design = observed
    else:
        if expected is None:
            raise TypeError("chisq_gof() missing required argument: 'expected'")
        design = HypothesisDesign.for_chisq_gof(
            observed, expected, alpha=alpha, method=method,
        )
    return _solve(design)


def two_sample_t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    alpha: float = 0.05,
    equal_variance: bool = True,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    Independent two-sample t-test (two-sided).

    Parameters
    ----------
    x, y : array-like
        Samples, at least 2 values each.
    alpha : float
        Significance level. Default 0.05.
    equal_variance : bool
        True (default): pooled variance, df = n1 + n2 - 2.
        False: Welch's test with Welch-Satterthwaite df.
    method : str
        'exact' or 'compat'. In both, reject = p_value < alpha.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise TypeError("two_sample_t_test() missing required argument: 'y'")
        design = HypothesisDesign.for_two_sample_t(
            x, y, alpha=alpha, equal_variance=equal_variance, method=method,
        )
    return _solve(design)


def paired_t_test(
    before: ArrayLike | HypothesisDesign,
    after: ArrayLike | None = None,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    Paired t-test on the differences after - before.

    Raises:
        DimensionError: If before and after differ in length
    """
    if isinstance(before, HypothesisDesign):
        design = before
    else:
        if after is None:
            raise TypeError("paired_t_test() missing required argument: 'after'")
        design = HypothesisDesign.for_paired_t(before, after, alpha=alpha, method=method)
    return _solve(design)


def anova_oneway(
    groups: Sequence[ArrayLike] | HypothesisDesign,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    One-way ANOVA across k >= 2 groups.

    The compat method fixes the critical F at 3.0 and reports p = 0.01
    when F exceeds it, else 0.1.

    Returns
    -------
    TestSolution
        df_detail holds 'between' (k - 1), 'within' (N - k) and 'total'
        (N - 1); extras holds the sums of squares and mean squares.
    """
    if isinstance(groups, HypothesisDesign):
        design = groups
    else:
        design = HypothesisDesign.for_anova(groups, alpha=alpha, method=method)
    return _solve(design)


def chisq_independence(
    table: ArrayLike | HypothesisDesign,
    alpha: float = 0.05,
    *,
    method: str = DEFAULT_METHOD,
) -> TestSolution:
    """
    Chi-squared test of independence on an r x c contingency table.

    Expected counts are row_total * col_total / grand_total; df is
    (r - 1)(c - 1). extras['expected'] holds the expected matrix.
    """
    if isinstance(table, HypothesisDesign):
        design = table
    else:
        design = HypothesisDesign.for_chisq_independence(table, alpha=alpha, method=method)
    return _solve(design)
