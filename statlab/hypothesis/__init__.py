"""
Hypothesis testing module.

Public API:
    one_sample_t_test(x, mu0)       - One-sample t-test
    z_test(x, mu0, sigma)           - One-sample z-test, sigma known
    chisq_gof(observed, expected)   - Chi-squared goodness of fit
    two_sample_t_test(x, y)         - Pooled or Welch two-sample t-test
    paired_t_test(before, after)    - Paired t-test
    anova_oneway(groups)            - One-way ANOVA
    chisq_independence(table)       - Chi-squared test of independence
"""

from statlab.hypothesis.solvers import (
    one_sample_t_test,
    z_test,
    chisq_gof,
    two_sample_t_test,
    paired_t_test,
    anova_oneway,
    chisq_independence,
)
from statlab.hypothesis.design import HypothesisDesign
from statlab.hypothesis._common import TestParams
from statlab.hypothesis.solution import TestSolution

__all__ = [
    "one_sample_t_test",
    "z_test",
    "chisq_gof",
    "two_sample_t_test",
    "paired_t_test",
    "anova_oneway",
    "chisq_independence",
    "HypothesisDesign",
    "TestParams",
    "TestSolution",
]
