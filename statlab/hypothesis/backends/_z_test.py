"""
One-sample z-test with known population standard deviation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statlab.core.methods import METHOD_EXACT
from statlab.hypothesis._common import TestParams, z_critical, z_p_value

if TYPE_CHECKING:
    from statlab.hypothesis.design import HypothesisDesign


def z_test(design: HypothesisDesign) -> tuple[TestParams, list[str]]:
    """z-test: H0: mean(x) = mu0, sigma known."""
    x = design.x
    mu0 = design.mu0
    sigma = design.sigma
    alpha = design.alpha
    method = design.method

    n = len(x)
    mean_x = float(np.mean(x))
    se = sigma / np.sqrt(n)
    z_stat = float((mean_x - mu0) / se)

    p_value = z_p_value(z_stat, method)
    critical = z_critical(alpha, method)
    if method == METHOD_EXACT:
        reject = bool(p_value < alpha)
    else:
        reject = bool(abs(z_stat) > critical)

    if reject:
        interpretation = f"Reject H0: The population mean differs significantly from {mu0:g}"
    else:
        interpretation = f"Fail to reject H0: No significant difference from {mu0:g}"

    return TestParams(
        test_name="One-Sample z-Test",
        statistic=z_stat,
        statistic_name="z",
        df=None,
        df_detail={},
        p_value=p_value,
        critical_value=critical,
        reject=reject,
        alpha=alpha,
        method=method,
        interpretation=interpretation,
        extras={
            "mean": mean_x,
            "n": n,
            "sigma": sigma,
            "standard_error": float(se),
            "mu0": mu0,
        },
    ), []
