"""
Scalar density and CDF kernels, one per distribution kind.

All kernels take an already-validated distribution, a float and a
method, and return a float. Dispatch tables at the bottom map `kind`
to kernel.

The binomial and Poisson closed forms below are the 'compat' path;
they go through factorial() and lose all precision once n! or lam^k
overflows (n > 170). The 'exact' path evaluates scipy.stats.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from statlab.core.compute.special import gamma, normal_cdf, normal_pdf
from statlab.core.compute.combinatorics import combination, factorial
from statlab.core.methods import METHOD_EXACT, COMPAT_T_CDF_FALLBACK


def binomial_pmf(k: int, n: int, p: float) -> float:
    """C(n, k) p^k (1-p)^(n-k); 0 outside 0..n."""
    if k < 0 or k > n:
        return 0.0
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        value = combination(n, k) * np.power(p, k) * np.power(1.0 - p, n - k)
    return float(value)


def poisson_pmf(k: int, lam: float) -> float:
    """
    lam^k e^-lam / k!; 0 for k < 0.

    For large k the power and the factorial both overflow and the
    result is NaN rather than an arbitrary-precision value.
    """
    if k < 0:
        return 0.0
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        value = np.power(np.float64(lam), k) * np.exp(-lam) / np.float64(factorial(k))
    return float(value)


def studentt_pdf(x: float, df: float) -> float:
    with np.errstate(over='ignore', invalid='ignore'):
        coeff = np.float64(gamma((df + 1.0) / 2.0)) / (
            math.sqrt(df * math.pi) * np.float64(gamma(df / 2.0))
        )
        value = coeff * np.power(1.0 + x * x / df, -(df + 1.0) / 2.0)
    return float(value)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


# --- pdf kernels ---

def _normal_pdf(dist, x, method):
    return float(normal_pdf(x, dist.mean, dist.sd))


def _binomial_pdf(dist, x, method):
    k = _round_half_up(x)
    if method == METHOD_EXACT:
        return float(stats.binom.pmf(k, dist.n, dist.p))
    return binomial_pmf(k, dist.n, dist.p)


def _poisson_pdf(dist, x, method):
    k = _round_half_up(x)
    if method == METHOD_EXACT:
        return float(stats.poisson.pmf(k, dist.lam))
    return poisson_pmf(k, dist.lam)


def _uniform_pdf(dist, x, method):
    if dist.low <= x <= dist.high:
        return 1.0 / (dist.high - dist.low)
    return 0.0


def _exponential_pdf(dist, x, method):
    if x < 0:
        return 0.0
    return float(dist.rate * math.exp(-dist.rate * x))


def _studentt_pdf(dist, x, method):
    if method == METHOD_EXACT:
        return float(stats.t.pdf(x, dist.df))
    return studentt_pdf(x, dist.df)


# --- cdf kernels ---

def _normal_cdf(dist, x, method):
    return float(normal_cdf(x, dist.mean, dist.sd))


def _binomial_cdf(dist, x, method):
    if x < 0:
        return 0.0
    upper = min(int(math.floor(x)), dist.n)
    if method == METHOD_EXACT:
        return float(stats.binom.cdf(upper, dist.n, dist.p))
    total = sum(binomial_pmf(k, dist.n, dist.p) for k in range(upper + 1))
    # np.minimum keeps a NaN sum (n > 170) visible
    return float(np.minimum(1.0, total))


def _poisson_cdf(dist, x, method):
    if x < 0:
        return 0.0
    upper = int(math.floor(x))
    if method == METHOD_EXACT:
        return float(stats.poisson.cdf(upper, dist.lam))
    total = 0.0
    for k in range(upper + 1):
        term = poisson_pmf(k, dist.lam)
        # The closed form overflows past this k; return the partial sum
        if not math.isfinite(term):
            break
        total += term
    return min(1.0, total)


def _uniform_cdf(dist, x, method):
    if x <= dist.low:
        return 0.0
    if x >= dist.high:
        return 1.0
    return (x - dist.low) / (dist.high - dist.low)


def _exponential_cdf(dist, x, method):
    if x < 0:
        return 0.0
    return 1.0 - math.exp(-dist.rate * x)


def _studentt_cdf(dist, x, method):
    if method == METHOD_EXACT:
        return float(stats.t.cdf(x, dist.df))
    return COMPAT_T_CDF_FALLBACK


PDF_KERNELS = {
    'normal': _normal_pdf,
    'binomial': _binomial_pdf,
    'poisson': _poisson_pdf,
    'uniform': _uniform_pdf,
    'exponential': _exponential_pdf,
    'studentt': _studentt_pdf,
}

CDF_KERNELS = {
    'normal': _normal_cdf,
    'binomial': _binomial_cdf,
    'poisson': _poisson_cdf,
    'uniform': _uniform_cdf,
    'exponential': _exponential_cdf,
    'studentt': _studentt_cdf,
}
