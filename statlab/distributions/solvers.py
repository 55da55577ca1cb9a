"""
Public entry points for the distribution library.

    pdf(dist, x)                         density (pmf at round(x) if discrete)
    pmf(dist, k, method)                 discrete kinds only
    cdf(dist, x, method)                 P(X <= x)
    probability(dist, x, method)         pdf, cdf and survival at x
    density_series(dist, lo, hi, points) lazy (x, y) samples for plotting
"""

from __future__ import annotations

from scipy import stats

from statlab.core.exceptions import ValidationError
from statlab.core.methods import DEFAULT_METHOD, METHOD_EXACT
from statlab.core.validation import (
    check_integer,
    check_method,
    check_positive,
    check_probability,
    check_real,
)
from statlab.distributions.design import DISCRETE_KINDS, DISTRIBUTIONS, Distribution
from statlab.distributions.solution import DensitySeries, ProbabilityResult
from statlab.distributions import _density


def _check_distribution(dist) -> Distribution:
    if type(dist) not in DISTRIBUTIONS.values():
        raise ValidationError(
            f"expected a distribution ({', '.join(sorted(DISTRIBUTIONS))}), "
            f"got {type(dist).__name__}"
        )
    return dist


def pdf(dist: Distribution, x: float, method: str = DEFAULT_METHOD) -> float:
    """
    Probability density at x.

    For binomial and Poisson this is the pmf at x rounded to the nearest
    integer (0 outside the support), so that the same call can drive a
    plot over a continuous axis.
    """
    dist = _check_distribution(dist)
    x = check_real(x, 'x')
    method = check_method(method)
    return _density.PDF_KERNELS[dist.kind](dist, x, method)


def pmf(dist: Distribution, k: int, method: str = DEFAULT_METHOD) -> float:
    """
    P(X = k) for a binomial or Poisson distribution.

    Raises:
        ValidationError: If dist is continuous or k is not an integer
    """
    dist = _check_distribution(dist)
    if dist.kind not in DISCRETE_KINDS:
        raise ValidationError(f"pmf is only defined for discrete kinds, got {dist.kind!r}")
    k = check_integer(k, 'k')
    method = check_method(method)
    return _density.PDF_KERNELS[dist.kind](dist, float(k), method)


def binomial_pmf(k: int, n: int, p: float, method: str = DEFAULT_METHOD) -> float:
    """C(n, k) p^k (1-p)^(n-k); 0 when k is outside 0..n."""
    k = check_integer(k, 'k')
    n = check_integer(n, 'n', minimum=0)
    p = check_probability(p, 'p')
    if check_method(method) == METHOD_EXACT:
        return float(stats.binom.pmf(k, n, p))
    return _density.binomial_pmf(k, n, p)


def poisson_pmf(k: int, lam: float, method: str = DEFAULT_METHOD) -> float:
    """lam^k e^-lam / k!; 0 for negative k."""
    k = check_integer(k, 'k')
    lam = check_positive(lam, 'lam')
    if check_method(method) == METHOD_EXACT:
        return float(stats.poisson.pmf(k, lam))
    return _density.poisson_pmf(k, lam)


def cdf(dist: Distribution, x: float, method: str = DEFAULT_METHOD) -> float:
    """
    Cumulative probability P(X <= x).

    Discrete kinds are evaluated at floor(x): scipy.stats under the
    'exact' method, a running sum of the closed-form pmf under
    'compat'. For Student's t the 'exact' method evaluates
    scipy.stats.t.cdf; the 'compat' method has no t CDF and returns 0.5.
    """
    dist = _check_distribution(dist)
    x = check_real(x, 'x')
    method = check_method(method)
    return _density.CDF_KERNELS[dist.kind](dist, x, method)


def probability(dist: Distribution, x: float, method: str = DEFAULT_METHOD) -> ProbabilityResult:
    """
    Evaluate pdf, cdf and survival function at a single point.

    Examples:
        >>> from statlab.distributions import Normal, probability
        >>> r = probability(Normal(0, 1), 1.96)
        >>> round(r.survival, 3)
        0.025
    """
    dist = _check_distribution(dist)
    x = check_real(x, 'x')
    method = check_method(method)

    density = _density.PDF_KERNELS[dist.kind](dist, x, method)
    cumulative = _density.CDF_KERNELS[dist.kind](dist, x, method)

    return ProbabilityResult(
        distribution=dist,
        x=x,
        pdf=density,
        cdf=cumulative,
        survival=1.0 - cumulative,
        method=method,
    )


def density_series(
    dist: Distribution,
    x_min: float,
    x_max: float,
    points: int = 100,
    method: str = DEFAULT_METHOD,
) -> DensitySeries:
    """
    Evenly spaced density samples for plotting.

    Yields points + 1 pairs (x_i, pdf(x_i)) with
    x_i = x_min + i * (x_max - x_min) / points.

    Raises:
        ValidationError: If x_min >= x_max or points < 1
    """
    dist = _check_distribution(dist)
    x_min = check_real(x_min, 'x_min')
    x_max = check_real(x_max, 'x_max')
    if not x_min < x_max:
        raise ValidationError(f"x_min must be < x_max, got x_min={x_min}, x_max={x_max}")
    points = check_integer(points, 'points', minimum=1)
    method = check_method(method)

    kernel = _density.PDF_KERNELS[dist.kind]
    return DensitySeries(dist, x_min, x_max, points, lambda x: kernel(dist, x, method))
