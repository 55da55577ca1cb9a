"""
Probability distributions.

Public API:
    Normal, Binomial, Poisson, Uniform, Exponential, StudentT
    make_distribution(kind, **params)
    pdf(dist, x), pmf(dist, k), cdf(dist, x, method)
    binomial_pmf(k, n, p), poisson_pmf(k, lam)
    probability(dist, x, method)  - pdf, cdf and survival at a point
    density_series(dist, x_min, x_max, points)
"""

from statlab.distributions.design import (
    Normal,
    Binomial,
    Poisson,
    Uniform,
    Exponential,
    StudentT,
    Distribution,
    make_distribution,
)
from statlab.distributions.solution import DensitySeries, ProbabilityResult
from statlab.distributions.solvers import (
    pdf,
    pmf,
    cdf,
    binomial_pmf,
    poisson_pmf,
    probability,
    density_series,
)

__all__ = [
    "Normal",
    "Binomial",
    "Poisson",
    "Uniform",
    "Exponential",
    "StudentT",
    "Distribution",
    "make_distribution",
    "pdf",
    "pmf",
    "cdf",
    "binomial_pmf",
    "poisson_pmf",
    "probability",
    "density_series",
    "DensitySeries",
    "ProbabilityResult",
]
