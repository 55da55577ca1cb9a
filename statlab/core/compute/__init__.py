"""
Shared compute infrastructure for statlab.

This module provides the numeric kernels and timing utilities that are
shared across all domain-specific backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    special: erf, normal CDF/PDF, gamma
    linalg: transpose, matmul, Gauss-Jordan inversion
    combinatorics: factorial, combination
    rng: random source resolution for simulations
    timing: per-stage backend timing
"""

from statlab.core.compute.special import erf, gamma, normal_cdf, normal_pdf
from statlab.core.compute.linalg import transpose, matmul, invert_matrix
from statlab.core.compute.combinatorics import factorial, combination
from statlab.core.compute.rng import make_rng
from statlab.core.compute.timing import Timer

__all__ = [
    # Special functions
    "erf",
    "gamma",
    "normal_cdf",
    "normal_pdf",
    # Linear algebra
    "transpose",
    "matmul",
    "invert_matrix",
    # Combinatorics
    "factorial",
    "combination",
    # Random source
    "make_rng",
    # Timing
    "Timer",
]
