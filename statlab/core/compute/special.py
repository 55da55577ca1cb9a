"""
Special functions.

Closed-form approximations that the distribution library and the
compatibility method are built on:

    erf(x)         Abramowitz & Stegun 7.1.26, |error| < 1.5e-7
    normal_cdf(x)  0.5 * (1 + erf((x - mean) / (sd * sqrt(2))))
    normal_pdf(x)  Gaussian density
    gamma(z)       Lanczos approximation (g=7, n=9) with reflection

The exact method bypasses these in favour of scipy.stats.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Abramowitz & Stegun 7.1.26
_ERF_P = 0.3275911
_ERF_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)

_LANCZOS_G = 7
_LANCZOS_COEFFS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


def _scalar_or_array(values: NDArray[np.floating[Any]], like: ArrayLike):
    """Return a Python float when the input was a scalar."""
    if np.ndim(like) == 0:
        return float(values)
    return values


def erf(x: ArrayLike):
    """
    Gauss error function, Abramowitz & Stegun formula 7.1.26.

    The sign is extracted before the magnitude is evaluated, so
    erf(-x) == -erf(x) holds exactly and erf(0) == 0.

    Args:
        x: Scalar or array of reals

    Returns:
        float for scalar input, ndarray otherwise
    """
    arr = np.asarray(x, dtype=np.float64)
    sign = np.sign(arr)
    ax = np.abs(arr)

    a1, a2, a3, a4, a5 = _ERF_A
    t = 1.0 / (1.0 + _ERF_P * ax)
    poly = ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t
    y = 1.0 - poly * np.exp(-ax * ax)

    return _scalar_or_array(sign * y, x)


def normal_cdf(x: ArrayLike, mean: float = 0.0, sd: float = 1.0):
    """Normal CDF built on the erf approximation."""
    z = (np.asarray(x, dtype=np.float64) - mean) / (sd * _SQRT_2)
    return _scalar_or_array(0.5 * (1.0 + np.asarray(erf(z))), x)


def normal_pdf(x: ArrayLike, mean: float = 0.0, sd: float = 1.0):
    """Normal probability density."""
    z = (np.asarray(x, dtype=np.float64) - mean) / sd
    return _scalar_or_array(np.exp(-0.5 * z * z) / (sd * _SQRT_2PI), x)


def gamma(z: float) -> float:
    """
    Gamma function via the Lanczos approximation.

    Uses the reflection formula Gamma(z) = pi / (sin(pi z) Gamma(1 - z))
    for z < 0.5. Non-positive integers are poles: the result there is
    whatever the floating-point arithmetic produces (a huge value, inf
    or NaN) and is not guarded.
    """
    z = float(z)
    if z < 0.5:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(math.pi) / (np.sin(np.pi * z) * gamma(1.0 - z)))

    z -= 1.0
    x = _LANCZOS_COEFFS[0]
    for i, c in enumerate(_LANCZOS_COEFFS[1:]):
        x += c / (z + i + 1)

    t = np.float64(z + _LANCZOS_G + 0.5)
    # Overflows to inf for z beyond ~171 instead of raising
    with np.errstate(over='ignore', invalid='ignore'):
        return float(_SQRT_2PI * np.power(t, z + 0.5) * np.exp(-t) * x)
