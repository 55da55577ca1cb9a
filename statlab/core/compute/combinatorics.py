"""
Combinatorics for the discrete distributions.

Both functions work in floating point: factorial(n) overflows to inf for
n beyond ~170 rather than switching to arbitrary precision, and the
binomial coefficient inherits that imprecision.
"""

from __future__ import annotations


def factorial(n: int) -> float:
    """Iterative factorial as a float; 1 for n <= 1."""
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def combination(n: int, k: int) -> float:
    """
    Binomial coefficient n! / (k! (n - k)!).

    Returns 0 when k is outside [0, n].
    """
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0
    return factorial(n) / (factorial(k) * factorial(n - k))
