"""
Regression module.

Public API:
    multiple_linear_regression(X, y)    - OLS with intercept
    polynomial_regression(x, y, degree) - Polynomial fit with curve and equation
"""

from statlab.regression.design import RegressionDesign
from statlab.regression.solution import (
    LinearParams,
    LinearSolution,
    PolynomialSolution,
    format_polynomial,
)
from statlab.regression.solvers import (
    multiple_linear_regression,
    polynomial_regression,
)

__all__ = [
    "multiple_linear_regression",
    "polynomial_regression",
    "RegressionDesign",
    "LinearParams",
    "LinearSolution",
    "PolynomialSolution",
    "format_polynomial",
]
