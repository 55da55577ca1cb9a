"""
Solver dispatch for regression.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from statlab.core.validation import check_sample, check_consistent_length, check_integer
from statlab.regression.design import RegressionDesign
from statlab.regression.solution import LinearSolution, PolynomialSolution
from statlab.regression.backends.cpu import CPUNormalEquationsBackend

# Curve resolution for plotting: CURVE_STEPS + 1 points
CURVE_STEPS = 100


def multiple_linear_regression(
    X: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
) -> LinearSolution:
    """
    Ordinary least squares with an intercept.

    Args:
        X: Predictor matrix (n x p), a 1D predictor, or a RegressionDesign.
            Do not include an intercept column; one is prepended.
        y: Response vector (n,). Required unless X is a RegressionDesign.

    Returns:
        LinearSolution with coefficients [intercept, b1, ..., bp],
        fitted values, residuals, R^2 and adjusted R^2

    Raises:
        DimensionError: If X and y differ in number of rows
        ValidationError: If fewer than p + 1 observations
        SingularMatrixError: If predictors are collinear

    Examples:
        >>> import numpy as np
        >>> X = np.array([[1, 2], [2, 1], [3, 5], [4, 3], [5, 6]])
        >>> y = 1 + 2 * X[:, 0] - X[:, 1]
        >>> multiple_linear_regression(X, y).coefficients.round(6)
        array([ 1.,  2., -1.])
    """
    if isinstance(X, RegressionDesign):
        design = X
    else:
        if y is None:
            raise TypeError("multiple_linear_regression() missing required argument: 'y'")
        design = RegressionDesign.from_arrays(X, y)

    result = CPUNormalEquationsBackend().solve(design)
    return LinearSolution(_result=result, _design=design)


def polynomial_regression(x: ArrayLike, y: ArrayLike, degree: int = 2) -> PolynomialSolution:
    """
    Fit y = c0 + c1 x + ... + c_degree x^degree.

    Expands x into the features [x, x^2, ..., x^degree] and fits them
    with multiple_linear_regression().

    Args:
        x: Predictor values (n,)
        y: Response values (n,)
        degree: Polynomial degree, >= 1

    Returns:
        PolynomialSolution with coefficients, equation string, a 101
        point curve over [min(x), max(x)] and predict()

    Raises:
        SingularMatrixError: If x has fewer distinct values than needed
            to identify the polynomial
    """
    x_arr = check_sample(x, 'x', min_samples=1)
    y_arr = check_sample(y, 'y', min_samples=1)
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    degree = check_integer(degree, 'degree', minimum=1)

    features = np.column_stack([x_arr ** d for d in range(1, degree + 1)])
    linear = multiple_linear_regression(features, y_arr)

    lo, hi = float(np.min(x_arr)), float(np.max(x_arr))
    xs = [lo + (i / CURVE_STEPS) * (hi - lo) for i in range(CURVE_STEPS + 1)]
    ys = np.polyval(linear.coefficients[::-1], np.asarray(xs))
    curve = tuple((float(a), float(b)) for a, b in zip(xs, ys))

    return PolynomialSolution(_linear=linear, _degree=degree, _curve=curve)
