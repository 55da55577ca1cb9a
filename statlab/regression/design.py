"""
Regression Design.

Holds the predictor matrix X (without the intercept column) and the
response y. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statlab.core.exceptions import ValidationError
from statlab.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design matrix specification.

    Construction:
        RegressionDesign.from_arrays(X, y)   # X is n x p, or length-n for p = 1

    The intercept column is added by the backend, so X carries the
    predictors only and p counts predictors, not parameters.
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Build RegressionDesign directly from arrays.

        Raises:
            DimensionError: If X is not 2D or X and y differ in rows
            ValidationError: If non-finite, or fewer than p + 1 observations
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))

        n, p = X_arr.shape
        if p < 1:
            raise ValidationError("X: need at least one predictor column")
        if n < p + 1:
            raise ValidationError(
                f"X: requires at least {p + 1} observations for {p} predictor(s) "
                f"plus intercept, got {n}"
            )

        X_arr = X_arr.copy()
        y_arr = y_arr.copy()
        X_arr.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(_X=X_arr, _y=y_arr, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Predictor matrix (n x p), no intercept column."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of predictors (excluding the intercept)."""
        return self._p

    def with_intercept(self) -> NDArray[np.floating[Any]]:
        """[1 | X], n x (p + 1)."""
        return np.column_stack([np.ones(self._n), self._X])

    def __repr__(self) -> str:
        return f"RegressionDesign(n={self._n}, p={self._p})"
