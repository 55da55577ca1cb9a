"""
Regression solution types.

Contains the parameter payload and the user-facing solution wrappers for
multiple linear and polynomial regression.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statlab.core.result import Result
from statlab.core.exceptions import DimensionError

if TYPE_CHECKING:
    from statlab.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    coefficients is [intercept, b1, ..., bp].
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    r_squared: float
    adjusted_r_squared: float
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, b1, ..., bp]."""
        return self._result.params.coefficients

    @property
    def intercept(self) -> float:
        return float(self.coefficients[0])

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        return self.coefficients[1:]

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def predictions(self) -> NDArray[np.floating[Any]]:
        """Alias of fitted_values."""
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def adjusted_r_squared(self) -> float:
        """1 - (1 - R^2)(n - 1)/(n - p - 1), p = number of predictors."""
        return self._result.params.adjusted_r_squared

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def p(self) -> int:
        return self._design.p

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X_new: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predicted responses for new predictor rows.

        X_new is m x p (or length m when p = 1, or a single row of
        length p).
        """
        X_arr = np.asarray(X_new, dtype=np.float64)
        if X_arr.ndim == 0:
            X_arr = X_arr.reshape(1, 1)
        elif X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1) if self.p == 1 else X_arr.reshape(1, -1)
        if X_arr.ndim != 2 or X_arr.shape[1] != self.p:
            raise DimensionError(
                f"X_new: expected {self.p} predictor column(s), got shape {X_arr.shape}"
            )
        return self.intercept + X_arr @ self.slopes

    def summary(self) -> str:
        """Text summary of the fit."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"Predictors: {self.p}",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            "",
            "Coefficients:",
            f"  {'(Intercept)':<12} {self.intercept:>14.6f}",
        ]
        for i, b in enumerate(self.slopes, start=1):
            lines.append(f"  {f'x{i}':<12} {b:>14.6f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, p={self.p}, "
            f"r_squared={self.r_squared:.4f})"
        )


def format_polynomial(coefficients: ArrayLike) -> str:
    """
    Render coefficients as "Y = c0 +c1X^1 -c2X^2 ...".

    Three decimals; each term after the first carries its own sign.
    """
    terms = []
    for idx, c in enumerate(np.asarray(coefficients, dtype=np.float64)):
        c = float(c) + 0.0  # drop negative zero
        if idx == 0:
            terms.append(f"{c:.3f}")
        else:
            sign = '+' if c >= 0 else ''
            terms.append(f"{sign}{c:.3f}X^{idx}")
    return "Y = " + " ".join(terms)


@dataclass
class PolynomialSolution:
    """
    Polynomial regression results.

    The underlying fit is a LinearSolution on the features
    [x, x^2, ..., x^degree]; curve holds 101 evenly spaced points of the
    fitted polynomial across [min(x), max(x)].
    """
    _linear: LinearSolution
    _degree: int
    _curve: tuple[tuple[float, float], ...]

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def linear(self) -> LinearSolution:
        """The multiple regression fit on the polynomial features."""
        return self._linear

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[c0, c1, ..., c_degree]."""
        return self._linear.coefficients

    @property
    def r_squared(self) -> float:
        return self._linear.r_squared

    @property
    def adjusted_r_squared(self) -> float:
        return self._linear.adjusted_r_squared

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._linear.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._linear.residuals

    @property
    def curve(self) -> tuple[tuple[float, float], ...]:
        """(x, y) points of the fitted curve for plotting."""
        return self._curve

    @property
    def equation(self) -> str:
        return format_polynomial(self.coefficients)

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._linear.warnings

    def predict(self, x: ArrayLike):
        """Evaluate the fitted polynomial at x (scalar or array)."""
        x_arr = np.asarray(x, dtype=np.float64)
        # np.polyval wants the highest power first
        values = np.polyval(self.coefficients[::-1], x_arr)
        if np.ndim(x) == 0:
            return float(values)
        return values

    def summary(self) -> str:
        return "\n".join([
            f"Polynomial Regression (degree {self._degree})",
            "=" * 60,
            self.equation,
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
        ])

    def __repr__(self) -> str:
        return (
            f"PolynomialSolution(degree={self._degree}, "
            f"r_squared={self.r_squared:.4f})"
        )
