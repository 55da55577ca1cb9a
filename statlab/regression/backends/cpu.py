"""
CPU backend for linear regression.

Solves the normal equations beta = (X'X)^-1 X'y, with (X'X)^-1 from the
Gauss-Jordan inverse in statlab.core.compute.linalg.

Predictors are centred and scaled to unit norm before X'X is formed.
Forming X'X squares the condition number of X, so raw columns with a
large offset (years, say) would otherwise look rank-deficient. The
coefficients are mapped back to the original scale afterwards.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from statlab.core.result import Result
from statlab.core.compute.timing import Timer
from statlab.core.compute.linalg import transpose, matmul, invert_matrix
from statlab.regression.design import RegressionDesign
from statlab.regression.solution import LinearParams


def _standardize(
    X: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    [1 | (X - centre) / scale] with column means and centred norms.

    A constant column keeps scale 1, so it centres to zeros and the
    collinearity with the intercept still surfaces as a singular X'X.
    """
    centre = X.mean(axis=0)
    centred = X - centre
    scale = np.sqrt(np.sum(centred ** 2, axis=0))
    scale[scale == 0.0] = 1.0
    Z = np.column_stack([np.ones(X.shape[0]), centred / scale])
    return Z, centre, scale


class CPUNormalEquationsBackend:
    """
    CPU backend using the normal equations.

    Implements RegressionDesign -> Result[LinearParams].
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Fit y = b0 + b1 x1 + ... + bp xp by ordinary least squares.

        Algorithm:
            1. Centre and scale each predictor; prepend a column of ones
            2. Form X'X and X'y on the scaled columns
            3. Invert X'X by Gauss-Jordan elimination
            4. Solve for the scaled coefficients, map them back to the
               original units, compute fitted values and residuals

        Raises:
            SingularMatrixError: If X'X is singular (collinear predictors)
        """
        timer = Timer()
        timer.start()

        n, p = design.n, design.p
        y = design.y
        warnings_list: list[str] = []

        with timer.section('normal_equations'):
            Z, centre, scale = _standardize(design.X)
            Zt = transpose(Z)
            ZtZ = matmul(Zt, Z)
            Zty = matmul(Zt, y.reshape(-1, 1))

        with timer.section('inversion'):
            ZtZ_inv = invert_matrix(ZtZ, name="X'X")

        with timer.section('solve'):
            gamma = matmul(ZtZ_inv, Zty)[:, 0]
            slopes = gamma[1:] / scale
            intercept = gamma[0] - float(centre @ slopes)
            coefficients = np.concatenate([[intercept], slopes])

        with timer.section('residuals'):
            fitted_values = Z @ gamma
            residuals = y - fitted_values

        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            y_mean = float(np.mean(y))
            tss = float(np.sum((y - y_mean) ** 2))

            if tss == 0.0:
                warnings_list.append("response is constant; R-squared is not informative")
                r_squared = 1.0 if rss == 0.0 else 0.0
            else:
                r_squared = 1.0 - rss / tss

            df_residual = n - p - 1
            if df_residual <= 0:
                warnings_list.append(
                    "no residual degrees of freedom; adjusted R-squared is undefined"
                )
                adjusted = float('nan')
            else:
                adjusted = 1.0 - (1.0 - r_squared) * (n - 1) / df_residual

        timer.stop()

        params = LinearParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            r_squared=r_squared,
            adjusted_r_squared=adjusted,
            df_residual=df_residual,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'n': n,
            'p': p,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
