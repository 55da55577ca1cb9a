"""
Dense linear algebra kernels.

Small-matrix routines used by the regression engine to solve the normal
equations. Inputs are validated up front: mismatched shapes raise
DimensionError and a singular matrix raises SingularMatrixError before
any division happens, so callers never receive inf/NaN coefficients.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statlab.core.exceptions import DimensionError, SingularMatrixError
from statlab.core.validation import check_array, check_2d, check_square, check_finite


def transpose(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """Transpose of a 2D matrix."""
    A_arr = check_array(A, 'A')
    check_2d(A_arr, 'A')
    return A_arr.T.copy()


def matmul(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product A @ B.

    Raises:
        DimensionError: If either operand is not 2D or the inner
            dimensions differ (A.cols != B.rows)
    """
    A_arr = check_array(A, 'A')
    B_arr = check_array(B, 'B')
    check_2d(A_arr, 'A')
    check_2d(B_arr, 'B')
    if A_arr.shape[1] != B_arr.shape[0]:
        raise DimensionError(
            f"Inner dimensions differ: A is {A_arr.shape}, B is {B_arr.shape}"
        )
    return A_arr @ B_arr


def _singular(
    A: NDArray[np.floating[Any]],
    name: str,
    detail: str,
) -> SingularMatrixError:
    """Build a SingularMatrixError carrying rank and conditioning."""
    n = A.shape[0]
    rank = int(np.linalg.matrix_rank(A))
    with np.errstate(all='ignore'):
        cond = float(np.linalg.cond(A))
    return SingularMatrixError(
        f"{name} is singular ({detail}; rank={rank}, expected={n}, "
        f"condition number={cond:.3g})",
        matrix_name=name,
        condition_number=cond,
        rank=rank,
        expected_rank=n,
    )


def invert_matrix(
    A: ArrayLike,
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination.

    Algorithm:
        1. Augment A with the identity: [A | I]
        2. Forward elimination with partial pivoting (the row holding
           the largest magnitude entry in the current column is swapped
           into the pivot position)
        3. Back substitution to clear entries above each pivot
        4. Normalise each row by its pivot; the right half is A^-1

    Args:
        A: Square, non-singular matrix
        name: Matrix name for error messages

    Returns:
        Inverse matrix, same shape as A

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If A is numerically rank-deficient or a zero
            pivot is met during elimination
    """
    A_arr = check_array(A, name)
    check_square(A_arr, name)
    check_finite(A_arr, name)

    n = A_arr.shape[0]
    if n == 0:
        raise DimensionError(f"{name}: cannot invert an empty matrix")

    rank = int(np.linalg.matrix_rank(A_arr))
    if rank < n:
        raise _singular(A_arr, name, "rank-deficient")

    aug = np.hstack([A_arr, np.eye(n)])
    tol = n * np.finfo(np.float64).eps * np.max(np.abs(A_arr))

    # Forward elimination
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]

        if abs(aug[i, i]) <= tol:
            raise _singular(A_arr, name, f"zero pivot in column {i}")

        factors = aug[i + 1:, i] / aug[i, i]
        aug[i + 1:, i:] -= np.outer(factors, aug[i, i:])

    # Back substitution
    for i in range(n - 1, -1, -1):
        factors = aug[:i, i] / aug[i, i]
        aug[:i, :] -= np.outer(factors, aug[i, :])

    # Normalise
    aug /= np.diag(aug[:, :n])[:, np.newaxis]

    return aug[:, n:].copy()
