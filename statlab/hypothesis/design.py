"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statlab.core.exceptions import ValidationError, DimensionError
from statlab.core.methods import DEFAULT_METHOD
from statlab.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_rectangular,
    check_sample,
    check_consistent_length,
    check_alpha,
    check_positive,
    check_real,
    check_method,
)

# Minimum observations per sample for the t-tests
MIN_N_T_TEST = 2


def _frozen(arr: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Numeric vectors
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # ANOVA groups
    _groups: tuple[NDArray[np.floating[Any]], ...] | None = None

    # Contingency table
    _table: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu0: float = 0.0
    _sigma: float | None = None
    _alpha: float = 0.05
    _method: str = DEFAULT_METHOD
    _equal_variance: bool = True

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def groups(self) -> tuple[NDArray[np.floating[Any]], ...] | None:
        return self._groups

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def mu0(self) -> float:
        return self._mu0

    @property
    def sigma(self) -> float | None:
        return self._sigma

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def method(self) -> str:
        return self._method

    @property
    def equal_variance(self) -> bool:
        return self._equal_variance

    # --- Factory classmethods ---

    @classmethod
    def for_one_sample_t(
        cls,
        x: ArrayLike,
        mu0: float,
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """Build design for one_sample_t_test()."""
        return cls(
            test_type="t_one_sample",
            _x=_frozen(check_sample(x, 'x', min_samples=MIN_N_T_TEST)),
            _mu0=check_real(mu0, 'mu0'),
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    @classmethod
    def for_z_test(
        cls,
        x: ArrayLike,
        mu0: float,
        sigma: float,
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """Build design for z_test(). sigma is the known population sd."""
        return cls(
            test_type="z_test",
            _x=_frozen(check_sample(x, 'x', min_samples=1)),
            _mu0=check_real(mu0, 'mu0'),
            _sigma=check_positive(sigma, 'sigma'),
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    @classmethod
    def for_chisq_gof(
        cls,
        observed: ArrayLike,
        expected: ArrayLike,
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """
        Build design for chisq_gof().

        Raises:
            DimensionError: If observed and expected differ in length
            ValidationError: If fewer than 2 categories
        """
        obs = check_sample(observed, 'observed', min_samples=1)
        exp = check_sample(expected, 'expected', min_samples=1)
        if obs.shape[0] != exp.shape[0]:
            raise DimensionError(
                f"observed and expected must have the same length, "
                f"got {obs.shape[0]} and {exp.shape[0]}"
            )
        if obs.shape[0] < 2:
            raise ValidationError(
                f"Need at least 2 categories, got {obs.shape[0]}"
            )
        return cls(
            test_type="chisq_gof",
            _x=_frozen(obs),
            _y=_frozen(exp),
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    @classmethod
    def for_two_sample_t(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = 0.05,
        equal_variance: bool = True,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """Build design for two_sample_t_test() (pooled or Welch)."""
        return cls(
            test_type="t_two_sample",
            _x=_frozen(check_sample(x, 'x', min_samples=MIN_N_T_TEST)),
            _y=_frozen(check_sample(y, 'y', min_samples=MIN_N_T_TEST)),
            _alpha=check_alpha(alpha),
            _equal_variance=bool(equal_variance),
            _method=check_method(method),
        )

    @classmethod
    def for_paired_t(
        cls,
        before: ArrayLike,
        after: ArrayLike,
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """
        Build design for paired_t_test().

        The design stores the differences after - before in `x`.

        Raises:
            DimensionError: If before and after differ in length
        """
        b = check_sample(before, 'before', min_samples=1)
        a = check_sample(after, 'after', min_samples=1)
        check_consistent_length(b, a, names=('before', 'after'))
        if b.shape[0] < MIN_N_T_TEST:
            raise ValidationError(
                f"Need at least {MIN_N_T_TEST} pairs, got {b.shape[0]}"
            )
        return cls(
            test_type="t_paired",
            _x=_frozen(a - b),
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    @classmethod
    def for_anova(
        cls,
        groups: Sequence[ArrayLike],
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """
        Build design for anova_oneway().

        Raises:
            ValidationError: If fewer than 2 groups, an empty group, or
                no more observations than groups
        """
        if isinstance(groups, np.ndarray) and groups.ndim == 2:
            groups = list(groups)
        try:
            group_list = list(groups)
        except TypeError as e:
            raise ValidationError(f"groups: expected a sequence of samples: {e}") from e

        if len(group_list) < 2:
            raise ValidationError(
                f"ANOVA requires at least 2 groups, got {len(group_list)}"
            )

        arrays = tuple(
            _frozen(check_sample(g, f'groups[{i}]', min_samples=1))
            for i, g in enumerate(group_list)
        )
        n_total = sum(a.shape[0] for a in arrays)
        if n_total <= len(arrays):
            raise ValidationError(
                f"ANOVA requires more observations than groups, "
                f"got N={n_total} for k={len(arrays)}"
            )

        return cls(
            test_type="anova_oneway",
            _groups=arrays,
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    @classmethod
    def for_chisq_independence(
        cls,
        table: ArrayLike,
        *,
        alpha: float = 0.05,
        method: str = DEFAULT_METHOD,
    ) -> HypothesisDesign:
        """
        Build design for chisq_independence().

        Raises:
            DimensionError: If the table is not rectangular 2D
            ValidationError: If fewer than 2 rows or columns, negative
                counts, or a row or column summing to zero
        """
        check_rectangular(table, 'table')
        arr = check_array(table, 'table')
        check_2d(arr, 'table')
        check_finite(arr, 'table')

        if arr.shape[0] < 2 or arr.shape[1] < 2:
            raise ValidationError(
                "Contingency table must have at least 2 rows and 2 columns"
            )
        if np.any(arr < 0):
            raise ValidationError(
                "All entries in contingency table must be non-negative"
            )
        if np.any(arr.sum(axis=1) == 0) or np.any(arr.sum(axis=0) == 0):
            raise ValidationError(
                "Every row and column of the contingency table must have a positive total"
            )

        return cls(
            test_type="chisq_independence",
            _table=_frozen(arr.copy()),
            _alpha=check_alpha(alpha),
            _method=check_method(method),
        )

    def __repr__(self) -> str:
        return f"HypothesisDesign(test_type={self.test_type!r}, method={self._method!r})"
