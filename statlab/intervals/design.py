"""
Design class for confidence intervals.

IntervalDesign holds a validated sample (mean interval) or a success
count (proportion interval) together with the confidence level and
method. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statlab.core.exceptions import ValidationError
from statlab.core.methods import DEFAULT_METHOD
from statlab.core.validation import check_sample, check_alpha, check_integer, check_method


@dataclass(frozen=True)
class IntervalDesign:
    """
    Frozen design for a confidence interval.

    Attributes:
        interval_type: "mean" or "proportion".
        conf_level: Confidence level in (0, 1).
        method: "exact" or "compat".
        x: Sample (mean intervals only).
        successes: Success count (proportion intervals only).
        n: Sample size.
    """
    interval_type: str
    conf_level: float
    method: str
    n: int
    x: NDArray[np.floating[Any]] | None = None
    successes: int = 0

    @classmethod
    def for_mean(
        cls,
        x: ArrayLike,
        conf_level: float = 0.95,
        *,
        method: str = DEFAULT_METHOD,
    ) -> IntervalDesign:
        """Design for a mean interval. x needs at least 2 finite values."""
        arr = check_sample(x, 'x', min_samples=2)
        arr.setflags(write=False)
        return cls(
            interval_type="mean",
            conf_level=check_alpha(conf_level, 'conf_level'),
            method=check_method(method),
            n=arr.shape[0],
            x=arr,
        )

    @classmethod
    def for_proportion(
        cls,
        successes: int,
        n: int,
        conf_level: float = 0.95,
        *,
        method: str = DEFAULT_METHOD,
    ) -> IntervalDesign:
        """
        Design for a proportion interval.

        Raises:
            ValidationError: If n < 1 or successes is outside 0..n
        """
        n = check_integer(n, 'n', minimum=1)
        successes = check_integer(successes, 'successes', minimum=0)
        if successes > n:
            raise ValidationError(f"successes: must be <= n={n}, got {successes}")
        return cls(
            interval_type="proportion",
            conf_level=check_alpha(conf_level, 'conf_level'),
            method=check_method(method),
            n=n,
            successes=successes,
        )

    def __repr__(self) -> str:
        return (
            f"IntervalDesign(interval_type={self.interval_type!r}, n={self.n}, "
            f"conf_level={self.conf_level:g}, method={self.method!r})"
        )
