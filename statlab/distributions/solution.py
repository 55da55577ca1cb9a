"""
Result types for the distribution library.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from statlab.distributions.design import Distribution


@dataclass(frozen=True)
class ProbabilityResult:
    """
    Point evaluation of a distribution at x.

    survival is 1 - cdf, i.e. P(X > x) for continuous distributions.
    """
    distribution: 'Distribution'
    x: float
    pdf: float
    cdf: float
    survival: float
    method: str

    def summary(self) -> str:
        name = type(self.distribution).__name__
        label = "P(X = x)" if self.distribution.kind in ('binomial', 'poisson') else "f(x)"
        return "\n".join([
            f"{self.distribution!r} at x = {self.x:g}",
            f"  {label:<9} {self.pdf:.6f}",
            f"  P(X <= x) {self.cdf:.6f}",
            f"  P(X > x)  {self.survival:.6f}",
            f"  ({name}, method={self.method})",
        ])


class DensitySeries:
    """
    Evenly spaced (x, y) samples of a density over [x_min, x_max].

    Values are computed on iteration, not stored. Every call to iter()
    starts again from x_min, and len() is always points + 1.
    """

    def __init__(self, distribution, x_min: float, x_max: float, points: int, density):
        self._distribution = distribution
        self._x_min = x_min
        self._x_max = x_max
        self._points = points
        self._density = density

    @property
    def distribution(self) -> 'Distribution':
        return self._distribution

    @property
    def step(self) -> float:
        return (self._x_max - self._x_min) / self._points

    def __len__(self) -> int:
        return self._points + 1

    def __iter__(self) -> Iterator[tuple[float, float]]:
        step = self.step
        for i in range(self._points + 1):
            x = self._x_min + i * step
            yield x, self._density(x)

    def to_arrays(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Materialise the series as (xs, ys) arrays."""
        pairs = list(self)
        xs = np.array([p[0] for p in pairs], dtype=np.float64)
        ys = np.array([p[1] for p in pairs], dtype=np.float64)
        return xs, ys

    def __repr__(self) -> str:
        return (
            f"DensitySeries({self._distribution!r}, x_min={self._x_min:g}, "
            f"x_max={self._x_max:g}, points={self._points})"
        )
