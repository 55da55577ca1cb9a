"""
SampleDesign: data wrapper for descriptive statistics.

Wraps one Sample (a flat sequence of finite reals) and provides
validation and metadata for the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statlab.core.validation import check_sample


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics.

    Immutable after construction. The stored array is a private copy,
    so later mutation of the caller's list or array has no effect.

    Construction:
        SampleDesign.from_array(data)
    """
    _x: NDArray[np.floating[Any]]
    _n: int
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'x') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            Flat numeric sequence. NaN and infinite values are rejected.
        name : str
            Name used in error messages and summaries.
        """
        x = check_sample(data, name, min_samples=1)
        x.setflags(write=False)
        return cls(_x=x, _n=int(x.shape[0]), _name=name)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Sample values (read-only)."""
        return self._x

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"SampleDesign(name={self._name!r}, n={self._n})"
