"""
Distribution specifications.

A tagged variant with one frozen dataclass per distribution kind. Each
variant carries only its own parameters and validates them at
construction; the `kind` tag is what the density functions dispatch on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from statlab.core.exceptions import ValidationError
from statlab.core.validation import (
    check_real,
    check_integer,
    check_positive,
    check_probability,
)


def _set(obj: Any, name: str, value: Any) -> None:
    """Store a coerced value on a frozen dataclass during __post_init__."""
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class Normal:
    """Normal(mean, sd), sd > 0."""
    mean: float = 0.0
    sd: float = 1.0
    kind: ClassVar[str] = 'normal'

    def __post_init__(self):
        _set(self, 'mean', check_real(self.mean, 'mean'))
        _set(self, 'sd', check_positive(self.sd, 'sd'))


@dataclass(frozen=True)
class Binomial:
    """Binomial(n, p), integer n >= 1 and p in [0, 1]."""
    n: int
    p: float
    kind: ClassVar[str] = 'binomial'

    def __post_init__(self):
        _set(self, 'n', check_integer(self.n, 'n', minimum=1))
        _set(self, 'p', check_probability(self.p, 'p'))


@dataclass(frozen=True)
class Poisson:
    """Poisson(lam), lam > 0."""
    lam: float
    kind: ClassVar[str] = 'poisson'

    def __post_init__(self):
        _set(self, 'lam', check_positive(self.lam, 'lam'))


@dataclass(frozen=True)
class Uniform:
    """Continuous Uniform(low, high), low < high."""
    low: float = 0.0
    high: float = 1.0
    kind: ClassVar[str] = 'uniform'

    def __post_init__(self):
        low = check_real(self.low, 'low')
        high = check_real(self.high, 'high')
        if not low < high:
            raise ValidationError(f"low must be < high, got low={low}, high={high}")
        _set(self, 'low', low)
        _set(self, 'high', high)


@dataclass(frozen=True)
class Exponential:
    """Exponential(rate), rate > 0."""
    rate: float = 1.0
    kind: ClassVar[str] = 'exponential'

    def __post_init__(self):
        _set(self, 'rate', check_positive(self.rate, 'rate'))


@dataclass(frozen=True)
class StudentT:
    """Student's t with df > 0 degrees of freedom (need not be integral)."""
    df: float
    kind: ClassVar[str] = 'studentt'

    def __post_init__(self):
        _set(self, 'df', check_positive(self.df, 'df'))


Distribution = Union[Normal, Binomial, Poisson, Uniform, Exponential, StudentT]

DISTRIBUTIONS: dict[str, type] = {
    cls.kind: cls
    for cls in (Normal, Binomial, Poisson, Uniform, Exponential, StudentT)
}

DISCRETE_KINDS = frozenset({Binomial.kind, Poisson.kind})


def make_distribution(kind: str, **params: Any) -> Distribution:
    """
    Build a distribution variant from its kind tag.

    Examples:
        >>> make_distribution('normal', mean=100, sd=15)
        Normal(mean=100.0, sd=15.0)
        >>> make_distribution('binomial', n=10, p=0.3)
        Binomial(n=10, p=0.3)
    """
    try:
        cls = DISTRIBUTIONS[kind]
    except KeyError:
        raise ValidationError(
            f"Unknown distribution kind: {kind!r}. "
            f"Must be one of {sorted(DISTRIBUTIONS)}."
        ) from None
    try:
        return cls(**params)
    except TypeError as e:
        raise ValidationError(f"{kind}: invalid parameters: {e}") from e
