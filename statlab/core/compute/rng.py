"""
Random source for the simulation engine.

There is no module-level generator: every simulation receives its
random source explicitly, so concurrent callers never share state and
a fixed seed reproduces a run exactly.
"""

from __future__ import annotations

from numbers import Integral

import numpy as np

from statlab.core.exceptions import ValidationError

SeedLike = int | np.random.Generator | None


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Resolve a seed argument to a numpy Generator.

    Args:
        seed: None for a fresh OS-seeded generator, a non-negative int
            for a reproducible one, or an existing Generator (returned
            unchanged, so its state advances with use)

    Raises:
        ValidationError: If seed is of any other type or negative
    """
    if seed is None:
        return np.random.default_rng()
    if isinstance(seed, np.random.Generator):
        return seed
    if isinstance(seed, Integral) and not isinstance(seed, bool):
        if seed < 0:
            raise ValidationError(f"seed: must be non-negative, got {seed}")
        return np.random.default_rng(int(seed))
    raise ValidationError(
        f"seed: expected None, an int or a numpy Generator, got {type(seed).__name__}"
    )
