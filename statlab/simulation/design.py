"""
Design class for the simulation engine.

SimulationDesign encapsulates the inputs of one simulation run,
including its random source. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from statlab.core.exceptions import ValidationError
from statlab.core.compute.rng import SeedLike, make_rng
from statlab.core.validation import check_integer, check_probability
from statlab.simulation._common import POPULATIONS


@dataclass(frozen=True)
class SimulationDesign:
    """
    Frozen design for a simulation run.

    Attributes:
        sim_type: "coin_flip", "dice_roll" or "clt".
        n: Number of flips, rolls or samples.
        p: Probability of heads (coin_flip).
        sides: Faces of the die (dice_roll).
        population: Population generator (clt).
        sample_size: Values per sample (clt).
        rng: Random source, resolved from the seed argument.
        seed: The seed argument as given, for the record.
    """
    sim_type: str
    n: int
    rng: np.random.Generator
    seed: SeedLike = None
    p: float = 0.5
    sides: int = 6
    population: str | None = None
    sample_size: int = 0

    @classmethod
    def for_coin_flip(
        cls,
        n_flips: int,
        p: float = 0.5,
        *,
        seed: SeedLike = None,
    ) -> SimulationDesign:
        """Create a coin flip design. n_flips >= 1, p in [0, 1]."""
        return cls(
            sim_type="coin_flip",
            n=check_integer(n_flips, 'n_flips', minimum=1),
            p=check_probability(p, 'p'),
            rng=make_rng(seed),
            seed=seed,
        )

    @classmethod
    def for_dice_roll(
        cls,
        n_rolls: int,
        sides: int = 6,
        *,
        seed: SeedLike = None,
    ) -> SimulationDesign:
        """Create a dice roll design. n_rolls >= 1, sides >= 2."""
        return cls(
            sim_type="dice_roll",
            n=check_integer(n_rolls, 'n_rolls', minimum=1),
            sides=check_integer(sides, 'sides', minimum=2),
            rng=make_rng(seed),
            seed=seed,
        )

    @classmethod
    def for_clt(
        cls,
        population: str,
        sample_size: int,
        n_samples: int,
        *,
        seed: SeedLike = None,
    ) -> SimulationDesign:
        """
        Create a central limit theorem design.

        Raises:
            ValidationError: If population is unknown or a size is < 1
        """
        if population not in POPULATIONS:
            raise ValidationError(
                f"population must be one of {POPULATIONS}, got {population!r}"
            )
        return cls(
            sim_type="clt",
            n=check_integer(n_samples, 'n_samples', minimum=1),
            population=population,
            sample_size=check_integer(sample_size, 'sample_size', minimum=1),
            rng=make_rng(seed),
            seed=seed,
        )
