"""
Solver dispatch for the simulation engine.

Every function takes a `seed`: None draws from a fresh OS-seeded
generator, an int makes the run reproducible, and a numpy Generator is
used as-is (its state advances).
"""

from __future__ import annotations

from statlab.core.compute.rng import SeedLike
from statlab.simulation.design import SimulationDesign
from statlab.simulation.solution import CoinFlipSolution, DiceRollSolution, CLTSolution
from statlab.simulation.backends.cpu import CPUSimulationBackend


def coin_flip(n_flips: int, p: float = 0.5, *, seed: SeedLike = None) -> CoinFlipSolution:
    """
    Simulate n_flips independent Bernoulli(p) coin flips.

    Returns
    -------
    CoinFlipSolution
        heads/tails counts and ratios, the first 100 outcomes, and the
        running heads ratio checkpointed every max(1, n_flips // 100)
        flips plus at the final flip.

    Examples:
        >>> res = coin_flip(10_000, seed=42)
        >>> abs(res.heads_ratio - 0.5) < 0.05
        True
    """
    design = SimulationDesign.for_coin_flip(n_flips, p, seed=seed)
    result = CPUSimulationBackend().solve(design)
    return CoinFlipSolution(_result=result, _design=design)


def dice_roll(n_rolls: int, sides: int = 6, *, seed: SeedLike = None) -> DiceRollSolution:
    """Roll a fair die with `sides` faces n_rolls times."""
    design = SimulationDesign.for_dice_roll(n_rolls, sides, seed=seed)
    result = CPUSimulationBackend().solve(design)
    return DiceRollSolution(_result=result, _design=design)


def central_limit_theorem(
    population: str,
    sample_size: int,
    n_samples: int,
    *,
    seed: SeedLike = None,
) -> CLTSolution:
    """
    Draw n_samples samples of sample_size values and collect their means.

    Populations:
        'uniform'      Uniform on [0, 10)
        'exponential'  Exponential with rate 1, by inverse-CDF sampling
        'binary'       0 with probability 0.3, otherwise 1

    Returns
    -------
    CLTSolution
        sample means, their mean and sd, and a 20-bin histogram.
    """
    design = SimulationDesign.for_clt(population, sample_size, n_samples, seed=seed)
    result = CPUSimulationBackend().solve(design)
    return CLTSolution(_result=result, _design=design)
