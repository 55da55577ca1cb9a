"""
Simulation engine.

Public API:
    coin_flip(n_flips, p, seed)                     - Bernoulli trials
    dice_roll(n_rolls, sides, seed)                 - Fair die frequencies
    central_limit_theorem(population, size, n, seed) - Sampling distribution of the mean
"""

from statlab.simulation.design import SimulationDesign
from statlab.simulation._common import (
    CoinFlipParams,
    DiceRollParams,
    FaceFrequency,
    CLTParams,
)
from statlab.simulation.solution import CoinFlipSolution, DiceRollSolution, CLTSolution
from statlab.simulation.solvers import coin_flip, dice_roll, central_limit_theorem

__all__ = [
    "coin_flip",
    "dice_roll",
    "central_limit_theorem",
    "SimulationDesign",
    "CoinFlipParams",
    "DiceRollParams",
    "FaceFrequency",
    "CLTParams",
    "CoinFlipSolution",
    "DiceRollSolution",
    "CLTSolution",
]
