"""
Common data structures for the simulation engine.

CoinFlipParams, DiceRollParams and CLTParams are the parameter payloads
wrapped by Result[P] and exposed through Solution classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from statlab.descriptive.solution import HistogramBin

# Raw outcomes kept for display
MAX_SHOWN_RESULTS = 100

# Number of running-ratio checkpoints aimed for
TARGET_CHECKPOINTS = 100

# Bins in the histogram of sample means
CLT_HISTOGRAM_BINS = 20

POPULATIONS = ("uniform", "exponential", "binary")


@dataclass(frozen=True)
class CoinFlipParams:
    """
    Parameter payload for coin_flip().

    - results: the first MAX_SHOWN_RESULTS outcomes as 'H' / 'T'
    - checkpoints: (flip number, running heads ratio) pairs
    """
    n_flips: int
    p: float
    heads: int
    tails: int
    heads_ratio: float
    tails_ratio: float
    results: tuple[str, ...]
    checkpoints: tuple[tuple[int, float], ...]


@dataclass(frozen=True)
class FaceFrequency:
    """One face of a die: observed count and probability vs expected."""
    value: int
    count: int
    probability: float
    expected: float


@dataclass(frozen=True)
class DiceRollParams:
    """Parameter payload for dice_roll()."""
    n_rolls: int
    sides: int
    frequency: dict[int, int]
    distribution: tuple[FaceFrequency, ...]
    mean: float
    theoretical_mean: float


@dataclass(frozen=True)
class CLTParams:
    """Parameter payload for central_limit_theorem()."""
    population: str
    sample_size: int
    n_samples: int
    sample_means: NDArray[np.floating[Any]]     # shape (n_samples,)
    mean_of_means: float
    sd_of_means: float
    histogram: tuple[HistogramBin, ...]
