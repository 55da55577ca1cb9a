"""
Solution wrappers for simulation results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from statlab.core.result import Result
from statlab.descriptive.solution import HistogramBin
from statlab.simulation._common import (
    CoinFlipParams,
    DiceRollParams,
    FaceFrequency,
    CLTParams,
)

if TYPE_CHECKING:
    from statlab.simulation.design import SimulationDesign


@dataclass
class _SimulationSolution:
    _result: Result
    _design: 'SimulationDesign'

    @property
    def seed(self):
        """Seed argument the run was created with."""
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings


@dataclass
class CoinFlipSolution(_SimulationSolution):
    """Coin flip run: counts, ratios, first outcomes and running ratio."""
    _result: Result[CoinFlipParams]

    @property
    def n_flips(self) -> int:
        return self._result.params.n_flips

    @property
    def heads(self) -> int:
        return self._result.params.heads

    @property
    def tails(self) -> int:
        return self._result.params.tails

    @property
    def heads_ratio(self) -> float:
        return self._result.params.heads_ratio

    @property
    def tails_ratio(self) -> float:
        return self._result.params.tails_ratio

    @property
    def results(self) -> tuple[str, ...]:
        """First 100 outcomes, 'H' or 'T'."""
        return self._result.params.results

    @property
    def checkpoints(self) -> tuple[tuple[int, float], ...]:
        """(flip number, heads ratio so far), about 100 entries plus the last flip."""
        return self._result.params.checkpoints

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            f"Coin flips: {p.n_flips} (P(heads) = {p.p:g})",
            f"  heads {p.heads:>8d}  ({p.heads_ratio:.4f})",
            f"  tails {p.tails:>8d}  ({p.tails_ratio:.4f})",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return f"CoinFlipSolution(n_flips={p.n_flips}, heads_ratio={p.heads_ratio:.4f})"


@dataclass
class DiceRollSolution(_SimulationSolution):
    """Dice roll run: per-face frequencies and empirical vs theoretical mean."""
    _result: Result[DiceRollParams]

    @property
    def n_rolls(self) -> int:
        return self._result.params.n_rolls

    @property
    def sides(self) -> int:
        return self._result.params.sides

    @property
    def frequency(self) -> dict[int, int]:
        """Face -> count, for every face 1..sides."""
        return self._result.params.frequency

    @property
    def distribution(self) -> tuple[FaceFrequency, ...]:
        return self._result.params.distribution

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def theoretical_mean(self) -> float:
        """(sides + 1) / 2."""
        return self._result.params.theoretical_mean

    def summary(self) -> str:
        p = self._result.params
        lines = [f"Dice rolls: {p.n_rolls} ({p.sides}-sided)",
                 f"{'face':>6} {'count':>8} {'observed':>9} {'expected':>9}"]
        for f in p.distribution:
            lines.append(
                f"{f.value:>6d} {f.count:>8d} {f.probability:>9.4f} {f.expected:>9.4f}"
            )
        lines.append(f"mean {p.mean:.4f} (theoretical {p.theoretical_mean:g})")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"DiceRollSolution(n_rolls={p.n_rolls}, sides={p.sides}, mean={p.mean:.4f})"


@dataclass
class CLTSolution(_SimulationSolution):
    """Distribution of sample means drawn from a non-normal population."""
    _result: Result[CLTParams]

    @property
    def population(self) -> str:
        return self._result.params.population

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    @property
    def n_samples(self) -> int:
        return self._result.params.n_samples

    @property
    def sample_means(self) -> NDArray[np.floating[Any]]:
        return self._result.params.sample_means

    @property
    def mean_of_means(self) -> float:
        return self._result.params.mean_of_means

    @property
    def sd_of_means(self) -> float:
        return self._result.params.sd_of_means

    @property
    def histogram(self) -> tuple[HistogramBin, ...]:
        """20 equal-width bins over the sample means."""
        return self._result.params.histogram

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            f"Central limit theorem: {p.n_samples} samples of size "
            f"{p.sample_size} from the {p.population} population",
            f"  mean of sample means {p.mean_of_means:.6g}",
            f"  sd of sample means   {p.sd_of_means:.6g}",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CLTSolution(population={p.population!r}, sample_size={p.sample_size}, "
            f"n_samples={p.n_samples})"
        )
