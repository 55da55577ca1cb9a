"""
CPU backend for the simulation engine.

Every draw comes from design.rng; nothing touches numpy's global state.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from statlab.core.result import Result
from statlab.core.compute.timing import Timer
from statlab.descriptive.solvers import histogram
from statlab.simulation._common import (
    CoinFlipParams,
    DiceRollParams,
    FaceFrequency,
    CLTParams,
    MAX_SHOWN_RESULTS,
    TARGET_CHECKPOINTS,
    CLT_HISTOGRAM_BINS,
)
from statlab.simulation.design import SimulationDesign

# Success probability threshold of the "binary" population: a draw
# U < BINARY_THRESHOLD maps to 0, anything else to 1
BINARY_THRESHOLD = 0.3

UNIFORM_WIDTH = 10.0


class CPUSimulationBackend:
    """CPU backend for coin flips, dice rolls and the CLT demonstration."""

    @property
    def name(self) -> str:
        return 'cpu_simulation'

    def solve(self, design: SimulationDesign) -> Result:
        """Dispatch on design.sim_type."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(design.sim_type):
            if design.sim_type == "coin_flip":
                params = self._coin_flip(design)
            elif design.sim_type == "dice_roll":
                params = self._dice_roll(design)
            elif design.sim_type == "clt":
                params = self._clt(design, warnings_list)
            else:
                raise ValueError(f"Unknown sim_type: {design.sim_type!r}")

        timer.stop()

        info: dict[str, Any] = {'sim_type': design.sim_type, 'seed': design.seed}
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _coin_flip(self, design: SimulationDesign) -> CoinFlipParams:
        n = design.n
        flips = design.rng.random(n) < design.p
        running_heads = np.cumsum(flips)
        heads = int(running_heads[-1])

        step = max(1, n // TARGET_CHECKPOINTS)
        flip_numbers = np.arange(1, n + 1)
        marks = (flip_numbers % step == 0)
        marks[-1] = True
        checkpoints = tuple(
            (int(k), float(running_heads[k - 1] / k)) for k in flip_numbers[marks]
        )

        return CoinFlipParams(
            n_flips=n,
            p=design.p,
            heads=heads,
            tails=n - heads,
            heads_ratio=heads / n,
            tails_ratio=(n - heads) / n,
            results=tuple('H' if f else 'T' for f in flips[:MAX_SHOWN_RESULTS]),
            checkpoints=checkpoints,
        )

    def _dice_roll(self, design: SimulationDesign) -> DiceRollParams:
        n, sides = design.n, design.sides
        rolls = design.rng.integers(1, sides + 1, size=n)
        counts = np.bincount(rolls, minlength=sides + 1)[1:]

        frequency = {face: int(c) for face, c in enumerate(counts, start=1)}
        distribution = tuple(
            FaceFrequency(
                value=face,
                count=count,
                probability=count / n,
                expected=1.0 / sides,
            )
            for face, count in frequency.items()
        )

        return DiceRollParams(
            n_rolls=n,
            sides=sides,
            frequency=frequency,
            distribution=distribution,
            mean=float(np.mean(rolls)),
            theoretical_mean=(sides + 1) / 2.0,
        )

    def _clt(self, design: SimulationDesign, warnings_list: list[str]) -> CLTParams:
        draws = self._draw_population(
            design.population, (design.n, design.sample_size), design.rng
        )
        means = draws.mean(axis=1)

        if design.n >= 2:
            sd = float(np.std(means, ddof=1))
        else:
            warnings_list.append("sd of sample means needs at least 2 samples")
            sd = float('nan')

        return CLTParams(
            population=design.population,
            sample_size=design.sample_size,
            n_samples=design.n,
            sample_means=means,
            mean_of_means=float(np.mean(means)),
            sd_of_means=sd,
            histogram=histogram(means, bins=CLT_HISTOGRAM_BINS),
        )

    @staticmethod
    def _draw_population(
        population: str,
        shape: tuple[int, int],
        rng: np.random.Generator,
    ) -> NDArray[np.floating[Any]]:
        u = rng.random(shape)
        if population == "uniform":
            return u * UNIFORM_WIDTH
        if population == "exponential":
            # Inverse CDF of Exponential(1); 1 - U lies in (0, 1]
            return -np.log1p(-u)
        if population == "binary":
            return (u >= BINARY_THRESHOLD).astype(np.float64)
        raise ValueError(f"Unknown population: {population!r}")
