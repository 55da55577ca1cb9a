"""
Tests for the simulation engine.

Validates:
    - Coin flip counts, ratios, displayed outcomes and checkpoints
    - Dice roll frequency table and mean
    - Central limit theorem sample means and histogram
    - Reproducibility with a fixed seed and with an injected Generator
    - Input validation
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from statlab.core.exceptions import ValidationError
from statlab.simulation import (
    CLTSolution,
    CoinFlipSolution,
    DiceRollSolution,
    central_limit_theorem,
    coin_flip,
    dice_roll,
)


# ═══════════════════════════════════════════════════════════════════════
# Coin flips
# ═══════════════════════════════════════════════════════════════════════


class TestCoinFlip:

    def test_fair_coin(self):
        result = coin_flip(10_000, seed=42)
        assert isinstance(result, CoinFlipSolution)
        assert result.n_flips == 10_000
        assert result.heads + result.tails == 10_000
        assert abs(result.heads_ratio - 0.5) < 0.05
        assert result.heads_ratio + result.tails_ratio == pytest.approx(1.0)

    def test_results_truncated(self):
        result = coin_flip(500, seed=1)
        assert len(result.results) == 100
        assert set(result.results) <= {'H', 'T'}

    def test_results_short_run(self):
        result = coin_flip(7, seed=1)
        assert len(result.results) == 7
        assert result.results.count('H') == result.heads

    def test_checkpoints_even(self):
        result = coin_flip(10_000, seed=3)
        assert len(result.checkpoints) == 100
        assert result.checkpoints[0][0] == 100
        assert result.checkpoints[-1] == (10_000, pytest.approx(result.heads_ratio))

    def test_checkpoints_include_last_flip(self):
        result = coin_flip(1055, seed=3)
        flips = [k for k, _ in result.checkpoints]
        assert flips[-1] == 1055
        assert flips[-2] == 1050
        assert len(flips) == 106

    def test_checkpoints_small_run(self):
        result = coin_flip(50, seed=3)
        assert [k for k, _ in result.checkpoints] == list(range(1, 51))

    def test_checkpoint_ratios_in_unit_interval(self):
        result = coin_flip(2000, seed=5)
        assert all(0.0 <= r <= 1.0 for _, r in result.checkpoints)

    def test_biased_coin(self):
        assert coin_flip(100, p=1.0, seed=0).heads == 100
        assert coin_flip(100, p=0.0, seed=0).heads == 0

    def test_reproducible(self):
        a = coin_flip(1000, seed=123)
        b = coin_flip(1000, seed=123)
        assert a.heads == b.heads
        assert a.results == b.results
        assert a.checkpoints == b.checkpoints

    def test_generator_injection(self):
        gen = np.random.default_rng(9)
        result = coin_flip(200, seed=gen)
        expected = np.random.default_rng(9).random(200) < 0.5
        assert result.heads == int(expected.sum())

    def test_metadata(self):
        result = coin_flip(10, seed=42)
        assert result.seed == 42
        assert result.info['sim_type'] == 'coin_flip'
        assert result.backend_name == 'cpu_simulation'
        assert "heads" in result.summary()

    def test_invalid(self):
        with pytest.raises(ValidationError):
            coin_flip(0)
        with pytest.raises(ValidationError):
            coin_flip(10, p=1.5)
        with pytest.raises(ValidationError):
            coin_flip(10, seed=-1)


# ═══════════════════════════════════════════════════════════════════════
# Dice rolls
# ═══════════════════════════════════════════════════════════════════════


class TestDiceRoll:

    def test_fair_die(self):
        result = dice_roll(6000, seed=42)
        assert isinstance(result, DiceRollSolution)
        assert sum(result.frequency.values()) == 6000
        assert sorted(result.frequency) == [1, 2, 3, 4, 5, 6]
        assert result.theoretical_mean == 3.5
        assert abs(result.mean - 3.5) < 0.1

    def test_distribution_table(self):
        result = dice_roll(1200, sides=4, seed=7)
        assert len(result.distribution) == 4
        for row in result.distribution:
            assert row.count == result.frequency[row.value]
            assert row.probability == pytest.approx(row.count / 1200)
            assert row.expected == pytest.approx(0.25)

    def test_faces_never_rolled_are_listed(self):
        result = dice_roll(1, sides=20, seed=0)
        assert len(result.frequency) == 20
        assert sum(result.frequency.values()) == 1

    def test_reproducible(self):
        assert dice_roll(300, seed=5).frequency == dice_roll(300, seed=5).frequency

    def test_invalid(self):
        with pytest.raises(ValidationError):
            dice_roll(10, sides=1)
        with pytest.raises(ValidationError):
            dice_roll(0)


# ═══════════════════════════════════════════════════════════════════════
# Central limit theorem
# ═══════════════════════════════════════════════════════════════════════


class TestCentralLimitTheorem:

    def test_uniform(self):
        result = central_limit_theorem('uniform', 30, 1000, seed=42)
        assert isinstance(result, CLTSolution)
        assert result.sample_means.shape == (1000,)
        assert result.mean_of_means == pytest.approx(5.0, abs=0.1)
        assert result.sd_of_means == pytest.approx(np.sqrt(100.0 / 12.0 / 30.0), rel=0.1)

    def test_exponential(self):
        result = central_limit_theorem('exponential', 50, 500, seed=42)
        assert np.all(np.isfinite(result.sample_means))
        assert result.mean_of_means == pytest.approx(1.0, abs=0.05)

    def test_binary(self):
        result = central_limit_theorem('binary', 40, 500, seed=42)
        assert np.all((result.sample_means >= 0.0) & (result.sample_means <= 1.0))
        assert result.mean_of_means == pytest.approx(0.7, abs=0.03)

    def test_histogram(self):
        result = central_limit_theorem('uniform', 10, 400, seed=1)
        assert len(result.histogram) == 20
        assert sum(b.count for b in result.histogram) == 400
        assert result.histogram[0].start == pytest.approx(result.sample_means.min())
        assert result.histogram[-1].end == pytest.approx(result.sample_means.max())

    def test_reproducible(self):
        a = central_limit_theorem('exponential', 5, 50, seed=11)
        b = central_limit_theorem('exponential', 5, 50, seed=11)
        assert_array_equal(a.sample_means, b.sample_means)

    def test_single_sample(self):
        result = central_limit_theorem('uniform', 5, 1, seed=0)
        assert np.isnan(result.sd_of_means)
        assert result.warnings

    def test_unknown_population(self):
        with pytest.raises(ValidationError, match="population"):
            central_limit_theorem('normal', 10, 10)

    def test_invalid_sizes(self):
        with pytest.raises(ValidationError):
            central_limit_theorem('uniform', 0, 10)
        with pytest.raises(ValidationError):
            central_limit_theorem('uniform', 10, 0)

    def test_summary(self):
        result = central_limit_theorem('binary', 10, 20, seed=0)
        assert 'binary' in result.summary()
