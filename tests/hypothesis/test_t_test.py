"""
Tests for the t-tests and the z-test.

Validates:
    - One-sample, two-sample (pooled and Welch) and paired t-tests
      against scipy.stats
    - The compat method's fixed critical value and p = 1.0
    - Zero standard error (constant data)
    - z-test under both methods
    - Input validation and design passthrough
"""

import numpy as np
import pytest
from scipy import stats

from statlab.core.exceptions import DimensionError, ValidationError
from statlab.hypothesis import (
    HypothesisDesign,
    TestSolution,
    one_sample_t_test,
    paired_t_test,
    two_sample_t_test,
    z_test,
)


SCORES = [98, 99, 100, 101, 102, 103, 104, 105]


# ═══════════════════════════════════════════════════════════════════════
# One-sample
# ═══════════════════════════════════════════════════════════════════════


class TestOneSample:

    def test_basic(self):
        result = one_sample_t_test(SCORES, mu0=100)
        assert isinstance(result, TestSolution)
        assert result.test_name == "One-Sample t-Test"
        assert result.statistic_name == "t"
        assert result.statistic > 0
        assert result.df == 7
        assert result.method == 'exact'

    def test_matches_scipy(self):
        result = one_sample_t_test(SCORES, mu0=100)
        ref = stats.ttest_1samp(SCORES, 100)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert result.critical_value == pytest.approx(stats.t.ppf(0.975, 7))
        assert result.reject is False

    def test_extras(self):
        result = one_sample_t_test(SCORES, mu0=100)
        assert result.extras['mean'] == pytest.approx(101.5)
        assert result.extras['n'] == 8
        assert result.extras['sd'] == pytest.approx(np.std(SCORES, ddof=1))

    def test_reject_far_mean(self, rng):
        x = rng.normal(10.0, 1.0, 30)
        result = one_sample_t_test(x, mu0=0.0)
        assert result.reject is True
        assert result.p_value < 1e-10
        assert "differs significantly from 0" in result.interpretation

    def test_compat(self):
        result = one_sample_t_test(SCORES, mu0=100, method='compat')
        assert result.p_value == 1.0
        assert result.critical_value == 1.96
        assert result.reject == (abs(result.statistic) > 1.96)
        assert result.method == 'compat'

    def test_compat_rejects_on_critical_value(self, rng):
        x = rng.normal(10.0, 1.0, 30)
        result = one_sample_t_test(x, mu0=0.0, method='compat')
        assert result.reject is True
        assert result.p_value == 1.0

    def test_constant_data(self):
        result = one_sample_t_test([5.0, 5.0, 5.0], mu0=4.0)
        assert np.isnan(result.statistic)
        assert np.isnan(result.p_value)
        assert result.reject is False
        assert any("constant" in w for w in result.warnings)
        assert "p-value = NA" in result.summary()

    def test_needs_two(self):
        with pytest.raises(ValidationError, match="at least 2"):
            one_sample_t_test([1.0], mu0=0.0)

    def test_invalid_alpha(self):
        with pytest.raises(ValidationError):
            one_sample_t_test(SCORES, mu0=100, alpha=1.5)

    def test_invalid_method(self):
        with pytest.raises(ValidationError, match="method"):
            one_sample_t_test(SCORES, mu0=100, method='r')

    def test_design_passthrough(self):
        design = HypothesisDesign.for_one_sample_t(SCORES, 100)
        assert design.test_type == "t_one_sample"
        assert one_sample_t_test(design).df == 7

    def test_design_read_only(self):
        design = HypothesisDesign.for_one_sample_t(SCORES, 100)
        with pytest.raises(ValueError):
            design.x[0] = 0.0

    def test_summary(self):
        text = one_sample_t_test(SCORES, mu0=100).summary()
        assert "\tOne-Sample t-Test" in text
        assert "t = " in text
        assert "df = 7" in text
        assert "decision: fail to reject H0" in text

    def test_metadata(self):
        result = one_sample_t_test(SCORES, mu0=100)
        assert result.backend_name == 'cpu_hypothesis'
        assert result.info['test_type'] == 't_one_sample'
        assert 'total_seconds' in result.timing


# ═══════════════════════════════════════════════════════════════════════
# Two-sample
# ═══════════════════════════════════════════════════════════════════════


class TestTwoSample:

    def test_pooled_matches_scipy(self, rng):
        x = rng.normal(0.0, 1.0, 20)
        y = rng.normal(0.8, 1.0, 25)
        result = two_sample_t_test(x, y)
        ref = stats.ttest_ind(x, y, equal_var=True)
        assert result.test_name == "Two-Sample t-Test (Equal Variance)"
        assert result.df == 43
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)

    def test_welch_matches_scipy(self, rng):
        x = rng.normal(0.0, 1.0, 12)
        y = rng.normal(0.5, 3.0, 30)
        result = two_sample_t_test(x, y, equal_variance=False)
        ref = stats.ttest_ind(x, y, equal_var=False)
        assert result.test_name == "Welch's t-Test (Unequal Variance)"
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert result.df != int(result.df)

    def test_identical_samples(self):
        x = [1.0, 2.0, 3.0, 4.0]
        result = two_sample_t_test(x, x, equal_variance=True)
        assert result.statistic == 0.0
        assert result.reject is False
        assert result.mean_difference == 0.0

    def test_compat_uses_p_value(self, rng):
        x = rng.normal(0.0, 1.0, 20)
        y = rng.normal(5.0, 1.0, 20)
        result = two_sample_t_test(x, y, method='compat')
        # p is 1.0 in compat mode and the decision follows p < alpha
        assert result.p_value == 1.0
        assert result.reject is False

    def test_missing_y(self):
        with pytest.raises(TypeError, match="'y'"):
            two_sample_t_test([1.0, 2.0, 3.0])

    def test_small_group(self):
        with pytest.raises(ValidationError):
            two_sample_t_test([1.0, 2.0, 3.0], [4.0])


# ═══════════════════════════════════════════════════════════════════════
# Paired
# ═══════════════════════════════════════════════════════════════════════


class TestPaired:

    def test_matches_scipy(self):
        before = [72.0, 75.0, 80.0, 68.0, 77.0, 70.0]
        after = [75.0, 79.0, 82.0, 71.0, 80.0, 74.0]
        result = paired_t_test(before, after)
        ref = stats.ttest_rel(after, before)
        assert result.test_name == "Paired t-Test"
        assert result.df == 5
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert result.mean_difference == pytest.approx(np.mean(np.subtract(after, before)))
        assert result.reject is True

    def test_direction_is_after_minus_before(self):
        result = paired_t_test([10.0, 11.0, 12.5], [8.0, 9.5, 10.0])
        assert result.statistic < 0

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            paired_t_test([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_one_pair(self):
        with pytest.raises(ValidationError, match="at least 2 pairs"):
            paired_t_test([1.0], [2.0])

    def test_missing_after(self):
        with pytest.raises(TypeError):
            paired_t_test([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# z-test
# ═══════════════════════════════════════════════════════════════════════


class TestZTest:

    def test_exact(self):
        result = z_test([1, 2, 3, 4, 5], mu0=2.0, sigma=1.0)
        expected_z = np.sqrt(5.0)
        assert result.test_name == "One-Sample z-Test"
        assert result.statistic == pytest.approx(expected_z)
        assert result.df is None
        assert result.df_detail == {}
        assert result.p_value == pytest.approx(2 * stats.norm.sf(expected_z), rel=1e-10)
        assert result.critical_value == pytest.approx(1.959964, abs=1e-6)
        assert result.reject is True

    def test_compat(self):
        result = z_test([1, 2, 3, 4, 5], mu0=2.0, sigma=1.0, method='compat')
        assert result.critical_value == 1.96
        assert result.p_value == pytest.approx(2 * stats.norm.sf(np.sqrt(5.0)), abs=1e-6)
        assert result.reject is True

    def test_single_observation(self):
        result = z_test([3.0], mu0=0.0, sigma=2.0)
        assert result.statistic == pytest.approx(1.5)

    def test_summary_has_no_df(self):
        text = z_test([1, 2, 3], mu0=0.0, sigma=1.0).summary()
        assert "df =" not in text
        assert "z = " in text

    def test_invalid_sigma(self):
        with pytest.raises(ValidationError, match="positive"):
            z_test([1, 2, 3], mu0=0.0, sigma=0.0)
