"""
Tests for the chi-squared tests.

Validates:
    - Goodness of fit against scipy.stats.chisquare
    - Skipped non-positive expected cells
    - Independence test expected matrix against scipy.stats.chi2_contingency
    - Compat critical value 7.815 and coarse p-values
    - Table validation
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from statlab.core.exceptions import DimensionError, ValidationError
from statlab.hypothesis import chisq_gof, chisq_independence


# ═══════════════════════════════════════════════════════════════════════
# Goodness of fit
# ═══════════════════════════════════════════════════════════════════════


class TestGoodnessOfFit:

    def test_matches_scipy(self):
        observed = [50, 30, 20]
        expected = [40, 40, 20]
        result = chisq_gof(observed, expected)
        ref = stats.chisquare(observed, expected)
        assert result.test_name == "Chi-Square Goodness-of-Fit Test"
        assert result.statistic_name == "X-squared"
        assert result.statistic == pytest.approx(5.0)
        assert result.statistic == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-10)
        assert result.df == 2
        assert result.critical_value == pytest.approx(stats.chi2.ppf(0.95, 2))
        assert result.reject is False

    def test_compat_not_significant(self):
        result = chisq_gof([50, 30, 20], [40, 40, 20], method='compat')
        assert result.critical_value == 7.815
        assert result.p_value == 0.1
        assert result.reject is False

    def test_compat_significant(self):
        result = chisq_gof([60, 20, 20], [40, 40, 20], method='compat')
        assert result.statistic == pytest.approx(20.0)
        assert result.p_value == 0.01
        assert result.reject is True

    def test_skips_non_positive_expected(self):
        result = chisq_gof([40, 5, 55], [40, 0, 60])
        assert result.statistic == pytest.approx(25.0 / 60.0)
        assert result.df == 2
        assert result.extras['cells_ignored'] == 1
        assert any("non-positive expected" in w for w in result.warnings)

    def test_small_expected_warning(self):
        result = chisq_gof([1, 4], [2, 3])
        assert result.warnings
        assert any("approximation may be incorrect" in w for w in result.warnings)

    def test_expected_exposed(self):
        result = chisq_gof([10, 20], [15, 15])
        assert_allclose(result.expected, [15.0, 15.0])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            chisq_gof([10, 20, 30], [15, 15])

    def test_single_category(self):
        with pytest.raises(ValidationError, match="at least 2 categories"):
            chisq_gof([10], [10])

    def test_missing_expected(self):
        with pytest.raises(TypeError):
            chisq_gof([10, 20])


# ═══════════════════════════════════════════════════════════════════════
# Independence
# ═══════════════════════════════════════════════════════════════════════


class TestIndependence:

    def test_expected_matrix(self):
        result = chisq_independence([[10, 20], [30, 40]])
        assert_allclose(result.expected, [[12.0, 18.0], [28.0, 42.0]])
        assert result.df == 1
        assert result.extras['grand_total'] == 100.0
        assert_allclose(result.extras['row_totals'], [30.0, 70.0])
        assert_allclose(result.extras['col_totals'], [40.0, 60.0])

    def test_matches_scipy(self):
        table = np.array([[20, 15, 25], [30, 35, 10]])
        result = chisq_independence(table)
        stat, p, dof, expected = stats.chi2_contingency(table, correction=False)
        assert result.test_name == "Chi-Square Test of Independence"
        assert result.statistic == pytest.approx(stat, rel=1e-10)
        assert result.p_value == pytest.approx(p, rel=1e-10)
        assert result.df == dof
        assert_allclose(result.expected, expected)
        assert result.reject is True

    def test_compat(self):
        table = [[20, 15, 25], [30, 35, 10]]
        result = chisq_independence(table, method='compat')
        assert result.critical_value == 7.815
        assert result.p_value == 0.01
        assert result.reject is True

    def test_ragged_table(self):
        with pytest.raises(DimensionError):
            chisq_independence([[1, 2, 3], [4, 5]])

    def test_one_dimensional(self):
        with pytest.raises(DimensionError):
            chisq_independence([1, 2, 3])

    def test_single_row(self):
        with pytest.raises(ValidationError, match="at least 2 rows"):
            chisq_independence([[1, 2, 3]])

    def test_negative_counts(self):
        with pytest.raises(ValidationError, match="non-negative"):
            chisq_independence([[1, -2], [3, 4]])

    def test_zero_margin(self):
        with pytest.raises(ValidationError, match="positive total"):
            chisq_independence([[0, 0], [3, 4]])
