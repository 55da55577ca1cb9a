"""
Tests for describe() and the individual summary statistics.

Validates:
    - SampleDesign construction and immutability
    - describe() against hand-computed values and scipy.stats
    - Small-sample behaviour (NaN plus warning in describe, error in
      the individual functions)
    - mode() tie handling
    - median() invariance under permutation and negation
"""

import numpy as np
import pytest
from scipy import stats

from statlab.core.exceptions import DimensionError, ValidationError
from statlab.descriptive import (
    SampleDesign,
    DescriptiveSolution,
    data_range,
    describe,
    kurtosis,
    maximum,
    mean,
    median,
    minimum,
    mode,
    sd,
    skewness,
    variance,
)


DATA = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


# ═══════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════


class TestSampleDesign:
    """SampleDesign validates and freezes one sample."""

    def test_from_list(self):
        design = SampleDesign.from_array([1, 2, 3])
        assert design.n == 3
        assert design.x.dtype == np.float64

    def test_read_only(self):
        design = SampleDesign.from_array([1.0, 2.0])
        with pytest.raises(ValueError):
            design.x[0] = 5.0

    def test_copy_decouples_caller(self):
        data = np.array([1.0, 2.0, 3.0])
        design = SampleDesign.from_array(data)
        data[0] = 100.0
        assert design.x[0] == 1.0

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            SampleDesign.from_array([])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            SampleDesign.from_array([1.0, float('nan')])

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            SampleDesign.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_repr(self):
        assert "n=2" in repr(SampleDesign.from_array([1.0, 2.0]))


# ═══════════════════════════════════════════════════════════════════════
# describe()
# ═══════════════════════════════════════════════════════════════════════


class TestDescribe:

    def test_returns_solution(self):
        result = describe(DATA)
        assert isinstance(result, DescriptiveSolution)
        assert result.backend_name == 'cpu_descriptive'
        assert result.timing is not None

    def test_location(self):
        result = describe(DATA)
        assert result.count == 8
        assert result.mean == pytest.approx(5.0)
        assert result.median == pytest.approx(4.5)
        assert result.mode == (4.0,)
        assert result.minimum == 2.0
        assert result.maximum == 9.0
        assert result.range == 7.0

    def test_dispersion(self):
        result = describe(DATA)
        assert result.variance == pytest.approx(np.var(DATA, ddof=1))
        assert result.sd == pytest.approx(np.std(DATA, ddof=1))

    def test_shape_matches_scipy(self, rng):
        x = rng.standard_normal(50)
        result = describe(x)
        assert result.skewness == pytest.approx(stats.skew(x, bias=False), rel=1e-10)
        assert result.kurtosis == pytest.approx(stats.kurtosis(x, bias=False), rel=1e-10)

    def test_accepts_design(self):
        design = SampleDesign.from_array(DATA)
        assert describe(design).mean == pytest.approx(5.0)

    def test_single_value(self):
        result = describe([3.0])
        assert result.mean == 3.0
        assert result.median == 3.0
        assert np.isnan(result.variance)
        assert np.isnan(result.skewness)
        assert np.isnan(result.kurtosis)
        assert len(result.warnings) == 3

    def test_three_values_no_kurtosis(self):
        result = describe([1.0, 2.0, 4.0])
        assert not np.isnan(result.skewness)
        assert np.isnan(result.kurtosis)
        assert any("kurtosis" in w for w in result.warnings)

    def test_constant_data(self):
        result = describe([5.0, 5.0, 5.0, 5.0])
        assert result.sd == 0.0
        assert np.isnan(result.skewness)
        assert np.isnan(result.kurtosis)
        assert any("constant" in w for w in result.warnings)

    def test_interpretations(self):
        symmetric = describe([1.0, 2.0, 3.0, 4.0, 5.0])
        assert symmetric.skewness_interpretation == "Approximately symmetric"
        right = describe([1.0, 1.0, 1.0, 2.0, 10.0])
        assert right.skewness_interpretation == "Right-skewed (positive)"

    def test_to_dict(self):
        d = describe(DATA).to_dict()
        assert d['count'] == 8
        assert d['mode'] == [4.0]
        assert set(d) >= {'mean', 'median', 'min', 'max', 'range', 'sd'}

    def test_summary(self):
        text = describe(DATA).summary()
        assert "Mean" in text
        assert "Std. Dev." in text
        assert "Kurtosis" in text

    def test_repr(self):
        assert "n=8" in repr(describe(DATA))


# ═══════════════════════════════════════════════════════════════════════
# Individual statistics
# ═══════════════════════════════════════════════════════════════════════


class TestIndividual:

    def test_simple_values(self):
        assert mean(DATA) == pytest.approx(5.0)
        assert median(DATA) == pytest.approx(4.5)
        assert minimum(DATA) == 2.0
        assert maximum(DATA) == 9.0
        assert data_range(DATA) == 7.0

    def test_variance_and_sd(self):
        assert variance([1.0, 2.0, 3.0, 4.0]) == pytest.approx(5.0 / 3.0)
        assert sd([1.0, 2.0, 3.0, 4.0]) == pytest.approx(np.sqrt(5.0 / 3.0))

    def test_variance_needs_two(self):
        with pytest.raises(ValidationError, match="at least 2"):
            variance([1.0])

    def test_skewness_needs_three(self):
        with pytest.raises(ValidationError, match="at least 3"):
            skewness([1.0, 2.0])

    def test_kurtosis_needs_four(self):
        with pytest.raises(ValidationError, match="at least 4"):
            kurtosis([1.0, 2.0, 3.0])

    def test_symmetric_skewness_zero(self):
        assert skewness([1.0, 2.0, 3.0, 4.0, 5.0]) == pytest.approx(0.0, abs=1e-12)

    def test_mean_empty(self):
        with pytest.raises(ValidationError):
            mean([])


class TestMode:

    def test_single_mode(self):
        assert mode([1, 2, 2, 3]) == (2.0,)

    def test_ties_ascending(self):
        assert mode([3, 3, 1, 1, 2]) == (1.0, 3.0)

    def test_all_distinct(self):
        assert mode([3.0, 1.0, 2.0]) == (1.0, 2.0, 3.0)


class TestMedian:

    def test_odd(self):
        assert median([5.0, 1.0, 3.0]) == 3.0

    def test_even(self):
        assert median([4.0, 1.0, 3.0, 2.0]) == 2.5

    def test_permutation_invariant(self, rng):
        x = rng.standard_normal(21)
        assert median(x) == median(rng.permutation(x))

    def test_negation(self, rng):
        x = rng.standard_normal(20)
        assert median(-x) == pytest.approx(-median(x))
