"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def linear_data(rng):
    """Noise-free data from y = 1.5 + 2 x1 - 0.5 x2 + 3 x3."""
    n = 40
    X = rng.standard_normal((n, 3))
    beta_true = np.array([1.5, 2.0, -0.5, 3.0])
    y = beta_true[0] + X @ beta_true[1:]
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (should fail)."""
    n = 50
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    X = np.column_stack([x1, x2, x3])
    y = rng.standard_normal(n)
    return X, y
