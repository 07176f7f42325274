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
def perfect_line():
    """y = 2x on three points: slope 2, intercept 0, r = 1."""
    return np.array([1.0, 2.0, 3.0]), np.array([2.0, 4.0, 6.0])


@pytest.fixture
def parabola():
    """y = x² on a symmetric grid: a = 1, b = 0, c = 0, vertex at origin."""
    x = np.array([-2.0, -1.0, 0.0, 1.0, 2.0])
    return x, x * x


@pytest.fixture
def exponential_data():
    """y = 3·e^(0.5·(x − 2)) sampled at x = 2..6."""
    x = np.array([2.0, 3.0, 4.0, 5.0, 6.0])
    return x, 3.0 * np.exp(0.5 * (x - 2.0))


@pytest.fixture
def power_data():
    """y = 2·x³ at x = 1, 2, 4, 8."""
    x = np.array([1.0, 2.0, 4.0, 8.0])
    return x, 2.0 * x ** 3


@pytest.fixture
def spike_data():
    """Nine flat samples and one far outlier at index 9."""
    x = np.arange(10, dtype=np.float64)
    y = np.ones(10)
    y[9] = 100.0
    return x, y
