import numpy as np
import pytest


@pytest.fixture
def random_points():
    """Seeded points in general position inside [0, 10]^2."""
    rng = np.random.default_rng(1)
    return rng.uniform(0.0, 10.0, size=(200, 2))


@pytest.fixture
def small_points():
    rng = np.random.default_rng(7)
    return rng.uniform(-5.0, 5.0, size=(40, 2))
