"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_config():
    """Configuration for the 5x5 scenario with 10 agents."""
    from schellingsim.core import SimulationConfig
    return SimulationConfig(
        num_agents=10,
        cells_side=5,
        alike_preference=0.7,
        tlength=1,
    )


@pytest.fixture
def medium_config():
    """Configuration for a 20x20 grid run over several steps."""
    from schellingsim.core import SimulationConfig
    return SimulationConfig(
        num_agents=200,
        cells_side=20,
        alike_preference=0.7,
        tlength=30,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
