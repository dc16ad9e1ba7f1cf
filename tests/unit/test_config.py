"""Unit tests for SimulationConfig validation."""

import numpy as np
import pytest

from schellingsim.core.config import InvalidConfiguration, SimulationConfig


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_default_config(self):
        cfg = SimulationConfig()
        assert cfg.num_agents == 2000
        assert cfg.cells_side == 51
        assert cfg.alike_preference == 0.7
        assert cfg.tlength == 100

    def test_grid_size(self):
        cfg = SimulationConfig(num_agents=10, cells_side=5)
        assert cfg.grid_size == 25

    def test_type_counts(self):
        cfg = SimulationConfig(num_agents=10, cells_side=5)
        assert cfg.type_counts == (15, 5, 5)
        assert sum(cfg.type_counts) == cfg.grid_size

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            SimulationConfig(cells_side=0)

    @pytest.mark.parametrize("preference", [0.0, 0.5, 1.0])
    def test_preference_bounds_inclusive(self, preference):
        cfg = SimulationConfig(num_agents=10, cells_side=5, alike_preference=preference)
        assert cfg.alike_preference == preference

    def test_numpy_scalars_accepted(self):
        cfg = SimulationConfig(
            num_agents=np.int64(10),
            cells_side=np.int64(5),
            alike_preference=np.float64(0.3),
        )
        assert cfg.grid_size == 25


class TestConfigValidation:
    """Each violated constraint raises InvalidConfiguration."""

    @pytest.mark.parametrize("side", [0, -3])
    def test_non_positive_side(self, side):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=2, cells_side=side)

    def test_zero_agents(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=0, cells_side=5)

    def test_population_equal_to_capacity(self):
        with pytest.raises(InvalidConfiguration, match="at least one cell"):
            SimulationConfig(num_agents=16, cells_side=4)

    def test_population_exceeding_capacity(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=30, cells_side=5)

    def test_odd_population(self):
        with pytest.raises(InvalidConfiguration, match="even"):
            SimulationConfig(num_agents=11, cells_side=5)

    @pytest.mark.parametrize("preference", [-0.1, 1.01, float("nan")])
    def test_preference_out_of_range(self, preference):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=10, cells_side=5, alike_preference=preference)

    def test_non_numeric_preference(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=10, cells_side=5, alike_preference="high")

    def test_non_positive_tlength(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=10, cells_side=5, tlength=0)

    def test_non_integer_side(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=10, cells_side=5.0)

    def test_bool_rejected_as_integer(self):
        with pytest.raises(InvalidConfiguration):
            SimulationConfig(num_agents=10, cells_side=5, tlength=True)

    def test_config_is_frozen(self):
        cfg = SimulationConfig(num_agents=10, cells_side=5)
        with pytest.raises(AttributeError):
            cfg.tlength = 5
