"""Unit tests for the matplotlib visualization helpers."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from schellingsim.core import create_engine
from schellingsim.viz import (
    CMAP_AGENTS,
    LiveRenderer,
    plot_grid,
    plot_happiness,
    plot_simulation_state,
    save_figure,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotGrid:
    """Tests for plot_grid."""

    def test_returns_figure_and_axes(self):
        values = np.array([[0, 1], [2, 0]])
        fig, ax = plot_grid(values)
        assert ax.figure is fig
        assert len(ax.images) == 1
        assert np.array_equal(ax.images[0].get_array(), values)

    def test_colormap_has_three_colors(self):
        assert CMAP_AGENTS.N == 3

    def test_legend_optional(self):
        values = np.zeros((3, 3), dtype=int)
        _, ax = plot_grid(values, legend=False)
        assert ax.get_legend() is None
        _, ax = plot_grid(values, legend=True)
        assert len(ax.get_legend().get_texts()) == 3

    def test_draws_on_existing_axes(self):
        fig, ax = plt.subplots()
        out_fig, out_ax = plot_grid(np.zeros((3, 3), dtype=int), ax=ax)
        assert out_fig is fig
        assert out_ax is ax


class TestPlotHappiness:
    """Tests for plot_happiness."""

    def test_line_data(self):
        record = [0.2, 0.5, 0.9]
        _, ax = plot_happiness(record, alike_preference=0.7, tlength=10)
        line = ax.get_lines()[0]
        assert list(line.get_xdata()) == [1, 2, 3]
        assert list(line.get_ydata()) == record
        assert ax.get_ylim() == (0.0, 1.0)
        assert ax.get_xlim() == (1.0, 10.0)
        assert "0.7" in ax.get_title()

    def test_empty_record(self):
        _, ax = plot_happiness([])
        assert len(ax.get_lines()[0].get_xdata()) == 0


class TestSimulationState:
    """Tests for the combined plot and saving."""

    def test_two_panels(self):
        fig = plot_simulation_state(np.zeros((4, 4), dtype=int), [0.5], step=1, tlength=5)
        assert len(fig.axes) == 2
        assert fig.axes[0].get_xlabel() == "Time: 1 / 5"

    def test_save_figure(self, tmp_path):
        fig, _ = plot_grid(np.zeros((3, 3), dtype=int))
        path = tmp_path / "nested" / "grid.png"
        save_figure(fig, path, dpi=50)
        assert path.exists()
        assert path.stat().st_size > 0


class TestLiveRenderer:
    """Tests for LiveRenderer as an engine observer."""

    def test_renders_each_step(self, medium_config):
        renderer = LiveRenderer(
            tlength=medium_config.tlength,
            alike_preference=medium_config.alike_preference,
            pause=0,
        )
        engine = create_engine(medium_config, seed=1, observers=[renderer])
        engine.run(n_steps=3)

        assert renderer.happiness == engine.happiness
        assert len(renderer.axes[1].get_lines()) == 1
        assert list(renderer.axes[1].get_lines()[0].get_ydata()) == engine.happiness

    def test_completion_title(self, small_config):
        renderer = LiveRenderer(pause=0)
        engine = create_engine(small_config, seed=1, observers=[renderer])
        engine.run()
        assert "complete after 1 steps" in renderer.fig.get_suptitle()
