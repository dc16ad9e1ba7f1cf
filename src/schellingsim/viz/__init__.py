"""
Visualization utilities.

- Agent distribution image
- Happiness-over-time chart
- Live renderer observer
"""

from schellingsim.viz.grid import (
    AGENT_COLORS,
    CMAP_AGENTS,
    plot_grid,
    plot_happiness,
    plot_simulation_state,
    save_figure,
)
from schellingsim.viz.live import LiveRenderer

__all__ = [
    "AGENT_COLORS",
    "CMAP_AGENTS",
    "plot_grid",
    "plot_happiness",
    "plot_simulation_state",
    "save_figure",
    "LiveRenderer",
]
