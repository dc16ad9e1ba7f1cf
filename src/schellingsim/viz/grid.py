"""
2D visualization of Schelling runs.

Provides:
- the agent distribution as an image (white = empty, red / blue = types)
- the happy fraction over time
- both side by side, as in the classic animation

All plots use matplotlib; nothing here is imported by the engine.
"""

from __future__ import annotations
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.figure import Figure
from matplotlib.patches import Patch
from matplotlib.ticker import PercentFormatter

# Cell value → color: 0 empty, 1 type 1, 2 type 2
AGENT_COLORS = ("white", "red", "blue")
AGENT_LABELS = ("Empty space", "Agent type 1", "Agent type 2")
CMAP_AGENTS = ListedColormap(AGENT_COLORS, name="schelling")
NORM_AGENTS = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], CMAP_AGENTS.N)

HAPPINESS_COLOR = "red"


def plot_grid(
    values: np.ndarray,
    title: str = "Agent distribution in Schelling's Model",
    ax: Axes | None = None,
    legend: bool = True,
    figsize: tuple[float, float] = (7, 7),
) -> tuple[Figure, Axes]:
    """
    Plot the agent distribution.

    Args:
        values: 2D array of cell values (0, 1, 2)
        title: Plot title
        ax: Existing axes to plot on (creates new figure if None)
        legend: Whether to add the cell type legend below the grid
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(values, cmap=CMAP_AGENTS, norm=NORM_AGENTS, interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title)

    if legend:
        handles = [
            Patch(facecolor=color, edgecolor="black", label=text)
            for color, text in zip(AGENT_COLORS, AGENT_LABELS)
        ]
        ax.legend(
            handles=handles,
            title="Cell type",
            loc="upper center",
            bbox_to_anchor=(0.5, -0.04),
            ncol=3,
            frameon=False,
        )

    return fig, ax


def plot_happiness(
    happiness: Sequence[float],
    alike_preference: float | None = None,
    tlength: int | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7, 5),
) -> tuple[Figure, Axes]:
    """
    Plot the share of happy agents over time.

    Args:
        happiness: One happy fraction per completed step
        alike_preference: Threshold shown in the title if given
        tlength: Fixes the x range to the full run length if given
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    steps = np.arange(1, len(happiness) + 1)
    ax.plot(steps, happiness, color=HAPPINESS_COLOR, linewidth=1.5)

    ax.set_ylim(0, 1)
    ax.set_xlim(1, max(tlength or len(happiness), 2))
    ax.set_xlabel("Time")
    ax.set_ylabel("Percent happy")
    ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0))
    if alike_preference is not None:
        ax.set_title(f"Alike preference threshold: {alike_preference}")

    return fig, ax


def plot_simulation_state(
    values: np.ndarray,
    happiness: Sequence[float],
    step: int | None = None,
    tlength: int | None = None,
    alike_preference: float | None = None,
    axes: Sequence[Axes] | None = None,
    figsize: tuple[float, float] = (14, 6),
) -> Figure:
    """
    Plot grid and happiness chart side by side.

    Returns:
        Figure with two subplots
    """
    if axes is None:
        fig, axes = plt.subplots(1, 2, figsize=figsize)
    else:
        fig = axes[0].figure

    plot_grid(values, ax=axes[0])
    if step is not None:
        label = f"Time: {step}" if tlength is None else f"Time: {step} / {tlength}"
        axes[0].set_xlabel(label)
    plot_happiness(happiness, alike_preference=alike_preference, tlength=tlength, ax=axes[1])

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
