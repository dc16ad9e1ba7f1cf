"""
Live rendering observer.

Redraws the agent distribution and the happiness chart after every
step, pausing briefly so the run plays as an animation.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

from schellingsim.viz.grid import plot_simulation_state


class LiveRenderer:
    """StepObserver drawing each step into one reusable figure."""

    def __init__(
        self,
        tlength: int | None = None,
        alike_preference: float | None = None,
        pause: float = 0.1,
        figsize: tuple[float, float] = (14, 6),
    ):
        self.tlength = tlength
        self.alike_preference = alike_preference
        self.pause = pause
        self.fig, self.axes = plt.subplots(1, 2, figsize=figsize)
        self.happiness: list[float] = []

    def on_step(self, grid_snapshot: np.ndarray, happy_fraction: float, step_index: int) -> None:
        self.happiness.append(happy_fraction)
        for ax in self.axes:
            ax.clear()
        plot_simulation_state(
            grid_snapshot,
            self.happiness,
            step=step_index,
            tlength=self.tlength,
            alike_preference=self.alike_preference,
            axes=self.axes,
        )
        if self.pause > 0:
            plt.pause(self.pause)

    def on_complete(self, total_steps: int, happiness_record: Sequence[float]) -> None:
        self.fig.suptitle(f"Simulation complete after {total_steps} steps")
        self.fig.canvas.draw_idle()
