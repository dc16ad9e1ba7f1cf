"""
Observers receive simulation output after every step.

The engine never draws or prints anything itself. Renderers, loggers and
recorders subscribe to it through this protocol.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol, Sequence

import numpy as np


class StepObserver(Protocol):
    """Protocol for consumers of per-step simulation output."""

    def on_step(self, grid_snapshot: np.ndarray, happy_fraction: float, step_index: int) -> None:
        """
        Called after each completed step.

        Args:
            grid_snapshot: Copy of the cell values after relocation
            happy_fraction: Share of agents that were happy this step
            step_index: 1-based index of the step just completed
        """
        ...

    def on_complete(self, total_steps: int, happiness_record: Sequence[float]) -> None:
        """Called once when the run reaches its configured length."""
        ...


@dataclass
class SnapshotRecorder:
    """
    Observer that keeps grid snapshots for later rendering.

    Only every `every`-th step is stored; the final step is always kept.
    """

    every: int = 1
    snapshots: dict[int, np.ndarray] = field(default_factory=dict)
    happy_fractions: list[float] = field(default_factory=list)
    completed: bool = False
    _last: tuple[int, np.ndarray] | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.every < 1:
            raise ValueError("every must be >= 1")

    def on_step(self, grid_snapshot: np.ndarray, happy_fraction: float, step_index: int) -> None:
        self.happy_fractions.append(happy_fraction)
        self._last = (step_index, grid_snapshot)
        if step_index % self.every == 0:
            self.snapshots[step_index] = grid_snapshot

    def on_complete(self, total_steps: int, happiness_record: Sequence[float]) -> None:
        self.completed = True
        if self._last is not None:
            step_index, grid_snapshot = self._last
            self.snapshots.setdefault(step_index, grid_snapshot)
