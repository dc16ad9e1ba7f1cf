"""
Schelling engine: the happiness test and the relocation policy.

Each step:
1. Count alike and occupied neighbors for every agent
2. Agent is happy if it has no occupied neighbors, or if
   like_count / occupied_count >= alike_preference
3. Record happy_fraction = |happy| / num_agents
4. Move unhappy agents, in a fresh random order, to random empty cells
   (rejection sampling against the current grid)
5. Notify observers with a grid snapshot and the happy fraction

All randomness comes from one injected numpy Generator, so a run is fully
reproducible from its seed.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from schellingsim.core.config import InvalidConfiguration, SimulationConfig
from schellingsim.core.grid import EMPTY, Grid, Position
from schellingsim.core.observer import StepObserver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one simulation step."""

    step: int  # 1-based step index
    happy_fraction: float
    n_happy: int
    n_unhappy: int
    n_moved: int
    sampling_attempts: int  # Random positions drawn while relocating


@dataclass
class SchellingEngine:
    """
    Drives the Schelling step loop on a grid it exclusively owns.

    The engine has no state beyond the step counter and the happiness
    record; grid and record are consistent between any two steps, so a
    caller may stop the loop at any step boundary.
    """

    grid: Grid
    config: SimulationConfig
    rng: np.random.Generator
    observers: list[StepObserver] = field(default_factory=list)

    current_step: int = field(default=0, init=False)
    happiness: list[float] = field(default_factory=list, init=False)
    history: list[StepResult] = field(default_factory=list, init=False)

    def __post_init__(self):
        if self.grid.cells_side != self.config.cells_side:
            raise InvalidConfiguration(
                f"grid side {self.grid.cells_side} does not match "
                f"cells_side={self.config.cells_side}"
            )
        if self.grid.num_agents != self.config.num_agents:
            raise InvalidConfiguration(
                f"grid holds {self.grid.num_agents} agents, "
                f"config expects num_agents={self.config.num_agents}"
            )
        if self.grid.num_agents >= self.grid.size:
            raise InvalidConfiguration("grid has no empty cell to relocate into")
        self.observers = list(self.observers)

    @property
    def finished(self) -> bool:
        return self.current_step >= self.config.tlength

    # ═══════════════════════════════════════════════════════════════
    # Happiness
    # ═══════════════════════════════════════════════════════════════

    def happy_mask(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Boolean (happy, unhappy) masks over the grid.

        Empty cells are False in both masks.
        """
        values = self.grid.values
        like_count, occupied_count = self.grid.neighbor_counts()
        occupied = values != EMPTY

        # Isolated agents get ratio 1.0 and are therefore always happy
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.where(occupied_count > 0, like_count / occupied_count, 1.0)

        happy = occupied & (ratio >= self.config.alike_preference)
        unhappy = occupied & ~happy
        return happy, unhappy

    def classify(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (happy, unhappy) position arrays, each shaped (n, 2), row-major."""
        happy, unhappy = self.happy_mask()
        return np.argwhere(happy), np.argwhere(unhappy)

    def is_happy(self, position: Position) -> bool:
        """Happiness test for the single agent at position."""
        value = self.grid.value_at(position)
        if value == EMPTY:
            raise ValueError(f"no agent at {position}")

        like_count = 0
        occupied_count = 0
        for neighbor in self.grid.neighbors_of(position):
            neighbor_value = self.grid.value_at(neighbor)
            if neighbor_value != EMPTY:
                occupied_count += 1
                if neighbor_value == value:
                    like_count += 1

        if occupied_count == 0:
            return True
        return like_count / occupied_count >= self.config.alike_preference

    # ═══════════════════════════════════════════════════════════════
    # Relocation
    # ═══════════════════════════════════════════════════════════════

    def _sample_empty(self) -> tuple[Position, int]:
        """Draw uniform random positions until an empty one turns up."""
        side = self.grid.cells_side
        attempts = 0
        while True:
            attempts += 1
            row, col = self.rng.integers(0, side, size=2)
            if self.grid.values[row, col] == EMPTY:
                return (int(row), int(col)), attempts

    def relocate(self, unhappy_positions: np.ndarray) -> tuple[int, int]:
        """
        Move every unhappy agent to a random empty cell.

        Agents are processed in a fresh random order. Each move sees the
        current grid, so a cell vacated earlier in the pass is a valid
        destination for a later agent.

        Returns:
            (n_moved, sampling_attempts)
        """
        if len(unhappy_positions) == 0:
            return 0, 0

        total_attempts = 0
        for i in self.rng.permutation(len(unhappy_positions)):
            source = (int(unhappy_positions[i, 0]), int(unhappy_positions[i, 1]))
            destination, attempts = self._sample_empty()
            self.grid.move(source, destination)
            total_attempts += attempts

        return len(unhappy_positions), total_attempts

    # ═══════════════════════════════════════════════════════════════
    # Step loop
    # ═══════════════════════════════════════════════════════════════

    def step(self) -> StepResult:
        """Execute one simulation step."""
        if self.finished:
            raise RuntimeError(
                f"simulation already complete after {self.config.tlength} steps"
            )

        happy, unhappy = self.classify()
        n_happy, n_unhappy = len(happy), len(unhappy)
        happy_fraction = n_happy / (n_happy + n_unhappy)
        self.happiness.append(happy_fraction)

        n_moved, attempts = self.relocate(unhappy)

        self.current_step += 1
        result = StepResult(
            step=self.current_step,
            happy_fraction=happy_fraction,
            n_happy=n_happy,
            n_unhappy=n_unhappy,
            n_moved=n_moved,
            sampling_attempts=attempts,
        )
        self.history.append(result)

        logger.debug(
            "step %d/%d: happy=%.4f moved=%d attempts=%d",
            self.current_step, self.config.tlength, happy_fraction, n_moved, attempts,
        )

        snapshot = self.grid.snapshot()
        for observer in self.observers:
            observer.on_step(snapshot, happy_fraction, self.current_step)

        if self.finished:
            self._complete()

        return result

    def _complete(self):
        logger.info("Simulation complete after specified time: %d", self.current_step)
        record = list(self.happiness)
        for observer in self.observers:
            observer.on_complete(self.current_step, record)

    def run(self, n_steps: int | None = None) -> dict:
        """
        Run the simulation until tlength steps have been executed.

        Args:
            n_steps: Optional cap on the number of steps run by this call;
                     the loop can be resumed later with another call.

        Returns:
            Statistics dictionary
        """
        remaining = self.config.tlength - self.current_step
        if n_steps is not None:
            if n_steps < 0:
                raise ValueError("n_steps must be >= 0")
            remaining = min(remaining, n_steps)

        for _ in range(remaining):
            self.step()

        ran = self.history[-remaining:] if remaining else []
        return {
            "n_steps": remaining,
            "current_step": self.current_step,
            "finished": self.finished,
            "total_moves": sum(r.n_moved for r in ran),
            "final_happy_fraction": self.happiness[-1] if self.happiness else None,
            "mean_happy_fraction": float(np.mean(self.happiness)) if self.happiness else None,
        }

    def add_observer(self, observer: StepObserver) -> None:
        self.observers.append(observer)


def create_engine(
    config: SimulationConfig,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    observers: Iterable[StepObserver] = (),
) -> SchellingEngine:
    """
    Factory for an engine on a freshly shuffled grid.

    Args:
        config: Validated simulation parameters
        rng: Random source; created from seed if None
        seed: Seed for a new generator (ignored when rng is given)
        observers: Observers notified after every step
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    grid = Grid.initialize(config.cells_side, config.type_counts, rng)
    return SchellingEngine(grid=grid, config=config, rng=rng, observers=list(observers))
