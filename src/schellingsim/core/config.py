"""
Simulation parameters and their validation.

Everything is validated before any grid is built, so a failing
configuration never leaves a partially constructed simulation behind.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral, Real


class InvalidConfiguration(ValueError):
    """Raised when simulation parameters are inconsistent."""


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for one Schelling run."""

    num_agents: int = 2000  # Total agents, split evenly into two types
    cells_side: int = 51  # Side length of the square toroidal grid
    alike_preference: float = 0.7  # Minimum share of alike neighbors to be happy
    tlength: int = 100  # Number of simulation steps

    def __post_init__(self) -> None:
        _require_int("cells_side", self.cells_side)
        _require_int("num_agents", self.num_agents)
        _require_int("tlength", self.tlength)

        if self.cells_side <= 0:
            raise InvalidConfiguration("cells_side must be > 0")
        if self.num_agents <= 0:
            raise InvalidConfiguration("num_agents must be > 0")
        if self.num_agents >= self.grid_size:
            raise InvalidConfiguration(
                f"num_agents ({self.num_agents}) must be smaller than the number "
                f"of cells ({self.grid_size}) so that at least one cell stays empty"
            )
        if self.num_agents % 2 != 0:
            raise InvalidConfiguration("num_agents must be even (two equal type groups)")

        if isinstance(self.alike_preference, bool) or not isinstance(self.alike_preference, Real):
            raise InvalidConfiguration(
                f"alike_preference must be a number, got {self.alike_preference!r}"
            )
        if not 0.0 <= self.alike_preference <= 1.0:
            raise InvalidConfiguration("alike_preference must lie in [0, 1]")

        if self.tlength <= 0:
            raise InvalidConfiguration("tlength must be > 0")

    @property
    def grid_size(self) -> int:
        """Total number of cells."""
        return self.cells_side * self.cells_side

    @property
    def type_counts(self) -> tuple[int, int, int]:
        """(empty, type 1, type 2) cell counts used to fill the grid."""
        half = self.num_agents // 2
        return self.grid_size - self.num_agents, half, half
