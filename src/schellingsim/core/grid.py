"""
Grid: the square toroidal lattice that agents live on.

The grid stores ONLY cell occupancy:
- 0 = empty cell
- 1, 2 = agent type

Edges wrap around, so every cell has exactly eight neighbors (Moore
neighborhood) and no position is ever out of range once wrapped.
"""

from __future__ import annotations
from typing import Iterator, Sequence

import numpy as np

from schellingsim.core.config import InvalidConfiguration

EMPTY = 0
AGENT_TYPES = (1, 2)

Position = tuple[int, int]

# (d_row, d_col) offsets in N, NE, E, SE, S, SW, W, NW order.
# Row 0 is the top row, so North decreases the row index.
DIRECTIONS_MOORE = {
    "N": (-1, 0),
    "NE": (-1, 1),
    "E": (0, 1),
    "SE": (1, 1),
    "S": (1, 0),
    "SW": (1, -1),
    "W": (0, -1),
    "NW": (-1, -1),
}


class Grid:
    """
    Cell occupancy of a Schelling world.

    Positions are (row, col) tuples indexed from 0. The grid itself knows
    nothing about happiness; it only answers "who lives where" and
    "who is next to whom".
    """

    def __init__(self, values: np.ndarray):
        self.values = values

    # ───────────────────────────────────────────────────────────────
    # Construction
    # ───────────────────────────────────────────────────────────────

    @classmethod
    def initialize(
        cls,
        cells_side: int,
        type_counts: Sequence[int],
        rng: np.random.Generator,
    ) -> "Grid":
        """
        Build a grid by randomly shuffling cell values.

        Args:
            cells_side: Side length of the square grid
            type_counts: (empty, type 1, type 2) counts; must sum to cells_side²
            rng: Random source used for the permutation

        Raises:
            InvalidConfiguration: on negative counts, a count mismatch, or
                a layout without any empty cell
        """
        if cells_side <= 0:
            raise InvalidConfiguration("cells_side must be > 0")
        if len(type_counts) != 3:
            raise InvalidConfiguration("type_counts must hold (empty, type 1, type 2) counts")
        if any(count < 0 for count in type_counts):
            raise InvalidConfiguration(f"type counts must be non-negative, got {tuple(type_counts)}")

        grid_size = cells_side * cells_side
        if sum(type_counts) != grid_size:
            raise InvalidConfiguration(
                f"type counts {tuple(type_counts)} sum to {sum(type_counts)}, "
                f"expected {grid_size} cells"
            )
        if type_counts[0] == 0:
            raise InvalidConfiguration("at least one cell must stay empty")

        group = np.repeat(np.array([EMPTY, *AGENT_TYPES], dtype=np.int8), type_counts)
        values = rng.permutation(group).reshape(cells_side, cells_side)
        return cls(values)

    @classmethod
    def from_array(cls, values) -> "Grid":
        """Build a grid from a pre-arranged square array of cell values."""
        raw = np.asarray(values)
        if raw.ndim != 2 or raw.shape[0] != raw.shape[1] or raw.shape[0] == 0:
            raise InvalidConfiguration(f"grid must be a non-empty square array, got shape {raw.shape}")
        # Check before casting so 1.7 is rejected rather than truncated to 1
        if not np.isin(raw, (EMPTY, *AGENT_TYPES)).all():
            raise InvalidConfiguration("cell values must be 0 (empty), 1 or 2")
        return cls(raw.astype(np.int8))

    # ───────────────────────────────────────────────────────────────
    # Geometry
    # ───────────────────────────────────────────────────────────────

    @property
    def cells_side(self) -> int:
        return self.values.shape[0]

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.values.size

    @property
    def directions(self) -> list[str]:
        """Direction names of the Moore neighborhood."""
        return list(DIRECTIONS_MOORE.keys())

    def wrap(self, position: Position) -> Position:
        """Map any (row, col) pair onto the torus."""
        side = self.cells_side
        return position[0] % side, position[1] % side

    def neighbor_coords(self, position: Position, direction: str) -> Position:
        """Get coordinates of the neighbor in the given direction."""
        d_row, d_col = DIRECTIONS_MOORE[direction]
        return self.wrap((position[0] + d_row, position[1] + d_col))

    def neighbors_of(self, position: Position) -> list[Position]:
        """The eight toroidal neighbors, in N, NE, E, SE, S, SW, W, NW order."""
        return [self.neighbor_coords(position, d) for d in DIRECTIONS_MOORE]

    def iter_positions(self) -> Iterator[Position]:
        """Iterate over all positions in row-major order."""
        side = self.cells_side
        for index in range(side * side):
            yield divmod(index, side)

    # ───────────────────────────────────────────────────────────────
    # Cell access
    # ───────────────────────────────────────────────────────────────

    def value_at(self, position: Position) -> int:
        row, col = self.wrap(position)
        return int(self.values[row, col])

    def set_value(self, position: Position, value: int) -> None:
        if value != EMPTY and value not in AGENT_TYPES:
            raise ValueError(f"invalid cell value: {value}")
        row, col = self.wrap(position)
        self.values[row, col] = value

    def move(self, source: Position, destination: Position) -> None:
        """Move the agent at source to the empty destination cell."""
        value = self.value_at(source)
        if value == EMPTY:
            raise ValueError(f"no agent at {source}")
        if self.value_at(destination) != EMPTY:
            raise ValueError(f"destination {destination} is occupied")
        self.set_value(source, EMPTY)
        self.set_value(destination, value)

    def empty_positions(self) -> list[Position]:
        """Positions of all empty cells, row-major."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.values == EMPTY)]

    def occupied_positions(self) -> np.ndarray:
        """(n, 2) array of occupied positions, row-major."""
        return np.argwhere(self.values != EMPTY)

    def type_counts(self) -> tuple[int, int, int]:
        """(empty, type 1, type 2) counts."""
        counts = np.bincount(self.values.ravel(), minlength=3)
        return int(counts[0]), int(counts[1]), int(counts[2])

    @property
    def num_agents(self) -> int:
        return int(np.count_nonzero(self.values))

    # ───────────────────────────────────────────────────────────────
    # Neighborhood composition
    # ───────────────────────────────────────────────────────────────

    def neighbor_counts(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Count alike and occupied neighbors for every cell at once.

        Returns:
            (like_count, occupied_count) integer arrays shaped like the grid.
            like_count is only meaningful for occupied cells.
        """
        values = self.values
        occupied = values != EMPTY
        like_count = np.zeros(values.shape, dtype=np.int16)
        occupied_count = np.zeros(values.shape, dtype=np.int16)

        for d_row, d_col in DIRECTIONS_MOORE.values():
            # neighbor[r, c] = values[r + d_row, c + d_col] (wrapped)
            neighbor = np.roll(values, shift=(-d_row, -d_col), axis=(0, 1))
            neighbor_occupied = neighbor != EMPTY
            occupied_count += neighbor_occupied
            like_count += neighbor_occupied & (neighbor == values) & occupied

        return like_count, occupied_count

    def snapshot(self) -> np.ndarray:
        """Copy of the cell values, safe to hand to observers."""
        return self.values.copy()
