"""
Segregation measures computed from grid snapshots.

These are derived quantities for plots and sweeps. The engine never
reads them; they only look at cell values after the fact.

- segregation_index: mean share of alike neighbors among agents
- cluster_stats: connected same-type regions on the torus
- summarize_run: one-line summary of a finished engine
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.ndimage import label

from schellingsim.core.grid import AGENT_TYPES, EMPTY, Grid

if TYPE_CHECKING:
    from schellingsim.core.engine import SchellingEngine

# 8-connectivity, matching the Moore neighborhood
MOORE_STRUCTURE = np.ones((3, 3), dtype=bool)


@dataclass
class ClusterStats:
    """Connected same-type clusters on the toroidal grid."""

    n_clusters: int
    mean_size: float
    max_size: int
    sizes: np.ndarray


@dataclass
class RunSummary:
    """Summary of a (possibly unfinished) simulation run."""

    steps: int
    final_happy_fraction: float | None
    mean_happy_fraction: float | None
    first_all_happy_step: int | None  # First step with every agent happy
    total_moves: int
    segregation_index: float
    clusters: ClusterStats


def segregation_index(values: np.ndarray) -> float:
    """
    Mean share of alike neighbors over agents with occupied neighbors.

    0.5 is roughly what a random mix of two equal groups gives; values
    close to 1 mean agents are surrounded almost only by their own type.
    Returns nan when no agent has an occupied neighbor.
    """
    grid = Grid(np.asarray(values))
    like_count, occupied_count = grid.neighbor_counts()
    mask = (grid.values != EMPTY) & (occupied_count > 0)
    if not np.any(mask):
        return float("nan")
    return float(np.mean(like_count[mask] / occupied_count[mask]))


def _find(parent: np.ndarray, i: int) -> int:
    while parent[i] != i:
        parent[i] = parent[parent[i]]
        i = parent[i]
    return i


def _merge_wrapped_labels(labels: np.ndarray, n_labels: int) -> np.ndarray:
    """Join labels that touch across the periodic edges (diagonals included)."""
    parent = np.arange(n_labels + 1)
    side_r, side_c = labels.shape

    def union(a: int, b: int):
        if a and b:
            ra, rb = _find(parent, a), _find(parent, b)
            if ra != rb:
                parent[max(ra, rb)] = min(ra, rb)

    for c in range(side_c):
        for dc in (-1, 0, 1):
            union(labels[side_r - 1, c], labels[0, (c + dc) % side_c])
    for r in range(side_r):
        for dr in (-1, 0, 1):
            union(labels[r, side_c - 1], labels[(r + dr) % side_r, 0])

    roots = np.array([_find(parent, i) for i in range(n_labels + 1)])
    return roots[labels]


def cluster_stats(values: np.ndarray, agent_type: int | None = None) -> ClusterStats:
    """
    Count connected clusters of same-type agents.

    Clusters use 8-connectivity and wrap around the grid edges.

    Args:
        values: 2D array of cell values
        agent_type: Restrict to one type (1 or 2); None pools both types

    Returns:
        ClusterStats with per-cluster sizes
    """
    values = np.asarray(values)
    types = AGENT_TYPES if agent_type is None else (agent_type,)
    if agent_type is not None and agent_type not in AGENT_TYPES:
        raise ValueError(f"agent_type must be one of {AGENT_TYPES}, got {agent_type}")

    all_sizes = []
    for t in types:
        labels, n_labels = label(values == t, structure=MOORE_STRUCTURE)
        if n_labels == 0:
            continue
        merged = _merge_wrapped_labels(labels, n_labels)
        counts = np.bincount(merged.ravel())
        all_sizes.append(counts[1:][counts[1:] > 0])

    sizes = np.concatenate(all_sizes) if all_sizes else np.array([], dtype=np.int64)
    return ClusterStats(
        n_clusters=int(len(sizes)),
        mean_size=float(sizes.mean()) if len(sizes) else 0.0,
        max_size=int(sizes.max()) if len(sizes) else 0,
        sizes=np.sort(sizes)[::-1],
    )


def summarize_run(engine: "SchellingEngine") -> RunSummary:
    """Summarize the happiness record and final layout of an engine."""
    happiness = engine.happiness
    first_all_happy = next(
        (i + 1 for i, fraction in enumerate(happiness) if fraction == 1.0),
        None,
    )
    values = engine.grid.snapshot()

    return RunSummary(
        steps=engine.current_step,
        final_happy_fraction=happiness[-1] if happiness else None,
        mean_happy_fraction=float(np.mean(happiness)) if happiness else None,
        first_all_happy_step=first_all_happy,
        total_moves=sum(r.n_moved for r in engine.history),
        segregation_index=segregation_index(values),
        clusters=cluster_stats(values),
    )
