"""
Sweep the alike preference and measure the outcome.

Each threshold gets its own generator spawned from one SeedSequence, so
results are reproducible and independent of the order of preferences.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Sequence

import numpy as np

from schellingsim.core import SimulationConfig, create_engine
from schellingsim.analysis import segregation_index


@dataclass
class SweepPoint:
    """Outcome of one run in a preference sweep."""

    alike_preference: float
    final_happy_fraction: float
    segregation_index: float
    total_moves: int


def preference_sweep(
    preferences: Sequence[float],
    base_config: SimulationConfig | None = None,
    seed: int | None = None,
) -> list[SweepPoint]:
    """
    Run one full simulation per alike_preference value.

    Args:
        preferences: Thresholds to test, each in [0, 1]
        base_config: Other parameters (defaults to SimulationConfig())
        seed: Root seed for the spawned generators

    Returns:
        One SweepPoint per preference, in input order
    """
    if base_config is None:
        base_config = SimulationConfig()

    children = np.random.SeedSequence(seed).spawn(len(preferences))
    points = []
    for preference, child in zip(preferences, children):
        config = replace(base_config, alike_preference=preference)
        engine = create_engine(config, rng=np.random.default_rng(child))
        stats = engine.run()
        points.append(SweepPoint(
            alike_preference=preference,
            final_happy_fraction=stats["final_happy_fraction"],
            segregation_index=segregation_index(engine.grid.values),
            total_moves=stats["total_moves"],
        ))
    return points
