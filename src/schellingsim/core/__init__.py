"""
Core engine primitives.

This layer knows NOTHING about plotting or segregation statistics.
It only knows:
- A toroidal grid of empty cells and agents of two types
- Moore-8 neighbor lookup with wraparound
- The happiness test against alike_preference
- Relocation of unhappy agents to random empty cells
- The happy fraction recorded once per step
"""

from schellingsim.core.config import InvalidConfiguration, SimulationConfig
from schellingsim.core.grid import Grid, DIRECTIONS_MOORE, EMPTY, AGENT_TYPES
from schellingsim.core.observer import StepObserver, SnapshotRecorder
from schellingsim.core.engine import SchellingEngine, StepResult, create_engine

__all__ = [
    "InvalidConfiguration",
    "SimulationConfig",
    "Grid",
    "DIRECTIONS_MOORE",
    "EMPTY",
    "AGENT_TYPES",
    "StepObserver",
    "SnapshotRecorder",
    "SchellingEngine",
    "StepResult",
    "create_engine",
]
