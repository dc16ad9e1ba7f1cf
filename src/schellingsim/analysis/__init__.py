"""
Analysis layer: derived quantities for plots and sweeps.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- segregation_index: mean share of alike neighbors
- cluster_stats: connected same-type clusters on the torus
- summarize_run: summary of an engine's happiness record and final grid
"""

from schellingsim.analysis.segregation import (
    ClusterStats,
    RunSummary,
    segregation_index,
    cluster_stats,
    summarize_run,
)

__all__ = [
    "ClusterStats",
    "RunSummary",
    "segregation_index",
    "cluster_stats",
    "summarize_run",
]
