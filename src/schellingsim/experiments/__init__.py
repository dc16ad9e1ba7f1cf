"""
Experiment harness: parameter sweeps.

- preference_sweep: final happiness and segregation per alike_preference
"""

from schellingsim.experiments.sweep import SweepPoint, preference_sweep

__all__ = ["SweepPoint", "preference_sweep"]
