#!/usr/bin/env python3
"""
Demo: How much preference does it take to segregate?

Runs the model for alike preferences from 0 to 1 and plots the final
happy fraction and segregation index against the threshold.

Output: output/demo_sweep/preference_sweep.png
"""

import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from schellingsim.core import SimulationConfig
from schellingsim.experiments import preference_sweep
from schellingsim.viz import save_figure


def main():
    logging.basicConfig(level=logging.WARNING)

    print("=" * 60)
    print("  ALIKE PREFERENCE SWEEP")
    print("=" * 60)

    base = SimulationConfig(num_agents=600, cells_side=30, tlength=50)
    preferences = np.round(np.linspace(0.0, 1.0, 11), 2)

    print(f"\n1. Running {len(preferences)} simulations on a {base.cells_side}x{base.cells_side} grid...")
    points = preference_sweep(preferences, base_config=base, seed=7)

    for p in points:
        print(
            f"   pref={p.alike_preference:.1f}  happy={p.final_happy_fraction:.3f}  "
            f"segregation={p.segregation_index:.3f}  moves={p.total_moves}"
        )

    print("\n2. Creating visualization...")
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(preferences, [p.final_happy_fraction for p in points], "o-", label="Final happy fraction")
    ax.plot(preferences, [p.segregation_index for p in points], "s--", label="Segregation index")
    ax.set_xlabel("Alike preference")
    ax.set_ylim(0, 1.05)
    ax.legend()
    ax.set_title("Schelling outcome vs. alike preference")

    output_path = Path("output/demo_sweep/preference_sweep.png")
    save_figure(fig, output_path)
    print(f"   Saved to: {output_path}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
