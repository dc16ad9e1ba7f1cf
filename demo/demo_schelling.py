#!/usr/bin/env python3
"""
Demo: Schelling's Model of Segregation

Agents of two types are randomly placed on a 51x51 toroidal grid.
Each step, every agent checks whether at least 70% of its occupied
neighbors share its type. Unhappy agents move to a random empty cell.

Even though no agent wants to live in a fully segregated neighborhood,
the grid quickly separates into large single-type regions.

Output: output/demo_schelling/final_state.png
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from schellingsim.core import SimulationConfig, SnapshotRecorder, create_engine
from schellingsim.analysis import summarize_run
from schellingsim.viz import LiveRenderer, plot_grid, plot_simulation_state, save_figure

LIVE = True  # Animate each step; set False for a headless run


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  SCHELLING SEGREGATION DEMONSTRATION")
    print("=" * 60)

    config = SimulationConfig(
        num_agents=2000,
        cells_side=51,
        alike_preference=0.7,
        tlength=100,
    )
    print("\n1. Setting up grid...")
    print(f"   Grid: {config.cells_side}x{config.cells_side} ({config.grid_size} cells)")
    print(f"   Agents: {config.num_agents} ({config.num_agents // 2} per type)")
    print(f"   Alike preference: {config.alike_preference}")

    recorder = SnapshotRecorder(every=25)
    observers = [recorder]
    if LIVE:
        observers.append(LiveRenderer(tlength=config.tlength, alike_preference=config.alike_preference))

    engine = create_engine(config, seed=42, observers=observers)
    initial = engine.grid.snapshot()

    print(f"\n2. Running {config.tlength} steps...")
    stats = engine.run()
    print(f"   Total moves: {stats['total_moves']}")
    print(f"   Final happy fraction: {stats['final_happy_fraction']:.3f}")

    print("\n3. Analysing final layout...")
    summary = summarize_run(engine)
    print(f"   Segregation index: {summary.segregation_index:.3f}")
    print(f"   Clusters: {summary.clusters.n_clusters} (largest {summary.clusters.max_size} agents)")
    if summary.first_all_happy_step is not None:
        print(f"   Everyone happy from step {summary.first_all_happy_step}")

    print("\n4. Creating visualization...")
    output_dir = Path("output/demo_schelling")

    fig, axes = plt.subplots(1, 2, figsize=(14, 7))
    plot_grid(initial, title="Initial distribution", ax=axes[0], legend=False)
    plot_grid(engine.grid.values, title=f"After {engine.current_step} steps", ax=axes[1])
    save_figure(fig, output_dir / "before_after.png")

    fig = plot_simulation_state(
        engine.grid.values,
        engine.happiness,
        step=engine.current_step,
        tlength=config.tlength,
        alike_preference=config.alike_preference,
    )
    save_figure(fig, output_dir / "final_state.png")
    print(f"   Saved to: {output_dir}")
    print(f"   Recorded snapshots at steps: {sorted(recorder.snapshots)}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)

    return summary


if __name__ == "__main__":
    main()
