#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import numpy as np

from lifegrid import GridEngine, Grid, Simulation, SimulationConfig


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Step a blinker by hand
    engine = GridEngine("B3/S23")
    cells = np.zeros((5, 5), dtype=np.int8)
    cells[2, 1:4] = 1
    engine.load(cells)

    print("Initial state:")
    print(Grid.from_array(engine.cells))
    print()

    for _ in range(2):
        engine.step()
        print(f"Generation {engine.generation}:")
        print(Grid.from_array(engine.cells))
        print(f"Population: {engine.population}")
        print()

    # Run a seeded HighLife simulation with a simple renderer
    def render(cells, iteration, tlength, rule):
        print(f"{rule} - Time: {iteration} / {tlength}, alive: {int(cells.sum())}")

    config = SimulationConfig(size=30, tlength=10, prob=0.2, rule="B36/S23", seed=42, delay=0)
    Simulation(config, renderer=render).run()
    print(f"Simulation complete after specified time: {config.tlength}")


if __name__ == "__main__":
    main()
