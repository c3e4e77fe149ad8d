"""Basic tests for the lifegrid package."""

import numpy as np

from lifegrid import GridEngine, Grid, RuleSet, Simulation, SimulationConfig, parse_rule


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10)
    assert grid.size == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_rule_parsing():
    """Test the documented rule variants."""
    assert parse_rule("B36/S23") == RuleSet(birth={3, 6}, survival={2, 3})
    assert parse_rule("B2/S").survival == frozenset()


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    engine = GridEngine("B3/S23")
    cells = np.zeros((5, 5), dtype=np.int8)
    cells[1:4, 2] = 1
    engine.load(cells)

    engine.step()
    assert engine.population == 3
    assert engine.cells[2, 1] == 1
    assert engine.cells[2, 2] == 1
    assert engine.cells[2, 3] == 1

    engine.step()
    assert np.array_equal(engine.cells, cells)


def test_simulation_runs():
    """Test a full run from configuration."""
    simulation = Simulation(SimulationConfig(size=8, tlength=3, delay=0))
    final = simulation.run()
    assert final.shape == (8, 8)
    assert simulation.finished
