"""Tests for the simulation driver."""

from unittest.mock import Mock, patch

import numpy as np
import pytest
from lifegrid.core.errors import (
    InvalidDimensionError,
    InvalidProbabilityError,
    InvalidRuleError,
    SimulationSetupError,
)
from lifegrid.core.rules import RuleSet
from lifegrid.core.simulation import Simulation, SimulationConfig, validate_config


class TestSimulationConfig:
    """Test cases for configuration and validation."""

    def test_defaults(self):
        config = SimulationConfig()
        assert config.size == 20
        assert config.tlength == 50
        assert config.prob == 0.5
        assert config.rule == "B3/S23"
        assert config.seed is None

    def test_validate_returns_rule(self):
        rule = validate_config(SimulationConfig(rule="B36/S23"))
        assert rule == RuleSet.parse("B36/S23")

    @pytest.mark.parametrize(
        "overrides, error",
        [
            ({"size": 0}, InvalidDimensionError),
            ({"size": 3.5}, InvalidDimensionError),
            ({"tlength": -1}, InvalidDimensionError),
            ({"tlength": 0}, InvalidDimensionError),
            ({"prob": 1.01}, InvalidProbabilityError),
            ({"prob": -0.5}, InvalidProbabilityError),
            ({"rule": "B3/S23x"}, InvalidRuleError),
            ({"delay": -1}, SimulationSetupError),
        ],
    )
    def test_validate_rejects(self, overrides, error):
        config = SimulationConfig(**overrides)
        with pytest.raises(error):
            validate_config(config)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_config(SimulationConfig(size=-1))

    def test_tlength_message(self):
        with pytest.raises(InvalidDimensionError, match="Invalid tlength"):
            validate_config(SimulationConfig(tlength=0))


class TestSimulation:
    """Test cases for the Simulation loop."""

    def test_invalid_config_fails_before_start(self):
        renderer = Mock()
        with pytest.raises(InvalidProbabilityError):
            Simulation(SimulationConfig(prob=2.0), renderer=renderer)
        renderer.assert_not_called()

    def test_initial_state(self):
        simulation = Simulation(SimulationConfig(size=8, tlength=4, seed=3, delay=0))
        assert simulation.iteration == 0
        assert not simulation.finished
        assert simulation.engine.size == 8

    def test_run_renders_every_iteration(self):
        """The renderer sees every generation with its counter."""
        renderer = Mock()
        simulation = Simulation(SimulationConfig(size=6, tlength=5, seed=2, delay=0), renderer=renderer)

        final = simulation.run()

        assert renderer.call_count == 5
        iterations = [call.args[1] for call in renderer.call_args_list]
        assert iterations == [1, 2, 3, 4, 5]
        for call in renderer.call_args_list:
            cells, _, tlength, rule = call.args
            assert cells.shape == (6, 6)
            assert tlength == 5
            assert rule == "B3/S23"

        assert simulation.finished
        assert simulation.iteration == 5
        assert simulation.engine.generation == 5
        assert np.array_equal(final, renderer.call_args_list[-1].args[0])

    def test_run_without_renderer(self):
        simulation = Simulation(SimulationConfig(size=4, tlength=3, delay=0))
        assert simulation.run().shape == (4, 4)
        assert simulation.iteration == 3

    def test_seeded_runs_match(self):
        config = SimulationConfig(size=12, tlength=6, prob=0.3, rule="B36/S23", seed=8, delay=0)
        assert np.array_equal(Simulation(config).run(), Simulation(config).run())

    def test_stop(self):
        """stop() ends the loop at the next iteration boundary."""
        simulation = Simulation(SimulationConfig(size=5, tlength=10, delay=0))

        def renderer(cells, iteration, tlength, rule):
            if iteration == 3:
                simulation.stop()

        simulation.renderer = renderer
        simulation.run()

        assert simulation.iteration == 3
        assert simulation.finished

    def test_delay_between_frames(self):
        """The loop pauses between frames but not after the last one."""
        simulation = Simulation(SimulationConfig(size=3, tlength=3, delay=0.25))

        with patch("lifegrid.core.simulation.time.sleep") as mock_sleep:
            simulation.run()

        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(0.25)

    def test_advance_after_run(self):
        """A finished run no longer steps or renders."""
        renderer = Mock()
        simulation = Simulation(SimulationConfig(size=5, tlength=2, seed=1, delay=0), renderer=renderer)
        final = simulation.run()

        cells = simulation.advance()

        assert renderer.call_count == 2
        assert simulation.iteration == 2
        assert simulation.engine.generation == 2
        assert np.array_equal(cells, final)

    def test_advance_after_stop(self):
        """A stopped run no longer steps or renders."""
        renderer = Mock()
        simulation = Simulation(SimulationConfig(size=5, tlength=4, seed=1, delay=0), renderer=renderer)
        initial = simulation.engine.cells

        simulation.stop()
        cells = simulation.advance()

        renderer.assert_not_called()
        assert simulation.iteration == 0
        assert simulation.engine.generation == 0
        assert np.array_equal(cells, initial)
