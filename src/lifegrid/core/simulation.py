"""Driving loop that steps a grid and hands each generation to a renderer."""

import time
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional

import numpy as np

from .engine import GridEngine, check_positive_int, check_probability
from .errors import SimulationSetupError
from .rules import RuleSet

# renderer(cells, iteration, tlength, rule_notation)
Renderer = Callable[[np.ndarray, int, int, str], None]


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    size: int = 20
    tlength: int = 50
    prob: float = 0.5
    rule: str = "B3/S23"
    seed: Optional[int] = None
    delay: float = 0.1


def validate_config(config: SimulationConfig) -> RuleSet:
    """Check every setup parameter before any simulation work.

    Args:
        config: Simulation configuration

    Returns:
        The parsed rule set

    Raises:
        InvalidDimensionError: If size or tlength is not a positive integer
        InvalidProbabilityError: If prob is outside [0, 1]
        InvalidRuleError: If the rule cannot be parsed
    """
    check_positive_int("size", config.size)
    check_positive_int("tlength", config.tlength)
    rule = RuleSet.parse(config.rule)
    check_probability("prob", config.prob)

    if isinstance(config.delay, bool) or not isinstance(config.delay, Real) or config.delay < 0:
        raise SimulationSetupError(f"Invalid delay: {config.delay!r}. Must be a non-negative number of seconds.")

    return rule


class Simulation:
    """Runs a fixed number of generations and renders each one."""

    def __init__(self, config: SimulationConfig, renderer: Optional[Renderer] = None) -> None:
        """Validate the configuration and populate the initial grid.

        Args:
            config: Simulation configuration
            renderer: Optional callable receiving every new generation
        """
        rule = validate_config(config)

        self.config = config
        self.renderer = renderer
        self.engine = GridEngine(rule)
        self.engine.initialize(config.size, config.prob, seed=config.seed)

        self._iteration = 0
        self._stopped = False

    @property
    def iteration(self) -> int:
        """Number of generations rendered so far."""
        return self._iteration

    @property
    def finished(self) -> bool:
        return self._stopped or self._iteration >= self.config.tlength

    def stop(self) -> None:
        """Stop the loop at the next iteration boundary."""
        self._stopped = True

    def advance(self) -> np.ndarray:
        """Compute and render one generation, unless the run has finished.

        Returns:
            Snapshot of the new grid
        """
        if self.finished:
            return self.engine.cells

        cells = self.engine.step()
        self._iteration += 1

        if self.renderer is not None:
            self.renderer(cells, self._iteration, self.config.tlength, self.engine.rule.notation)

        return cells

    def run(self) -> np.ndarray:
        """Run until tlength generations have been rendered or stop() is called.

        Returns:
            Snapshot of the final grid
        """
        while not self.finished:
            self.advance()

            if self.config.delay > 0 and not self.finished:
                time.sleep(self.config.delay)

        return self.engine.cells
