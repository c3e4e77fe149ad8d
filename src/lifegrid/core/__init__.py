"""Core cellular automata logic."""

from .errors import InvalidDimensionError, InvalidProbabilityError, InvalidRuleError, SimulationSetupError
from .grid import Grid, ALIVE, DEAD
from .rules import RuleSet, SUPPORTED_RULES, parse_rule
from .engine import GridEngine
from .simulation import Simulation, SimulationConfig, validate_config

__all__ = [
    "Grid",
    "ALIVE",
    "DEAD",
    "RuleSet",
    "SUPPORTED_RULES",
    "parse_rule",
    "GridEngine",
    "Simulation",
    "SimulationConfig",
    "validate_config",
    "SimulationSetupError",
    "InvalidDimensionError",
    "InvalidProbabilityError",
    "InvalidRuleError",
]
