"""Life-like cellular automata on a bounded square grid."""

__version__ = "0.1.0"

from .core.errors import InvalidDimensionError, InvalidProbabilityError, InvalidRuleError, SimulationSetupError
from .core.grid import Grid
from .core.engine import GridEngine
from .core.rules import RuleSet, parse_rule
from .core.simulation import Simulation, SimulationConfig

__all__ = [
    "Grid",
    "GridEngine",
    "RuleSet",
    "parse_rule",
    "Simulation",
    "SimulationConfig",
    "SimulationSetupError",
    "InvalidDimensionError",
    "InvalidProbabilityError",
    "InvalidRuleError",
]
