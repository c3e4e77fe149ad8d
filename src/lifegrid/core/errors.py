"""Errors raised while setting up a simulation."""


class SimulationSetupError(ValueError):
    """Base class for invalid simulation parameters."""


class InvalidDimensionError(SimulationSetupError):
    """Grid size or iteration count is not a positive integer."""


class InvalidProbabilityError(SimulationSetupError):
    """Initial-alive probability is not a number in [0, 1]."""


class InvalidRuleError(SimulationSetupError):
    """Rule notation does not follow the B<digits>/S<digits> grammar."""
