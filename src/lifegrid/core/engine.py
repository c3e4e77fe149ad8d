"""Generation stepping for Life-like cellular automata."""

from numbers import Integral, Real
from typing import Optional, Union
import math
import numpy as np

from .errors import InvalidDimensionError, InvalidProbabilityError
from .grid import Grid
from .rules import RuleSet


def check_positive_int(name: str, value) -> int:
    """Ensure a parameter is a positive integer.

    Raises:
        InvalidDimensionError: If value is not an integer greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidDimensionError(f"Invalid {name}: {value!r}. Must be a positive integer.")
    return int(value)


def check_probability(name: str, value) -> float:
    """Ensure a parameter is a number between 0 and 1.

    Raises:
        InvalidProbabilityError: If value is not numeric or outside [0, 1]
    """
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value) or not 0 <= value <= 1:
        raise InvalidProbabilityError(f"Invalid {name}: {value!r}. Must be a numeric value between 0 and 1.")
    return float(value)


class GridEngine:
    """Owns the current grid and computes successive generations.

    Every step reads neighbor counts from the grid as it was before the
    step and builds the next generation in a separate grid, which then
    replaces the current one.
    """

    def __init__(self, rule: Union[RuleSet, str], grid: Optional[Grid] = None) -> None:
        """Initialize the engine.

        Args:
            rule: Rule set, or rule notation to parse
            grid: Optional starting grid (empty 0x0 grid if omitted)

        Raises:
            InvalidRuleError: If rule notation cannot be parsed
        """
        self._rule = rule if isinstance(rule, RuleSet) else RuleSet.parse(rule)
        self._grid = grid.copy() if grid is not None else Grid(0)
        self._generation = 0

    @property
    def rule(self) -> RuleSet:
        return self._rule

    @property
    def grid(self) -> Grid:
        """Copy of the current grid."""
        return self._grid.copy()

    @property
    def cells(self) -> np.ndarray:
        """Read-only snapshot of the current cells."""
        return self._grid.snapshot()

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def generation(self) -> int:
        """Number of steps taken since the grid was initialized."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def initialize(self, n: int, p: float, seed: Optional[int] = None) -> np.ndarray:
        """Create a randomly populated N x N grid.

        Args:
            n: Grid edge length
            p: Probability that each cell starts alive
            seed: Optional seed for a reproducible population

        Returns:
            Snapshot of the initial grid

        Raises:
            InvalidDimensionError: If n is not a positive integer
            InvalidProbabilityError: If p is outside [0, 1]
        """
        n = check_positive_int("size", n)
        p = check_probability("prob", p)

        grid = Grid(n)
        grid.randomize(p, seed)

        self._grid = grid
        self._generation = 0
        return self.cells

    def load(self, cells) -> np.ndarray:
        """Replace the grid with explicit cell states.

        Args:
            cells: Square 2D array-like of 0/1 values

        Returns:
            Snapshot of the loaded grid

        Raises:
            InvalidDimensionError: If cells is not a square 2D array
        """
        try:
            self._grid = Grid.from_array(cells)
        except ValueError as e:
            raise InvalidDimensionError(str(e)) from e

        self._generation = 0
        return self.cells

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbor count of every cell in the current grid."""
        return self._grid.count_all_neighbors()

    def step(self) -> np.ndarray:
        """Advance the simulation by one generation.

        Returns:
            Snapshot of the new grid
        """
        current = self._grid.cells
        next_cells = self._rule.apply(current, self._grid.count_all_neighbors())

        self._grid = self._grid.successor(next_cells)
        self._generation += 1
        return self.cells
