"""Birth/survival rules for Life-like cellular automata."""

import re
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, FrozenSet, Iterable

import numpy as np

from .errors import InvalidRuleError

# Rules documented with the simulator
SUPPORTED_RULES: Dict[str, str] = {
    "B3/S23": "Conway's Life: born with 3 neighbors, survives with 2 or 3",
    "B2/S": "Born with 2 neighbors, survives with any live neighbor (1-8), dies if isolated",
    "B36/S23": "HighLife: born with 3 or 6 neighbors, survives with 2 or 3",
}

RULE_PATTERN = re.compile(r"^B(?P<birth>[0-8]*)/S(?P<survival>[0-8]*)$")

MAX_NEIGHBORS = 8


def _digit_set(digits: str) -> FrozenSet[int]:
    return frozenset(int(d) for d in digits)


def _count_set(counts: Iterable) -> FrozenSet[int]:
    result = set()
    for count in counts:
        if isinstance(count, bool) or not isinstance(count, Integral) or not 0 <= count <= MAX_NEIGHBORS:
            raise InvalidRuleError(f"Invalid neighbor count {count!r}. Must be an integer between 0 and {MAX_NEIGHBORS}.")
        result.add(int(count))
    return frozenset(result)


@dataclass(frozen=True)
class RuleSet:
    """Neighbor counts that create and keep life.

    An empty survival set does not mean "never survives": a live cell then
    survives with any number of live neighbors from 1 to 8 and only dies
    when isolated.
    """

    birth: FrozenSet[int]
    survival: FrozenSet[int]

    def __post_init__(self) -> None:
        # Accept any iterable of counts, store frozensets
        object.__setattr__(self, "birth", _count_set(self.birth))
        object.__setattr__(self, "survival", _count_set(self.survival))

    @classmethod
    def parse(cls, spec: str) -> "RuleSet":
        """Parse rule notation such as ``"B36/S23"``.

        Args:
            spec: Rule string of the form ``B<digits>/S<digits>``

        Returns:
            Parsed rule set

        Raises:
            InvalidRuleError: If the string does not follow the grammar
        """
        match = RULE_PATTERN.match(spec.strip()) if isinstance(spec, str) else None
        if match is None:
            raise InvalidRuleError(
                f"Invalid rule: {spec!r}. Must match B<digits>/S<digits> with digits 0-8 "
                f"(e.g. one of: {', '.join(SUPPORTED_RULES)})."
            )

        return cls(birth=_digit_set(match.group("birth")), survival=_digit_set(match.group("survival")))

    @property
    def notation(self) -> str:
        """Canonical rule string with sorted digits."""
        birth = "".join(str(n) for n in sorted(self.birth))
        survival = "".join(str(n) for n in sorted(self.survival))
        return f"B{birth}/S{survival}"

    @property
    def survives_unless_isolated(self) -> bool:
        """Whether an empty survival set keeps every non-isolated cell alive."""
        return not self.survival

    @property
    def description(self) -> str:
        return SUPPORTED_RULES.get(self.notation, f"Custom rule {self.notation}")

    def next_state(self, alive: bool, neighbors: int) -> bool:
        """Apply the rule to a single cell.

        Args:
            alive: Current cell state
            neighbors: Number of live neighbors (0-8)

        Returns:
            True if the cell is alive in the next generation
        """
        if alive:
            if self.survives_unless_isolated:
                return neighbors >= 1
            return neighbors in self.survival
        return neighbors in self.birth

    def apply(self, cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
        """Apply the rule to a whole grid.

        Args:
            cells: Current cell states (0 dead, 1 alive)
            neighbor_counts: Live neighbor count of every cell

        Returns:
            New int8 array with the next generation
        """
        alive = cells > 0

        if self.survives_unless_isolated:
            survive_mask = alive & (neighbor_counts >= 1)
        else:
            survive_mask = alive & np.isin(neighbor_counts, _as_array(self.survival))

        birth_mask = ~alive & np.isin(neighbor_counts, _as_array(self.birth))

        next_cells = np.zeros(cells.shape, dtype=np.int8)
        next_cells[survive_mask | birth_mask] = 1
        return next_cells

    def __str__(self) -> str:
        return self.notation


def _as_array(counts: Iterable[int]) -> np.ndarray:
    return np.fromiter(sorted(counts), dtype=np.int64)


def parse_rule(spec: str) -> RuleSet:
    """Parse rule notation into a :class:`RuleSet`."""
    return RuleSet.parse(spec)
