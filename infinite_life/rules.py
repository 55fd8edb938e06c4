"""Birth / survival rule configuration.

A :class:`Rules` value holds two sets of neighbor counts:

* ``survive``: counts under which a live cell stays alive.
* ``birth``: counts under which a dead cell becomes alive.

Rules are immutable; the engine swaps the whole value when the user edits a
rule, so a generation in progress always sees one consistent configuration.
Values are not validated. Counts outside ``0..8`` simply never match.

Rules round-trip through the common ``B/S`` notation, e.g. ``B3/S23`` for
Conway's Life.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable

from pyrsistent import PSet, pset

from infinite_life.types import NeighborCount

_NOTATION = re.compile(r"^\s*B(?P<birth>\d*)\s*/\s*S(?P<survive>\d*)\s*$", re.I)
_NOTATION_REVERSED = re.compile(
    r"^\s*S(?P<survive>\d*)\s*/\s*B(?P<birth>\d*)\s*$", re.I
)


@dataclass(frozen=True)
class Rules:
    """Immutable neighbor-count rule sets.

    Attributes:
        birth (PSet[int]): Counts that bring a dead cell to life.
        survive (PSet[int]): Counts that keep a live cell alive.
    """

    birth: PSet[NeighborCount] = pset([3])
    survive: PSet[NeighborCount] = pset([2, 3])

    @classmethod
    def from_counts(
        cls, birth: Iterable[NeighborCount], survive: Iterable[NeighborCount]
    ) -> "Rules":
        return cls(birth=pset(birth), survive=pset(survive))

    @classmethod
    def parse(cls, notation: str) -> "Rules":
        """Parse ``B<digits>/S<digits>`` (either order, case-insensitive).

        Raises:
            ValueError: If ``notation`` is not in B/S form.
        """
        match = _NOTATION.match(notation) or _NOTATION_REVERSED.match(notation)
        if match is None:
            raise ValueError(f"Invalid rule notation: {notation!r}")
        return cls.from_counts(
            birth=[int(c) for c in match.group("birth")],
            survive=[int(c) for c in match.group("survive")],
        )

    @property
    def notation(self) -> str:
        birth = "".join(str(c) for c in sorted(self.birth))
        survive = "".join(str(c) for c in sorted(self.survive))
        return f"B{birth}/S{survive}"

    def next_state(self, alive: bool, neighbors: NeighborCount) -> bool:
        """Return the state of a cell after one generation."""
        if alive:
            return neighbors in self.survive
        return neighbors in self.birth

    def with_birth(self, counts: Iterable[NeighborCount]) -> "Rules":
        return Rules(birth=pset(counts), survive=self.survive)

    def with_survive(self, counts: Iterable[NeighborCount]) -> "Rules":
        return Rules(birth=self.birth, survive=pset(counts))

    def toggle_birth(self, count: NeighborCount) -> "Rules":
        return self.with_birth(_toggle(self.birth, count))

    def toggle_survival(self, count: NeighborCount) -> "Rules":
        return self.with_survive(_toggle(self.survive, count))

    def __str__(self) -> str:
        return self.notation


def _toggle(counts: PSet[NeighborCount], count: NeighborCount) -> PSet[NeighborCount]:
    return counts.remove(count) if count in counts else counts.add(count)


CONWAY = Rules.parse("B3/S23")

RULE_REGISTRY: Dict[str, Rules] = {
    "Conway's Life": CONWAY,
    "HighLife": Rules.parse("B36/S23"),
    "Seeds": Rules.parse("B2/S"),
    "Day & Night": Rules.parse("B3678/S34678"),
    "Maze": Rules.parse("B3/S12345"),
    "Replicator": Rules.parse("B1357/S1357"),
    "DryLife": Rules.parse("B37/S23"),
    "Live Free or Die": Rules.parse("B2/S0"),
    "2x2": Rules.parse("B36/S125"),
    "Life Without Death": Rules.parse("B3/S012345678"),
}
"""Registry of named rule presets.

Hosts may offer these as presets; any other ``Rules`` value works the same.
"""
