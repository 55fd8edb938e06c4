"""Pointer painting.

A click toggles the cell under the pointer; dragging with the button held
paints that same value over every further cell the pointer crosses. Each cell
is written at most once per stroke so a slow drag does not flicker cells.
"""

from typing import Optional, Set

from infinite_life.vector import Vector2
from infinite_life.world import World, to_cell


class PaintStroke:
    world: World
    value: Optional[bool]

    def __init__(self, world: World):
        self.world = world
        self.value = None
        self._applied: Set[Vector2] = set()

    @property
    def active(self) -> bool:
        return self.value is not None

    def press(self, cell: Vector2) -> bool:
        """Start a stroke on ``cell`` and toggle it. Returns the painted value."""
        cell = to_cell(cell)
        self._applied.clear()
        self.value = not self.world.get_cell(cell)
        self._paint(cell)
        return self.value

    def drag(self, cell: Vector2) -> bool:
        """Paint ``cell`` if the stroke is active and has not touched it yet.

        Returns:
            bool: ``True`` if the cell was written.
        """
        cell = to_cell(cell)
        if self.value is None or cell in self._applied:
            return False
        self._paint(cell)
        return True

    def release(self) -> None:
        self.value = None
        self._applied.clear()

    def _paint(self, cell: Vector2) -> None:
        assert self.value is not None
        self.world.set_cell(cell, self.value)
        self._applied.add(cell)
