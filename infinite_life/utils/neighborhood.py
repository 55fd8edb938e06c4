"""Moore neighborhood helpers."""

from typing import List, Tuple

from infinite_life.vector import Vector2

# Row-major order: top row, middle row (without center), bottom row.
MOORE_OFFSETS: Tuple[Vector2, ...] = (
    Vector2(-1, -1),
    Vector2(0, -1),
    Vector2(1, -1),
    Vector2(-1, 0),
    Vector2(1, 0),
    Vector2(-1, 1),
    Vector2(0, 1),
    Vector2(1, 1),
)


def moore_neighbors(cell: Vector2) -> List[Vector2]:
    """Return the 8 cells surrounding ``cell``."""
    return [cell.add(offset) for offset in MOORE_OFFSETS]
