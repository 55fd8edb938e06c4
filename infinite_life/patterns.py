"""Named starting patterns.

Coordinates are ``(x, y)`` offsets from the pattern's top-left corner.
"""

from typing import Dict, Iterable, List, Tuple, Union

from infinite_life.chunk import Chunk
from infinite_life.step import CellUpdate, apply_updates
from infinite_life.vector import Vector2
from infinite_life.world import World

Offsets = List[Tuple[int, int]]

PATTERNS: Dict[str, Offsets] = {
    # Still lifes
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "beehive": [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
    # Oscillators
    "blinker": [(0, 0), (1, 0), (2, 0)],
    "toad": [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
    "pulsar": [
        (2, 0), (3, 0), (4, 0), (8, 0), (9, 0), (10, 0),
        (0, 2), (5, 2), (7, 2), (12, 2),
        (0, 3), (5, 3), (7, 3), (12, 3),
        (0, 4), (5, 4), (7, 4), (12, 4),
        (2, 5), (3, 5), (4, 5), (8, 5), (9, 5), (10, 5),
        (2, 7), (3, 7), (4, 7), (8, 7), (9, 7), (10, 7),
        (0, 8), (5, 8), (7, 8), (12, 8),
        (0, 9), (5, 9), (7, 9), (12, 9),
        (0, 10), (5, 10), (7, 10), (12, 10),
        (2, 12), (3, 12), (4, 12), (8, 12), (9, 12), (10, 12),
    ],
    # Spaceships
    "glider": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    "lwss": [
        (1, 0), (4, 0), (0, 1), (0, 2), (4, 2),
        (0, 3), (1, 3), (2, 3), (3, 3),
    ],
    # Methuselahs
    "r_pentomino": [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
    "acorn": [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
    "diehard": [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
    # Guns
    "gosper_gun": [
        (24, 0),
        (22, 1), (24, 1),
        (12, 2), (13, 2), (20, 2), (21, 2), (34, 2), (35, 2),
        (11, 3), (15, 3), (20, 3), (21, 3), (34, 3), (35, 3),
        (0, 4), (1, 4), (10, 4), (16, 4), (20, 4), (21, 4),
        (0, 5), (1, 5), (10, 5), (14, 5), (16, 5), (17, 5), (22, 5), (24, 5),
        (10, 6), (16, 6), (24, 6),
        (11, 7), (15, 7),
        (12, 8), (13, 8),
    ],
}  # fmt: skip


def pattern_cells(
    pattern: Union[str, Iterable[Tuple[int, int]]], origin: Vector2
) -> List[Vector2]:
    """Return the world cells of ``pattern`` placed with its corner at ``origin``.

    Raises:
        ValueError: If ``pattern`` names no entry of ``PATTERNS``.
    """
    if isinstance(pattern, str):
        if pattern not in PATTERNS:
            raise ValueError(f"Unknown pattern: {pattern}")
        pattern = PATTERNS[pattern]
    return [Vector2(origin.x + dx, origin.y + dy) for dx, dy in pattern]


def place_pattern(
    world: World,
    pattern: Union[str, Iterable[Tuple[int, int]]],
    origin: Vector2 = Vector2(0, 0),
) -> List[Chunk]:
    """Set every cell of ``pattern`` live, rebuilding each touched chunk once."""
    updates = [CellUpdate(cell, True) for cell in pattern_cells(pattern, origin)]
    return apply_updates(world, updates)
