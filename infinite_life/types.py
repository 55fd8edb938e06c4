"""Common type aliases.

``ChunkKey`` is the hashable key of the world's chunk map and ``Clock`` is the
injectable monotonic time source (seconds) used by
:class:`infinite_life.game.Game`.
"""

from typing import Callable, Tuple

ChunkKey = Tuple[int, int]

Clock = Callable[[], float]

Color = Tuple[int, int, int, int]

NeighborCount = int
