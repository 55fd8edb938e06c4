"""Sparse chunked world model.

The :class:`World` stores cells in lazily created :class:`Chunk` tiles kept in
a dict keyed by integer chunk coordinates, so the grid can grow in every
direction without bound. Unallocated space reads as dead.

Alongside the chunks the world keeps ``live_cells``: the coordinates of every
live cell in insertion order. It is the seed set for the activity-driven
generation step (see :mod:`infinite_life.step`) and always equals exactly the
set of cells for which :meth:`World.get_cell` returns ``True``.

Coordinate conventions:

* Cell coordinates are integers. Non-integer input is floored to the cell that
  contains it.
* ``world_to_chunk_coordinate`` floor-divides by ``chunk_size`` (so ``-1``
  lives in chunk ``-1``) and the chunk-relative coordinate is the remainder,
  giving ``chunk * chunk_size + relative == cell``.
"""

from typing import Dict, Iterable, List, Optional

from infinite_life.chunk import Chunk
from infinite_life.config import Config
from infinite_life.types import ChunkKey, Color
from infinite_life.vector import Vector2


class World:
    chunk_size: int
    cell_pixel_size: int
    alive_color: Color
    chunks: Dict[ChunkKey, Chunk]

    def __init__(
        self,
        chunk_size: int = Config.CHUNK_SIZE,
        cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
        alive_color: Color = Config.ALIVE_COLOR,
    ):
        self.chunk_size = chunk_size
        self.cell_pixel_size = cell_pixel_size
        self.alive_color = alive_color
        self.chunks = {}
        # Insertion-ordered set of live cells.
        self._live: Dict[Vector2, None] = {}

    # -------- Coordinate translation --------

    def world_to_chunk_coordinate(self, cell: Vector2) -> Vector2:
        """Return the coordinate of the chunk containing ``cell``."""
        cell = to_cell(cell)
        return Vector2(cell.x // self.chunk_size, cell.y // self.chunk_size)

    def chunk_relative_coordinate(self, cell: Vector2) -> Vector2:
        """Return ``cell`` relative to the origin of its chunk."""
        cell = to_cell(cell)
        return Vector2(cell.x % self.chunk_size, cell.y % self.chunk_size)

    # -------- Cell API --------

    def get_cell(self, cell: Vector2) -> bool:
        """Return whether ``cell`` is live. Unallocated chunks are dead space."""
        chunk = self.get_chunk_containing_cell(cell)
        if chunk is None:
            return False
        return chunk.get_cell(self.chunk_relative_coordinate(cell))

    def set_cell(
        self, cell: Vector2, value: bool = True, trigger_visual_update: bool = True
    ) -> Chunk:
        """Write ``value`` to ``cell`` and return the owning chunk.

        The chunk is created on demand. Bulk writers pass
        ``trigger_visual_update=False`` and rebuild each touched chunk once
        afterwards. Repeating a write leaves ``live_cells`` unchanged.

        Args:
            cell (Vector2): World cell coordinate.
            value (bool): New state, ``True`` for live.
            trigger_visual_update (bool): Rebuild the chunk surface right away.

        Returns:
            Chunk: The chunk that holds ``cell``.
        """
        cell = to_cell(cell)
        chunk = self.get_or_create_chunk(self.world_to_chunk_coordinate(cell))
        chunk.set_cell(self.chunk_relative_coordinate(cell), value)
        if trigger_visual_update:
            chunk.rebuild_visual()

        if value:
            self._live[cell] = None
        else:
            self._live.pop(cell, None)

        return chunk

    @property
    def live_cells(self) -> List[Vector2]:
        """Snapshot of all live cell coordinates, oldest first."""
        return list(self._live)

    @property
    def population(self) -> int:
        return len(self._live)

    # -------- Chunk API --------

    def get_chunk(self, coordinate: Vector2) -> Optional[Chunk]:
        return self.chunks.get(chunk_key(coordinate))

    def get_chunk_containing_cell(self, cell: Vector2) -> Optional[Chunk]:
        return self.get_chunk(self.world_to_chunk_coordinate(cell))

    def get_or_create_chunk(self, coordinate: Vector2) -> Chunk:
        """Return the chunk at ``coordinate``, allocating and registering it if absent."""
        chunk = self.get_chunk(coordinate)
        if chunk is None:
            chunk = Chunk(
                coordinate,
                chunk_size=self.chunk_size,
                cell_pixel_size=self.cell_pixel_size,
                alive_color=self.alive_color,
            )
            self.register_chunk(chunk)
        return chunk

    def register_chunk(self, chunk: Chunk) -> None:
        """Add ``chunk`` to the world and build its initial visual."""
        if chunk.chunk_size != self.chunk_size:
            raise ValueError(
                f"Chunk size {chunk.chunk_size} does not match world chunk size "
                f"{self.chunk_size}"
            )
        replaced = self.chunks.get(chunk.key)
        if replaced is not None:
            for y, x in zip(*replaced.cells.nonzero()):
                self._live.pop(chunk_to_world(replaced, int(x), int(y)), None)
        self.chunks[chunk.key] = chunk
        for y, x in zip(*chunk.cells.nonzero()):
            self._live[chunk_to_world(chunk, int(x), int(y))] = None
        chunk.rebuild_visual()

    def ensure_chunks(self, coordinates: Iterable[Vector2]) -> List[Chunk]:
        """Allocate every missing chunk among ``coordinates``; return the new ones."""
        created: List[Chunk] = []
        for coordinate in coordinates:
            if self.get_chunk(coordinate) is None:
                created.append(self.get_or_create_chunk(coordinate))
        return created


def to_cell(v: Vector2) -> Vector2:
    """Floor ``v`` to the integer cell containing it."""
    if isinstance(v.x, int) and isinstance(v.y, int):
        return v
    return v.floor()


def chunk_key(coordinate: Vector2) -> ChunkKey:
    coordinate = to_cell(coordinate)
    return (int(coordinate.x), int(coordinate.y))


def chunk_to_world(chunk: Chunk, x: int, y: int) -> Vector2:
    origin = chunk.coordinate.multiply_scalar(chunk.chunk_size)
    return Vector2(origin.x + x, origin.y + y)
