"""Fixed-size tile of the infinite grid.

A :class:`Chunk` owns a ``chunk_size x chunk_size`` boolean array addressed by
chunk-local coordinates in ``[0, chunk_size)``. The world translates global
cell coordinates before delegating here, so an out-of-range local coordinate
is a programming error and raises ``IndexError`` instead of wrapping around.

Besides the cells a chunk carries its renderable ``surface`` (a Pillow image)
and the pixel ``origin`` at which a view layer should place that surface.
"""

import numpy as np
import numpy.typing as npt
from PIL import Image

from infinite_life.config import Config
from infinite_life.renderer.surface import render_chunk_surface
from infinite_life.types import ChunkKey, Color
from infinite_life.vector import Vector2


class Chunk:
    coordinate: Vector2
    chunk_size: int
    cell_pixel_size: int
    alive_color: Color
    cells: npt.NDArray[np.bool_]
    surface: Image.Image
    version: int

    def __init__(
        self,
        coordinate: Vector2,
        chunk_size: int = Config.CHUNK_SIZE,
        cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
        alive_color: Color = Config.ALIVE_COLOR,
    ):
        self.coordinate = coordinate.floor()
        self.chunk_size = chunk_size
        self.cell_pixel_size = cell_pixel_size
        self.alive_color = alive_color
        self.cells = np.zeros((chunk_size, chunk_size), dtype=np.bool_)
        side = chunk_size * cell_pixel_size
        self.surface = Image.new("RGBA", (side, side), (0, 0, 0, 0))
        self.version = 0

    @property
    def key(self) -> ChunkKey:
        return (int(self.coordinate.x), int(self.coordinate.y))

    @property
    def origin(self) -> Vector2:
        """Pixel position of the surface's top-left corner in world space."""
        return self.coordinate.multiply_scalar(self.chunk_size * self.cell_pixel_size)

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.cells))

    def get_cell(self, local: Vector2) -> bool:
        x, y = self._check_bounds(local)
        return bool(self.cells[y, x])

    def set_cell(self, local: Vector2, value: bool = True) -> None:
        x, y = self._check_bounds(local)
        self.cells[y, x] = value

    def rebuild_visual(self) -> None:
        """Redraw ``surface`` from the current cell array."""
        self.surface = render_chunk_surface(
            self.cells, self.cell_pixel_size, self.alive_color
        )
        self.version += 1

    def _check_bounds(self, local: Vector2) -> tuple[int, int]:
        x, y = int(local.x), int(local.y)
        if not (0 <= x < self.chunk_size and 0 <= y < self.chunk_size):
            raise IndexError(
                f"Out of bounds: {local} for chunk {self.coordinate} "
                f"of size {self.chunk_size}"
            )
        return x, y

    def __repr__(self) -> str:
        return f"Chunk(coordinate={self.coordinate}, population={self.population})"
