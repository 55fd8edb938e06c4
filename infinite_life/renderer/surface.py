import numpy as np
import numpy.typing as npt
from PIL import Image

from infinite_life.config import Config
from infinite_life.types import Color

BoolArray = npt.NDArray[np.bool_]


def render_chunk_surface(
    cells: BoolArray,
    cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
    alive_color: Color = Config.ALIVE_COLOR,
) -> Image.Image:
    """
    Renders a ``[y, x]`` boolean cell array as an RGBA image where each live
    cell is a filled ``cell_pixel_size`` square and dead cells are transparent.
    """
    mask: BoolArray = np.repeat(
        np.repeat(cells, cell_pixel_size, axis=0), cell_pixel_size, axis=1
    )
    pixels = np.zeros(mask.shape + (4,), dtype=np.uint8)
    pixels[mask] = alive_color
    return Image.fromarray(pixels)
