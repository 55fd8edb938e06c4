import math
from typing import Optional

from PIL import Image

from infinite_life.config import Config
from infinite_life.types import Color
from infinite_life.view import (
    ViewTransform,
    chunk_screen_size,
    visible_chunk_keys,
    world_to_screen,
)
from infinite_life.world import World


def render_view(
    world: World,
    view: ViewTransform,
    width: int,
    height: int,
    background_color: Color = Config.BACKGROUND_COLOR,
) -> Image.Image:
    """
    Renders the part of ``world`` seen through ``view`` as a ``width x height``
    RGBA frame. Chunk surfaces are scaled with nearest-neighbor sampling so
    cells stay crisp at every zoom level.
    """
    frame = Image.new("RGBA", (width, height), background_color)
    size = chunk_screen_size(view, world.chunk_size, world.cell_pixel_size)
    if size == 0:
        return frame

    for key in visible_chunk_keys(
        view, width, height, world.chunk_size, world.cell_pixel_size
    ):
        chunk = world.get_chunk(key)
        if chunk is None or chunk.population == 0:
            continue
        surface = chunk.surface
        if surface.size != (size, size):
            surface = surface.resize((size, size), Image.Resampling.NEAREST)
        corner = world_to_screen(chunk.origin, view)
        frame.paste(surface, (math.floor(corner.x), math.floor(corner.y)), surface)
    return frame


class ViewRenderer:
    width: int
    height: int
    background_color: Color

    def __init__(
        self,
        width: int,
        height: int,
        background_color: Optional[Color] = None,
    ):
        self.width = width
        self.height = height
        self.background_color = background_color or Config.BACKGROUND_COLOR

    def render(self, world: World, view: ViewTransform) -> Image.Image:
        return render_view(
            world, view, self.width, self.height, self.background_color
        )
