"""View transform helpers.

A :class:`ViewTransform` is the camera of a host: a screen-space ``offset``
(``x``, ``y``) and a uniform ``scale``. World pixel coordinates map to the
screen as ``world * scale + offset``. Every function here is pure and takes
the transform as input, so any rendering backend can reuse them.

Units:

* *screen*: host pixels.
* *world*: unscaled pixels (``cell * cell_pixel_size``).
* *cell*: integer world cell coordinate.
"""

import math
from dataclasses import dataclass, replace
from typing import List

from infinite_life.config import Config
from infinite_life.vector import Vector2


@dataclass(frozen=True)
class ViewTransform:
    """Camera offset and zoom.

    Attributes:
        x: Horizontal screen offset of the world origin.
        y: Vertical screen offset of the world origin.
        scale: Zoom factor, screen pixels per world pixel.
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    @property
    def offset(self) -> Vector2:
        return Vector2(self.x, self.y)


def screen_to_world(point: Vector2, view: ViewTransform) -> Vector2:
    return Vector2((point.x - view.x) / view.scale, (point.y - view.y) / view.scale)


def world_to_screen(point: Vector2, view: ViewTransform) -> Vector2:
    return Vector2(point.x * view.scale + view.x, point.y * view.scale + view.y)


def screen_to_cell(
    point: Vector2,
    view: ViewTransform,
    cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
) -> Vector2:
    """Return the integer cell under a screen pixel."""
    return screen_to_world(point, view).divide_scalar(cell_pixel_size).floor()


def pan(view: ViewTransform, delta: Vector2) -> ViewTransform:
    """Move the camera by ``delta`` screen pixels."""
    return replace(view, x=view.x + delta.x, y=view.y + delta.y)


def zoom_at(
    view: ViewTransform,
    anchor: Vector2,
    delta_y: float,
    min_scale: float = Config.MIN_ZOOM,
) -> ViewTransform:
    """Zoom by a wheel delta, keeping the world point under ``anchor`` fixed.

    The scale is multiplied by ``1 - delta_y / ZOOM_WHEEL_DIVISOR``. When the
    result falls below ``min_scale`` the scale is clamped and the offset is
    left untouched.
    """
    scale = view.scale * (1 - delta_y / Config.ZOOM_WHEEL_DIVISOR)
    if scale < min_scale:
        return replace(view, scale=min_scale)

    zoomed = replace(view, scale=scale)
    before = screen_to_world(anchor, view)
    after = screen_to_world(anchor, zoomed)
    movement = after.subtract(before).multiply_scalar(scale)
    return pan(zoomed, movement)


def visible_chunk_keys(
    view: ViewTransform,
    width: float,
    height: float,
    chunk_size: int = Config.CHUNK_SIZE,
    cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
) -> List[Vector2]:
    """Return the chunk coordinates covering a ``width x height`` screen.

    The range runs from the floor of the top-left chunk to the ceiling of the
    bottom-right one, both inclusive, so partially visible chunks at every
    edge are included.
    """
    chunk_pixels = view.scale * cell_pixel_size * chunk_size
    start = Vector2(-view.x, -view.y).divide_scalar(chunk_pixels).floor()
    end = Vector2(
        start.x + width / chunk_pixels, start.y + height / chunk_pixels
    ).ceil()
    return [
        Vector2(x, y)
        for y in range(int(start.y), int(end.y) + 1)
        for x in range(int(start.x), int(end.x) + 1)
    ]


def view_centered_on(
    cell: Vector2,
    width: float,
    height: float,
    scale: float = 1.0,
    cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
) -> ViewTransform:
    """Return a transform that puts the center of ``cell`` mid-screen."""
    center = Vector2(cell.x + 0.5, cell.y + 0.5).multiply_scalar(
        cell_pixel_size * scale
    )
    return ViewTransform(x=width / 2 - center.x, y=height / 2 - center.y, scale=scale)


def chunk_screen_size(
    view: ViewTransform,
    chunk_size: int = Config.CHUNK_SIZE,
    cell_pixel_size: int = Config.CELL_PIXEL_SIZE,
) -> int:
    return max(0, int(math.ceil(chunk_size * cell_pixel_size * view.scale)))
