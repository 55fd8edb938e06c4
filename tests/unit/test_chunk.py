import pytest

from infinite_life.chunk import Chunk
from infinite_life.vector import Vector2


def test_new_chunk_is_empty() -> None:
    chunk = Chunk(Vector2(1, 2), chunk_size=4, cell_pixel_size=3)
    assert chunk.cells.shape == (4, 4)
    assert chunk.population == 0
    assert chunk.key == (1, 2)
    assert chunk.version == 0
    assert chunk.surface.size == (12, 12)


def test_origin_is_pixel_placement() -> None:
    chunk = Chunk(Vector2(-1, 2), chunk_size=4, cell_pixel_size=3)
    assert chunk.origin == Vector2(-12, 24)


def test_get_and_set_cell() -> None:
    chunk = Chunk(Vector2(0, 0), chunk_size=4, cell_pixel_size=1)
    chunk.set_cell(Vector2(3, 1), True)
    assert chunk.get_cell(Vector2(3, 1))
    assert not chunk.get_cell(Vector2(1, 3))
    assert chunk.population == 1
    chunk.set_cell(Vector2(3, 1), False)
    assert not chunk.get_cell(Vector2(3, 1))


@pytest.mark.parametrize("local", [(4, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_bounds_access_raises(local: tuple[int, int]) -> None:
    chunk = Chunk(Vector2(0, 0), chunk_size=4, cell_pixel_size=1)
    with pytest.raises(IndexError):
        chunk.get_cell(Vector2(*local))
    with pytest.raises(IndexError):
        chunk.set_cell(Vector2(*local), True)


def test_rebuild_visual_draws_live_cells() -> None:
    chunk = Chunk(Vector2(0, 0), chunk_size=4, cell_pixel_size=2)
    chunk.set_cell(Vector2(1, 0), True)
    chunk.rebuild_visual()
    assert chunk.version == 1
    assert chunk.surface.size == (8, 8)
    assert chunk.surface.getpixel((2, 0)) == (255, 255, 255, 255)
    assert chunk.surface.getpixel((3, 1)) == (255, 255, 255, 255)
    assert chunk.surface.getpixel((0, 0))[3] == 0
    assert chunk.surface.getpixel((4, 0))[3] == 0
