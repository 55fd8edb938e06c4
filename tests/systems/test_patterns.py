import pytest

from infinite_life.patterns import PATTERNS, pattern_cells, place_pattern
from infinite_life.vector import Vector2
from tests.test_utils import live_set, make_world, shifted


def test_pattern_cells_offsets_from_origin() -> None:
    cells = pattern_cells("blinker", Vector2(10, -3))
    assert cells == [Vector2(10, -3), Vector2(11, -3), Vector2(12, -3)]


def test_pattern_cells_accepts_raw_offsets() -> None:
    assert pattern_cells([(0, 0), (2, 1)], Vector2(1, 1)) == [
        Vector2(1, 1),
        Vector2(3, 2),
    ]


def test_unknown_pattern_raises() -> None:
    with pytest.raises(ValueError):
        pattern_cells("not-a-pattern", Vector2(0, 0))


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_patterns_have_unique_cells(name: str) -> None:
    assert len(set(PATTERNS[name])) == len(PATTERNS[name])


def test_place_pattern_rebuilds_each_chunk_once() -> None:
    world = make_world(chunk_size=8)
    chunks = place_pattern(world, "gosper_gun", Vector2(-4, -4))
    assert live_set(world) == set(shifted(PATTERNS["gosper_gun"], -4, -4))
    assert len(chunks) == len({c.key for c in chunks})
    # registration build + one batched rebuild
    assert all(chunk.version == 2 for chunk in chunks)
    assert {c.key for c in chunks} == set(world.chunks)
