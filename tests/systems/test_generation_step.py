from typing import List, Tuple

import pytest

from infinite_life.patterns import PATTERNS, place_pattern
from infinite_life.rules import CONWAY, Rules
from infinite_life.step import (
    CellUpdate,
    apply_updates,
    collect_candidates,
    count_live_neighbors,
    evaluate_candidates,
    step,
)
from infinite_life.utils.dedup import unique_in_place
from infinite_life.vector import Vector2
from tests.test_utils import live_set, make_world, scanned_live_set, shifted

BLOCK = [(0, 0), (1, 0), (0, 1), (1, 1)]
BLINKER_ROW = [(0, 1), (1, 1), (2, 1)]
BLINKER_COLUMN = [(1, 0), (1, 1), (1, 2)]


def test_collect_candidates_covers_moore_neighborhood() -> None:
    candidates = collect_candidates([Vector2(5, 5)])
    assert len(candidates) == 9
    assert set(candidates) == {
        Vector2(x, y) for x in range(4, 7) for y in range(4, 7)
    }


def test_count_live_neighbors() -> None:
    world = make_world(BLOCK)
    assert count_live_neighbors(world, Vector2(0, 0)) == 3
    assert count_live_neighbors(world, Vector2(2, 0)) == 2
    assert count_live_neighbors(world, Vector2(-1, -1)) == 1
    assert count_live_neighbors(world, Vector2(10, 10)) == 0


def test_empty_world_stays_empty() -> None:
    world = make_world()
    result = step(world, CONWAY)
    assert (result.births, result.deaths, result.chunks) == (0, 0, [])
    assert world.live_cells == []


def test_isolated_cell_dies() -> None:
    world = make_world([(0, 0)])
    result = step(world, CONWAY)
    assert world.live_cells == []
    assert result.deaths == 1


def test_isolated_cell_survives_when_zero_in_survive() -> None:
    world = make_world([(0, 0)])
    step(world, Rules.parse("B3/S0"))
    assert live_set(world) == {(0, 0)}


def test_dead_neighbors_are_not_allocated() -> None:
    world = make_world([(0, 0)])
    step(world, CONWAY)
    assert set(world.chunks) == {(0, 0)}


def test_block_is_still_life() -> None:
    world = make_world(BLOCK)
    result = step(world, CONWAY)
    assert live_set(world) == set(BLOCK)
    assert (result.births, result.deaths) == (0, 0)


def test_blinker_oscillates() -> None:
    world = make_world(BLINKER_ROW)
    step(world, CONWAY)
    assert live_set(world) == set(BLINKER_COLUMN)
    step(world, CONWAY)
    assert live_set(world) == set(BLINKER_ROW)


@pytest.mark.parametrize(
    "name, period", [("block", 1), ("beehive", 1), ("toad", 2), ("pulsar", 3)]
)
def test_pattern_periods(name: str, period: int) -> None:
    world = make_world()
    place_pattern(world, name, Vector2(-6, -6))
    start = live_set(world)
    for _ in range(period):
        step(world, CONWAY)
    assert live_set(world) == start


def test_glider_moves_across_chunks() -> None:
    world = make_world(chunk_size=8)
    place_pattern(world, "glider", Vector2(5, 5))
    for _ in range(8):
        step(world, CONWAY)
    assert live_set(world) == set(shifted(PATTERNS["glider"], 7, 7))
    assert scanned_live_set(world) == live_set(world)
    assert world.get_chunk(Vector2(1, 1)) is not None


def test_updates_use_pre_step_state() -> None:
    world = make_world(BLINKER_ROW)
    candidates = unique_in_place(collect_candidates(world.live_cells))
    updates = evaluate_candidates(world, CONWAY, candidates)
    assert live_set(world) == set(BLINKER_ROW)
    assert {(int(u.cell.x), int(u.cell.y), u.alive) for u in updates} == {
        (0, 1, False),
        (2, 1, False),
        (1, 0, True),
        (1, 2, True),
    }


def test_duplicate_candidates_do_not_change_result() -> None:
    cells = PATTERNS["r_pentomino"]
    with_dedup = make_world(cells)
    without_dedup = make_world(cells)
    for _ in range(5):
        step(with_dedup, CONWAY)
        candidates = collect_candidates(without_dedup.live_cells)
        candidates = candidates + candidates[::-1]
        apply_updates(
            without_dedup, evaluate_candidates(without_dedup, CONWAY, candidates)
        )
        assert live_set(without_dedup) == live_set(with_dedup)
    assert len(without_dedup.live_cells) == len(set(without_dedup.live_cells))


def test_one_rebuild_per_changed_chunk() -> None:
    # Blinker straddling the boundary between chunks (0, 0) and (1, 0).
    world = make_world([(7, 4), (8, 4), (9, 4)], chunk_size=8)
    world.set_cell(Vector2(-20, -20), True)  # lone cell in a far chunk
    world.ensure_chunks([Vector2(0, 1)])
    versions = {key: chunk.version for key, chunk in world.chunks.items()}

    result = step(world, CONWAY)

    rebuilt = [chunk.key for chunk in result.chunks]
    assert sorted(rebuilt) == [(-3, -3), (0, 0), (1, 0)]
    for key, chunk in world.chunks.items():
        expected = versions[key] + (1 if key in rebuilt else 0)
        assert chunk.version == expected
    assert live_set(world) == {(8, 3), (8, 4), (8, 5)}
    assert (result.births, result.deaths) == (2, 3)


def test_apply_updates_tolerates_repeats() -> None:
    world = make_world()
    updates: List[CellUpdate] = [
        CellUpdate(Vector2(1, 1), True),
        CellUpdate(Vector2(1, 1), True),
        CellUpdate(Vector2(2, 2), False),
    ]
    chunks = apply_updates(world, updates)
    assert [c.key for c in chunks] == [(0, 0)]
    assert world.live_cells == [Vector2(1, 1)]


def test_birth_rule_controls_births() -> None:
    cells: List[Tuple[int, int]] = [(0, 0), (2, 0)]
    world = make_world(cells)
    step(world, Rules.parse("B2/S"))
    assert live_set(world) == {(1, -1), (1, 0), (1, 1)}
