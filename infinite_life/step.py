"""Generation step orchestration.

This module advances a :class:`infinite_life.world.World` by one generation
under a :class:`infinite_life.rules.Rules` configuration. Instead of scanning
the whole grid it only visits cells whose neighbor count can have changed:

1. ``collect_candidates`` gathers every live cell plus its Moore neighbors.
   Any other cell has no live neighbor and is treated as stable, even when
   ``0`` is in ``birth``.
2. ``unique_in_place`` drops duplicate candidates so each cell is evaluated
   once.
3. ``evaluate_candidates`` counts live neighbors against the *pre-step*
   world and records only the cells whose state changes.
4. ``apply_updates`` writes every change in one batch with visual updates
   deferred, then rebuilds each touched chunk exactly once.

Evaluation never reads a value written in the same generation, which gives
the classic synchronous-update semantics.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from infinite_life.chunk import Chunk
from infinite_life.rules import Rules
from infinite_life.types import ChunkKey, NeighborCount
from infinite_life.utils.dedup import unique_in_place
from infinite_life.utils.neighborhood import MOORE_OFFSETS, moore_neighbors
from infinite_life.vector import Vector2
from infinite_life.world import World


@dataclass(frozen=True)
class CellUpdate:
    cell: Vector2
    alive: bool


@dataclass(frozen=True)
class StepResult:
    """Summary of one generation.

    Attributes:
        births (int): Cells that became alive.
        deaths (int): Cells that died.
        chunks (List[Chunk]): Chunks rebuilt because at least one of their
            cells changed, in first-touched order.
    """

    births: int = 0
    deaths: int = 0
    chunks: List[Chunk] = field(default_factory=list)


def collect_candidates(live_cells: Iterable[Vector2]) -> List[Vector2]:
    """Return every live cell followed by its 8 neighbors (duplicates kept)."""
    candidates: List[Vector2] = []
    for cell in live_cells:
        candidates.append(cell)
        candidates.extend(moore_neighbors(cell))
    return candidates


def count_live_neighbors(world: World, cell: Vector2) -> NeighborCount:
    count = 0
    for offset in MOORE_OFFSETS:
        if world.get_cell(cell.add(offset)):
            count += 1
    return count


def evaluate_candidates(
    world: World, rules: Rules, candidates: Iterable[Vector2]
) -> List[CellUpdate]:
    """Compute the state changes for ``candidates`` without touching ``world``.

    Candidates that keep their state produce no update. Repeated candidates
    produce repeated, identical updates, which ``apply_updates`` tolerates.

    Args:
        world (World): Pre-step world, read only.
        rules (Rules): Birth / survival configuration for this generation.
        candidates (Iterable[Vector2]): Cells to evaluate.

    Returns:
        List[CellUpdate]: Cells whose state flips, in candidate order.
    """
    updates: List[CellUpdate] = []
    for cell in candidates:
        alive = world.get_cell(cell)
        next_alive = rules.next_state(alive, count_live_neighbors(world, cell))
        if next_alive != alive:
            updates.append(CellUpdate(cell, next_alive))
    return updates


def apply_updates(world: World, updates: Iterable[CellUpdate]) -> List[Chunk]:
    """Write ``updates`` in one batch and rebuild each touched chunk once.

    Returns:
        List[Chunk]: The rebuilt chunks, in first-touched order.
    """
    touched: Dict[ChunkKey, Chunk] = {}
    for update in updates:
        chunk = world.set_cell(update.cell, update.alive, trigger_visual_update=False)
        touched.setdefault(chunk.key, chunk)
    for chunk in touched.values():
        chunk.rebuild_visual()
    return list(touched.values())


def step(world: World, rules: Rules) -> StepResult:
    """Advance ``world`` by one generation in place.

    Args:
        world (World): World to evolve.
        rules (Rules): Birth / survival configuration.

    Returns:
        StepResult: Birth / death counts and the chunks that were rebuilt.
    """
    candidates = unique_in_place(collect_candidates(world.live_cells))
    updates = evaluate_candidates(world, rules, candidates)
    chunks = apply_updates(world, updates)
    births = sum(1 for update in updates if update.alive)
    return StepResult(births=births, deaths=len(updates) - births, chunks=chunks)
