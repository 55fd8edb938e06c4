from typing import Iterable, List, Set, Tuple

from infinite_life.game import Game
from infinite_life.rules import Rules
from infinite_life.vector import Vector2
from infinite_life.world import World

Cells = Iterable[Tuple[int, int]]


def make_world(
    cells: Cells = (), chunk_size: int = 8, cell_pixel_size: int = 1
) -> World:
    """Small world (tiny chunks, 1px cells) with ``cells`` set live."""
    world = World(chunk_size=chunk_size, cell_pixel_size=cell_pixel_size)
    for x, y in cells:
        world.set_cell(Vector2(x, y), True)
    return world


def live_set(world: World) -> Set[Tuple[int, int]]:
    return {(int(c.x), int(c.y)) for c in world.live_cells}


def scanned_live_set(world: World) -> Set[Tuple[int, int]]:
    """Live cells found by scanning every allocated chunk (ignores ``live_cells``)."""
    found: Set[Tuple[int, int]] = set()
    for (cx, cy), chunk in world.chunks.items():
        ys, xs = chunk.cells.nonzero()
        for x, y in zip(xs, ys):
            found.add((cx * world.chunk_size + int(x), cy * world.chunk_size + int(y)))
    return found


class FakeClock:
    """Monotonic clock in seconds, advanced by hand in milliseconds."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def __call__(self) -> float:
        return self.now_ms / 1000.0


def make_game(
    cells: Cells = (),
    rules: Rules | None = None,
    tick_interval: float = 100.0,
    chunk_size: int = 8,
) -> Tuple[Game, FakeClock]:
    clock = FakeClock()
    game = Game(
        world=make_world(cells, chunk_size=chunk_size),
        rules=rules,
        tick_interval=tick_interval,
        clock=clock,
    )
    return game, clock


def shifted(cells: Cells, dx: int, dy: int) -> List[Tuple[int, int]]:
    return [(x + dx, y + dy) for x, y in cells]
