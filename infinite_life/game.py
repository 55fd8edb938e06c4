"""Simulation engine.

:class:`Game` owns the :class:`World` and the current :class:`Rules` and
drives generations from a host's per-frame callback:

* **Stopped** (initial) and **Running** are toggled by :meth:`Game.start` /
  :meth:`Game.stop`. Ticks are no-ops while stopped.
* While running, :meth:`Game.tick` performs one generation whenever at least
  ``tick_interval`` milliseconds of monotonic time have elapsed since the last
  generation. The host may call it far more often than that; the generation
  rate stays tied to ``tick_interval``.

A generation always runs to completion inside a single call, so stopping
never interrupts one half way.
"""

import logging
import time
from typing import Callable, Iterable, Optional, Tuple

from infinite_life.config import Config
from infinite_life.rules import Rules
from infinite_life.step import StepResult, step
from infinite_life.types import Clock, NeighborCount
from infinite_life.vector import Vector2
from infinite_life.world import World

LOG = logging.getLogger(__name__)


class Game:
    world: World
    tick_interval: float
    generation: int

    def __init__(
        self,
        world: Optional[World] = None,
        rules: Optional[Rules] = None,
        tick_interval: float = Config.DEFAULT_TICK_INTERVAL,
        clock: Clock = time.monotonic,
    ):
        """Create a stopped engine.

        Args:
            world: World to evolve. By default a new world with the initial
                chunks of ``Config.INITIAL_CHUNKS`` registered.
            rules: Birth / survival rules, ``Config.DEFAULT_RULE`` if omitted.
            tick_interval: Milliseconds between generations.
            clock: Monotonic time source in seconds.
        """
        if world is None:
            world = World()
            world.ensure_chunks(Vector2(x, y) for x, y in Config.INITIAL_CHUNKS)
        self.world = world
        self._rules = rules if rules is not None else Rules.parse(Config.DEFAULT_RULE)
        self.tick_interval = tick_interval
        self.generation = 0
        self._clock = clock
        self._started = False
        self._last_tick = self._now()

    # -------- State machine --------

    def start(self) -> None:
        if not self._started:
            LOG.info("Simulation started at generation %d", self.generation)
        self._started = True

    def stop(self) -> None:
        if self._started:
            LOG.info("Simulation stopped at generation %d", self.generation)
        self._started = False

    def is_running(self) -> bool:
        return self._started

    # -------- Ticking --------

    def tick(self) -> bool:
        """Per-frame entry point.

        Returns:
            bool: ``True`` if a generation ran during this call.
        """
        if not self._started:
            return False
        now = self._now()
        if now - self._last_tick < self.tick_interval:
            return False
        self._last_tick = now
        self.step()
        return True

    def get_ticker(self) -> Callable[[], bool]:
        """Return the bound per-frame callback for a host scheduler."""
        return self.tick

    def step(self) -> StepResult:
        """Advance one generation regardless of the running state."""
        result = step(self.world, self._rules)
        self.generation += 1
        LOG.debug(
            "Generation %d: births=%d deaths=%d population=%d chunks=%d",
            self.generation,
            result.births,
            result.deaths,
            self.world.population,
            len(self.world.chunks),
        )
        return result

    def set_speed(self, multiplier: float) -> None:
        """Set ``tick_interval`` from a speed multiplier (x1 = base interval)."""
        if multiplier <= 0:
            raise ValueError(f"Speed multiplier must be positive, got {multiplier}")
        self.tick_interval = Config.BASE_TICK_INTERVAL / multiplier

    def _now(self) -> float:
        return self._clock() * 1000.0

    # -------- Rules --------

    @property
    def rules(self) -> Rules:
        return self._rules

    @rules.setter
    def rules(self, rules: Rules) -> None:
        if rules != self._rules:
            LOG.info("Rules changed: %s -> %s", self._rules, rules)
        self._rules = rules

    @property
    def live(self) -> Tuple[NeighborCount, ...]:
        """Neighbor counts under which a live cell survives."""
        return tuple(sorted(self._rules.survive))

    @live.setter
    def live(self, counts: Iterable[NeighborCount]) -> None:
        self.rules = self._rules.with_survive(counts)

    @property
    def death(self) -> Tuple[NeighborCount, ...]:
        """Neighbor counts under which a dead cell is born."""
        return tuple(sorted(self._rules.birth))

    @death.setter
    def death(self, counts: Iterable[NeighborCount]) -> None:
        self.rules = self._rules.with_birth(counts)

    def toggle_survival(self, count: NeighborCount) -> None:
        self.rules = self._rules.toggle_survival(count)

    def toggle_birth(self, count: NeighborCount) -> None:
        self.rules = self._rules.toggle_birth(count)
