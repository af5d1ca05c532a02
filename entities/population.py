"""
Ordered collection of live bubbles.

Ordinal positions are part of the external contract: a renderer mirrors the
population element-for-element, so every append and removal is announced to
registered listeners with the index it affected.
"""
import logging
import random

from entities.bubble import Bubble

logger = logging.getLogger("bubble_sim")


class SimulationListener:
    """Receives population changes. Override the hooks you need."""

    def bubble_spawned(self, index: int, x: float, y: float, size: float):
        pass

    def bubble_removed(self, index: int):
        pass

    def bubbles_moved(self, snapshot):
        """snapshot: list of (index, x, y) in ordinal order."""
        pass


class Population:
    def __init__(self, equations, cap: int = 50, size_range=(0.2, 0.9), x_range=(-0.25, 0.25),
                 bubble_density: float = 1.2, max_recycles: int | None = None,
                 rng: random.Random | None = None):
        """
        - equations: per-step physics models (flow, forces, integrator, walls)
        - cap: maximum number of live bubbles
        - size_range, x_range: default spawn distributions
        - bubble_density: density given to spawned bubbles [kg/m³]
        - max_recycles: retire a bubble after this many top recycles (None = never)
        - rng: random source; inject a seeded instance for reproducible runs
        """
        if cap < 1:
            raise ValueError("Population cap must be at least 1")
        self.eq = equations
        self.cap = int(cap)
        self.size_range = tuple(size_range)
        self.x_range = tuple(x_range)
        self.bubble_density = float(bubble_density)
        self.max_recycles = max_recycles
        self.rng = rng or random.Random()

        self.bubbles: list[Bubble] = []
        self.listeners: list[SimulationListener] = []
        self.retired_total = 0

    def __len__(self):
        return len(self.bubbles)

    def __iter__(self):
        return iter(self.bubbles)

    def __getitem__(self, index):
        return self.bubbles[index]

    def add_listener(self, listener: SimulationListener):
        self.listeners.append(listener)

    def is_full(self) -> bool:
        return len(self.bubbles) >= self.cap

    def spawn(self, count: int, size_range=None, x_range=None) -> list[Bubble]:
        """
        Append up to `count` bubbles at y = 0 with zero velocity.

        The batch is truncated so the live count never exceeds the cap.
        Returns the bubbles actually created.

        Raises
        ------
        ValueError
            If the size range is not strictly positive or either range is
            inverted. Nothing is spawned in that case.
        """
        lo_s, hi_s = size_range or self.size_range
        lo_x, hi_x = x_range or self.x_range
        if lo_s <= 0.0 or hi_s < lo_s:
            raise ValueError(f"Invalid size range {(lo_s, hi_s)}")
        if hi_x < lo_x:
            raise ValueError(f"Invalid spawn x range {(lo_x, hi_x)}")

        room = max(0, self.cap - len(self.bubbles))
        n = min(max(0, int(count)), room)
        if n < count:
            logger.debug("Spawn truncated from %d to %d (cap %d)", count, n, self.cap)

        created = []
        for _ in range(n):
            x = self.rng.uniform(lo_x, hi_x)
            size = self.rng.uniform(lo_s, hi_s)
            bubble = Bubble(x, 0.0, size, rho=self.bubble_density)
            self.bubbles.append(bubble)
            created.append(bubble)

            index = len(self.bubbles) - 1
            logger.debug("Spawned bubble %d at x=%.4f size=%.3f", index, x, size)
            for listener in self.listeners:
                listener.bubble_spawned(index, bubble.x, bubble.y, bubble.size)
        return created

    def remove_at(self, index: int) -> Bubble:
        """
        Remove the bubble at ordinal `index`; later bubbles shift down by one.

        Raises
        ------
        IndexError
            Unless 0 <= index < len(population). Negative indices are rejected.
        """
        if not 0 <= index < len(self.bubbles):
            raise IndexError(f"No bubble at index {index} (population {len(self.bubbles)})")
        bubble = self.bubbles.pop(index)
        for listener in self.listeners:
            listener.bubble_removed(index)
        return bubble

    def pick(self, index: int) -> Bubble:
        """Pick-to-remove request from the renderer."""
        bubble = self.remove_at(index)
        logger.info("Picked bubble %d, %d left", index, len(self.bubbles))
        return bubble

    def advance_all(self, dt: float):
        for bubble in self.bubbles:
            bubble.step(self.eq, dt)
            if self.max_recycles is not None and bubble.recycles >= self.max_recycles:
                bubble.retired = True

        if self.max_recycles is not None:
            self._remove_retired()

    def _remove_retired(self):
        # Highest index first so each announced index is valid when emitted
        for index in range(len(self.bubbles) - 1, -1, -1):
            if self.bubbles[index].retired:
                self.remove_at(index)
                self.retired_total += 1
                logger.info("Retired bubble %d after %d recycles", index, self.max_recycles)

    def snapshot(self) -> list[tuple[int, float, float]]:
        return [(i, b.x, b.y) for i, b in enumerate(self.bubbles)]

    def notify_moved(self):
        if not self.listeners:
            return
        snap = self.snapshot()
        for listener in self.listeners:
            listener.bubbles_moved(snap)
