"""
Fixed-timestep driver for a bubble population.

The clock decouples simulation time from the render rate: every tick advances
the population by dt_macro, split into dt_macro/dt_micro calls of
advance_all. Ticks are either driven manually (tick) or converted from
wall-clock time by advance, which the render loop calls once per frame.
"""
import logging

logger = logging.getLogger("bubble_sim")

STOPPED = "stopped"
RUNNING = "running"


class SimulationClock:
    def __init__(self, population, dt_micro: float = 1.0e-4, dt_macro: float = 1.0e-3,
                 spawn_period: int = 100, spawn_batch: int = 1, max_ticks_per_call: int = 20):
        if dt_micro <= 0.0 or dt_macro <= 0.0:
            raise ValueError("Time steps must be positive")
        ratio = dt_macro / dt_micro
        steps = int(round(ratio))
        if steps < 1 or abs(ratio - steps) > 1e-9 * ratio:
            raise ValueError(f"dt_macro/dt_micro must be a whole number, got {ratio:g}")
        if spawn_period < 1 or spawn_batch < 1:
            raise ValueError("spawn_period and spawn_batch must be at least 1")

        self.population = population
        self.dt_micro = float(dt_micro)
        self.dt_macro = float(dt_macro)
        self.micro_steps = steps
        self.spawn_period = int(spawn_period)
        self.spawn_batch = int(spawn_batch)
        self.max_ticks_per_call = int(max_ticks_per_call)

        self.state = STOPPED
        self.counter = 0
        self._accumulator = 0.0

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    @property
    def sim_time(self) -> float:
        return self.counter * self.dt_macro

    def start(self):
        if self.state == RUNNING:
            return
        self.state = RUNNING
        logger.info("Clock started at tick %d", self.counter)

    def stop(self):
        if self.state == STOPPED:
            return
        self.state = STOPPED
        # Drop partial wall time so resuming does not burst ticks
        self._accumulator = 0.0
        logger.info("Clock stopped at tick %d", self.counter)

    def tick(self) -> bool:
        """
        Run one macro-step if running.

        Returns False when stopped (nothing happens).
        """
        if self.state != RUNNING:
            return False

        pop = self.population
        if self.counter % self.spawn_period == 0 and not pop.is_full():
            pop.spawn(self.spawn_batch)

        for _ in range(self.micro_steps):
            pop.advance_all(self.dt_micro)

        self.counter += 1
        pop.notify_moved()
        return True

    def advance(self, elapsed: float) -> int:
        """
        Convert `elapsed` wall-clock seconds into whole ticks.

        At most max_ticks_per_call ticks run; any excess time is dropped.
        Returns the number of ticks run.

        When a tick costs more wall time than dt_macro (a full population of
        50 bubbles takes roughly 9 ms per 1 ms tick) the cap is hit every
        frame and simulated time runs slower than real time. sim_time always
        reports simulated seconds, never wall seconds.
        """
        if self.state != RUNNING:
            return 0

        self._accumulator += max(0.0, elapsed)
        n = 0
        while self._accumulator >= self.dt_macro and n < self.max_ticks_per_call:
            self.tick()
            self._accumulator -= self.dt_macro
            n += 1
        if n == self.max_ticks_per_call:
            self._accumulator = 0.0
        return n
