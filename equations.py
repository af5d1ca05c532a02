import logging
import random

from config import SimulationConfig
from entities import Population
from physics import ChannelFlow, ForceModel, Integrator, ChannelWalls
from clock import SimulationClock

logger = logging.getLogger("bubble_sim")


class Equations:
    """Physics models every bubble runs through on each micro-step."""

    def __init__(self, flow: ChannelFlow, forces: ForceModel, integrator: Integrator, walls: ChannelWalls):
        self.flow = flow
        self.forces = forces
        self.integrator = integrator
        self.walls = walls

    @classmethod
    def from_config(cls, cfg: SimulationConfig):
        return cls(
            flow=ChannelFlow(cfg.channel.peak_velocity, cfg.channel.width,
                             rho=cfg.fluid.rho, mu=cfg.fluid.mu),
            forces=ForceModel(),
            integrator=Integrator(substeps=cfg.rk4_substeps),
            walls=ChannelWalls(cfg.bounds.x_min, cfg.bounds.x_max, cfg.bounds.y_top),
        )


def build_simulation(cfg: SimulationConfig | None = None, rng: random.Random | None = None):
    """
    Wire a population and its clock from a validated config.

    Returns
    -------
    tuple
        (population, clock). The clock starts Stopped.
    """
    cfg = (cfg or SimulationConfig()).validate()
    eq = Equations.from_config(cfg)
    population = Population(
        eq,
        cap=cfg.spawn.cap,
        size_range=cfg.spawn.size_range,
        x_range=cfg.spawn.x_range,
        bubble_density=cfg.spawn.bubble_density,
        max_recycles=cfg.max_recycles,
        rng=rng,
    )
    clock = SimulationClock(
        population,
        dt_micro=cfg.clock.dt_micro,
        dt_macro=cfg.clock.dt_macro,
        spawn_period=cfg.spawn.period,
        spawn_batch=cfg.spawn.batch,
        max_ticks_per_call=cfg.clock.max_ticks_per_call,
    )
    logger.info(
        "Simulation built: U=%.3g m/s, W=%.3g m, cap=%d, %d micro-steps per tick",
        cfg.channel.peak_velocity, cfg.channel.width, cfg.spawn.cap, clock.micro_steps,
    )
    return population, clock
