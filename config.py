"""
Session configuration for the bubble channel simulation.

All values are fixed when the simulation is built; nothing here is reloaded
mid-run. Defaults reproduce the reference setup: a 1 m wide water channel with
a 1 m/s centerline, air bubbles released across the middle half of the channel.
"""
from dataclasses import dataclass, field


# Nominal size parameter -> bubble diameter [m]
SIZE_TO_DIAMETER = 1.0e-2


@dataclass
class FluidProperties:
    """Carrier fluid (water at ~20 C)."""
    rho: float = 998.02   # kg/m³
    mu: float = 1e-3      # Pa·s


@dataclass
class ChannelParams:
    """Poiseuille channel profile."""
    peak_velocity: float = 1.0   # m/s, U∞ at the centerline
    width: float = 1.0           # m, walls at ±0.5 W


@dataclass
class DomainBounds:
    """Observed window; bubbles reflect off x bounds and recycle past y_top."""
    x_min: float = -0.25
    x_max: float = 0.25
    y_top: float = 1.2


@dataclass
class SpawnParams:
    period: int = 100                 # ticks between spawn batches
    batch: int = 1                    # bubbles per batch
    cap: int = 50                     # max live bubbles
    size_range: tuple = (0.2, 0.9)    # nominal size parameter
    x_range: tuple = (-0.25, 0.25)    # m
    bubble_density: float = 1.2       # kg/m³ (air)


@dataclass
class ClockParams:
    dt_micro: float = 1.0e-4   # s, one advance_all call
    dt_macro: float = 1.0e-3   # s, one tick
    # Upper bound on ticks run for one wall-clock frame
    max_ticks_per_call: int = 20

    @property
    def micro_steps(self) -> int:
        return int(round(self.dt_macro / self.dt_micro))


@dataclass
class SimulationConfig:
    fluid: FluidProperties = field(default_factory=FluidProperties)
    channel: ChannelParams = field(default_factory=ChannelParams)
    bounds: DomainBounds = field(default_factory=DomainBounds)
    spawn: SpawnParams = field(default_factory=SpawnParams)
    clock: ClockParams = field(default_factory=ClockParams)
    rk4_substeps: int = 5
    # Recycles through the top before a bubble is retired; None = never
    max_recycles: int | None = None

    def validate(self) -> "SimulationConfig":
        """
        Check every constant before anything is built.

        Raises
        ------
        ValueError
            On the first invalid value found.
        """
        if self.channel.width == 0.0:
            raise ValueError("Channel width must be nonzero")
        if self.fluid.rho <= 0.0 or self.fluid.mu <= 0.0:
            raise ValueError("Fluid density and viscosity must be positive")
        if self.spawn.bubble_density <= 0.0:
            raise ValueError("Bubble density must be positive")

        b = self.bounds
        if not b.x_min < b.x_max:
            raise ValueError(f"Domain bounds inverted: x_min={b.x_min}, x_max={b.x_max}")
        if b.y_top <= 0.0:
            raise ValueError("y_top must be positive")

        c = self.clock
        if c.dt_micro <= 0.0 or c.dt_macro <= 0.0:
            raise ValueError("Time steps must be positive")
        ratio = c.dt_macro / c.dt_micro
        if c.micro_steps < 1 or abs(ratio - c.micro_steps) > 1e-9 * ratio:
            raise ValueError(
                f"dt_macro/dt_micro must be a whole number of steps, got {ratio:g}"
            )
        if c.max_ticks_per_call < 1:
            raise ValueError("max_ticks_per_call must be at least 1")

        s = self.spawn
        if s.period < 1 or s.batch < 1 or s.cap < 1:
            raise ValueError("Spawn period, batch and cap must be at least 1")
        lo, hi = s.size_range
        if lo <= 0.0 or hi < lo:
            raise ValueError(f"Invalid size range {s.size_range}")
        if s.x_range[1] < s.x_range[0]:
            raise ValueError(f"Invalid spawn x range {s.x_range}")

        if self.rk4_substeps < 1:
            raise ValueError("rk4_substeps must be at least 1")
        if self.max_recycles is not None and self.max_recycles < 1:
            raise ValueError("max_recycles must be None or at least 1")
        return self
