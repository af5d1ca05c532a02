import math

from config import SIZE_TO_DIAMETER
from physics.fluid_field import FluidSample
from physics.forces import ForceSample


class Bubble:
    def __init__(self, x: float, y: float, size: float, u: float = 0.0, v: float = 0.0, rho: float = 1.2):
        """
        A small buoyant sphere carried by the channel flow.
        - x, y: position [m]; x is the offset from the centerline
        - size: nominal size parameter; diameter = size * SIZE_TO_DIAMETER
        - u, v: initial velocity [m/s]
        - rho: bubble material density [kg/m³]
        """
        if size <= 0.0:
            raise ValueError(f"Bubble size must be positive, got {size}")
        if rho <= 0.0:
            raise ValueError(f"Bubble density must be positive, got {rho}")

        self.x = float(x)
        self.y = float(y)
        self.u = float(u)
        self.v = float(v)
        self.rho = float(rho)
        self.size = float(size)
        self.diameter = self.size * SIZE_TO_DIAMETER
        self.mass = self.rho * (math.pi / 6.0) * self.diameter ** 3

        # Per-step caches, refreshed before use
        self.fluid = FluidSample()
        self.forces = ForceSample()

        # Lifecycle
        self.recycles = 0
        self.retired = False

    def step(self, eq, dt: float):
        """Sample fluid, evaluate forces, integrate, then apply the walls."""
        self.fluid = eq.flow.sample(self.x)
        self.forces = eq.forces.compute(self, self.fluid)
        eq.integrator.advance(self, dt)
        if eq.walls.apply(self):
            self.recycles += 1

    @property
    def speed(self) -> float:
        return math.hypot(self.u, self.v)

    def __repr__(self):
        return (f"Bubble(x={self.x:.4f}, y={self.y:.4f}, u={self.u:.4f}, "
                f"v={self.v:.4f}, d={self.diameter:.2e})")
