"""
Time integration of bubble velocity and position.

Each velocity component is advanced with classic 4th-order Runge-Kutta over
several sub-steps, because the drag/virtual-mass balance is stiff compared to
the outer step. Position then follows by explicit Euler with the new velocity.
"""
import math


def acceleration(vb: float, mb: float, vf: float, dvf_dt: float,
                 fls: float, term_d: float, term_vm: float) -> float:
    """Drag + lift + virtual-mass acceleration along one axis [m/s²]."""
    return (term_d * (vf - vb) + fls + term_vm * dvf_dt) / (mb + term_vm)


def rk4_step(dt: float, vb: float, mb: float, vf: float, dvf_dt: float,
             fls: float, term_d: float, term_vm: float) -> float:
    k1 = acceleration(vb, mb, vf, dvf_dt, fls, term_d, term_vm)
    k2 = acceleration(vb + k1 * dt / 2.0, mb, vf, dvf_dt, fls, term_d, term_vm)
    k3 = acceleration(vb + k2 * dt / 2.0, mb, vf, dvf_dt, fls, term_d, term_vm)
    k4 = acceleration(vb + k3 * dt, mb, vf, dvf_dt, fls, term_d, term_vm)
    return vb + (k1 + 2.0 * k2 + 2.0 * k3 + k4) * dt / 6.0


class Integrator:
    def __init__(self, substeps: int = 5):
        if substeps < 1:
            raise ValueError("substeps must be at least 1")
        self.substeps = int(substeps)

    def advance(self, bubble, dt: float):
        """
        Advance `bubble` by `dt` using its current fluid and force caches.

        Forces are frozen over the step; only the velocity relaxes.
        """
        fluid = bubble.fluid
        forces = bubble.forces
        h = dt / self.substeps

        for _ in range(self.substeps):
            bubble.u = rk4_step(h, bubble.u, bubble.mass, fluid.u, fluid.dudt,
                                forces.fls_x, forces.term_d, forces.term_vm)
            bubble.v = rk4_step(h, bubble.v, bubble.mass, fluid.v, fluid.dvdt,
                                forces.fls_y, forces.term_d, forces.term_vm)

        bubble.x += bubble.u * dt
        bubble.y += bubble.v * dt

        assert math.isfinite(bubble.u) and math.isfinite(bubble.v), "velocity diverged"
        assert math.isfinite(bubble.x) and math.isfinite(bubble.y), "position diverged"
