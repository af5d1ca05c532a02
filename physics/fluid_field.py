"""
Analytic carrier-fluid field for a vertical channel.

The flow is a steady parabolic (Poiseuille-like) profile: purely vertical,
peak velocity U∞ on the centerline x = 0 and zero at the walls x = ±W/2.
Because the field is steady, the material derivatives seen by a bubble are
taken as zero.
"""
from dataclasses import dataclass


@dataclass
class FluidSample:
    """Fluid state at a bubble's position for one step."""
    u: float = 0.0          # horizontal velocity [m/s]
    v: float = 0.0          # vertical velocity [m/s]
    dudt: float = 0.0       # [m/s²]
    dvdt: float = 0.0       # [m/s²]
    vort: float = 0.0       # vorticity [1/s]
    vort_mag: float = 0.0   # |vorticity| [1/s]
    rho: float = 998.02     # density [kg/m³]
    mu: float = 1e-3        # dynamic viscosity [Pa·s]


class ChannelFlow:
    def __init__(self, peak_velocity: float, width: float, rho: float = 998.02, mu: float = 1e-3):
        """
        - peak_velocity: centerline velocity U∞ [m/s]
        - width: channel width W [m]; must be nonzero
        - rho, mu: carrier fluid density and viscosity
        """
        if width == 0.0:
            raise ValueError("Channel width must be nonzero")
        self.peak_velocity = float(peak_velocity)
        self.width = float(width)
        self.rho = float(rho)
        self.mu = float(mu)
        self._half_width_sq = 0.25 * self.width ** 2

    def velocity(self, x: float) -> float:
        return self.peak_velocity * (1.0 - x * x / self._half_width_sq)

    def vorticity(self, x: float) -> float:
        return -2.0 * self.peak_velocity * x / self._half_width_sq

    def sample(self, x: float) -> FluidSample:
        vort = self.vorticity(x)
        return FluidSample(
            u=0.0,
            v=self.velocity(x),
            dudt=0.0,
            dvdt=0.0,
            vort=vort,
            vort_mag=abs(vort),
            rho=self.rho,
            mu=self.mu,
        )
