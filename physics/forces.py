"""
Hydrodynamic force closures for a small rigid sphere in a sheared flow.

This module implements:
- Drag from a piecewise Reynolds-number correlation
- Saffman-type shear-induced lift (Mei correction for finite Re)
- Added (virtual) mass of the displaced fluid

Regime boundaries belong to the lower branch of each interval, i.e. Re = 1.5
uses the Stokes law and Re = 80 the intermediate law.
"""
import math
from dataclasses import dataclass


@dataclass
class ForceSample:
    """Force terms consumed by the integrator for one step."""
    term_d: float = 0.0    # drag time constant [kg/s]
    fls_x: float = 0.0     # shear lift, x component [N]
    fls_y: float = 0.0     # shear lift, y component [N]
    term_vm: float = 0.0   # virtual mass [kg]


# Shear parameter band where the lift correlation is valid
BETA_MIN = 0.005
BETA_MAX = 0.4


def reynolds_number(rho: float, diameter: float, speed: float, mu: float) -> float:
    return rho * diameter * speed / mu


def drag_coefficient(Re: float) -> float:
    """
    Drag coefficient for a sphere.

    Returns 0 for Re <= 0: with no relative motion there is no drag.
    """
    if Re <= 0.0:
        return 0.0
    if Re <= 1.5:
        return 16.0 / Re
    if Re <= 80.0:
        return 14.9 / (Re ** 0.78)
    if Re <= 1530.0:
        return 48.0 / Re * (1.0 - 2.21 / math.sqrt(Re)) + 1.86e-15 * (Re ** 4.756)
    return 2.61


def shear_parameter(Re: float, Re_s: float) -> float:
    return 0.5 * Re_s / Re if Re > 0.0 else 0.0


def lift_coefficient(beta: float, Re: float) -> float:
    """
    Shear-lift coefficient C_ls.

    Parameters
    ----------
    beta : float
        Shear parameter 0.5·Re_s/Re.
    Re : float
        Particle Reynolds number.

    Returns
    -------
    float
        C_ls, or 0 outside the open band (BETA_MIN, BETA_MAX).
    """
    if not BETA_MIN < beta < BETA_MAX:
        return 0.0
    sqrt_beta = math.sqrt(beta)
    if Re <= 40.0:
        return (1.0 - 0.3314 * sqrt_beta) * math.exp(-Re / 10.0) + 0.3314 * sqrt_beta
    return 0.0524 * math.sqrt(beta * Re)


class ForceModel:
    def compute(self, bubble, fluid) -> ForceSample:
        """
        Evaluate all force terms for `bubble` in the local `fluid` sample.

        Parameters
        ----------
        bubble : Bubble
            Needs u, v, diameter, mass and rho (particle density).
        fluid : FluidSample
            Fluid state at the bubble position for this step.
        """
        d = bubble.diameter
        du = fluid.u - bubble.u
        dv = fluid.v - bubble.v
        v_rel = math.sqrt(du * du + dv * dv)

        Re = reynolds_number(fluid.rho, d, v_rel, fluid.mu)
        Cd = drag_coefficient(Re)

        # Shear lift
        Re_s = fluid.rho * (d ** 2) * fluid.vort_mag / fluid.mu
        beta = shear_parameter(Re, Re_s)

        term_fls = 0.0
        if BETA_MIN < beta < BETA_MAX:
            # beta > 0 implies Re_s > 0, hence vort_mag > 0
            Cls = lift_coefficient(beta, Re)
            term_fls = 1.615 * d * fluid.mu * math.sqrt(Re_s) / fluid.vort_mag * Cls

        forces = ForceSample(
            term_d=0.75 * bubble.mass * Cd * Re * fluid.mu / (bubble.rho * d ** 2),
            fls_x=term_fls * (dv * fluid.vort),
            fls_y=term_fls * ((bubble.u - fluid.u) * fluid.vort),
            term_vm=0.5 * bubble.mass * (fluid.rho / bubble.rho),
        )
        assert math.isfinite(forces.term_d), f"non-finite drag at Re={Re}"
        assert math.isfinite(forces.fls_x) and math.isfinite(forces.fls_y), "non-finite lift"
        return forces
