"""Physics models for bubbles carried by a channel flow."""

from physics.fluid_field import ChannelFlow, FluidSample
from physics.forces import (
    ForceModel, ForceSample,
    drag_coefficient, lift_coefficient, reynolds_number, shear_parameter,
)
from physics.integrator import Integrator, acceleration, rk4_step
from physics.boundary import ChannelWalls

__all__ = [
    "ChannelFlow", "FluidSample",
    "ForceModel", "ForceSample",
    "drag_coefficient", "lift_coefficient", "reynolds_number", "shear_parameter",
    "Integrator", "acceleration", "rk4_step",
    "ChannelWalls",
]
