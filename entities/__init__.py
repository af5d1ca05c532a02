"""Simulated bodies: bubbles and the population that owns them."""

from entities.bubble import Bubble
from entities.population import Population, SimulationListener

__all__ = [
    "Bubble",
    "Population",
    "SimulationListener",
]
