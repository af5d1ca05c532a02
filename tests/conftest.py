import random

import pytest

from config import SimulationConfig
from equations import Equations
from entities import Population, SimulationListener


class RecordingListener(SimulationListener):
    def __init__(self):
        self.events = []

    def bubble_spawned(self, index, x, y, size):
        self.events.append(("spawned", index))

    def bubble_removed(self, index):
        self.events.append(("removed", index))

    def bubbles_moved(self, snapshot):
        self.events.append(("moved", len(snapshot)))


@pytest.fixture
def cfg():
    return SimulationConfig().validate()


@pytest.fixture
def eq(cfg):
    return Equations.from_config(cfg)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def population(eq):
    return Population(eq, cap=10, rng=random.Random(42))
