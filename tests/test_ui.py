import random

import pytest

from config import SimulationConfig
from equations import build_simulation
from main import apply_input
from ui import UI


@pytest.fixture
def sim():
    population, clock = build_simulation(SimulationConfig(), rng=random.Random(11))
    ui = UI(bounds=SimulationConfig().bounds)
    population.add_listener(ui)
    return ui, population, clock


def mirrored(pop):
    return [(b.x, b.y, b.size) for b in pop]


def test_sprites_mirror_population_index_for_index(sim):
    ui, population, clock = sim
    population.spawn(4)
    population.remove_at(1)
    clock.start()
    clock.tick()

    assert len(population) == 4
    assert [tuple(s) for s in ui.sprites] == mirrored(population)


def test_hit_test_prefers_topmost_sprite(sim):
    ui = sim[0]
    ui.sprites = [[0.0, 0.5, 0.6], [0.0, 0.5, 0.6]]
    pos = ui.to_screen(0.0, 0.5)
    assert ui.bubble_at(pos) == 1
    assert ui.bubble_at((0, 0)) is None


def test_hit_test_respects_radius(sim):
    ui = sim[0]
    ui.sprites = [[-0.1, 0.5, 0.5], [0.1, 0.5, 0.5]]
    cx, cy = ui.to_screen(-0.1, 0.5)
    assert ui.bubble_at((cx + ui.radius_px(0.5) - 1, cy)) == 0


def test_pick_while_paused_leaves_clock_stopped(sim):
    ui, population, clock = sim
    population.spawn(3)
    second = population[2]
    clock.start()

    ui.paused = True
    ui.pending_pick = 1
    apply_input(ui, clock, population)

    assert not clock.running
    assert len(population) == 2
    assert population[1] is second
    assert [tuple(s) for s in ui.sprites] == mirrored(population)
    assert ui.pending_pick is None


def test_pick_while_running_resumes(sim):
    ui, population, clock = sim
    population.spawn(2)
    clock.start()

    ui.pending_pick = 0
    apply_input(ui, clock, population)

    assert clock.running
    assert len(population) == 1
    assert len(ui.sprites) == 1


def test_pause_and_resume_toggle_the_clock(sim):
    ui, population, clock = sim
    clock.start()
    ui.paused = True
    apply_input(ui, clock, population)
    assert not clock.running
    assert clock.tick() is False

    ui.paused = False
    apply_input(ui, clock, population)
    assert clock.running
