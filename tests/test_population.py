import random

import pytest

from entities import Population


def test_spawned_bubbles_start_at_rest_on_the_floor(population):
    created = population.spawn(5)
    assert len(created) == 5
    for b in created:
        assert -0.25 <= b.x <= 0.25
        assert 0.2 <= b.size <= 0.9
        assert b.y == 0.0
        assert (b.u, b.v) == (0.0, 0.0)
        assert b.diameter == pytest.approx(b.size * 1.0e-2)
        assert b.mass > 0.0


def test_spawn_ranges_can_be_overridden(population):
    b, = population.spawn(1, size_range=(0.5, 0.5), x_range=(0.1, 0.1))
    assert b.x == pytest.approx(0.1)
    assert b.size == pytest.approx(0.5)


def test_spawn_at_cap_is_suppressed(population):
    population.spawn(10)
    assert population.is_full()
    assert population.spawn(1) == []
    assert len(population) == 10


def test_spawn_batch_truncated_to_cap(population):
    population.spawn(8)
    created = population.spawn(5)
    assert len(created) == 2
    assert len(population) == population.cap


def test_remove_shifts_later_ordinals_down(population, listener):
    population.spawn(2)
    initial = len(population)
    population.add_listener(listener)

    population.spawn(3)
    third = population[initial + 2]
    population.remove_at(initial + 1)

    assert len(population) == initial + 2
    assert population[initial + 1] is third
    assert listener.events == [
        ("spawned", initial), ("spawned", initial + 1), ("spawned", initial + 2),
        ("removed", initial + 1),
    ]


def test_ordinal_consistency_from_empty(population):
    population.spawn(3)
    original = list(population)
    population.remove_at(1)
    assert len(population) == 2
    assert population[1] is original[2]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_out_of_range_raises(population, index):
    population.spawn(3)
    with pytest.raises(IndexError):
        population.remove_at(index)
    assert len(population) == 3


def test_pick_removes_and_notifies(population, listener):
    population.add_listener(listener)
    population.spawn(2)
    first = population[0]
    assert population.pick(0) is first
    assert listener.events[-1] == ("removed", 0)


def test_same_seed_gives_same_spawns(eq):
    a = Population(eq, rng=random.Random(7))
    b = Population(eq, rng=random.Random(7))
    a.spawn(4)
    b.spawn(4)
    assert [(p.x, p.size) for p in a] == [(p.x, p.size) for p in b]


def test_advance_all_carries_bubbles_upward(population):
    population.spawn(3)
    for _ in range(10):
        population.advance_all(1.0e-4)
    for b in population:
        assert b.v > 0.0
        assert b.y > 0.0
        assert b.fluid.v > 0.0
        assert b.forces.term_d > 0.0


def test_snapshot_and_render_sync(population, listener):
    population.spawn(2)
    population.add_listener(listener)
    population.notify_moved()
    assert listener.events == [("moved", 2)]
    snap = population.snapshot()
    assert [i for i, _, _ in snap] == [0, 1]
    assert snap[1][1:] == (population[1].x, population[1].y)


def test_retire_after_max_recycles(eq, listener):
    pop = Population(eq, cap=5, max_recycles=1, rng=random.Random(3))
    pop.add_listener(listener)
    pop.spawn(2)
    leaving, staying = pop[0], pop[1]
    leaving.y = 5.0

    pop.advance_all(1.0e-4)

    assert leaving.retired
    assert list(pop) == [staying]
    assert pop.retired_total == 1
    assert listener.events[-1] == ("removed", 0)


def test_never_retires_by_default(population):
    population.spawn(1)
    population[0].y = 5.0
    population.advance_all(1.0e-4)
    assert len(population) == 1
    assert population[0].recycles == 1
    assert not population[0].retired


def test_cap_must_be_positive(eq):
    with pytest.raises(ValueError):
        Population(eq, cap=0)


@pytest.mark.parametrize("size_range, x_range", [
    ((0.0, 0.5), None),
    ((-0.1, 0.5), None),
    ((0.6, 0.2), None),
    (None, (0.2, -0.2)),
])
def test_invalid_spawn_ranges_spawn_nothing(population, listener, size_range, x_range):
    population.add_listener(listener)
    with pytest.raises(ValueError):
        population.spawn(5, size_range=size_range, x_range=x_range)
    assert len(population) == 0
    assert listener.events == []
