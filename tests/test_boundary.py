from types import SimpleNamespace

import pytest

from physics import ChannelWalls


def bubble_at(x, y=0.5, u=0.3, v=0.8):
    return SimpleNamespace(x=x, y=y, u=u, v=v)


@pytest.fixture
def walls():
    return ChannelWalls(-0.25, 0.25, 1.2)


def test_reflects_off_left_wall_then_idempotent(walls):
    b = bubble_at(-0.26)
    walls.apply(b)
    assert b.x == pytest.approx(-0.24)
    assert b.u == pytest.approx(-0.3)

    before = (b.x, b.y, b.u, b.v)
    walls.apply(b)
    assert (b.x, b.y, b.u, b.v) == before


def test_reflects_off_right_wall(walls):
    b = bubble_at(0.27, u=0.5)
    walls.apply(b)
    assert b.x == pytest.approx(0.23)
    assert b.u == pytest.approx(-0.5)


def test_right_wall_owns_its_boundary(walls):
    b = bubble_at(0.25, u=0.1)
    walls.apply(b)
    assert b.x == pytest.approx(0.25)
    assert b.u == pytest.approx(-0.1)


def test_top_recycle_keeps_horizontal_state(walls):
    b = bubble_at(0.1, y=1.25, u=0.02, v=0.9)
    assert walls.apply(b) is True
    assert b.y == 0.0
    assert (b.x, b.u, b.v) == (0.1, 0.02, 0.9)


def test_inside_domain_untouched(walls):
    b = bubble_at(0.0, y=0.3)
    assert walls.apply(b) is False
    assert (b.x, b.y, b.u, b.v) == (0.0, 0.3, 0.3, 0.8)


@pytest.mark.parametrize("args", [(0.25, -0.25, 1.2), (0.0, 0.0, 1.0), (-0.25, 0.25, 0.0)])
def test_invalid_bounds_rejected(args):
    with pytest.raises(ValueError):
        ChannelWalls(*args)
