import math

import pytest

from asciicraft.vector import EYE_HEIGHT, PosView, Vector, ViewAngles, initial_pos_view


def test_add_componentwise():
    assert Vector(1, 2, 3) + Vector(4, 5, 6) == Vector(1 + 4, 2 + 5, 3 + 6)


def test_sub_inverts_add():
    a = Vector(1.5, -2.0, 3.25)
    b = Vector(0.5, 4.0, -1.0)
    result = (a + b) - b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)
    assert result.z == pytest.approx(a.z)


def test_sub_of_self_is_zero():
    v = Vector(2, 3, 4)
    assert v - v == Vector(0, 0, 0)


def test_scale_multiplies_each_component():
    assert Vector(1, -2, 3).scale(2) == Vector(2, -4, 6)


def test_scale_by_zero():
    assert Vector(7, 8, 9).scale(0) == Vector(0, 0, 0)


@pytest.mark.parametrize("v", [Vector(3, 4, 0), Vector(1, 1, 1), Vector(-2, 0.5, 9)])
def test_normalized_has_unit_length(v):
    n = v.normalized()
    assert math.sqrt(n.x ** 2 + n.y ** 2 + n.z ** 2) == pytest.approx(1.0)


def test_normalized_keeps_direction():
    v = Vector(0, 0, 5)
    assert v.normalized() == Vector(0, 0, 1)


def test_normalized_zero_raises():
    with pytest.raises(ValueError):
        Vector(0, 0, 0).normalized()


def test_vectors_are_immutable():
    v = Vector(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v == Vector(1, 2, 3)
    assert v.x == 1


def test_straight_ahead_points_along_x():
    v = ViewAngles(0, 0).to_vector()
    assert v == Vector(1, 0, 0)


def test_heading_quarter_turn_points_along_y():
    v = ViewAngles(0, math.pi / 2).to_vector()
    assert v.x == pytest.approx(0, abs=1e-12)
    assert v.y == pytest.approx(1)
    assert v.z == pytest.approx(0, abs=1e-12)


@pytest.mark.parametrize("psi, phi", [(0.3, 1.2), (-0.7, 2.5), (1.0, -0.4)])
def test_to_vector_is_unit(psi, phi):
    v = ViewAngles(psi, phi).to_vector()
    assert v.x ** 2 + v.y ** 2 + v.z ** 2 == pytest.approx(1.0)
    assert v.z == pytest.approx(math.sin(psi))


def test_initial_pos_view():
    pv = initial_pos_view()
    assert pv.pos == Vector(5, 5, 4 + EYE_HEIGHT)
    assert pv.view == ViewAngles(0, 0)


def test_initial_pos_view_is_fresh_each_time():
    a = initial_pos_view()
    b = initial_pos_view()
    a.pos = Vector(0, 0, 0)
    assert b.pos == Vector(5, 5, 4 + EYE_HEIGHT)


def test_posview_defaults():
    pv = PosView()
    assert pv.pos == Vector(0, 0, 0)
    assert pv.view == ViewAngles(0, 0)