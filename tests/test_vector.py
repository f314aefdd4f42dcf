import math

import pytest

from raytrace.vector import Vector


def test_unit_vectors_match_constants():
    assert Vector.unit(Vector.X) == Vector.I
    assert Vector.unit(Vector.Y) == Vector.J
    assert Vector.unit(Vector.Z) == Vector.K


def test_unit_out_of_range_is_zero():
    assert Vector.unit(7) == Vector()


def test_from_iterable_round_trip():
    v = Vector.from_iterable([1.5, -2.0, 3.25])
    assert v.to_tuple() == (1.5, -2.0, 3.25)
    assert Vector.from_iterable(v.to_tuple()) == v
    assert tuple(v) == v.to_tuple()


@pytest.mark.parametrize("values", [[], [1.0, 2.0], [1.0, 2.0, 3.0, 4.0]])
def test_from_iterable_wrong_length(values):
    with pytest.raises(ValueError):
        Vector.from_iterable(values)


def test_cross_of_basis():
    assert Vector.I.cross(Vector.J) == Vector.K
    assert Vector.J.cross(Vector.K) == Vector.I
    assert Vector.K.cross(Vector.I) == Vector.J
    assert Vector.J.cross(Vector.I) == Vector.unit(Vector.Z).__neg__()
    assert Vector.I ^ Vector.J == Vector.unit(Vector.Z)


def test_cross_is_orthogonal_to_operands():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    c = a ^ b
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c * b == pytest.approx(0.0, abs=1e-12)
    assert a.cross(b) == -(b.cross(a))


def test_dot_is_symmetric_and_matches_sq():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    assert a * b == b * a
    assert a.dot(a) == a.sq()
    assert abs(a) == pytest.approx(math.sqrt(a.sq()))


def test_scalar_operations_round_trip():
    a = Vector(1.0, -2.0, 3.0)
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0
    assert (a + a) - a == a
    assert a + (-a) == Vector()


def test_norm_has_unit_length_and_same_direction():
    a = Vector(3.0, -7.0, 2.0)
    n = a.norm()
    assert abs(n) == pytest.approx(1.0)
    assert (n ^ a).sq() == pytest.approx(0.0, abs=1e-12)
    assert n * a > 0


def test_norm_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector().norm()


def test_indexing_wraps():
    v = Vector(1.0, 2.0, 3.0)
    assert [v[i] for i in range(6)] == [1.0, 2.0, 3.0, 1.0, 2.0, 3.0]


def test_replace_component():
    v = Vector(1.0, 2.0, 3.0)
    assert v.replace_component(1, 9.0) == Vector(1.0, 9.0, 3.0)
    assert v.replace_component(5, 9.0) == Vector(1.0, 2.0, 9.0)
    assert v == Vector(1.0, 2.0, 3.0)


def test_rotate_about_z_quarter_turn():
    r = Vector.I.rotate_on_axis(Vector.Z, 90.0)
    assert r.to_tuple() == pytest.approx(Vector.J.to_tuple(), abs=1e-12)


def test_rotate_preserves_length_and_axis_component():
    v = Vector(1.0, 2.0, 3.0)
    for axis in (Vector.X, Vector.Y, Vector.Z):
        r = v.rotate_on_axis(axis, 37.0)
        assert abs(r) == pytest.approx(abs(v))
        assert r[axis] == v[axis]


def test_rotate_full_turn_is_identity():
    v = Vector(1.0, 2.0, 3.0)
    r = v.rotate_on_axis(Vector.Y, 360.0)
    assert r.to_tuple() == pytest.approx(v.to_tuple())


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        Vector() + 1.0
    with pytest.raises(TypeError):
        Vector() ^ 2.0