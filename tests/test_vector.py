import math

import pytest

from floodforge.vector import Vector2, Vector3


def test_add_then_subtract_roundtrips():
    a = Vector2(1.5, -2.25)
    b = Vector2(3.0, 7.5)
    assert (a + b) - b == a


def test_scalar_multiplication_commutes_and_matches_addition():
    a = Vector2(2.0, -3.0)
    assert 2 * a == a * 2
    assert a * 2 == a + a


def test_division_inverts_multiplication():
    a = Vector2(1.25, -8.5)
    assert (a * 4) / 4 == a
    b = Vector2(2.0, 4.0)
    assert (a * b) / b == a


def test_negation():
    a = Vector2(3.0, -1.0)
    assert -a + a == Vector2(0.0, 0.0)


def test_distance_properties():
    a = Vector2(1.0, 2.0)
    b = Vector2(-4.0, 6.0)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(a) == 0.0
    assert Vector2(0, 0).distance_to(Vector2(3, 4)) == pytest.approx(5.0)


def test_rounded_half_away_from_zero():
    assert Vector2(2.5, -2.5).rounded() == Vector2(3.0, -3.0)


def test_rounded_is_idempotent():
    v = Vector2(1.49, -7.51).rounded()
    assert v.rounded() == v


def test_componentwise_min_max():
    a = Vector2(1.0, 9.0)
    b = Vector2(4.0, -2.0)
    assert Vector2.componentwise_min(a, b) == Vector2(1.0, -2.0)
    assert Vector2.componentwise_max(a, b) == Vector2(4.0, 9.0)


def test_str_format():
    assert str(Vector2(1, 2)) == "(1, 2)"
    assert str(Vector3(1, 2, 3)) == "(1, 2, 3)"


def test_iteration_unpacks():
    x, y = Vector2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)


def test_vector3_length_squared_matches_dot():
    v = Vector3(1.0, -2.0, 3.5)
    assert v.length_squared() == pytest.approx(v.dot(v))
    assert v.length() == pytest.approx(math.sqrt(v.dot(v)))


def test_vector3_normalized_has_unit_length():
    v = Vector3(3.0, -7.0, 2.0).normalized()
    assert v.length() == pytest.approx(1.0)


def test_vector3_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == Vector3(-c.x, -c.y, -c.z)


def test_vector3_cross_of_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_vector3_arithmetic_roundtrip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, -0.5, 4.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert 3 * a == a * 3


def test_normalizing_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalized()