import math

import pytest

from rtscene.vec3 import Vec3


def test_add_and_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_add_and_sub_round_trip():
    a = Vec3(1.0, 2.0, 3.0)
    assert (a + 2.5) - 2.5 == a


def test_scalar_multiply_and_divide_round_trip():
    a = Vec3(1.0, -2.0, 4.0)
    assert (a * 4.0) / 4.0 == a
    assert 4.0 * a == a * 4.0


def test_componentwise_multiply_and_divide_round_trip():
    a = Vec3(3.0, 6.0, 9.0)
    b = Vec3(2.0, 4.0, 8.0)
    assert (a * b) / b == a


def test_negation_is_scaling_by_minus_one():
    a = Vec3(1.0, -2.0, 3.0)
    assert -a == a * -1


def test_iteration_gives_components():
    assert tuple(Vec3(7.0, 8.0, 9.0)) == (7.0, 8.0, 9.0)


def test_dot_value():
    assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32


def test_dot_is_commutative():
    a = Vec3(0.3, -1.2, 2.0)
    b = Vec3(5.0, 0.1, -0.7)
    assert a.dot(b) == pytest.approx(b.dot(a))


def test_cross_of_basis_vectors():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert tuple(b.cross(a)) == pytest.approx(tuple(-c))


def test_length_matches_squared_length():
    a = Vec3(2.0, -3.0, 6.0)
    assert a.length() ** 2 == pytest.approx(a.squared_length())
    assert a.squared_length() == a.dot(a)


def test_normalized_has_unit_length_and_same_direction():
    a = Vec3(3.0, -4.0, 12.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert tuple(n * a.length()) == pytest.approx(tuple(a))


def test_normalized_zero_vector_gives_nan():
    n = Vec3(0.0, 0.0, 0.0).normalized()
    assert [math.isnan(c) for c in n] == [True, True, True]


def test_divide_by_zero_scalar_gives_infinity():
    v = Vec3(1.0, -1.0, 0.0) / 0
    assert v.x == math.inf
    assert v.y == -math.inf
    assert math.isnan(v.z)


def test_reflect_preserves_length_and_is_involution():
    d = Vec3(1.0, -2.0, 0.5)
    n = Vec3(0.0, 1.0, 1.0).normalized()
    r = d.reflect(n)
    assert r.length() == pytest.approx(d.length())
    assert tuple(r.reflect(n)) == pytest.approx(tuple(d))


def test_reflect_flips_normal_component():
    d = Vec3(1.0, -2.0, 0.5)
    n = Vec3(0.0, 1.0, 0.0)
    r = d.reflect(n)
    assert r.dot(n) == pytest.approx(-d.dot(n))
    assert r.x == d.x and r.z == d.z


def test_vectors_are_immutable():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert tuple(v) == (1.0, 2.0, 3.0)