import math

import pytest

from vector_bloom.point import InvalidGeometryError, Point


def test_magnitude_and_normalize_are_consistent():
    p = Point(3, 4)
    assert p.magnitude() == 5

    p.normalize()
    assert math.isclose(p.magnitude(), 1.0)
    assert math.isclose(p.x, 0.6) and math.isclose(p.y, 0.8)

    again = p.copy().normalize()
    assert math.isclose(again.x, p.x) and math.isclose(again.y, p.y)


def test_normalize_zero_vector_raises():
    with pytest.raises(InvalidGeometryError):
        Point().normalize()


def test_unit_leaves_original_untouched():
    p = Point(0, -2)
    u = p.unit()
    assert u == Point(0, -1)
    assert p == Point(0, -2)


def test_chained_operations_run_in_order():
    a = Point(10, 0)
    b = Point(4, 0)
    result = Point().set(a).subtract(b).normalize().scale(3)
    assert result == Point(3, 0)


def test_set_and_arithmetic_accept_raw_numbers():
    p = Point().set(1, 2).add(3, 4).subtract(1, 1)
    assert p.as_tuple() == (3.0, 5.0)
    with pytest.raises(TypeError):
        p.add(1)


@pytest.mark.parametrize(
    'x, y, expected',
    [(1, 0, 0.0), (0, 1, math.pi / 2), (-1, 0, math.pi), (0, -1, 3 * math.pi / 2)],
)
def test_angle_is_in_full_turn(x, y, expected):
    assert math.isclose(Point(x, y).angle(), expected)


def test_distances():
    p = Point(1, 1)
    assert p.distance_from(Point(4, 5)) == 5
    assert p.squared_distance_from(4, 5) == 25


def test_direction_points_from_argument_to_self():
    d = Point(0, 10).direction(Point(0, 0))
    assert d == Point(0, 1)
    with pytest.raises(InvalidGeometryError):
        Point(1, 1).direction(Point(1, 1))


def test_mid_point_returns_new_point():
    p = Point(0, 0)
    mid = p.mid_point(Point(2, 4))
    assert mid == Point(1, 2)
    assert p == Point(0, 0)
    assert Point(1, 1).mid_point(3, 3) == Point(2, 2)


def test_rotate_about_uses_screen_orientation():
    p = Point(1, 0).rotate_about(Point(0, 0), math.pi / 2)
    assert math.isclose(p.x, 0.0, abs_tol=1e-12)
    assert math.isclose(p.y, -1.0)

    q = Point(2, 1).rotate_about(Point(1, 1), math.pi)
    assert math.isclose(q.x, 0.0, abs_tol=1e-12)
    assert math.isclose(q.y, 1.0)


def test_compute_center():
    center = Point.compute_center([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
    assert center == Point(1, 1)
    with pytest.raises(InvalidGeometryError):
        Point.compute_center([])


def test_is_same_is_exact():
    assert Point(0.1 + 0.2, 0).is_same(Point(0.1 + 0.2, 0))
    assert not Point(0.1 + 0.2, 0).is_same(Point(0.3, 0))
