import pytest

from openfinite.geometry import (
    Point,
    Vector,
    barycenter,
    cross,
    dot,
    midpoint,
    sign,
)


def test_point_difference_is_vector_and_round_trips():
    p = Point(1.0, 2.0)
    q = Point(4.0, 6.0)
    v = q - p
    assert isinstance(v, Vector)
    assert p + v == q
    assert q - v == p


def test_vector_arithmetic_round_trips():
    v = Vector(1.5, -2.0, 0.25)
    w = Vector(0.5, 4.0, -1.0)
    assert (v + w) - w == v
    assert 2 * v == v + v
    assert v * 2 == 2 * v
    assert (v / 2) * 2 == v
    assert -v + v == Vector(0.0, 0.0, 0.0)


def test_squared_length_matches_dot():
    v = Vector(3.0, -7.0)
    assert v.squared_length() == dot(v, v)
    assert v.squared_length() == v.dot(v)


def test_dot_is_symmetric():
    v = Vector(1.0, 2.0, 3.0)
    w = Vector(-4.0, 0.5, 2.0)
    assert dot(v, w) == dot(w, v)
    assert v.dot(w) == dot(v, w)


def test_cross_2d_antisymmetric():
    v = Vector(1.0, 2.0)
    w = Vector(-3.0, 5.0)
    assert cross(v, w) == -cross(w, v)
    assert cross(v, v) == 0.0
    assert v.cross(w) == cross(v, w)


def test_cross_3d_is_perpendicular():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 4.0)
    n = cross(a, b)
    assert isinstance(n, Vector)
    assert dot(n, a) == pytest.approx(0.0)
    assert dot(n, b) == pytest.approx(0.0)


def test_cross_of_unit_axes():
    ex = Vector(1.0, 0.0, 0.0)
    ey = Vector(0.0, 1.0, 0.0)
    assert cross(ex, ey) == Vector(0.0, 0.0, 1.0)


def test_midpoint_is_equidistant():
    p1 = Point(0.0, 1.0, 2.0)
    p2 = Point(3.0, -5.0, 8.0)
    m = midpoint(p1, p2)
    assert m - p1 == p2 - m


def test_barycenter_of_three_and_four_points():
    for pts in (
        (Point(0.0, 0.0), Point(3.0, 0.0), Point(0.0, 6.0)),
        (Point(0.0, 0.0, 0.0), Point(4.0, 0.0, 0.0), Point(0.0, 4.0, 0.0), Point(0.0, 0.0, 8.0)),
    ):
        g = barycenter(*pts)
        total = sum((p - g for p in pts), Vector([0.0] * g.dimension()))
        assert total.squared_length() == pytest.approx(0.0)


def test_barycenter_rejects_wrong_count():
    with pytest.raises(TypeError):
        barycenter(Point(0.0, 0.0), Point(1.0, 1.0))


def test_sign_invariant():
    for value in (-2.5, -1e-9, 3.0, 7):
        assert sign(value) * abs(value) == value
    assert sign(0.0) == 0


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Point(1.0, 2.0) - Point(0.0, 0.0, 0.0)


def test_point_construction_from_iterable():
    assert Point([1.0, 2.0, 3.0]) == Point(1.0, 2.0, 3.0)
    assert Point(1.0, 2.0, 3.0).dimension() == 3
    assert Point(1.0, 2.0).dimension() == 2
    assert Point(1.0, 2.0).y == 2.0