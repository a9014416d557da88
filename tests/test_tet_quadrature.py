import pytest

from openfinite.geometry import Point
from openfinite.tet_quadrature import TetrahedronQuadrature


def _corner_tet(h):
    return [(0, 0, 0), (h, 0, 0), (0, h, 0), (0, 0, h)]


def test_integral_of_x_matches_source_case():
    h = 0.5
    quad = TetrahedronQuadrature(4)
    val = quad.integrate(lambda p: p[0], _corner_tet(h))
    assert abs(val - h ** 5 / 12.0) < 1e-10


@pytest.mark.parametrize("q", range(1, 8))
def test_integral_of_x_every_order(q):
    h = 0.5
    val = TetrahedronQuadrature(q).integrate(lambda p: p[0], _corner_tet(h))
    assert val == pytest.approx(h ** 5 / 12.0, abs=1e-10)


@pytest.mark.parametrize(
    "q, expected",
    [(1, 1 / 24), (2, 1 / 60), (3, 1 / 120), (4, 1 / 210),
     (5, 1 / 336), (6, 1 / 504), (7, 1 / 720)],
)
def test_monomial_exactness_on_unit_tet(q, expected):
    val = TetrahedronQuadrature(q).integrate(lambda p: p[0] ** q, _corner_tet(1.0))
    assert val == pytest.approx(expected, rel=1e-8)


@pytest.mark.parametrize(
    "q, count", [(1, 1), (2, 4), (3, 10), (4, 20), (5, 35), (6, 56), (7, 84)]
)
def test_number_of_points(q, count):
    quad = TetrahedronQuadrature(q)
    assert quad.number_of_quadrature_points() == count
    assert len(quad) == count


@pytest.mark.parametrize("q", range(1, 8))
def test_weights_sum_to_one(q):
    quad = TetrahedronQuadrature(q)
    total = sum(quad.quadrature_weight(i) for i in range(quad.number_of_quadrature_points()))
    assert total == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("q", range(1, 8))
def test_points_are_barycentric(q):
    quad = TetrahedronQuadrature(q)
    for i in range(quad.number_of_quadrature_points()):
        lam = quad.quadrature_point(i)
        assert len(lam) == 4
        assert sum(lam) == pytest.approx(1.0, abs=1e-9)
        assert all(0.0 < c < 1.0 for c in lam)


def test_first_order_point_is_centroid():
    quad = TetrahedronQuadrature(1)
    assert quad.quadrature_point(0) == (0.25, 0.25, 0.25, 0.25)
    assert quad.quadrature_weight(0) == 1.0


def test_constant_gives_volume_of_unit_cube_corner():
    val = TetrahedronQuadrature(3).integrate(lambda p: 1.0, _corner_tet(2.0))
    assert val == pytest.approx(8.0 / 6.0)


def test_orientation_does_not_change_sign():
    verts = _corner_tet(1.0)
    swapped = [verts[0], verts[2], verts[1], verts[3]]
    quad = TetrahedronQuadrature(2)
    a = quad.integrate(lambda p: p[1], verts)
    b = quad.integrate(lambda p: p[1], swapped)
    assert a == pytest.approx(b)
    assert a == pytest.approx(1 / 24)


def test_integrand_receives_points():
    seen = []
    TetrahedronQuadrature(2).integrate(lambda p: seen.append(p) or 0.0, _corner_tet(1.0))
    assert len(seen) == 4
    assert all(isinstance(p, Point) and p.dimension() == 3 for p in seen)


@pytest.mark.parametrize("q", [0, 8, -1])
def test_invalid_order(q):
    with pytest.raises(ValueError):
        TetrahedronQuadrature(q)


def test_wrong_vertex_count():
    with pytest.raises(ValueError):
        TetrahedronQuadrature(1).integrate(lambda p: 1.0, [(0, 0, 0), (1, 0, 0), (0, 1, 0)])


def test_point_index_out_of_range():
    with pytest.raises(IndexError):
        TetrahedronQuadrature(1).quadrature_point(1)