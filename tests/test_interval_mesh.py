import pytest

from openfinite.cell_type import CellType
from openfinite.geometry import Point
from openfinite.interval_mesh import IntervalMesh


def _unit_mesh():
    mesh = IntervalMesh()
    mesh.insert_node((0.0,))
    mesh.insert_node((1.0,))
    mesh.insert_cell((0, 1))
    mesh.init_top()
    return mesh


def _length(mesh):
    return sum(abs(mesh.nodes[b][0] - mesh.nodes[a][0]) for a, b in mesh.cells)


def test_counts_and_dimensions():
    mesh = _unit_mesh()
    assert mesh.number_of_nodes() == 2
    assert mesh.number_of_cells() == 1
    assert mesh.number_of_edges() == mesh.number_of_cells()
    assert mesh.number_of_faces() == mesh.number_of_cells()
    assert mesh.geo_dimension() == 1
    assert mesh.top_dimension() == 1
    assert mesh.number_of_nodes_of_each_cell() == 2


def test_vtk_cell_type_is_line():
    assert _unit_mesh().vtk_cell_type() is CellType.LINE


def test_geo_dimension_of_empty_mesh_raises():
    with pytest.raises(ValueError):
        IntervalMesh().geo_dimension()


def test_insert_cell_with_wrong_arity_raises():
    with pytest.raises(ValueError):
        IntervalMesh().insert_cell((0, 1, 2))


def test_node_to_cell_before_init_raises():
    mesh = IntervalMesh()
    mesh.insert_node((0.0,))
    with pytest.raises(RuntimeError):
        mesh.node_to_cell(0)


def test_single_refine_splits_at_midpoint():
    mesh = _unit_mesh()
    mesh.uniform_refine(1)
    assert mesh.number_of_nodes() == 3
    assert mesh.number_of_cells() == 2
    assert mesh.nodes[2] == Point(0.5)
    assert mesh.cells == [(0, 2), (2, 1)]


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_refine_counts_and_length(n):
    mesh = _unit_mesh()
    mesh.uniform_refine(n)
    assert mesh.number_of_cells() == 2 ** n
    assert mesh.number_of_nodes() == 2 ** n + 1
    assert _length(mesh) == pytest.approx(1.0)


def test_node_to_cell_after_refine():
    mesh = _unit_mesh()
    mesh.uniform_refine(2)
    interior = [i for i in range(mesh.number_of_nodes()) if i not in (0, 1)]
    for i in interior:
        cells = mesh.node_to_cell(i)
        assert len(cells) == 2
        assert all(i in mesh.cells[c] for c in cells)
    assert len(mesh.node_to_cell(0)) == 1
    assert len(mesh.node_to_cell(1)) == 1


def test_refine_in_two_dimensions_keeps_points_on_segment():
    mesh = IntervalMesh()
    mesh.insert_node((0.0, 0.0))
    mesh.insert_node((2.0, 4.0))
    mesh.insert_cell((0, 1))
    mesh.init_top()
    mesh.uniform_refine(2)
    assert mesh.geo_dimension() == 2
    for p in mesh.nodes:
        assert p[1] == pytest.approx(2.0 * p[0])