# openfinite

Building blocks for finite element computations in pure Python. No
third-party packages are needed.

- **Geometry** (`openfinite.geometry`): immutable `Point` and `Vector` in two
  or three dimensions, with `dot`, `cross` (a scalar in 2D, a `Vector` in 3D),
  `midpoint`, `barycenter` (of three or four points) and `sign`, plus the
  constants `PI`, `E`, `C`, `INF`, `NAN` and `EPS`.
- **Algebra** (`openfinite.algebra`): `Shape` with `size()` and `reshape()`
  (a single `-1` flattens; a size mismatch raises `ReshapeError`), a dense
  row-major `RMatrix` indexed as `m[i, j]`, the `MatrixType` storage
  enumeration, a `CooMatrix` sparse format with `to_dense()`, and test-matrix
  generators `random_int_matrix`, `laplace_1d`, `laplace_2d` (size must be a
  perfect square) and `laplace_3d` (size must be a perfect cube).
- **Geometry models** (`openfinite.models`): `CubeModel` (the unit cube with
  tagged points, lines, faces and one volume), `CubeWithSpheresModelHexMesh`
  (projection onto the sphere of radius √3 about the origin) and
  `RectangleWithHole` (the unit square with a `Circle` hole of radius 0.3).
  Each projects points, and where relevant vectors, onto faces and edges,
  returning new values.
- **Interval meshes** (`openfinite.interval_mesh`): `IntervalMesh` with
  `insert_node`, `insert_cell`, entity counts, `init_top`, `node_to_cell`
  and `uniform_refine`.
- **Cell types** (`openfinite.cell_type`): `CellType`, the VTK cell type
  numbers as an `IntEnum`.
- **Quadrature** (`openfinite.tet_quadrature`): `TetrahedronQuadrature`,
  symmetric rules of order 1 to 7 on the tetrahedron in barycentric form,
  with `integrate(f, vertices)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from openfinite.algebra import laplace_1d
from openfinite.interval_mesh import IntervalMesh
from openfinite.tet_quadrature import TetrahedronQuadrature

mesh = IntervalMesh()
mesh.insert_node((0.0,))
mesh.insert_node((1.0,))
mesh.insert_cell((0, 1))
mesh.init_top()
mesh.uniform_refine(2)
print(mesh.number_of_nodes(), mesh.number_of_cells())  # 5 4

print(laplace_1d(3).to_dense())
# [[2.0, -1.0, 0.0], [-1.0, 2.0, -1.0], [0.0, -1.0, 2.0]]

rule = TetrahedronQuadrature(4)
h = 0.5
vertices = [(0, 0, 0), (h, 0, 0), (0, h, 0), (0, 0, h)]
print(rule.integrate(lambda p: p[0], vertices))  # h**4 / 24
```

## What it does not do

The package has no two- or three-dimensional mesh types beyond
`IntervalMesh`, no mesh quality measures, no function spaces, and no mesh
file reading or writing: meshes are built in memory only. It also has no
mesh partitioning and no command-line program.