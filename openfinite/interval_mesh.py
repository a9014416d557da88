"""Meshes of intervals: nodes joined by two-node cells."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from openfinite.cell_type import CellType
from openfinite.geometry import Point, midpoint


class IntervalMesh:
    """Mesh whose cells are segments; edges and faces coincide with cells."""

    VTK_CELL_INDEX = (0, 1)

    def __init__(self) -> None:
        self.nodes: list[Point] = []
        self.cells: list[tuple[int, int]] = []
        self._node2cell: list[tuple[int, ...]] | None = None

    def insert_node(self, node: Iterable[float]) -> None:
        """Append a node."""
        self.nodes.append(Point(node))

    def insert_cell(self, cell: Iterable[int]) -> None:
        """Append a cell given by two node indices."""
        c = tuple(int(v) for v in cell)
        if len(c) != 2:
            raise ValueError(f"an interval cell has 2 nodes, got {len(c)}")
        self.cells.append(c)  # type: ignore[arg-type]

    def number_of_nodes(self) -> int:
        return len(self.nodes)

    def number_of_cells(self) -> int:
        return len(self.cells)

    def number_of_edges(self) -> int:
        return len(self.cells)

    def number_of_faces(self) -> int:
        return len(self.cells)

    @staticmethod
    def number_of_nodes_of_each_cell() -> int:
        return 2

    @staticmethod
    def number_of_vertices_of_each_cell() -> int:
        return 2

    def geo_dimension(self) -> int:
        """Dimension of the space the nodes live in."""
        if not self.nodes:
            raise ValueError("the geometric dimension of an empty mesh is unknown")
        return self.nodes[0].dimension()

    def top_dimension(self) -> int:
        return 1

    @property
    def edges(self) -> list[tuple[int, int]]:
        return self.cells

    @property
    def faces(self) -> list[tuple[int, int]]:
        return self.cells

    def vtk_cell_type(self) -> CellType:
        return CellType.LINE

    def vtk_write_cell_index(self) -> tuple[int, int]:
        return self.VTK_CELL_INDEX

    def vtk_read_cell_index(self) -> tuple[int, int]:
        return self.VTK_CELL_INDEX

    def init_top(self) -> None:
        """Build the node-to-cell adjacency."""
        adjacency: list[list[int]] = [[] for _ in self.nodes]
        for i, cell in enumerate(self.cells):
            for v in cell:
                adjacency[v].append(i)
        self._node2cell = [tuple(cells) for cells in adjacency]

    def node_to_cell(self, i: int) -> tuple[int, ...]:
        """Indices of the cells that contain node i."""
        if self._node2cell is None or len(self._node2cell) != len(self.nodes):
            raise RuntimeError("topology is not initialised; call init_top() first")
        return self._node2cell[i]

    def uniform_refine(self, n: int = 1) -> None:
        """Split every cell at its midpoint, n times."""
        for _ in range(n):
            nn = len(self.nodes)
            nc = len(self.cells)
            self.nodes.extend(
                midpoint(self.nodes[a], self.nodes[b]) for a, b in self.cells
            )
            left = [(a, nn + i) for i, (a, _) in enumerate(self.cells)]
            right = [(nn + i, b) for i, (_, b) in enumerate(self.cells)]
            self.cells = left + right
            assert len(self.cells) == 2 * nc
            self.init_top()

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.cells)

    def __str__(self) -> str:
        lines = ["Nodes:"]
        lines += [f"{i}: " + " ".join(f"{c:g}" for c in p) for i, p in enumerate(self.nodes)]
        lines.append("Cells:")
        lines += [f"{i}: " + " ".join(str(v) for v in c) for i, c in enumerate(self.cells)]
        return "\n".join(lines)