"""Array shapes, dense row-major matrices and test-matrix factories."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional


class ReshapeError(ValueError):
    """Raised when a shape cannot be changed to the requested one."""


class Shape:
    """Dimensions of an array."""

    def __init__(self, *dims: int) -> None:
        self._dims = [int(d) for d in dims] if dims else [0]

    def size(self) -> int:
        """Number of elements covered by the shape."""
        return math.prod(self._dims)

    def reshape(self, *dims: int) -> None:
        """Change the dimensions, keeping the size; a single -1 flattens."""
        if not dims:
            raise ReshapeError("reshape needs at least one dimension")
        total = self.size()
        if len(dims) == 1 and dims[0] == -1:
            self._dims = [total]
            return
        if math.prod(dims) != total:
            target = ",".join(str(d) for d in dims)
            raise ReshapeError(
                f"cannot reshape array of size {total} into shape ({target},)"
            )
        self._dims = [int(d) for d in dims]

    def __getitem__(self, i: int) -> int:
        return self._dims[i]

    def __setitem__(self, i: int, value: int) -> None:
        self._dims[i] = int(value)

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._dims == other._dims

    def __str__(self) -> str:
        return "(" + "".join(f"{d}," for d in self._dims) + ")"

    def __repr__(self) -> str:
        return f"Shape{tuple(self._dims)}"


class RMatrix:
    """Dense row-major matrix of floats."""

    def __init__(self, rows: int, cols: int, value: float = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.shape = (rows, cols)
        self._data = [float(value)] * (rows * cols)

    @property
    def size(self) -> int:
        return len(self._data)

    def fill(self, value: float) -> None:
        """Set every entry to value."""
        self._data = [float(value)] * len(self._data)

    def _offset(self, key: tuple) -> int:
        i, j = key
        rows, cols = self.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"index ({i}, {j}) out of range for shape {self.shape}")
        return i * cols + j

    def __getitem__(self, key: tuple) -> float:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple, value: float) -> None:
        self._data[self._offset(key)] = float(value)

    def rows(self) -> list:
        """Entries as a list of row lists."""
        cols = self.shape[1]
        return [self._data[r * cols:(r + 1) * cols] for r in range(self.shape[0])]

    def __str__(self) -> str:
        lines = [f"RMatrix({self.shape[0]},{self.shape[1]}):"]
        lines.extend("".join(f"{v:g} " for v in row) for row in self.rows())
        return "\n".join(lines) + "\n\n"


class MatrixType(IntEnum):
    """Storage layouts of a matrix."""

    F = 0
    FR = 1
    FC = 2
    CSR = 3
    CSC = 4
    COO = 5
    BSR = 6
    BSC = 7


@dataclass
class CooMatrix:
    """Sparse matrix in coordinate form."""

    shape: tuple
    row: list = field(default_factory=list)
    col: list = field(default_factory=list)
    data: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (len(self.row) == len(self.col) == len(self.data)):
            raise ValueError("row, col and data must have the same length")

    @property
    def nnz(self) -> int:
        return len(self.data)

    def to_dense(self) -> list:
        """Dense list of rows; duplicate entries are summed."""
        rows, cols = self.shape
        dense = [[0.0] * cols for _ in range(rows)]
        for r, c, v in zip(self.row, self.col, self.data):
            dense[r][c] += v
        return dense


def random_int_matrix(
    rows: int, cols: int, low: int = 0, upper: int = 10, seed: Optional[int] = 0
) -> RMatrix:
    """Matrix of random integers in [low, upper); seed 0 or None seeds from the clock."""
    if upper <= low:
        raise ValueError("upper must be greater than low")
    rng = random.Random() if not seed else random.Random(seed)
    m = RMatrix(rows, cols)
    for i in range(rows):
        for j in range(cols):
            m[i, j] = rng.randrange(low, upper)
    return m


def _symmetric_pairs(pairs: list) -> tuple:
    rows: list = []
    cols: list = []
    for a, b in pairs:
        rows.extend((a, b))
        cols.extend((b, a))
    return rows, cols


def laplace_1d(n: int) -> CooMatrix:
    """Second-difference matrix of order n: 2 on the diagonal, -1 beside it."""
    if n < 1:
        raise ValueError("n must be positive")
    diag = list(range(n))
    upper_rows = list(range(n - 1))
    upper_cols = [i + 1 for i in range(n - 1)]
    row = diag + upper_rows + upper_cols
    col = diag + upper_cols + upper_rows
    data = [2.0] * n + [-1.0] * (2 * (n - 1))
    return CooMatrix((n, n), row, col, data)


def laplace_2d(size: int) -> CooMatrix:
    """Five-point Laplacian on an n-by-n grid with n*n == size."""
    n = math.isqrt(size) if size > 0 else 0
    if n < 1 or n * n != size:
        raise ValueError(f"size {size} is not a positive perfect square")
    pairs = [(i * n + j, i * n + j + 1) for i in range(n) for j in range(n - 1)]
    pairs += [(i * n + j, i * n + j + n) for j in range(n) for i in range(n - 1)]
    off_rows, off_cols = _symmetric_pairs(pairs)
    row = list(range(size)) + off_rows
    col = list(range(size)) + off_cols
    data = [4.0] * size + [-1.0] * len(off_rows)
    return CooMatrix((size, size), row, col, data)


def _cube_root(m: int) -> int:
    n = round(m ** (1.0 / 3.0))
    for candidate in (n - 1, n, n + 1):
        if candidate > 0 and candidate ** 3 == m:
            return candidate
    raise ValueError(f"size {m} is not a positive perfect cube")


def laplace_3d(size: int) -> CooMatrix:
    """Seven-point Laplacian on an n*n*n grid; node (i, j, k) is i*n*n + j*n + k."""
    if size < 1:
        raise ValueError(f"size {size} is not a positive perfect cube")
    n = _cube_root(size)
    pairs = []
    for i in range(n):
        for j in range(n):
            for k in range(n - 1):
                p = i * n * n + j * n + k
                pairs.append((p, p + 1))
        for k in range(n):
            for j in range(n - 1):
                p = i * n * n + j * n + k
                pairs.append((p, p + n))
    for j in range(n):
        for k in range(n):
            for i in range(n - 1):
                p = i * n * n + j * n + k
                pairs.append((p, p + n * n))
    off_rows, off_cols = _symmetric_pairs(pairs)
    row = list(range(size)) + off_rows
    col = list(range(size)) + off_cols
    data = [6.0] * size + [-1.0] * len(off_rows)
    return CooMatrix((size, size), row, col, data)