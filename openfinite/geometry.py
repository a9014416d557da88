"""Points, vectors and small geometric helpers in two and three dimensions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Callable, Union

C = 2.99792458e8
E = 2.718281828459045
PI = 3.14159265358979323846
INF = math.inf
NAN = math.nan

TWO_THIRDS = 2.0 / 3.0
ONE_THIRD = 1.0 / 3.0
EPS = 1e-12


class _Coordinates:
    """Immutable tuple of float coordinates shared by points and vectors."""

    __slots__ = ("_coords",)

    def __init__(self, *coords: Union[float, Iterable[float]]) -> None:
        if len(coords) == 1 and not isinstance(coords[0], Real):
            coords = tuple(coords[0])  # type: ignore[arg-type]
        if not coords:
            raise ValueError(f"{type(self).__name__} needs at least one coordinate")
        self._coords = tuple(float(c) for c in coords)  # type: ignore[arg-type]

    def dimension(self) -> int:
        """Number of coordinates."""
        return len(self._coords)

    @property
    def x(self) -> float:
        return self._coords[0]

    @property
    def y(self) -> float:
        return self._coords[1]

    @property
    def z(self) -> float:
        return self._coords[2]

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, i: int) -> float:
        return self._coords[i]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._coords == other._coords  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._coords))

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._coords)
        return f"{type(self).__name__}({inner})"

    def _zip(self, other: Iterable[float], op: Callable[[float, float], float]) -> tuple:
        other_coords = tuple(other)
        if len(other_coords) != len(self._coords):
            raise ValueError(
                f"dimension mismatch: {len(self._coords)} and {len(other_coords)}"
            )
        return tuple(op(a, b) for a, b in zip(self._coords, other_coords))


class Vector(_Coordinates):
    """A displacement in the plane or in space."""

    __slots__ = ()

    def squared_length(self) -> float:
        return sum(c * c for c in self._coords)

    def dot(self, other: Iterable[float]) -> float:
        return sum(self._zip(other, lambda a, b: a * b))

    def cross(self, other: Iterable[float]) -> Union[float, "Vector"]:
        """Scalar cross product in 2D, vector cross product in 3D."""
        w = tuple(other)
        if len(w) != len(self._coords):
            raise ValueError(f"dimension mismatch: {len(self._coords)} and {len(w)}")
        v = self._coords
        if len(v) == 2:
            return v[0] * w[1] - w[0] * v[1]
        if len(v) == 3:
            return Vector(
                v[1] * w[2] - v[2] * w[1],
                v[2] * w[0] - v[0] * w[2],
                v[0] * w[1] - v[1] * w[0],
            )
        raise ValueError("cross product is defined only in 2 and 3 dimensions")

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._zip(other, lambda a, b: a + b))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._zip(other, lambda a, b: a - b))

    def __neg__(self) -> "Vector":
        return Vector(-c for c in self._coords)

    def __mul__(self, scalar: object) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(float(scalar) * c for c in self._coords)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(c / float(scalar) for c in self._coords)


class Point(_Coordinates):
    """A location in the plane or in space."""

    __slots__ = ()

    def dimension(self) -> int:
        """Number of coordinates of the point."""
        return len(self._coords)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, (Vector, Point)):
            return NotImplemented
        return Point(self._zip(other, lambda a, b: a + b))

    def __sub__(self, other: object) -> Union["Point", Vector]:
        if isinstance(other, Point):
            return Vector(self._zip(other, lambda a, b: a - b))
        if isinstance(other, Vector):
            return Point(self._zip(other, lambda a, b: a - b))
        return NotImplemented

    def __mul__(self, scalar: object) -> "Point":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(float(scalar) * c for c in self._coords)

    __rmul__ = __mul__


def dot(v: Iterable[float], w: Iterable[float]) -> float:
    """Inner product of two vectors."""
    return Vector(v).dot(w)


def cross(v: Iterable[float], w: Iterable[float]) -> Union[float, Vector]:
    """Cross product: a scalar in 2D, a vector in 3D."""
    return Vector(v).cross(w)


def midpoint(p1: Iterable[float], p2: Iterable[float]) -> Point:
    """Point halfway between two points."""
    return Point(Point(p1)._zip(p2, lambda a, b: (a + b) / 2.0))


def barycenter(*points: Iterable[float]) -> Point:
    """Barycenter of three or four points."""
    if len(points) not in (3, 4):
        raise TypeError(f"barycenter takes 3 or 4 points, got {len(points)}")
    coords = [tuple(p) for p in points]
    dim = len(coords[0])
    if any(len(c) != dim for c in coords):
        raise ValueError("all points must have the same dimension")
    n = float(len(coords))
    return Point(sum(column) / n for column in zip(*coords))


def sign(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    return (value > 0) - (value < 0)