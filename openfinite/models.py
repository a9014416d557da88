"""Simple geometric models: their entities and projections onto them."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from openfinite.geometry import Point, Vector, cross, dot


def _oriented_start(points: dict, lines: dict, signed_line: int) -> Point:
    """First point of a line taken with the orientation given by its sign."""
    if signed_line > 0:
        return points[lines[signed_line][0]]
    return points[lines[-signed_line][1]]


def _line_projection(points: dict, lines: dict, eid: int, p: Iterable[float]) -> Point:
    """Orthogonal projection of p onto the line through edge eid."""
    line = lines[eid]
    p0 = points[line[0]]
    p1 = points[line[1]]
    v = p1 - p0
    k = dot(Point(p) - p0, v) / v.squared_length()
    return p0 + k * v


class CubeModel:
    """The unit cube with tagged points, lines, faces and one volume."""

    def __init__(self) -> None:
        self.points: dict[int, Point] = {}
        self.lines: dict[int, list[int]] = {}
        self.faces: dict[int, list[int]] = {}
        self.volumes: dict[int, list[int]] = {}
        self.spheres: dict = {}

        corners = [
            (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0),
            (0.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0),
        ]
        for tag, corner in enumerate(corners, start=1):
            self.add_point(corner, tag)

        edges = [
            (1, 2), (2, 3), (3, 4), (4, 1),
            (5, 6), (6, 7), (7, 8), (8, 5),
            (1, 5), (2, 6), (3, 7), (4, 8),
        ]
        for tag, edge in enumerate(edges, start=1):
            self.add_line(edge, tag)

        faces = [
            (-1, -4, -3, -2), (5, 6, 7, 8), (1, 10, -5, -9),
            (3, 12, -7, -11), (2, 11, -6, -10), (4, 9, -8, -12),
        ]
        for tag, face in enumerate(faces, start=1):
            self.add_face(face, tag)

        self.add_volume((1, 2, 3, 4, 5, 6), 1)

    def add_point(self, point: Iterable[float], tag: int) -> None:
        """Store a point under tag."""
        self.points[tag] = Point(point)

    def add_line(self, line: Iterable[int], tag: int) -> None:
        """Store a line, given by two point tags, under tag."""
        self.lines[tag] = [int(v) for v in line]

    def add_face(self, face: Iterable[int], tag: int) -> None:
        """Store a face, given by signed line tags, under tag."""
        self.faces[tag] = [int(v) for v in face]

    def add_volume(self, volume: Iterable[int], tag: int) -> None:
        """Store a volume, given by face tags, under tag."""
        self.volumes[tag] = [int(v) for v in volume]

    @property
    def sphere_flag(self) -> bool:
        return False

    def _face_frame(self, fid: int) -> tuple:
        face = self.faces[fid]
        p0, p1, p2 = (
            _oriented_start(self.points, self.lines, face[k]) for k in range(3)
        )
        return p0, p1 - p0, p2 - p1

    def project_to_face(self, fid: int, p: Iterable[float]) -> Point:
        """Orthogonal projection of p onto the plane of face fid."""
        p0, v0, v1 = self._face_frame(fid)
        v2 = Point(p) - p0
        a = dot(v0, v0)
        b = dot(v0, v1)
        c = dot(v1, v1)
        f = dot(v2, v0)
        g = dot(v2, v1)
        det = a * c - b * b
        k = (f * c - b * g) / det
        m = (a * g - b * f) / det
        return p0 + k * v0 + m * v1

    def project_to_edge(self, eid: int, p: Iterable[float]) -> Point:
        """Orthogonal projection of p onto the line through edge eid."""
        return _line_projection(self.points, self.lines, eid, p)

    def point_normal(self, fid: int, p: Iterable[float]) -> Vector:
        """Normal of face fid, oriented by the face's line order."""
        _, v0, v1 = self._face_frame(fid)
        return cross(v0, v1)

    def point_tangent(self, eid: int, p: Iterable[float]) -> Vector:
        """Tangent of edge eid, from its first point to its second."""
        line = self.lines[eid]
        return self.points[line[1]] - self.points[line[0]]


class CubeWithSpheresModelHexMesh:
    """Boundary model whose faces lie on the sphere of radius sqrt(3) about the origin."""

    _CENTER = Point(0.0, 0.0, 0.0)

    def project_to_face(self, fid: int, p: Iterable[float]) -> Point:
        """Radial projection of p onto the sphere."""
        r = math.sqrt(3)
        v = Point(p) - self._CENTER
        v = (r / math.sqrt(v.squared_length())) * v
        return self._CENTER + v

    def project_to_edge(self, eid: int, p: Iterable[float]) -> Point:
        """Edges carry no constraint: p is returned unchanged."""
        return Point(p)

    def project_vector_to_face(
        self, fid: int, p: Iterable[float], v: Iterable[float]
    ) -> Vector:
        """Tangential part of v at p on the sphere."""
        n = Point(p) - self._CENTER
        vec = Vector(v)
        return vec - dot(vec, n) * n / n.squared_length()

    def project_vector_to_edge(
        self, eid: int, p: Iterable[float], v: Iterable[float]
    ) -> Vector:
        """Edges carry no constraint: v is returned unchanged."""
        return Vector(v)


@dataclass
class Circle:
    """A circle given by centre and radius."""

    center: Point
    radius: float


class RectangleWithHole:
    """Unit square with a circular hole of radius 0.3 about its centre."""

    def __init__(self) -> None:
        self.points: dict[int, Point] = {}
        self.lines: dict[int, list[int]] = {}
        self.faces: dict[int, list[int]] = {}
        self.volumes: dict[int, list[int]] = {}
        self.circles: dict[int, Circle] = {}

        for tag, corner in enumerate([(0, 0), (1, 0), (1, 1), (0, 1)], start=1):
            self.add_point(corner, tag)
        for tag, edge in enumerate([(1, 2), (2, 3), (3, 4), (4, 1)], start=1):
            self.add_line(edge, tag)
        self.add_circle((0.5, 0.5), 0.3, 5)
        self.add_face((1, 2, 3, 4, -5, -6, -7, -8), 1)

    def add_point(self, point: Iterable[float], tag: int) -> None:
        """Store a point under tag."""
        self.points[tag] = Point(point)

    def add_line(self, line: Iterable[int], tag: int) -> None:
        """Store a line, given by two point tags, under tag."""
        self.lines[tag] = [int(v) for v in line]

    def add_face(self, face: Iterable[int], tag: int) -> None:
        """Store a face, given by signed line tags, under tag."""
        self.faces[tag] = [int(v) for v in face]

    def add_circle(self, center: Iterable[float], radius: float, tag: int) -> None:
        """Store a circle under tag; its four arcs take tags tag..tag+3."""
        self.circles[tag] = Circle(Point(center), float(radius))

    def _circle_of_edge(self, eid: int) -> Circle:
        return self.circles[(eid - 5) // 4 + 5]

    def project_to_edge(self, eid: int, p: Iterable[float]) -> Point:
        """Projection onto a straight side (eid < 5) or onto a circle arc."""
        if eid < 5:
            return _line_projection(self.points, self.lines, eid, p)
        circle = self._circle_of_edge(eid)
        v = Point(p) - circle.center
        v = circle.radius * v / math.sqrt(v.squared_length())
        return circle.center + v

    def project_to_face(self, fid: int, p: Iterable[float]) -> Point:
        """The face is planar: p is returned unchanged."""
        return Point(p)

    def project_vector_to_face(
        self, fid: int, p: Iterable[float], v: Iterable[float]
    ) -> Vector:
        """The face is planar: v is returned unchanged."""
        return Vector(v)

    def project_vector_to_edge(
        self, eid: int, p: Iterable[float], v: Iterable[float]
    ) -> Vector:
        """Part of v tangent to edge eid at p."""
        vec = Vector(v)
        if eid < 5:
            line = self.lines[eid]
            v0 = self.points[line[1]] - self.points[line[0]]
            return dot(vec, v0) * v0 / v0.squared_length()
        circle = self._circle_of_edge(eid)
        v0 = Point(p) - circle.center
        return vec - dot(vec, v0) * v0 / v0.squared_length()