"""Geometry, test matrices, geometric models, interval meshes and tetrahedron quadrature."""

__version__ = "0.1.0"