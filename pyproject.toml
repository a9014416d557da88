[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "openfinite"
version = "0.1.0"
description = "Points and vectors, geometric models, interval meshes, test matrices and tetrahedron quadrature rules for finite element work"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finite element",
    "mesh",
    "interval mesh",
    "quadrature",
    "tetrahedron",
    "laplacian",
    "numerical analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["openfinite*"]

[tool.pytest.ini_options]
addopts = "-ra"
