[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qgrid"
version = "0.1.0"
description = "Building blocks for grid-based quantum wave simulation: matrices, banded operators, potentials and solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "schrodinger", "simulation", "tridiagonal", "linear-algebra", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["qgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
