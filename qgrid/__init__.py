"""Matrices, banded operators, potentials and solvers for grid-based quantum wave simulation."""

__version__ = "0.1.0"

__all__ = [
    "matrix",
    "linalg",
    "diagonals",
    "composition",
    "cases",
    "tridiagonal",
    "potentials",
    "region",
    "qsystem",
]