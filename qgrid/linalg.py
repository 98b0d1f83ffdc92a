"""LU decomposition, triangular solvers and element-wise matrix helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product
from typing import Any, Iterable, List, Sequence, Tuple, Union

from qgrid.matrix import Matrix, MatrixBase, SquareMatrix

MatrixLike = Union[MatrixBase, Iterable[Sequence[Any]]]


def _rows_of(a: MatrixLike) -> list:
    if isinstance(a, MatrixBase):
        return a.to_lists()
    return [list(row) for row in a]


def _as_square(a: MatrixLike) -> SquareMatrix:
    """An independent square copy of ``a``; raises ValueError if it is not square."""
    return SquareMatrix.from_rows(_rows_of(a))


def _as_matrix(a: MatrixLike) -> MatrixBase:
    if isinstance(a, MatrixBase):
        return a
    return Matrix.from_rows(a)


@dataclass
class LUResult:
    """Outcome of an LU decomposition with partial pivoting.

    ``pivots`` lists the row exchanges ``(k, r)`` in the order they were
    applied, so that applying them to the rows of the input gives
    ``lower * upper``.
    """

    lower: SquareMatrix
    upper: SquareMatrix
    pivots: List[Tuple[int, int]] = field(default_factory=list)


def argmax(m: MatrixBase) -> Tuple[int, int]:
    """Row and column of the first largest element of ``m``."""
    rows, cols = m.shape
    return max(product(range(rows), range(cols)), key=lambda ij: m.at(*ij))


def elementwise_abs(m: MatrixBase) -> MatrixBase:
    """A copy of ``m`` holding the absolute value of every element."""
    return m.transform(abs)


def conjugate(m: MatrixBase) -> MatrixBase:
    """A copy of ``m`` holding the complex conjugate of every element."""
    return m.transform(lambda value: value.conjugate())


def lu_decomposition(a: MatrixLike) -> LUResult:
    """Decompose the square matrix ``a`` into unit-lower and upper factors."""
    upper = _as_square(a)
    n = upper.shape[0]
    lower = SquareMatrix.eye(n)
    pivots: List[Tuple[int, int]] = []

    for k in range(n - 1):
        column = elementwise_abs(upper.get_column(k, (k, n)))
        r = argmax(column)[0] + k
        if r != k:
            upper.swap_rows(k, r)
            pivots.append((k, r))
            if k > 0:
                lower.swap_rows(k, r, (0, k))

        pivot = upper[k, k]
        for i in range(k + 1, n):
            factor = upper[i, k] / pivot
            lower[i, k] = factor
            for j in range(k, n):
                upper[i, j] -= factor * upper[k, j]

    return LUResult(lower, upper, pivots)


def solve_lower(lower: MatrixBase, y: Sequence[Any]) -> list:
    """Forward substitution for a lower triangular system ``lower * x = y``."""
    n = lower.shape[0]
    x = list(y)
    if len(x) != n:
        raise ValueError(f"vector of length {len(x)} does not match size {n}")
    for k in range(n - 1):
        x[k] = x[k] / lower.at(k, k)
        for i in range(k + 1, n):
            x[i] -= x[k] * lower.at(i, k)
    x[n - 1] /= lower.at(n - 1, n - 1)
    return x


def solve_upper(upper: MatrixBase, x: Sequence[Any]) -> list:
    """Back substitution for an upper triangular system ``upper * s = x``."""
    n = upper.shape[0]
    s = list(x)
    if len(s) != n:
        raise ValueError(f"vector of length {len(s)} does not match size {n}")
    for k in range(n - 1, 0, -1):
        s[k] = s[k] / upper.at(k, k)
        for i in range(k - 1, -1, -1):
            s[i] -= s[k] * upper.at(i, k)
    s[0] /= upper.at(0, 0)
    return s


def solve(a: MatrixLike, b: Sequence[Any]) -> list:
    """Solve ``a * s = b`` through an LU decomposition of ``a``."""
    lu = lu_decomposition(a)
    rhs = list(b)
    if len(rhs) != lu.upper.shape[0]:
        raise ValueError(
            f"vector of length {len(rhs)} does not match size {lu.upper.shape[0]}"
        )
    for k, r in lu.pivots:
        rhs[k], rhs[r] = rhs[r], rhs[k]
    return solve_upper(lu.upper, solve_lower(lu.lower, rhs))


def matvec(a: MatrixLike, x: Sequence[Any]) -> list:
    """The product of the matrix ``a`` with the vector ``x``."""
    m = _as_matrix(a)
    rows, cols = m.shape
    values = list(x)
    if cols != len(values):
        raise ValueError(f"invalid vector length {len(values)} for {cols} columns")
    return [sum((m.at(i, j) * values[j] for j in range(cols)), 0) for i in range(rows)]