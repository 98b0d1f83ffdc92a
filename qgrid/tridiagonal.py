"""Direct solver for tridiagonal linear systems."""

from __future__ import annotations

from typing import Any, Iterable, List


def solve_tridiagonal(a: Any, x: Iterable[Any]) -> List[Any]:
    """Solve ``a * s = x`` assuming ``a`` is tridiagonal.

    ``a`` is any operator exposing ``at(i, j)``; only its three central
    diagonals are read. Runs in linear time without pivoting.
    """
    values = list(x)
    n = len(values)
    if n == 0:
        raise ValueError("cannot solve an empty system")

    diag = [a.at(0, 0)]
    for i in range(1, n):
        pivot = a.at(i, i - 1) / diag[i - 1]
        values[i] -= values[i - 1] * pivot
        diag.append(a.at(i, i) - a.at(i - 1, i) * pivot)

    for i in range(n - 1, 0, -1):
        values[i] /= diag[i]
        values[i - 1] -= a.at(i - 1, i) * values[i]

    values[0] /= diag[0]
    return values