import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from qgrid.composition import Composition
from qgrid.diagonals import make_diagonals
from qgrid.linalg import matvec, solve
from qgrid.matrix import SquareMatrix
from qgrid.tridiagonal import solve_tridiagonal


def _tridiagonal(lower, main, upper):
    n = len(main)
    rows = [[0.0] * n for _ in range(n)]
    for i in range(n):
        rows[i][i] = main[i]
        if i > 0:
            rows[i][i - 1] = lower[i - 1]
        if i < n - 1:
            rows[i][i + 1] = upper[i]
    return SquareMatrix.from_rows(rows)


def test_known_solution():
    a = SquareMatrix.from_rows([[4, 1, 0], [1, 4, 1], [0, 1, 4]])
    assert solve_tridiagonal(a, [5, 6, 5]) == pytest.approx([1, 1, 1])


def test_single_element():
    a = SquareMatrix.from_rows([[3]])
    assert solve_tridiagonal(a, [6]) == pytest.approx([2])


def test_agrees_with_lu_solver():
    a = SquareMatrix.from_rows([[2, -1, 0, 0], [-1, 2, -1, 0], [0, -1, 2, -1], [0, 0, -1, 2]])
    b = [1.0, 0.0, 2.0, -1.0]
    assert solve_tridiagonal(a, b) == pytest.approx(solve(a, b))


def test_does_not_modify_input():
    a = SquareMatrix.from_rows([[4, 1], [1, 4]])
    b = [1.0, 2.0]
    solve_tridiagonal(a, b)
    assert b == [1.0, 2.0]


def test_with_banded_operator():
    op = make_diagonals((-1, 1.0), (0, 4.0), (1, -1.0))
    b = [1.0, 2.0, 3.0, 4.0, 5.0]
    s = solve_tridiagonal(op, b)
    assert op * s == pytest.approx(b)


def test_complex_composition():
    laplace = make_diagonals((-1, 1.0), (0, -2.0), (1, 1.0))
    op = Composition(1.0, laplace * 0.3j)
    b = [1.0, 1j, 0.5, -1.0]
    s = solve_tridiagonal(op, b)
    assert op * s == pytest.approx(b)


def test_empty_vector_rejected():
    with pytest.raises(ValueError):
        solve_tridiagonal(SquareMatrix(1), [])


_coef = st.floats(min_value=-1.0, max_value=1.0, allow_nan=False)


@settings(max_examples=50)
@given(st.integers(min_value=1, max_value=8).flatmap(
    lambda n: st.tuples(
        st.lists(_coef, min_size=n, max_size=n),
        st.lists(_coef, min_size=n, max_size=n),
        st.lists(st.floats(min_value=3.0, max_value=10.0), min_size=n, max_size=n),
        st.lists(st.floats(min_value=-10.0, max_value=10.0), min_size=n, max_size=n),
    )
))
def test_diagonally_dominant_systems(data):
    lower, upper, main, b = data
    a = _tridiagonal(lower, main, upper)
    s = solve_tridiagonal(a, b)
    assert matvec(a, s) == pytest.approx(b, abs=1e-9)