# qgrid

`qgrid` holds building blocks for simulating a quantum wave function on a discrete grid. It is written in pure Python and has no third-party dependencies.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `qgrid.matrix`: dense matrices.
  - `Matrix`, built with `Matrix(rows, cols, init)` or `Matrix.from_rows`.
  - `SquareMatrix`, with `SquareMatrix.eye`.
  - Bounds-checked access with `at` and `set`. Indexing with `m[i, j]` and slices.
  - Element-wise `+`, `-` between matrices, and `*`, `/` by a scalar. These are also available in place. Where shapes differ, `+` and `-` act on the overlapping part.
  - `assign`, `swap`, `transform` and `to_lists`.
  - Views that write through to their parent: `SubMatrix` (from `restrict`), `RowVector` (from `get_row`) and `ColumnVector` (from `get_column`). The row and column views can be iterated and have `dot`.
  - `swap_rows`, optionally limited to a column range.
- `qgrid.linalg`: linear algebra on these matrices.
  - `lu_decomposition` does LU decomposition with partial pivoting. It returns an `LUResult` with `lower`, `upper` and the list of `pivots`.
  - `solve`, `solve_lower` and `solve_upper`.
  - `matvec`.
  - `argmax`, `elementwise_abs` and `conjugate`.
- `qgrid.diagonals`: banded and diagonal operators.
  - `Diagonals` (or `make_diagonals`) is a square operator whose shifted diagonals each carry a single value. Multiply it by a number to scale it, or by a list to apply it.
  - `DiagArray` and `DiagFunctor` are pure diagonal operators, backed by a sequence or by a function of the index.
- `qgrid.composition`: linear combinations of operators.
  - `Composition` is `identity * I + c1 + c2 + ...`.
  - `PtrComposition` is `identity * I + gain * (c1 + c2 + ...)` over shared components.
  - Both support scalar arithmetic. Apply them to vectors with `apply` or `*`.
- `qgrid.cases`: sparse lookup tables.
  - `MatchCases` matches exact keys.
  - `IntervalCases` uses the value at the smallest key not below the index. `get` falls back to a default; `lookup` raises `KeyError`.
  - `CasesSquareMatrix` is built from them and can be made dense with `to_matrix`.
- `qgrid.tridiagonal`: `solve_tridiagonal(a, x)` solves a tridiagonal system in linear time. It needs no pivoting and works with any operator that has `at(i, j)`.
- `qgrid.potentials`: potentials.
  - `Potential` is the abstract base.
  - `Barrier` is constant on a closed interval.
  - `Uniform` is constant everywhere.
  - `Composed` is a sum of potentials.
- `qgrid.region`: `Region`, a sorted list of boundary points that splits the line into `len(region)` regions.
  - `insert`, `find` and `remove`.
  - The constant `MACHINE_PRECISION`.
- `qgrid.qsystem`: the abstract `QSystem` and `Evolver`.
  - `QSystem` holds the wave function (`psi`), the potential (`V`), the `mass`, `hbar` and an optional evolver.
  - `mass` and `hbar` are stored as absolute values. Setting either to zero raises `ValueError`, and so does a `None` potential.
  - `evolve(dt)` delegates to the evolver.
  - `normalize` divides the wave by the square root of `norm()`.

## Example

```python
from qgrid.matrix import SquareMatrix
from qgrid.linalg import solve
from qgrid.diagonals import make_diagonals
from qgrid.composition import Composition
from qgrid.tridiagonal import solve_tridiagonal

a = SquareMatrix.from_rows([[4.0, 1.0], [2.0, 3.0]])
x = solve(a, [1.0, 2.0])

# discrete Laplacian: -2 on the diagonal, 1 on its neighbours
laplace = make_diagonals((-1, 1.0), (0, -2.0), (1, 1.0))
y = laplace * [0.0, 1.0, 0.0, 0.0]

# the operator 1 + 0.5j * laplace, and a solve against it
op = Composition(1.0, 0.5j * laplace)
z = solve_tridiagonal(op, [1.0, 0.0, 0.0, 0.0])
```

## What the package does not do

`QSystem` and `Evolver` are abstract. The package has no ready-made one- or two-dimensional grid system, and no time-stepping scheme that plugs into `QSystem.evolve`. To build one, subclass them and use the operators and `solve_tridiagonal`. The package also has no command-line tool and no visualisation.

## Running the tests

```
pytest
```