"""Dense matrices, sub-matrix views and row/column vector views."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from itertools import product
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Tuple

Span = Optional[Tuple[int, int]]


def _resolve_range(span: Span, limit: int, what: str) -> Tuple[int, int]:
    """Turn an optional ``(begin, end)`` span into a validated half-open range."""
    if span is None:
        return 0, limit
    begin, end = span
    if begin < 0 or begin >= end or end > limit:
        raise IndexError(f"{what} range {tuple(span)!r} exceeds size {limit}")
    return begin, end


def _slice_range(key: slice, limit: int) -> Tuple[int, int]:
    if key.step not in (None, 1):
        raise ValueError("strided slices are not supported")
    begin, end, _ = key.indices(limit)
    return begin, end


class MatrixBase(ABC):
    """Common behaviour of every two-dimensional matrix-like object."""

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, int]:
        """Number of rows and columns."""

    @abstractmethod
    def _get(self, i: int, j: int) -> Any: ...

    @abstractmethod
    def _set(self, i: int, j: int, value: Any) -> None: ...

    @abstractmethod
    def copy(self) -> "MatrixBase":
        """Return an independent copy holding the same values."""

    def _cells(self) -> Iterator[Tuple[int, int]]:
        rows, cols = self.shape
        return product(range(rows), range(cols))

    def _check(self, i: int, j: int) -> None:
        rows, cols = self.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"index ({i}, {j}) exceeds matrix size {rows}x{cols}")

    def _view(self, i: Any, j: Any) -> "SubMatrix":
        rows, cols = self.shape
        if isinstance(i, slice) and isinstance(j, slice):
            return SubMatrix(self, _slice_range(i, rows), _slice_range(j, cols))
        if isinstance(j, slice):
            self._check(i, 0)
            return RowVector(self, (i, i + 1), _slice_range(j, cols))
        self._check(0, j)
        return ColumnVector(self, _slice_range(i, rows), (j, j + 1))

    def at(self, i: int, j: int) -> Any:
        """Bounds-checked element access."""
        self._check(i, j)
        return self._get(i, j)

    def set(self, i: int, j: int, value: Any) -> None:
        """Bounds-checked element assignment."""
        self._check(i, j)
        self._set(i, j, value)

    def _overlap(self, other: "MatrixBase") -> Iterator[Tuple[int, int]]:
        rows = min(self.shape[0], other.shape[0])
        cols = min(self.shape[1], other.shape[1])
        return product(range(rows), range(cols))

    def assign(self, other: "MatrixBase") -> "MatrixBase":
        """Copy the values of ``other`` into the region both matrices share."""
        for i, j in self._overlap(other):
            self._set(i, j, other._get(i, j))
        return self

    def swap(self, other: "MatrixBase") -> None:
        """Exchange every value with ``other``; both must have the same shape."""
        if self.shape != other.shape:
            raise ValueError("swap is allowed only between matrices of the same size")
        for i, j in self._cells():
            mine = self._get(i, j)
            self._set(i, j, other._get(i, j))
            other._set(i, j, mine)

    def transform(self, operation: Callable[[Any], Any]) -> "MatrixBase":
        """Return a copy with ``operation`` applied to every element."""
        result = self.copy()
        for i, j in result._cells():
            result._set(i, j, operation(result._get(i, j)))
        return result

    def to_lists(self) -> list:
        """Return the values as a list of row lists."""
        rows, cols = self.shape
        return [[self._get(i, j) for j in range(cols)] for i in range(rows)]

    def __iadd__(self, other: Any) -> "MatrixBase":
        if not isinstance(other, MatrixBase):
            return NotImplemented
        for i, j in self._overlap(other):
            self._set(i, j, self._get(i, j) + other._get(i, j))
        return self

    def __isub__(self, other: Any) -> "MatrixBase":
        if not isinstance(other, MatrixBase):
            return NotImplemented
        for i, j in self._overlap(other):
            self._set(i, j, self._get(i, j) - other._get(i, j))
        return self

    def __imul__(self, scalar: Any) -> "MatrixBase":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        for i, j in self._cells():
            self._set(i, j, self._get(i, j) * scalar)
        return self

    def __itruediv__(self, scalar: Any) -> "MatrixBase":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        for i, j in self._cells():
            self._set(i, j, self._get(i, j) / scalar)
        return self

    def __add__(self, other: Any) -> "MatrixBase":
        if not isinstance(other, MatrixBase):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Any) -> "MatrixBase":
        if not isinstance(other, MatrixBase):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, scalar: Any) -> "MatrixBase":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    def __rmul__(self, scalar: Any) -> "MatrixBase":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> "MatrixBase":
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(self._get(i, j) == other._get(i, j) for i, j in self._cells())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_lists()!r})"


class Matrix(MatrixBase):
    """A dense matrix stored as a list of rows."""

    def __init__(self, rows: int, cols: int, init: Any = 0) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix size must be positive")
        self._table = [[init] * cols for _ in range(rows)]

    @classmethod
    def _from_table(cls, table: list) -> "Matrix":
        obj = cls.__new__(cls)
        obj._table = table
        return obj

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Matrix":
        """Build a matrix from an iterable of equally long rows."""
        table = [list(row) for row in rows]
        if not table or not table[0]:
            raise ValueError("matrix size must be positive")
        width = len(table[0])
        if any(len(row) != width for row in table):
            raise ValueError("incoherent row lengths")
        return cls._from_table(table)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._table), len(self._table[0])

    def _get(self, i: int, j: int) -> Any:
        return self._table[i][j]

    def _set(self, i: int, j: int, value: Any) -> None:
        self._table[i][j] = value

    def __getitem__(self, key: Tuple[Any, Any]) -> Any:
        i, j = key
        if isinstance(i, slice) or isinstance(j, slice):
            return self._view(i, j)
        return self._table[i][j]

    def __setitem__(self, key: Tuple[Any, Any], value: Any) -> None:
        i, j = key
        if isinstance(i, slice) or isinstance(j, slice):
            self._view(i, j).assign(value)
        else:
            self._table[i][j] = value

    def copy(self) -> "Matrix":
        return type(self)._from_table([row[:] for row in self._table])

    def restrict(self, rows: Span = None, cols: Span = None) -> "SubMatrix":
        """View of the ``[begin, end)`` row and column ranges; ``None`` means all."""
        return SubMatrix(self, rows, cols)

    def get_row(self, i: int, cols: Span = None) -> "RowVector":
        """View of row ``i``, optionally restricted to a column range."""
        if not 0 <= i < self.shape[0]:
            raise IndexError(f"row index {i} exceeded")
        return RowVector(self, (i, i + 1), cols)

    def get_column(self, j: int, rows: Span = None) -> "ColumnVector":
        """View of column ``j``, optionally restricted to a row range."""
        if not 0 <= j < self.shape[1]:
            raise IndexError(f"column index {j} exceeded")
        return ColumnVector(self, rows, (j, j + 1))

    def swap_rows(self, first: int, second: int, cols: Span = None) -> None:
        """Exchange two rows, optionally only inside a column range."""
        if first == second:
            return
        if cols is None:
            table = self._table
            table[first], table[second] = table[second], table[first]
        else:
            one = self.restrict((first, first + 1), cols)
            other = self.restrict((second, second + 1), cols)
            one.swap(other)


class SquareMatrix(Matrix):
    """A matrix with as many rows as columns."""

    def __init__(self, size: int, init: Any = 0) -> None:
        super().__init__(size, size, init)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "SquareMatrix":
        table = [list(row) for row in rows]
        if any(len(row) != len(table) for row in table):
            raise ValueError("rows do not form a square matrix")
        return super().from_rows(table)

    @classmethod
    def eye(cls, size: int) -> "SquareMatrix":
        """The identity matrix of the given size."""
        out = cls(size)
        for k in range(size):
            out._table[k][k] = 1
        return out


class SubMatrix(MatrixBase):
    """A rectangular view into another matrix; writes go through to it."""

    def __init__(self, parent: MatrixBase, rows: Span = None, cols: Span = None) -> None:
        parent_rows, parent_cols = parent.shape
        self._parent = parent
        self._row0, row_end = _resolve_range(rows, parent_rows, "row")
        self._col0, col_end = _resolve_range(cols, parent_cols, "column")
        self._shape = (row_end - self._row0, col_end - self._col0)
        self._check_shape()

    def _check_shape(self) -> None:
        pass

    def _vector_key(self, key: Any) -> Any:
        return key

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    def _get(self, i: int, j: int) -> Any:
        return self._parent._get(i + self._row0, j + self._col0)

    def _set(self, i: int, j: int, value: Any) -> None:
        self._parent._set(i + self._row0, j + self._col0, value)

    def __getitem__(self, key: Any) -> Any:
        i, j = self._vector_key(key)
        if isinstance(i, slice) or isinstance(j, slice):
            return self._view(i, j)
        return self.at(i, j)

    def __setitem__(self, key: Any, value: Any) -> None:
        i, j = self._vector_key(key)
        if isinstance(i, slice) or isinstance(j, slice):
            self._view(i, j).assign(value)
        else:
            self.set(i, j, value)

    def copy(self) -> "SubMatrix":
        """A standalone view of the same kind over a private copy of the values."""
        return type(self)(Matrix.from_rows(self.to_lists()))


class RowVector(SubMatrix):
    """A one-row view usable as a sequence."""

    def _check_shape(self) -> None:
        if self._shape[0] != 1:
            raise ValueError("a row vector spans exactly one row")

    def _vector_key(self, key: Any) -> Any:
        return (0, key) if isinstance(key, (int, slice)) else key

    def __len__(self) -> int:
        return self._shape[1]

    def __iter__(self) -> Iterator[Any]:
        return (self._get(0, j) for j in range(len(self)))

    def dot(self, other: Iterable[Any]) -> Any:
        """Scalar product over the common length."""
        return sum((a * b for a, b in zip(self, other)), 0)


class ColumnVector(SubMatrix):
    """A one-column view usable as a sequence."""

    def _check_shape(self) -> None:
        if self._shape[1] != 1:
            raise ValueError("a column vector spans exactly one column")

    def _vector_key(self, key: Any) -> Any:
        return (key, 0) if isinstance(key, (int, slice)) else key

    def __len__(self) -> int:
        return self._shape[0]

    def __iter__(self) -> Iterator[Any]:
        return (self._get(i, 0) for i in range(len(self)))

    def dot(self, other: Iterable[Any]) -> Any:
        """Scalar product over the common length."""
        return sum((a * b for a, b in zip(self, other)), 0)