"""Sparse lookup tables keyed by index, and square matrices described by them."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Any, Iterable, Mapping, Tuple, Union

from qgrid.matrix import SquareMatrix

Items = Union[Mapping[int, Any], Iterable[Tuple[int, Any]]]


class _Cases:
    """Index-keyed values with a fallback for missing keys."""

    def _setup(self, items: Items, default: Any) -> None:
        self._values = dict(items)
        self._keys = sorted(self._values)
        self.default = default

    def _store(self, k: int, value: Any) -> None:
        if k not in self._values:
            insort(self._keys, k)
        self._values[k] = value

    def __contains__(self, k: object) -> bool:
        return k in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = {k: self._values[k] for k in self._keys}
        return f"{type(self).__name__}({items!r}, default={self.default!r})"


class MatchCases(_Cases):
    """Values that apply to their exact key only."""

    def __init__(self, items: Items = (), default: Any = 0) -> None:
        self._setup(items, default)

    def __setitem__(self, k: int, value: Any) -> None:
        self._store(k, value)

    def get(self, k: int) -> Any:
        """The value stored at ``k``, or the default."""
        return self._values.get(k, self.default)


class IntervalCases(_Cases):
    """Values that apply to every index up to and including their key.

    The value for index ``k`` is the one stored at the smallest key not less
    than ``k``.
    """

    def __init__(self, items: Items = (), default: Any = 0) -> None:
        self._setup(items, default)

    def __setitem__(self, k: int, value: Any) -> None:
        self._store(k, value)

    def _bound(self, k: int) -> Any:
        pos = bisect_left(self._keys, k)
        if pos == len(self._keys):
            raise KeyError(k)
        return self._values[self._keys[pos]]

    def get(self, k: int) -> Any:
        """The value covering ``k``, or the default if no key reaches it."""
        try:
            return self._bound(k)
        except KeyError:
            return self.default

    def lookup(self, k: int) -> Any:
        """The value covering ``k``; raises KeyError if no key reaches it."""
        return self._bound(k)


def _as_match_cases(row: Any) -> MatchCases:
    return row if isinstance(row, MatchCases) else MatchCases(row)


class CasesSquareMatrix:
    """A square matrix whose rows are chosen by interval and columns by exact match.

    ``rows`` maps a row bound to the columns of every row up to that bound;
    the columns are a :class:`MatchCases` or a mapping of column to value.
    """

    def __init__(self, size: int, rows: Items = ()) -> None:
        if size <= 0:
            raise ValueError("matrix size must be positive")
        self._size = size
        self._rows = IntervalCases(
            ((bound, _as_match_cases(row)) for bound, row in dict(rows).items()),
            MatchCases(),
        )

    @property
    def size(self) -> int:
        """Number of rows, equal to the number of columns."""
        return self._size

    def at(self, i: int, j: int) -> Any:
        """The element in row ``i`` and column ``j``."""
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError(f"index ({i}, {j}) exceeds matrix size {self._size}")
        return self._rows.get(i).get(j)

    def to_matrix(self) -> SquareMatrix:
        """A dense square matrix holding the same values."""
        span = range(self._size)
        return SquareMatrix.from_rows([self.at(i, j) for j in span] for i in span)