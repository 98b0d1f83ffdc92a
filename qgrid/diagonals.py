"""Banded operators built from constant sub-diagonals, and pure diagonal operators."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from bisect import bisect_left
from typing import Any, Callable, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple


class DiagonalEntry(NamedTuple):
    """One constant sub-diagonal: its offset from the main diagonal and its value."""

    offset: int
    value: Any


class RowEntry(NamedTuple):
    """A non-zero element of a row: its column and its value."""

    column: int
    value: Any


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Number)


class Diagonals:
    """A square operator made of shifted diagonals, each holding a single value.

    An entry ``(offset, value)`` puts ``value`` at every position ``(i, i + offset)``;
    offset 0 is the main diagonal, positive offsets lie above it.
    """

    def __init__(self, entries: Iterable[Tuple[int, Any]]) -> None:
        items = sorted(
            (DiagonalEntry(int(offset), value) for offset, value in entries),
            key=lambda entry: entry.offset,
        )
        if not items:
            raise ValueError("at least one diagonal is required")
        self._entries: List[DiagonalEntry] = items
        self._offsets = [entry.offset for entry in items]

    @property
    def entries(self) -> Tuple[DiagonalEntry, ...]:
        """The diagonals in ascending order of offset."""
        return tuple(self._entries)

    def _find(self, offset: int) -> Optional[int]:
        pos = bisect_left(self._offsets, offset)
        if pos < len(self._offsets) and self._offsets[pos] == offset:
            return pos
        return None

    def at(self, i: int, j: int) -> Any:
        """The element in row ``i`` and column ``j``."""
        pos = self._find(j - i)
        return self._entries[pos].value if pos is not None else 0

    def row(self, row: int, size: int) -> Iterator[RowEntry]:
        """The non-zero elements of ``row`` in a matrix of the given size."""
        for offset, value in self._entries:
            column = row + offset
            if 0 <= column < size:
                yield RowEntry(column, value)

    def _copy(self) -> "Diagonals":
        return Diagonals(self._entries)

    def __imul__(self, scalar: Any) -> "Diagonals":
        if not _is_scalar(scalar):
            return NotImplemented
        self._entries = [entry._replace(value=entry.value * scalar) for entry in self._entries]
        return self

    def __iadd__(self, scalar: Any) -> "Diagonals":
        """Add a multiple of the identity; the main diagonal must be present."""
        if not _is_scalar(scalar):
            return NotImplemented
        pos = self._find(0)
        if pos is None:
            raise ValueError("no main diagonal to add the identity to")
        entry = self._entries[pos]
        self._entries[pos] = entry._replace(value=entry.value + scalar)
        return self

    def __mul__(self, other: Any) -> Any:
        """Scale by a number, or apply to a vector and return the resulting list."""
        if _is_scalar(other):
            result = self._copy()
            result *= other
            return result
        values = list(other)
        size = len(values)
        return [
            sum((entry.value * values[entry.column] for entry in self.row(m, size)), 0)
            for m in range(size)
        ]

    def __rmul__(self, scalar: Any) -> "Diagonals":
        if not _is_scalar(scalar):
            return NotImplemented
        return self * scalar

    def __repr__(self) -> str:
        return f"Diagonals({[tuple(entry) for entry in self._entries]!r})"


def make_diagonals(*args: Tuple[int, Any]) -> Diagonals:
    """Build a :class:`Diagonals` from ``(offset, value)`` pairs."""
    return Diagonals(args)


class Diagonal(ABC):
    """A diagonal operator with random access to its diagonal values."""

    @abstractmethod
    def __getitem__(self, m: int) -> Any:
        """The ``m``-th diagonal value."""

    def at(self, i: int, j: int) -> Any:
        """The element in row ``i`` and column ``j``."""
        return self[i] if i == j else 0

    def apply(self, vector: Iterable[Any]) -> List[Any]:
        """Multiply every component of ``vector`` by the matching diagonal value."""
        return [value * self[k] for k, value in enumerate(vector)]


class DiagArray(Diagonal):
    """A diagonal operator backed by a fixed sequence of values."""

    def __init__(self, data: Iterable[Any]) -> None:
        self._data = tuple(data)

    def __getitem__(self, m: int) -> Any:
        return self._data[m]

    def __len__(self) -> int:
        return len(self._data)

    def __imul__(self, scalar: Any) -> "DiagArray":
        if not _is_scalar(scalar):
            return NotImplemented
        self._data = tuple(value * scalar for value in self._data)
        return self

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return DiagArray(value * other for value in self._data)
        return self.apply(other)

    def __rmul__(self, scalar: Any) -> "DiagArray":
        if not _is_scalar(scalar):
            return NotImplemented
        return self * scalar

    def __repr__(self) -> str:
        return f"DiagArray({list(self._data)!r})"


class DiagFunctor(Diagonal):
    """A diagonal operator whose values come from a function of the index."""

    def __init__(self, func: Callable[[int], Any], gain: Any = 1) -> None:
        self._func = func
        self._gain = gain

    @property
    def gain(self) -> Any:
        """The factor applied to every value of the function."""
        return self._gain

    def __getitem__(self, m: int) -> Any:
        return self._gain * self._func(m)

    def __imul__(self, scalar: Any) -> "DiagFunctor":
        if not _is_scalar(scalar):
            return NotImplemented
        self._gain *= scalar
        return self

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return DiagFunctor(self._func, self._gain * other)
        return self.apply(other)

    def __rmul__(self, scalar: Any) -> "DiagFunctor":
        if not _is_scalar(scalar):
            return NotImplemented
        return self * scalar