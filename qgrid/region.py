"""A partition of the real line into regions separated by sorted boundaries."""

from __future__ import annotations

from bisect import bisect_left, insort_left
from typing import Iterable, Tuple

MACHINE_PRECISION = 1e-8


class Region:
    """Sorted boundaries ``x1 <= x2 <= ... <= xM`` splitting the line into ``M + 1`` regions.

    Region ``k`` covers the points above boundary ``k - 1`` up to and
    including boundary ``k``.
    """

    def __init__(self, points: Iterable[float] = ()) -> None:
        self._points = sorted(points)

    @property
    def boundaries(self) -> Tuple[float, ...]:
        """The boundaries in ascending order."""
        return tuple(self._points)

    def __len__(self) -> int:
        """Number of regions, one more than the number of boundaries."""
        return len(self._points) + 1

    def __getitem__(self, index: int) -> float:
        """The boundary at ``index``."""
        return self._points[index]

    def insert(self, x: float) -> None:
        """Add a boundary, keeping the order."""
        insort_left(self._points, x)

    def find(self, x: float) -> int:
        """The index of the region that contains ``x``."""
        return bisect_left(self._points, x)

    def remove(self, index: int) -> float:
        """Remove the boundary at ``index`` and return it."""
        return self._points.pop(index)

    def __repr__(self) -> str:
        return f"Region({self._points!r})"