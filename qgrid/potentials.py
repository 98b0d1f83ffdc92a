"""Potential energy fields over arbitrary coordinates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator, List


class Potential(ABC):
    """A scalar field evaluated at the given coordinates."""

    @abstractmethod
    def __call__(self, *args: Any) -> float:
        """The value of the field at the coordinates ``args``."""


def _single(args: tuple) -> Any:
    if len(args) != 1:
        raise TypeError(f"expected one coordinate, got {len(args)}")
    return args[0]


class Barrier(Potential):
    """A constant value inside the closed interval ``[left, right]``, zero outside."""

    def __init__(self, value: float, left: Any, right: Any) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __call__(self, *args: Any) -> float:
        access = _single(args)
        return self.value if self.left <= access <= self.right else 0

    def __repr__(self) -> str:
        return f"Barrier({self.value!r}, {self.left!r}, {self.right!r})"


class Composed(Potential):
    """The sum of several potentials."""

    def __init__(self, potentials: Iterable[Callable[..., float]] = ()) -> None:
        self._potentials: List[Callable[..., float]] = list(potentials)

    def append(self, potential: Callable[..., float]) -> None:
        """Add another term to the sum."""
        self._potentials.append(potential)

    def __len__(self) -> int:
        return len(self._potentials)

    def __iter__(self) -> Iterator[Callable[..., float]]:
        return iter(self._potentials)

    def __call__(self, *args: Any) -> float:
        return sum((potential(*args) for potential in self._potentials), 0.0)


class Uniform(Potential):
    """The same value everywhere."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def __call__(self, *args: Any) -> float:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"Uniform({self.value!r})"