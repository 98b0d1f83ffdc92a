"""Linear operators formed as a multiple of the identity plus a sum of operators."""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Sequence


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Number)


def _scaled(scalar: Any, vector: Iterable[Any]) -> List[Any]:
    return [scalar * value for value in vector]


def _summed(first: Sequence[Any], second: Iterable[Any]) -> List[Any]:
    return [a + b for a, b in zip(first, second, strict=True)]


class Composition:
    """``identity * I + c1 + c2 + ...`` over operators that can be applied to vectors.

    Every component must support ``component * vector``, ``component * scalar``
    and ``component.at(i, j)``. Operations return new compositions.
    """

    def __init__(self, identity: Any, *args: Any) -> None:
        self._identity = identity
        self._components = tuple(args)

    @property
    def identity(self) -> Any:
        """The multiple of the identity."""
        return self._identity

    @property
    def components(self) -> tuple:
        """The composing operators, in order."""
        return self._components

    def __len__(self) -> int:
        """Number of composing operators, not counting the identity part."""
        return len(self._components)

    def __getitem__(self, k: int) -> Any:
        """Index 0 is the identity multiple, indices 1.. the components."""
        if k == 0:
            return self._identity
        if 1 <= k <= len(self._components):
            return self._components[k - 1]
        raise IndexError(f"composition index {k} out of range")

    def extend(self, addon: Any) -> "Composition":
        """A new composition with ``addon`` appended to the components."""
        return Composition(self._identity, *self._components, addon)

    def apply(self, vector: Iterable[Any]) -> List[Any]:
        """Apply the operator to ``vector`` and return the resulting list."""
        values = list(vector)
        out = _scaled(self._identity, values)
        for component in self._components:
            out = _summed(out, component * values)
        return out

    def at(self, i: int, j: int) -> Any:
        """The element in row ``i`` and column ``j``."""
        total = self._identity if i == j else 0
        for component in self._components:
            total += component.at(i, j)
        return total

    def _times(self, scalar: Any) -> "Composition":
        return Composition(
            self._identity * scalar, *(component * scalar for component in self._components)
        )

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._times(other)
        return self.apply(other)

    def __rmul__(self, scalar: Any) -> "Composition":
        if not _is_scalar(scalar):
            return NotImplemented
        return self._times(scalar)

    def __add__(self, other: Any) -> "Composition":
        if _is_scalar(other):
            return Composition(self._identity + other, *self._components)
        return self.extend(other)

    def __radd__(self, scalar: Any) -> "Composition":
        if not _is_scalar(scalar):
            return NotImplemented
        return self + scalar

    def __sub__(self, scalar: Any) -> "Composition":
        if not _is_scalar(scalar):
            return NotImplemented
        return Composition(self._identity - scalar, *self._components)

    def __rsub__(self, scalar: Any) -> "Composition":
        if not _is_scalar(scalar):
            return NotImplemented
        return -(self - scalar)

    def __neg__(self) -> "Composition":
        return self._times(-1)

    def __repr__(self) -> str:
        return f"Composition({self._identity!r}, {len(self._components)} components)"


class PtrComposition:
    """``identity * I + gain * (c1 + c2 + ...)`` over shared, unmodified operators.

    The components are held by reference: changes made to them later are seen
    by the composition. Scaling acts on the identity part and the gain only.
    """

    def __init__(self, components: Iterable[Any], identity: Any = 0.0, gain: Any = 1.0) -> None:
        self._components = tuple(components)
        self._identity = identity
        self._gain = gain

    @property
    def identity(self) -> Any:
        """The multiple of the identity."""
        return self._identity

    @property
    def gain(self) -> Any:
        """The factor applied to the sum of the components."""
        return self._gain

    @property
    def components(self) -> tuple:
        """The shared composing operators."""
        return self._components

    def apply(self, vector: Iterable[Any]) -> List[Any]:
        """Apply the operator to ``vector`` and return the resulting list."""
        values = list(vector)
        out = _scaled(self._identity / self._gain, values)
        for component in self._components:
            out = _summed(out, component * values)
        return _scaled(self._gain, out)

    def _replace(self, identity: Any, gain: Any) -> "PtrComposition":
        return PtrComposition(self._components, identity, gain)

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._replace(self._identity * other, self._gain * other)
        return self.apply(other)

    def __rmul__(self, scalar: Any) -> "PtrComposition":
        if not _is_scalar(scalar):
            return NotImplemented
        return self * scalar

    def __add__(self, scalar: Any) -> "PtrComposition":
        if not _is_scalar(scalar):
            return NotImplemented
        return self._replace(self._identity + scalar, self._gain)

    def __radd__(self, scalar: Any) -> "PtrComposition":
        return self.__add__(scalar)

    def __sub__(self, scalar: Any) -> "PtrComposition":
        if not _is_scalar(scalar):
            return NotImplemented
        return self._replace(self._identity - scalar, self._gain)

    def __rsub__(self, scalar: Any) -> "PtrComposition":
        if not _is_scalar(scalar):
            return NotImplemented
        return -(self - scalar)

    def __neg__(self) -> "PtrComposition":
        return self._replace(-self._identity, -self._gain)