"""General description of a quantum system evolving in time."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

WaveT = complex


class Evolver(ABC):
    """A time integration scheme for a quantum system."""

    @abstractmethod
    def evolve(self, system: "QSystem", dt: float) -> Any:
        """The wave function of ``system`` advanced by ``dt``."""


class QSystem(ABC):
    """A wave function with a mass, a potential, Planck's constant and an evolver."""

    def __init__(
        self,
        mass: float,
        wave: Any,
        potential: Callable[..., float],
        evolver: Optional[Evolver] = None,
        hbar: float = 1.0,
    ) -> None:
        if potential is None:
            raise ValueError("the potential cannot be None")
        self._wave = wave
        self._evolver = evolver
        self._mass = abs(mass)
        self._potential = potential
        self._hbar = abs(hbar)

    @property
    def mass(self) -> float:
        """The particle mass, always non-negative."""
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        if value == 0:
            raise ValueError("the mass cannot be zero")
        self._mass = abs(value)

    @property
    def hbar(self) -> float:
        """The reduced Planck constant, always non-negative."""
        return self._hbar

    @hbar.setter
    def hbar(self, value: float) -> None:
        if value == 0:
            raise ValueError("the Planck constant cannot be zero")
        self._hbar = abs(value)

    @property
    def psi(self) -> Any:
        """The current wave function."""
        return self._wave

    @property
    def V(self) -> Callable[..., float]:
        """The potential."""
        return self._potential

    @property
    def evolver(self) -> Optional[Evolver]:
        """The time integration scheme, if any."""
        return self._evolver

    def set_evolver(self, evolver: Optional[Evolver]) -> None:
        """Replace the time integration scheme."""
        self._evolver = evolver

    def set_potential(self, potential: Callable[..., float]) -> None:
        """Replace the potential."""
        if potential is None:
            raise ValueError("the potential cannot be None")
        self._potential = potential

    def replace_wave(self, wave: Any) -> None:
        """Replace the wave function."""
        self._wave = wave

    def evolve(self, dt: float) -> None:
        """Advance the wave function by ``dt`` using the evolver, if one is set."""
        if self._evolver is not None:
            self._wave = self._evolver.evolve(self, dt)

    @abstractmethod
    def energy(self) -> float:
        """The mean energy of the system."""

    @abstractmethod
    def norm(self) -> float:
        """The squared norm of the wave function."""

    def normalize(self) -> None:
        """Scale the wave function to unit norm."""
        scale = math.sqrt(self.norm())
        wave = self._wave
        if isinstance(wave, (list, tuple)):
            self._wave = type(wave)(value / scale for value in wave)
        else:
            self._wave = wave / scale