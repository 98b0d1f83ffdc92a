import cmath

import pytest

from qgrid.matrix import Matrix
from qgrid.potentials import Barrier, Uniform
from qgrid.qsystem import Evolver, QSystem


class _Grid(QSystem):
    def norm(self):
        return sum(abs(v) ** 2 for v in self.psi)

    def energy(self):
        weighted = sum(self.V(k) * abs(v) ** 2 for k, v in enumerate(self.psi))
        return weighted / self.norm()


class _MatrixGrid(QSystem):
    def norm(self):
        return sum(abs(v) ** 2 for row in self.psi.to_lists() for v in row)

    def energy(self):
        return 0.0


class _Phase(Evolver):
    def evolve(self, system, dt):
        return [
            cmath.exp(-1j * system.V(k) * dt / system.hbar) * psi
            for k, psi in enumerate(system.psi)
        ]


class _Fixed(Evolver):
    def __init__(self, wave):
        self.wave = wave

    def evolve(self, system, dt):
        return self.wave


def test_abstract_classes():
    with pytest.raises(TypeError):
        Evolver()
    with pytest.raises(TypeError):
        QSystem(1.0, [1.0], Uniform())


def test_constructor_takes_absolute_values():
    system = _Grid(-2.0, [1.0], Uniform(), hbar=-0.5)
    assert system.mass == 2.0
    assert system.hbar == 0.5


def test_constructor_rejects_missing_potential():
    valid = _Grid(1.0, [1.0], Uniform(2.0))
    assert valid.V(0) == 2.0
    with pytest.raises(ValueError):
        _Grid(1.0, [1.0], None)


def test_mass_setter():
    system = _Grid(1.0, [1.0], Uniform())
    system.mass = -3.0
    assert system.mass == 3.0
    with pytest.raises(ValueError):
        system.mass = 0


def test_hbar_setter():
    system = _Grid(1.0, [1.0], Uniform())
    system.hbar = -2.0
    assert system.hbar == 2.0
    with pytest.raises(ValueError):
        system.hbar = 0


def test_normalize_list_wave():
    system = _Grid(1.0, [3.0, 4.0j], Uniform())
    system.normalize()
    assert system.norm() == pytest.approx(1.0)
    first, second = system.psi
    assert second / first == pytest.approx(4.0j / 3.0)


def test_normalize_tuple_keeps_type():
    system = _Grid(1.0, (2.0, 2.0), Uniform())
    system.normalize()
    assert isinstance(system.psi, tuple)
    assert system.norm() == pytest.approx(1.0)


def test_normalize_matrix_wave():
    system = _MatrixGrid(1.0, Matrix.from_rows([[1.0, 1.0], [1.0, 1.0]]), Uniform())
    system.normalize()
    assert system.norm() == pytest.approx(1.0)


def test_evolve_uses_evolver():
    target = [0.5, 0.5j]
    system = _Grid(1.0, [1.0, 0.0], Uniform(), _Fixed(target))
    system.evolve(0.1)
    assert system.psi == target


def test_evolve_without_evolver_keeps_wave():
    wave = [1.0, 2.0]
    system = _Grid(1.0, wave, Uniform())
    system.evolve(0.1)
    assert system.psi == wave


def test_phase_evolution_preserves_norm_and_energy():
    system = _Grid(1.0, [1.0, 2.0, 0.5j], Barrier(3.0, 1, 1), _Phase())
    norm, energy = system.norm(), system.energy()
    for _ in range(5):
        system.evolve(0.2)
    assert system.norm() == pytest.approx(norm)
    assert system.energy() == pytest.approx(energy)


def test_set_evolver_and_potential():
    system = _Grid(1.0, [1.0], Uniform())
    evolver = _Fixed([2.0])
    system.set_evolver(evolver)
    assert system.evolver is evolver
    barrier = Barrier(5.0, 0, 0)
    system.set_potential(barrier)
    assert system.V is barrier
    assert system.V(0) == 5.0
    with pytest.raises(ValueError):
        system.set_potential(None)


def test_replace_wave():
    system = _Grid(1.0, [1.0], Uniform())
    system.replace_wave([0.0, 1.0])
    assert system.psi == [0.0, 1.0]
    assert system.norm() == pytest.approx(1.0)