import pytest

from qgrid.potentials import Barrier, Composed, Potential, Uniform


def test_potential_is_abstract():
    with pytest.raises(TypeError):
        Potential()


def test_barrier_inside_and_bounds():
    barrier = Barrier(2.0, 1, 3)
    assert [barrier(k) for k in (1, 2, 3)] == [2.0, 2.0, 2.0]


def test_barrier_outside():
    barrier = Barrier(2.0, 1, 3)
    assert barrier(0) == 0
    assert barrier(4) == 0


def test_barrier_requires_one_coordinate():
    with pytest.raises(TypeError):
        Barrier(1.0, 0, 1)(0, 1)


def test_uniform_ignores_coordinates():
    uniform = Uniform(1.5)
    assert uniform(0) == 1.5
    assert uniform(3, 4) == 1.5
    assert float(uniform) == 1.5


def test_uniform_default_and_update():
    uniform = Uniform()
    assert uniform(7) == 0.0
    uniform.value = 4.0
    assert uniform(7) == 4.0


def test_composed_sums_terms():
    composed = Composed([Uniform(1.0), Barrier(2.0, 0, 0)])
    assert composed(0) == pytest.approx(3.0)
    assert composed(1) == pytest.approx(1.0)


def test_composed_empty_is_zero():
    assert Composed()(5) == 0.0


def test_composed_append_and_iterate():
    first, second = Uniform(1.0), Uniform(2.0)
    composed = Composed([first])
    composed.append(second)
    assert len(composed) == 2
    assert list(composed) == [first, second]
    assert composed(0) == pytest.approx(first(0) + second(0))


def test_composed_accepts_plain_callables():
    composed = Composed([lambda k: k * 2.0, Uniform(1.0)])
    assert composed(3) == pytest.approx(7.0)