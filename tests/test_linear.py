import pytest

from numlab.linear import (
    SingularMatrixError,
    gauss_elimination,
    gauss_jordan,
    gauss_seidel,
)
from numlab.roots import NotConvergentError

# The diagonally dominant system used for Gauss-Seidel iteration.
DOMINANT = [
    [20, 1, -2, 17],
    [3, 20, -1, -18],
    [2, -3, 20, 25],
]

GENERAL = [
    [2, 1, -1, 8],
    [-3, -1, 2, -11],
    [-2, 1, 2, -3],
]


def residual(augmented, solution):
    return max(
        abs(sum(a * x for a, x in zip(row[:-1], solution)) - row[-1])
        for row in augmented
    )


@pytest.mark.parametrize("system", [DOMINANT, GENERAL])
def test_gauss_elimination_satisfies_system(system):
    solution = gauss_elimination(system)
    assert len(solution) == len(system)
    assert residual(system, solution) < 1e-9


@pytest.mark.parametrize("system", [DOMINANT, GENERAL])
def test_gauss_jordan_agrees_with_elimination(system):
    jordan = gauss_jordan(system)
    elimination = gauss_elimination(system)
    assert jordan == pytest.approx(elimination)
    assert residual(system, jordan) < 1e-9


def test_zero_leading_pivot_is_handled():
    system = [[0, 1, 2], [1, 0, 3]]
    assert gauss_elimination(system) == pytest.approx([3, 2])
    assert gauss_jordan(system) == pytest.approx([3, 2])


@pytest.mark.parametrize("solver", [gauss_elimination, gauss_jordan])
def test_singular_matrix_raises(solver):
    with pytest.raises(SingularMatrixError):
        solver([[1, 2, 3], [2, 4, 6]])


@pytest.mark.parametrize("solver", [gauss_elimination, gauss_jordan, gauss_seidel])
def test_ragged_matrix_raises(solver):
    with pytest.raises(ValueError):
        solver([[1, 2, 3], [4, 5]])


@pytest.mark.parametrize("solver", [gauss_elimination, gauss_jordan, gauss_seidel])
def test_empty_system_raises(solver):
    with pytest.raises(ValueError):
        solver([])


def test_input_is_not_modified():
    system = [row[:] for row in GENERAL]
    gauss_elimination(system)
    gauss_jordan(system)
    assert system == GENERAL


def test_gauss_seidel_converges_on_dominant_system():
    solution = gauss_seidel(DOMINANT, tol=1e-10)
    assert residual(DOMINANT, solution) < 1e-8
    assert solution == pytest.approx(gauss_elimination(DOMINANT))


def test_gauss_seidel_too_few_iterations():
    with pytest.raises(NotConvergentError):
        gauss_seidel(DOMINANT, tol=1e-12, max_iterations=1)


def test_gauss_seidel_divergence_raises():
    with pytest.raises(NotConvergentError):
        gauss_seidel([[1, 2, 3], [3, 1, 4]], tol=1e-6, max_iterations=50)


def test_gauss_seidel_zero_diagonal_raises():
    with pytest.raises(ValueError):
        gauss_seidel([[0, 1, 2], [1, 0, 3]])