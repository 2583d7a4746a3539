"""Direct and iterative solvers for systems of linear equations.

Every solver takes the augmented matrix ``[A | b]`` as ``n`` rows of
``n + 1`` numbers and returns the solution vector as a list of floats.
"""

from __future__ import annotations

import math
from typing import Sequence

from numlab.roots import NotConvergentError

_TINY = 1e-12


class SingularMatrixError(ValueError):
    """Raised when the coefficient matrix has no unique solution."""


def _augmented_copy(augmented: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [[float(value) for value in row] for row in augmented]
    if not rows:
        raise ValueError("the system has no equations")
    size = len(rows)
    if any(len(row) != size + 1 for row in rows):
        raise ValueError(f"every row of the augmented matrix must hold {size + 1} numbers")
    return rows


def _pivot(rows: list[list[float]], col: int) -> list[float]:
    """Return the pivot row for ``col``, exchanging rows only if the pivot is zero."""
    if abs(rows[col][col]) < _TINY:
        best = max(range(col, len(rows)), key=lambda r: abs(rows[r][col]))
        if abs(rows[best][col]) < _TINY:
            raise SingularMatrixError("the coefficient matrix is singular")
        rows[col], rows[best] = rows[best], rows[col]
    return rows[col]


def _eliminate(row: list[float], pivot_row: list[float], col: int) -> None:
    ratio = row[col] / pivot_row[col]
    if ratio:
        row[:] = [a - ratio * p for a, p in zip(row, pivot_row)]


def gauss_elimination(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system by forward elimination and back substitution."""
    rows = _augmented_copy(augmented)
    size = len(rows)
    for col in range(size):
        pivot_row = _pivot(rows, col)
        for row in rows[col + 1:]:
            _eliminate(row, pivot_row, col)

    solution = [0.0] * size
    for i in reversed(range(size)):
        row = rows[i]
        if abs(row[i]) < _TINY:
            raise SingularMatrixError("the coefficient matrix is singular")
        remainder = row[size] - sum(row[j] * solution[j] for j in range(i + 1, size))
        solution[i] = remainder / row[i]
    return solution


def gauss_jordan(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system by reducing the coefficient matrix to diagonal form."""
    rows = _augmented_copy(augmented)
    size = len(rows)
    for col in range(size):
        pivot_row = _pivot(rows, col)
        for row in rows:
            if row is not pivot_row:
                _eliminate(row, pivot_row, col)
    return [row[size] / row[i] for i, row in enumerate(rows)]


def gauss_seidel(
    augmented: Sequence[Sequence[float]],
    tol: float = 1e-6,
    max_iterations: int = 100,
) -> list[float]:
    """Solve the system by Gauss-Seidel iteration starting from zero.

    Iteration stops once no unknown changes by ``tol`` or more in a sweep;
    :class:`NotConvergentError` is raised if that does not happen within
    ``max_iterations`` sweeps or the iterates diverge.
    """
    rows = _augmented_copy(augmented)
    size = len(rows)
    if any(row[i] == 0 for i, row in enumerate(rows)):
        raise ValueError("every diagonal coefficient must be non-zero")

    x = [0.0] * size
    for _ in range(max_iterations):
        change = 0.0
        for i, row in enumerate(rows):
            remainder = row[size] - sum(row[j] * x[j] for j in range(size) if j != i)
            updated = remainder / row[i]
            change = max(change, abs(updated - x[i]))
            x[i] = updated
        if not all(math.isfinite(value) for value in x):
            raise NotConvergentError("the iteration diverged")
        if change < tol:
            return x
    raise NotConvergentError(f"no convergence within {max_iterations} iterations")