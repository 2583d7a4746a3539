"""Finite-difference tables and polynomial interpolation."""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Sequence


def _difference_columns(ys: Sequence[float]) -> list[list[float]]:
    """Return ``columns`` with ``columns[k][i]`` equal to the k-th forward difference at ``i``."""
    values = [float(y) for y in ys]
    if not values:
        raise ValueError("at least one value is needed")
    columns = [values]
    while len(columns[-1]) > 1:
        previous = columns[-1]
        columns.append([b - a for a, b in zip(previous, previous[1:])])
    return columns


def forward_differences(ys: Sequence[float]) -> list[list[float]]:
    """Return the forward difference table, one row per point.

    Row ``i`` holds ``y_i, Δy_i, Δ²y_i, ...`` as far as the data allows.
    """
    columns = _difference_columns(ys)
    size = len(columns)
    return [[column[i] for column in columns[: size - i]] for i in range(size)]


def backward_differences(ys: Sequence[float]) -> list[list[float]]:
    """Return the backward difference table, one row per point.

    Row ``i`` holds ``y_i, ∇y_i, ..., ∇^i y_i``.
    """
    columns = _difference_columns(ys)
    return [[columns[k][i - k] for k in range(i + 1)] for i in range(len(columns))]


def _paired(xs: Sequence[float], ys: Sequence[float]) -> tuple[list[float], list[float]]:
    xs, ys = [float(x) for x in xs], [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        raise ValueError("at least one point is needed")
    return xs, ys


def _equally_spaced(
    xs: Sequence[float], ys: Sequence[float]
) -> tuple[list[float], list[float], float]:
    xs, ys = _paired(xs, ys)
    if len(xs) < 2:
        raise ValueError("at least two points are needed")
    h = xs[1] - xs[0]
    if h == 0 or any(
        not math.isclose(b - a, h, rel_tol=1e-9) for a, b in zip(xs, xs[1:])
    ):
        raise ValueError("the x values must be distinct and equally spaced")
    return xs, ys, h


def newton_forward(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Newton's forward difference formula."""
    xs, ys, h = _equally_spaced(xs, ys)
    u = (x - xs[0]) / h
    result, coefficient = 0.0, 1.0
    for k, column in enumerate(_difference_columns(ys)):
        result += coefficient * column[0]
        coefficient *= (u - k) / (k + 1)
    return result


def newton_backward(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Newton's backward difference formula."""
    xs, ys, h = _equally_spaced(xs, ys)
    u = (x - xs[-1]) / h
    result, coefficient = 0.0, 1.0
    for k, column in enumerate(_difference_columns(ys)):
        result += coefficient * column[-1]
        coefficient *= (u + k) / (k + 1)
    return result


def gauss_forward(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Gauss's forward central difference formula.

    The origin is the last tabulated point below ``x``; terms are added for as
    long as the table holds the differences they need.
    """
    xs, ys, h = _equally_spaced(xs, ys)
    if h < 0:
        raise ValueError("the x values must be increasing")
    if not xs[0] <= x <= xs[-1]:
        raise ValueError(f"{x} lies outside the tabulated range")
    origin = max(bisect_left(xs, x) - 1, 0)
    u = (x - xs[origin]) / h
    result, coefficient = 0.0, 1.0
    for k, column in enumerate(_difference_columns(ys)):
        start = origin - k // 2
        if start < 0 or start >= len(column):
            break
        result += coefficient * column[start]
        factor = u + k // 2 if k % 2 == 0 else u - (k + 1) // 2
        coefficient *= factor / (k + 1)
    return result


def lagrange(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Lagrange's formula; the xs need not be equally spaced."""
    xs, ys = _paired(xs, ys)
    if len(set(xs)) != len(xs):
        raise ValueError("the x values must be distinct")
    total = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        weight = math.prod(
            (x - xj) / (xi - xj) for j, xj in enumerate(xs) if j != i
        )
        total += weight * yi
    return total