"""Composite Newton-Cotes rules for definite integrals."""

from __future__ import annotations

from typing import Callable

Function = Callable[[float], float]


def _step(lower: float, upper: float, intervals: int, multiple: int) -> float:
    if intervals < 1:
        raise ValueError("the number of intervals must be positive")
    if intervals % multiple:
        raise ValueError(f"the number of intervals must be a multiple of {multiple}")
    return (upper - lower) / intervals


def trapezoidal(f: Function, lower: float, upper: float, intervals: int) -> float:
    """Integrate ``f`` over ``[lower, upper]`` by the composite trapezoidal rule."""
    h = _step(lower, upper, intervals, 1)
    inner = sum(f(lower + i * h) for i in range(1, intervals))
    return (f(lower) + f(upper) + 2 * inner) * h / 2


def simpson_one_third(f: Function, lower: float, upper: float, intervals: int) -> float:
    """Integrate ``f`` by Simpson's 1/3 rule; ``intervals`` must be even."""
    h = _step(lower, upper, intervals, 2)
    inner = sum(
        (2 if i % 2 == 0 else 4) * f(lower + i * h) for i in range(1, intervals)
    )
    return (f(lower) + f(upper) + inner) * h / 3


def simpson_three_eighths(
    f: Function, lower: float, upper: float, intervals: int
) -> float:
    """Integrate ``f`` by Simpson's 3/8 rule; ``intervals`` must be a multiple of 3."""
    h = _step(lower, upper, intervals, 3)
    inner = sum(
        (2 if i % 3 == 0 else 3) * f(lower + i * h) for i in range(1, intervals)
    )
    return (f(lower) + f(upper) + inner) * 3 * h / 8