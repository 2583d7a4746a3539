"""Least-squares curve fitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Line:
    """The straight line ``y = intercept + slope * x``."""

    intercept: float
    slope: float

    def __call__(self, x: float) -> float:
        return self.intercept + self.slope * x


def fit_straight_line(xs: Iterable[float], ys: Iterable[float]) -> Line:
    """Fit ``y = a + b x`` to the observations by least squares."""
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    n = len(xs)
    if n < 2:
        raise ValueError("at least two observations are needed")
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise ValueError("all x values are equal; the line is undetermined")
    intercept = (sum_y * sum_x2 - sum_x * sum_xy) / denominator
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    return Line(intercept, slope)