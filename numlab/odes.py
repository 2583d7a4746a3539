"""Step methods for first-order initial value problems ``y' = f(x, y)``."""

from __future__ import annotations

from typing import Callable

Derivative = Callable[[float, float], float]

_EPS = 1e-7


def euler(f: Derivative, x0: float, y0: float, xn: float, steps: int) -> float:
    """Approximate ``y(xn)`` with ``steps`` equal steps of Euler's method."""
    if steps < 1:
        raise ValueError("the number of steps must be positive")
    h = (xn - x0) / steps
    x, y = x0, y0
    for _ in range(steps):
        y += h * f(x, y)
        x += h
    return y


def modified_euler(f: Derivative, x0: float, y0: float, xn: float, h: float) -> float:
    """Approximate ``y(xn)`` by Euler's predictor-corrector method with step ``h``."""
    if h == 0:
        raise ValueError("the step size must be non-zero")
    direction = 1 if h > 0 else -1
    x, y = x0, y0
    while (xn - x) * direction > _EPS:
        predictor = h * f(x, y)
        corrector = h * f(x + h, y + predictor)
        y += (predictor + corrector) / 2
        x += h
    return y


def runge_kutta4(f: Derivative, x0: float, y0: float, xn: float, h: float) -> float:
    """Approximate ``y(xn)`` by the classical fourth-order Runge-Kutta method."""
    if h <= 0:
        raise ValueError("the step size must be positive")
    x, y = x0, y0
    while x < xn - h * 1e-9:
        k1 = h * f(x, y)
        k2 = h * f(x + h / 2, y + k1 / 2)
        k3 = h * f(x + h / 2, y + k2 / 2)
        k4 = h * f(x + h, y + k3)
        y += (k1 + 2 * k2 + 2 * k3 + k4) / 6
        x += h
    return y