"""Root finding for equations of one variable."""

from __future__ import annotations

from typing import Callable

Function = Callable[[float], float]


class RootNotBracketedError(ValueError):
    """Raised when the end points of an interval do not enclose a sign change."""


class NotConvergentError(RuntimeError):
    """Raised when an iteration fails to reach the requested tolerance."""


def _check_bracket(f: Function, a: float, b: float, *, strict: bool) -> None:
    product = f(a) * f(b)
    if product > 0 or (strict and product == 0):
        raise RootNotBracketedError(
            f"f({a}) and f({b}) do not have opposite signs"
        )


def bisection(f: Function, a: float, b: float, tol: float = 1e-5) -> float:
    """Find a root of ``f`` in ``[a, b]`` by repeated halving of the interval.

    ``f(a)`` and ``f(b)`` must have strictly opposite signs.
    """
    _check_bracket(f, a, b, strict=True)
    while True:
        c = b + (a - b) / 2
        fc = f(c)
        if fc == 0:
            return c
        if fc * f(a) < 0:
            b = c
        else:
            a = c
        if abs(b - a) < tol:
            return c


def regula_falsi(f: Function, a: float, b: float, tol: float = 1e-4) -> float:
    """Find a root of ``f`` in ``[a, b]`` by the method of false position.

    Iteration stops once two successive estimates differ by less than ``tol``.
    """
    _check_bracket(f, a, b, strict=False)
    previous: float | None = None
    while True:
        fa, fb = f(a), f(b)
        if fa == fb:
            raise NotConvergentError("function values at both end points coincide")
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)
        if fc * fa < 0:
            b = c
        elif fc * fb < 0:
            a = c
        if previous is not None and abs(previous - c) < tol:
            return c
        previous = c


def fixed_point(
    f: Function,
    g: Function,
    x0: float,
    tol: float = 1e-6,
    max_steps: int = 100,
) -> float:
    """Solve ``f(x) = 0`` by iterating ``x = g(x)`` from ``x0``.

    Stops when ``|f(x)| <= tol``; raises :class:`NotConvergentError` after
    ``max_steps`` iterations without meeting the tolerance.
    """
    x = x0
    for _ in range(max_steps):
        try:
            x = g(x)
            if abs(f(x)) <= tol:
                return x
        except OverflowError as exc:
            raise NotConvergentError("iteration diverged") from exc
    raise NotConvergentError(f"no convergence within {max_steps} steps")


def newton_raphson(
    f: Function,
    df: Function,
    x0: float,
    tol: float = 1e-6,
    max_steps: int = 100,
) -> float:
    """Solve ``f(x) = 0`` by Newton's method with derivative ``df``.

    Stops when ``|f(x)| <= tol``; raises :class:`NotConvergentError` on a zero
    derivative or after ``max_steps`` iterations.
    """
    x = x0
    for _ in range(max_steps):
        slope = df(x)
        if slope == 0:
            raise NotConvergentError(f"derivative vanishes at x = {x}")
        x = x - f(x) / slope
        if abs(f(x)) <= tol:
            return x
    raise NotConvergentError(f"no convergence within {max_steps} steps")