"""Bracketing root finders for scalar equations ``f(x) = 0``.

All strategies share the signature ``(function, a, b, eps)`` and return the
root estimate together with an :class:`~analysiskit.utils.convergence.IterationInfo`.
The bracket ``[a, b]`` is assumed, not checked, to contain a sign change.
Every loop is bounded by :data:`~analysiskit.utils.convergence.MAX_ITERATIONS`.
"""

from __future__ import annotations

from analysiskit.utils.convergence import (
    MAX_ITERATIONS,
    ConvergenceStatus,
    IterationInfo,
    finish_iteration,
)
from analysiskit.utils.numerics import secant_step
from analysiskit.utils.types import Scalar, ScalarFunction

__all__ = [
    "bisection",
    "chord",
    "secant",
    "false_position",
]


def _refine(function: ScalarFunction, x1: Scalar, x2: Scalar) -> Scalar:
    """One secant step through the final bracket; keeps ``x2`` if the step is undefined."""
    step = secant_step(x1, x2, function(x1), function(x2))
    return x2 if step is None else step


def bisection(
    function: ScalarFunction, a: float, b: float, eps: float
) -> tuple[float, IterationInfo]:
    """Interval halving on a real bracket.

    The residual at ``b`` is evaluated once; the midpoint replaces ``b``'s side
    of the bracket while it has the same sign as ``f(b)``. Once the bracket is
    narrower than ``eps`` a secant step through its ends gives the estimate.

    Args:
        function: Real scalar function.
        a: Left end of the bracket.
        b: Right end of the bracket.
        eps: Bracket width tolerance.

    Returns:
        Tuple ``(root, info)``.
    """
    x1, x2 = a, b
    fb = function(b)
    n = 0
    while abs(x2 - x1) > eps and n < MAX_ITERATIONS:
        midpoint = 0.5 * (x1 + x2)
        if fb * function(midpoint) > 0:
            x2 = midpoint
        else:
            x1 = midpoint
        n += 1

    status = ConvergenceStatus.CONVERGED if abs(x2 - x1) <= eps else ConvergenceStatus.CAP_REACHED
    return _refine(function, x1, x2), finish_iteration("bisection", n, status)


def chord(
    function: ScalarFunction, a: Scalar, b: Scalar, eps: float
) -> tuple[Scalar, IterationInfo]:
    """Chord method with the end ``a`` held fixed.

    Starts from ``(b - a) / 2`` and repeatedly replaces the estimate by the
    root of the chord through ``(a, f(a))`` and ``(x, f(x))``. Stops when the
    residual scaled by ``1/|b|`` drops to ``eps`` (the plain residual when
    ``b`` is zero).

    Args:
        function: Real or complex scalar function.
        a: Fixed end of the chord.
        b: Other end of the bracket, also used to scale the residual.
        eps: Residual tolerance.

    Returns:
        Tuple ``(root, info)``.
    """
    scale = abs(b) if b != 0 else 1.0
    fa = function(a)
    x0 = (b - a) / 2.0
    f0 = function(x0)
    n = 0
    status = ConvergenceStatus.CAP_REACHED
    while n < MAX_ITERATIONS:
        if abs(f0) / scale <= eps:
            status = ConvergenceStatus.CONVERGED
            break
        denom = fa - f0
        if denom == 0:
            status = ConvergenceStatus.STALLED
            break
        x0 = x0 - f0 * (a - x0) / denom
        f0 = function(x0)
        n += 1
    else:
        if abs(f0) / scale <= eps:
            status = ConvergenceStatus.CONVERGED

    return x0, finish_iteration("chord", n, status)


def secant(
    function: ScalarFunction, a: Scalar, b: Scalar, eps: float
) -> tuple[Scalar, IterationInfo]:
    """Secant iteration started from the two bracket ends.

    Args:
        function: Real or complex scalar function.
        a: First starting point.
        b: Second starting point.
        eps: Residual tolerance.

    Returns:
        Tuple ``(root, info)``.
    """
    x1, x2 = a, b
    f1, f2 = function(a), function(b)
    n = 0
    status = ConvergenceStatus.CAP_REACHED
    while n < MAX_ITERATIONS:
        if abs(f2) <= eps:
            status = ConvergenceStatus.CONVERGED
            break
        step = secant_step(x1, x2, f1, f2)
        if step is None:
            status = ConvergenceStatus.STALLED
            break
        x1, f1 = x2, f2
        x2 = step
        f2 = function(x2)
        n += 1
    else:
        if abs(f2) <= eps:
            status = ConvergenceStatus.CONVERGED

    return x2, finish_iteration("secant", n, status)


def false_position(
    function: ScalarFunction, a: Scalar, b: Scalar, eps: float
) -> tuple[Scalar, IterationInfo]:
    """Regula falsi with an early exit on a small trial residual.

    The trial point is the secant root of the current bracket. It replaces the
    ``b`` side when ``Re(f(b)) * Re(f(trial)) > 0``. For real functions this is
    the usual sign test; for complex functions it only compares real parts and
    is not a rigorous bracketing criterion.

    Args:
        function: Real or complex scalar function.
        a: Left end of the bracket.
        b: Right end of the bracket.
        eps: Tolerance on both the bracket width and the trial residual.

    Returns:
        Tuple ``(root, info)``.
    """
    x1, x2 = a, b
    fb = function(b)
    n = 0
    status = ConvergenceStatus.CAP_REACHED
    while n < MAX_ITERATIONS:
        if abs(x2 - x1) <= eps:
            status = ConvergenceStatus.CONVERGED
            break
        trial = secant_step(x1, x2, function(x1), function(x2))
        if trial is None:
            status = ConvergenceStatus.STALLED
            break
        f_trial = function(trial)
        if fb.real * f_trial.real > 0:
            x2 = trial
        else:
            x1 = trial
        if abs(f_trial) < eps:
            status = ConvergenceStatus.CONVERGED
            break
        n += 1

    return _refine(function, x1, x2), finish_iteration("false position", n, status)
