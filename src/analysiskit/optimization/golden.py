"""Golden-section search for the extremum of a unimodal real function."""

from __future__ import annotations

import operator

from analysiskit.utils.convergence import (
    MAX_ITERATIONS,
    ConvergenceStatus,
    IterationInfo,
    finish_iteration,
)
from analysiskit.utils.numerics import GOLDEN_RATIO
from analysiskit.utils.types import ScalarFunction

__all__ = ["golden_section"]


def golden_section(
    function: ScalarFunction,
    a: float,
    b: float,
    eps: float,
    maximize: bool = False,
) -> tuple[float, IterationInfo]:
    """Shrinks ``[a, b]`` around the minimum (or maximum) of ``function``.

    Each step places two interior probes at ``b - (b - a)/φ`` and
    ``a + (b - a)/φ`` and discards the part of the interval beyond the worse
    probe. The search stops once the interval is narrower than ``eps``.

    Args:
        function: Real scalar function, assumed unimodal on ``[a, b]``.
        a: Left end of the interval.
        b: Right end of the interval.
        eps: Interval width tolerance.
        maximize: Search for the maximum instead of the minimum.

    Returns:
        Tuple ``(x, info)`` with ``x`` the midpoint of the final interval.
    """
    worse = operator.lt if maximize else operator.gt
    status = ConvergenceStatus.CAP_REACHED
    n = 0
    while n < MAX_ITERATIONS:
        x1 = b - (b - a) / GOLDEN_RATIO
        x2 = a + (b - a) / GOLDEN_RATIO
        if worse(function(x1), function(x2)):
            a = x1
        else:
            b = x2
        n += 1
        if abs(b - a) < eps:
            status = ConvergenceStatus.CONVERGED
            break

    return (a + b) / 2.0, finish_iteration("golden-section search", n, status)
