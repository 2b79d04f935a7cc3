"""Explicit Adams–Bashforth multistep integration."""

from __future__ import annotations

from typing import Callable

import numpy as np

from analysiskit.utils.linalg import solve_or_pinv
from analysiskit.utils.types import MeshFunction, Scalar, ScalarArray

__all__ = [
    "adams_bashforth_coefficients",
    "adams_bashforth",
]


def adams_bashforth_coefficients(order: int) -> np.ndarray:
    """Solves for the weights of the ``order``-step Adams–Bashforth formula.

    The weights ``c`` satisfy ``A @ c = b`` with ``A[i, j] = j**i`` and
    ``b[i] = (-1)**i / (i + 1)``. For ``order = 2`` this gives ``[3/2, -1/2]``.

    Args:
        order: Number of steps, at least 1.

    Returns:
        Real array of ``order`` weights, newest derivative first.

    Raises:
        ValueError: If ``order < 1``.
    """
    if order < 1:
        raise ValueError(f"order must be >= 1; got {order}.")
    i = np.arange(order)[:, None]
    j = np.arange(order, dtype=float)[None, :]
    matrix = np.power(j, i)
    rhs = (-1.0) ** np.arange(order) / (np.arange(order) + 1.0)
    return solve_or_pinv(matrix, rhs, warn_context="Adams–Bashforth coefficients")


def adams_bashforth(
    function: MeshFunction,
    x: ScalarArray,
    y0: Scalar,
    order: int,
    starter: Callable[[MeshFunction, ScalarArray, Scalar], ScalarArray],
) -> ScalarArray:
    """Integrates ``y' = f(x, y)`` with an ``order``-step Adams–Bashforth scheme.

    The first ``order`` values come from ``starter`` (a one-step solver)
    applied to ``x[:order + 1]``. Every later value ``y[i]`` (approximating
    ``y(x[i + 1])``) is ``y[i - 1] + sum_j h_j c_j f(x[i - j], y[i - j - 1])``
    with ``h_j = x[i - j] - x[i - j - 1]``.

    Args:
        function: Right-hand side ``f(x, y)``.
        x: 1D grid with more than ``order + 1`` points.
        y0: Initial value at ``x[0]``.
        order: Number of steps.
        starter: One-step solver used for the first ``order`` values.

    Returns:
        Array of length ``len(x) - 1``.
    """
    c = adams_bashforth_coefficients(order)
    n = len(x) - 1
    y = list(starter(function, x[:order + 1], y0)[:order])

    for i in range(order, n):
        total = y[i - 1]
        for j in range(order):
            t = x[i - j]
            h = t - x[i - j - 1]
            total = total + h * c[j] * function(t, y[i - j - 1])
        y.append(total)
    return np.asarray(y)
