"""Univariate interpolation through sample nodes ``(x[i], y[i])``.

All strategies take ``(x, y, xl)`` with validated 1D arrays of equal length and
return the interpolant at ``xl``. Nodes must be distinct; the linear method
also expects them in increasing order.
"""

from __future__ import annotations

import numpy as np

from analysiskit.utils.types import Scalar, ScalarArray

__all__ = [
    "locate_interval",
    "linear",
    "lagrange",
    "newton",
    "divided_differences",
    "barycentric_weights",
    "barycentric",
]


def locate_interval(nodes: np.ndarray, value: float) -> int | None:
    """Returns ``i`` such that ``nodes[i] <= value < nodes[i + 1]``, or None.

    Intervals are half-open, so the last node itself lies in no interval.
    """
    inside = np.nonzero((value >= nodes[:-1]) & (value < nodes[1:]))[0]
    if inside.size == 0:
        return None
    return int(inside[-1])


def linear(x: ScalarArray, y: ScalarArray, xl: float) -> Scalar:
    """Piecewise-linear interpolation; 0 when ``xl`` lies outside ``[x[0], x[-1])``."""
    i = locate_interval(x, xl)
    if i is None:
        return 0.0
    return y[i] + (xl - x[i]) * (y[i + 1] - y[i]) / (x[i + 1] - x[i])


def lagrange(x: ScalarArray, y: ScalarArray, xl: Scalar) -> Scalar:
    """Lagrange form of the interpolating polynomial, ``O(n**2)`` per query."""
    total = 0.0
    for i in range(x.shape[0]):
        term = y[i]
        for j in range(x.shape[0]):
            if i != j:
                term = term * (xl - x[j]) / (x[i] - x[j])
        total = total + term
    return total


def divided_differences(x: ScalarArray, y: ScalarArray) -> ScalarArray:
    """Newton divided-difference coefficients ``f[x0], f[x0, x1], ...``.

    The table is updated in place, one column per pass.
    """
    table = np.array(y, copy=True)
    n = x.shape[0]
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            table[j] = (table[j - 1] - table[j]) / (x[j - 1 - i] - x[j])
    return table


def newton(x: ScalarArray, y: ScalarArray, xl: Scalar) -> Scalar:
    """Newton form of the interpolating polynomial, evaluated by nested multiplication."""
    coefficients = divided_differences(x, y)
    value = coefficients[-1]
    for i in range(x.shape[0] - 2, -1, -1):
        value = coefficients[i] + (xl - x[i]) * value
    return value


def barycentric_weights(x: ScalarArray) -> ScalarArray:
    """Weights ``w[i] = 1 / prod_{j != i} (x[i] - x[j])``."""
    diff = x[:, None] - x[None, :]
    np.fill_diagonal(diff, 1.0)
    return 1.0 / np.prod(diff, axis=1)


def barycentric(x: ScalarArray, y: ScalarArray, xl: Scalar) -> Scalar:
    """Barycentric formula of the second kind.

    A query that coincides with a node returns that node's value.
    """
    hit = np.nonzero(x == xl)[0]
    if hit.size:
        return y[hit[0]]
    terms = barycentric_weights(x) / (xl - x)
    return np.sum(y * terms) / np.sum(terms)
