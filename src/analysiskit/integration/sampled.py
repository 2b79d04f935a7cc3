"""Quadrature rules applied to integrands sampled in advance.

The rules mirror :mod:`analysiskit.integration.quadrature` but read the first
``n`` entries of an array of values ``y`` taken at equally spaced points of
``[a, b]`` instead of calling a function.
"""

from __future__ import annotations

import numpy as np

from analysiskit.integration.quadrature import simpson_weights
from analysiskit.utils.types import Scalar, ScalarArray

__all__ = [
    "rectangle_samples",
    "midpoint_samples",
    "trapezoidal_samples",
    "simpson_samples",
]


def rectangle_samples(y: ScalarArray, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Rectangle rule: each of the first ``n`` samples weighted by ``(b - a) / n``."""
    h = (b - a) / n
    return h * np.sum(y[:n])


def midpoint_samples(y: ScalarArray, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Averages adjacent samples over ``n - 1`` partitions.

    With no function to probe between nodes, the midpoint value of each
    partition is taken as the mean of its end samples. Returns NaN for fewer
    than two samples.
    """
    if n < 2:
        return np.nan
    h = (b - a) / (n - 1)
    return h * np.sum(0.5 * (y[:n - 1] + y[1:n]))


def trapezoidal_samples(y: ScalarArray, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Trapezoidal rule over the first ``n`` samples. Returns NaN for fewer than two samples."""
    if n < 2:
        return np.nan
    h = (b - a) / (n - 1)
    return 0.5 * h * np.sum(y[:n - 1] + y[1:n])


def simpson_samples(y: ScalarArray, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Composite Simpson rule over the first ``n`` samples.

    Returns NaN when fewer than three samples are used or the spacing is zero.
    """
    if n < 3:
        return np.nan
    h = (b - a) / (n - 1)
    if h == 0:
        return np.nan
    return h * np.dot(simpson_weights(n), y[:n])
