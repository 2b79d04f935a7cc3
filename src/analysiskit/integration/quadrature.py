"""Newton–Cotes quadrature rules applied to a callable integrand.

Every rule has the signature ``(function, a, b, n)``. The rectangle, midpoint
and trapezoidal rules split ``[a, b]`` into ``n`` partitions of width
``(b - a) / n``; Simpson's rule uses ``n`` equally spaced nodes. The bounds may
be complex, in which case the integral is taken along the straight segment
from ``a`` to ``b``.
"""

from __future__ import annotations

import numpy as np

from analysiskit.utils.types import Scalar, ScalarArray, ScalarFunction

__all__ = [
    "sample_function",
    "rectangle",
    "midpoint",
    "trapezoidal",
    "simpson",
    "simpson_weights",
]


def sample_function(function: ScalarFunction, nodes: ScalarArray) -> ScalarArray:
    """Evaluates ``function`` at every node and stacks the results into an array."""
    return np.asarray([function(x) for x in nodes])


def rectangle(function: ScalarFunction, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Left-endpoint rectangle rule with ``n`` partitions."""
    h = (b - a) / n
    return h * np.sum(sample_function(function, a + np.arange(n) * h))


def midpoint(function: ScalarFunction, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Midpoint rule with ``n`` partitions."""
    h = (b - a) / n
    return h * np.sum(sample_function(function, a + (np.arange(n) + 0.5) * h))


def trapezoidal(function: ScalarFunction, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Trapezoidal rule with ``n`` partitions."""
    h = (b - a) / n
    y = sample_function(function, a + np.arange(n + 1) * h)
    return 0.5 * h * np.sum(y[:-1] + y[1:])


def simpson_weights(n: int) -> np.ndarray:
    """Returns the composite Simpson weights for ``n >= 3`` nodes, in units of the node spacing.

    For an odd node count this is the composite 1/3 rule. For an even count
    the first four nodes are integrated with the 3/8 rule and the remaining
    (even) number of partitions with the 1/3 rule.

    Args:
        n: Number of equally spaced nodes.

    Returns:
        Array of length ``n`` such that ``h * weights @ y`` approximates the integral.
    """
    weights = np.zeros(n)
    start = 0
    if n % 2 == 0:
        weights[:4] += np.array([3.0, 9.0, 9.0, 3.0]) / 8.0
        start = 3
    for i in range(start, n - 1, 2):
        weights[i:i + 3] += np.array([1.0, 4.0, 1.0]) / 3.0
    return weights


def simpson(function: ScalarFunction, a: Scalar, b: Scalar, n: int) -> Scalar:
    """Composite Simpson rule on ``n`` equally spaced nodes.

    Returns NaN when fewer than three nodes are requested or the interval is
    empty.
    """
    if n < 3 or b == a:
        return np.nan
    h = (b - a) / (n - 1)
    y = sample_function(function, a + np.arange(n) * h)
    return h * np.dot(simpson_weights(n), y)
