"""Explicit one-step solvers for ``y' = f(x, y)`` on a given grid.

Each solver takes ``(function, x, y0)`` and returns the ``len(x) - 1`` values
that approximate ``y(x[1]), ..., y(x[-1])``; the initial value is not
repeated. The grid does not need to be uniform.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from analysiskit.utils.types import MeshFunction, Scalar, ScalarArray

__all__ = [
    "ButcherTableau",
    "EULER",
    "RUNGE_KUTTA2",
    "RUNGE_KUTTA4",
    "FEHLBERG",
    "explicit_runge_kutta",
    "euler",
    "runge_kutta2",
    "runge_kutta4",
    "fehlberg",
]


@dataclass(frozen=True)
class ButcherTableau:
    """Coefficients of an explicit Runge–Kutta scheme.

    Attributes:
        nodes: Stage abscissae ``c_s`` as fractions of the step.
        matrix: Lower-triangular stage weights; row ``s`` has ``s`` entries.
        weights: Weights ``b_s`` combining the stages into the update.
    """

    nodes: tuple[float, ...]
    matrix: tuple[tuple[float, ...], ...]
    weights: tuple[float, ...]


EULER = ButcherTableau(nodes=(0.0,), matrix=((),), weights=(1.0,))

# Explicit midpoint rule.
RUNGE_KUTTA2 = ButcherTableau(
    nodes=(0.0, 0.5),
    matrix=((), (0.5,)),
    weights=(0.0, 1.0),
)

RUNGE_KUTTA4 = ButcherTableau(
    nodes=(0.0, 0.5, 0.5, 1.0),
    matrix=((), (0.5,), (0.0, 0.5), (0.0, 0.0, 1.0)),
    weights=(1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0),
)

# Runge–Kutta–Fehlberg stages; the update uses the embedded weights
# 25/216, 1408/2565, 2197/4104, -1/5 and no step-size control. The sixth
# stage only feeds the error estimate, so it is not evaluated.
FEHLBERG = ButcherTableau(
    nodes=(0.0, 0.25, 3.0 / 8.0, 12.0 / 13.0, 1.0),
    matrix=(
        (),
        (0.25,),
        (3.0 / 32.0, 9.0 / 32.0),
        (1932.0 / 2197.0, -7200.0 / 2197.0, 7296.0 / 2197.0),
        (439.0 / 216.0, -8.0, 3680.0 / 513.0, -845.0 / 4104.0),
    ),
    weights=(25.0 / 216.0, 0.0, 1408.0 / 2565.0, 2197.0 / 4104.0, -0.2),
)


def explicit_runge_kutta(
    function: MeshFunction,
    x: ScalarArray,
    y0: Scalar,
    tableau: ButcherTableau,
) -> ScalarArray:
    """Advances ``y0`` across the grid ``x`` with the given explicit scheme.

    Args:
        function: Right-hand side ``f(x, y)``.
        x: 1D grid of abscissae; ``x[0]`` is where ``y0`` is given.
        y0: Initial value.
        tableau: Scheme coefficients.

    Returns:
        Array of length ``len(x) - 1``.
    """
    y = y0
    result = []
    for i in range(len(x) - 1):
        h = x[i + 1] - x[i]
        stages = []
        for c, row in zip(tableau.nodes, tableau.matrix):
            increment = sum(a * k for a, k in zip(row, stages))
            stages.append(h * function(x[i] + c * h, y + increment))
        y = y + sum(b * k for b, k in zip(tableau.weights, stages))
        result.append(y)
    return np.asarray(result)


def euler(function: MeshFunction, x: ScalarArray, y0: Scalar) -> ScalarArray:
    """Forward Euler method."""
    return explicit_runge_kutta(function, x, y0, EULER)


def runge_kutta2(function: MeshFunction, x: ScalarArray, y0: Scalar) -> ScalarArray:
    """Second-order Runge–Kutta (midpoint) method."""
    return explicit_runge_kutta(function, x, y0, RUNGE_KUTTA2)


def runge_kutta4(function: MeshFunction, x: ScalarArray, y0: Scalar) -> ScalarArray:
    """Classical fourth-order Runge–Kutta method."""
    return explicit_runge_kutta(function, x, y0, RUNGE_KUTTA4)


def fehlberg(function: MeshFunction, x: ScalarArray, y0: Scalar) -> ScalarArray:
    """Runge–Kutta–Fehlberg stages without adaptive step control."""
    return explicit_runge_kutta(function, x, y0, FEHLBERG)
