"""Provides the Differential class.

Solves initial-value problems ``y' = f(x, y)``, ``y(x[0]) = y0`` on a
user-supplied grid, either with a one-step Runge–Kutta method or with an
Adams–Bashforth multistep scheme started by that method.

Example:
    >>> import numpy as np
    >>> from analysiskit.differential import Differential
    >>> x = np.linspace(0.0, 1.0, 101)
    >>> y = Differential().compute(lambda x, y: y, x, 1.0)
    >>> round(float(y[-1]), 6)
    2.718282
"""

from __future__ import annotations

import operator
from typing import Callable, Iterable

import numpy as np

from analysiskit.differential.adams_bashforth import adams_bashforth, adams_bashforth_coefficients
from analysiskit.differential.runge_kutta import euler, fehlberg, runge_kutta2, runge_kutta4
from analysiskit.methods import MethodRegistry, MethodSpec
from analysiskit.utils.types import ArrayLike1D, MeshFunction, Scalar, ScalarArray
from analysiskit.utils.validate import as_scalar_array

__all__ = [
    "Differential",
    "available_methods",
    "register_method",
]

_REGISTRY = MethodRegistry(
    "differential",
    [
        MethodSpec("euler", euler, ("forward-euler",)),
        MethodSpec("runge_kutta2", runge_kutta2, ("rk2", "midpoint")),
        MethodSpec("runge_kutta4", runge_kutta4, ("rk4", "classic")),
        MethodSpec("fehlberg", fehlberg, ("rkf", "rkf45", "runge-kutta-fehlberg")),
    ],
)


def register_method(name: str, function: Callable, *, aliases: Iterable[str] = ()) -> None:
    """Register a new one-step ODE solver.

    Args:
        name: Canonical public name of the method.
        function: Callable ``(function, x, y0) -> array`` returning ``len(x) - 1`` values.
        aliases: Additional accepted spellings.
    """
    _REGISTRY.register(name, function, aliases=aliases)


def available_methods() -> list[str]:
    """List canonical one-step ODE method names.

    Returns:
        List of method names.
    """
    return _REGISTRY.available()


class Differential:
    """Initial-value ODE solver on a fixed grid.

    Attributes:
        method: Canonical name of the one-step method.
    """

    def __init__(self, method: str = "runge_kutta4"):
        """Initializes the solver.

        Args:
            method: One-step method name or alias (``"euler"``,
                ``"runge_kutta2"``, ``"runge_kutta4"`` or ``"fehlberg"``).

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        self.method = method

    @property
    def method(self) -> str:
        """Canonical name of the one-step method."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = _REGISTRY.resolve(value).name

    @staticmethod
    def get_coefficients(order: int) -> np.ndarray:
        """Returns the Adams–Bashforth weights for an ``order``-step scheme."""
        return adams_bashforth_coefficients(order)

    def compute(
        self,
        function: MeshFunction,
        x: ArrayLike1D,
        y0: Scalar,
        order: int | None = None,
    ) -> ScalarArray:
        """Integrates ``y' = function(x, y)`` across the grid ``x``.

        Args:
            function: Right-hand side ``f(x, y)``.
            x: 1D grid of abscissae, not necessarily uniform.
            y0: Value of the solution at ``x[0]``.
            order: Number of Adams–Bashforth steps. The multistep scheme is used
                only when ``1 < order < len(x) - 1``; otherwise (including
                ``None``) the one-step method runs over the whole grid.

        Returns:
            Array of ``len(x) - 1`` values; element ``i`` approximates
            ``y(x[i + 1])``.

        Raises:
            ValueError: If ``x`` is not 1D.
            TypeError: If ``order`` is not an integer.
        """
        grid = as_scalar_array(x, name="x")
        if np.iscomplexobj(grid) or np.iscomplexobj(y0):
            grid = grid.astype(complex)
            y0 = complex(y0)
        else:
            y0 = float(y0)

        step = _REGISTRY.resolve(self._method).function
        if order is not None:
            order = operator.index(order)
            if 1 < order < grid.shape[0] - 1:
                return adams_bashforth(function, grid, y0, order, step)
        return step(function, grid, y0)
