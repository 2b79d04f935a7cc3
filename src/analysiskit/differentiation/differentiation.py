"""Provides the Differentiation class.

Derivatives of arbitrary order are estimated from ``points + 1`` equally
spaced samples ``x, x + h, ..., x + points * h``. The stencil weights are the
rows of the inverted Taylor table from
:func:`analysiskit.differentiation.stencil.difference_coefficients`.

Example:
    >>> from analysiskit.differentiation import Differentiation
    >>> d = Differentiation(points=4)
    >>> round(d.compute(lambda x: x**3, 2.0, 0.1, 1), 8)
    12.0
"""

from __future__ import annotations

from typing import Any

import numpy as np

from analysiskit.differentiation.stencil import difference_coefficients
from analysiskit.utils.numerics import as_python_scalar
from analysiskit.utils.types import ArrayLike1D, Scalar, ScalarFunction
from analysiskit.utils.validate import as_scalar_array, validate_int_setting

__all__ = ["Differentiation"]


class Differentiation:
    """Finite-difference differentiation on a forward stencil.

    Attributes:
        points: Number of steps in the stencil; the stencil has ``points + 1`` samples.
    """

    def __init__(self, points: int):
        """Initializes the differentiator.

        Args:
            points: Number of stencil steps, at least 0.

        Raises:
            TypeError: If ``points`` is not an integer.
            ValueError: If ``points`` is negative.
        """
        self.points = points

    @property
    def points(self) -> int:
        """Number of stencil steps."""
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        self._points = validate_int_setting(value, "points", 0)

    @staticmethod
    def get_coefficients(length: int) -> np.ndarray:
        """Returns the inverted ``length x length`` finite-difference table.

        Args:
            length: Number of stencil points.

        Returns:
            Array whose row ``k`` holds the weights for the ``k``-th derivative.
        """
        return difference_coefficients(length)

    @staticmethod
    def _weights(points: int, order: Any) -> np.ndarray:
        order = validate_int_setting(order, "order", 0)
        if order > points:
            raise ValueError(
                f"order must not exceed the number of stencil steps ({points}); got {order}."
            )
        return difference_coefficients(points + 1)[order]

    def compute(
        self,
        function: ScalarFunction | ArrayLike1D,
        x: Scalar | int,
        h: Scalar,
        order: int,
    ) -> Scalar:
        """Estimates the ``order``-th derivative.

        Args:
            function: Callable to differentiate, or a 1D array of samples taken
                with spacing ``h``.
            x: Evaluation point for a callable, or the index of the first
                stencil sample for an array.
            h: Step size (may be complex for a callable).
            order: Derivative order, ``0 <= order <= points``.

        Returns:
            The derivative estimate as ``float`` or ``complex``; NaN if ``h``
            is zero and ``order > 0``.

        Raises:
            ValueError: If ``order`` is out of range, or the stencil runs past
                the end of the sample array.
        """
        points = self._points
        weights = self._weights(points, order)
        order = int(order)

        if callable(function):
            samples = np.asarray([function(x + i * h) for i in range(points + 1)])
        else:
            y = as_scalar_array(function, name="y")
            index = validate_int_setting(x, "index", 0)
            stop = index + points + 1
            if stop > y.shape[0]:
                raise ValueError(
                    f"stencil [{index}, {stop}) runs past the end of {y.shape[0]} samples."
                )
            samples = y[index:stop]

        if h == 0 and order > 0:
            return np.nan
        return as_python_scalar(np.dot(weights, samples) / h**order)
