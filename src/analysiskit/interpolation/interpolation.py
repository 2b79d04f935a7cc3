"""Provides the Interpolation class.

Example:
    >>> from analysiskit.interpolation import Interpolation
    >>> x, y = [0.0, 1.0, 2.0], [1.0, 3.0, 7.0]
    >>> Interpolation(method="newton").compute(x, y, 1.5)
    4.75
"""

from __future__ import annotations

from typing import Callable, Iterable

from analysiskit.interpolation.bilinear import bilinear
from analysiskit.interpolation.univariate import barycentric, lagrange, linear, newton
from analysiskit.logger import analysiskit_logger
from analysiskit.methods import MethodRegistry, MethodSpec
from analysiskit.utils.numerics import as_python_scalar, is_complex_mode
from analysiskit.utils.types import ArrayLike1D, ArrayLike2D, Scalar
from analysiskit.utils.validate import validate_samples_xy, validate_surface_grid

__all__ = [
    "Interpolation",
    "available_methods",
    "register_method",
]

# Fallback used when the configured method needs ordered (real) nodes.
_COMPLEX_FALLBACK = "lagrange"

_REGISTRY = MethodRegistry(
    "interpolation",
    [
        MethodSpec("linear", linear, ("piecewise-linear", "lin"), supports_complex=False),
        MethodSpec("lagrange", lagrange, ("lagra",)),
        MethodSpec("newton", newton, ("divided-differences", "newto")),
        MethodSpec("barycentric", barycentric, ("baryc", "bary")),
    ],
)


def register_method(
    name: str,
    function: Callable,
    *,
    aliases: Iterable[str] = (),
    supports_complex: bool = True,
) -> None:
    """Register a new univariate interpolation strategy.

    Args:
        name: Canonical public name of the method.
        function: Callable ``(x, y, xl) -> value`` taking validated 1D arrays.
        aliases: Additional accepted spellings.
        supports_complex: Whether the strategy accepts complex nodes.
    """
    _REGISTRY.register(name, function, aliases=aliases, supports_complex=supports_complex)


def available_methods() -> list[str]:
    """List canonical univariate interpolation method names.

    Returns:
        List of method names.
    """
    return _REGISTRY.available()


class Interpolation:
    """Point evaluation of interpolants through sampled data.

    Attributes:
        method: Canonical name of the univariate strategy.
    """

    def __init__(self, method: str = "lagrange"):
        """Initializes the interpolator.

        Args:
            method: Method name or alias (``"linear"``, ``"lagrange"``,
                ``"newton"`` or ``"barycentric"``).

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        self.method = method

    @property
    def method(self) -> str:
        """Canonical name of the univariate strategy."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = _REGISTRY.resolve(value).name

    def compute(self, x: ArrayLike1D, y: ArrayLike1D, xl: Scalar) -> Scalar:
        """Evaluates the interpolant through ``(x[i], y[i])`` at ``xl``.

        Complex nodes or a complex query switch the call to complex
        arithmetic; ``linear`` then falls back to ``lagrange`` and a warning
        is logged. Complex values on real nodes are interpolated by the
        selected method unchanged.

        Args:
            x: 1D array of distinct nodes (increasing for ``linear``).
            y: 1D array of values at the nodes.
            xl: Query point.

        Returns:
            The interpolated value as ``float`` or ``complex``. ``linear``
            returns 0 outside ``[x[0], x[-1])``.

        Raises:
            ValueError: If ``x`` and ``y`` are not 1D arrays of the same, nonzero length.
        """
        x_arr, y_arr = validate_samples_xy(x, y, min_length=1)
        spec = _REGISTRY.resolve(self._method)

        # Complex values on real nodes keep the real-node strategies.
        if is_complex_mode(x_arr, xl):
            x_arr = x_arr.astype(complex)
            y_arr = y_arr.astype(complex)
            xl = complex(xl)
            if not spec.supports_complex:
                analysiskit_logger.warning(
                    "Interpolation method '%s' does not support complex scalars; using '%s'.",
                    spec.name,
                    _COMPLEX_FALLBACK,
                )
                spec = _REGISTRY.resolve(_COMPLEX_FALLBACK)
        else:
            xl = float(xl)

        return as_python_scalar(spec.function(x_arr, y_arr, xl))

    def compute_surface(
        self,
        x: ArrayLike1D,
        y: ArrayLike1D,
        z: ArrayLike2D,
        xl: float,
        yl: float,
    ) -> float:
        """Bilinear interpolation of ``z[i, j] = f(x[i], y[j])`` at ``(xl, yl)``.

        Args:
            x: Increasing first-axis nodes.
            y: Increasing second-axis nodes.
            z: 2D values of shape ``(len(x), len(y))``.
            xl: First coordinate of the query.
            yl: Second coordinate of the query.

        Returns:
            The interpolated value; 0 outside the grid.

        Raises:
            TypeError: If any input is complex.
            ValueError: If the grid shapes are inconsistent.
        """
        if is_complex_mode(xl, yl):
            raise TypeError("bilinear interpolation requires a real query point.")
        x_arr, y_arr, z_arr = validate_surface_grid(x, y, z)
        return float(bilinear(x_arr, y_arr, z_arr, float(xl), float(yl)))
