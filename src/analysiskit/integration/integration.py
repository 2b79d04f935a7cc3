"""Provides the Integration class.

The class approximates definite integrals either of a callable integrand or
of values sampled in advance at equally spaced points.

Example:
    >>> import numpy as np
    >>> from analysiskit.integration import Integration
    >>> quad = Integration(method="simpson")
    >>> round(quad.compute(lambda x: x**2, 0.0, 1.0, 11), 10)
    0.3333333333
    >>> round(quad.compute(np.linspace(0.0, 1.0, 11) ** 2, 0.0, 1.0), 10)
    0.3333333333
"""

from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

from analysiskit.integration.quadrature import midpoint, rectangle, simpson, trapezoidal
from analysiskit.integration.romberg import romberg
from analysiskit.integration.sampled import (
    midpoint_samples,
    rectangle_samples,
    simpson_samples,
    trapezoidal_samples,
)
from analysiskit.logger import analysiskit_logger
from analysiskit.methods import MethodRegistry, MethodSpec
from analysiskit.utils.convergence import ConvergenceStatus, IterationInfo
from analysiskit.utils.numerics import as_python_scalar, clamp_tolerance
from analysiskit.utils.types import ArrayLike1D, Scalar, ScalarFunction
from analysiskit.utils.validate import as_scalar_array, validate_int_setting

__all__ = [
    "Integration",
    "available_methods",
    "register_method",
]

# Rule used for pre-sampled data when the configured method needs a callable.
_SAMPLED_FALLBACK = "rectangle"

_REGISTRY = MethodRegistry(
    "integration",
    [
        MethodSpec("rectangle", rectangle, ("rect", "left-rectangle")),
        MethodSpec("midpoint", midpoint, ("midp", "mid-point")),
        MethodSpec("trapezoidal", trapezoidal, ("trapezoid", "trap")),
        MethodSpec("simpson", simpson, ("simp", "simpsons")),
        MethodSpec("romberg", romberg, ("romb", "richardson")),
    ],
)

# Pre-sampled counterparts, keyed by canonical method name.
_SAMPLED_RULES: dict[str, Callable] = {
    "rectangle": rectangle_samples,
    "midpoint": midpoint_samples,
    "trapezoidal": trapezoidal_samples,
    "simpson": simpson_samples,
}

# Rules that iterate and report their own IterationInfo.
_ITERATIVE = {"romberg"}


def register_method(
    name: str,
    function: Callable,
    *,
    sampled: Callable | None = None,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new quadrature rule.

    Args:
        name: Canonical public name of the rule.
        function: Callable ``(function, a, b, n) -> value`` integrating a callable.
        sampled: Optional callable ``(y, a, b, n) -> value`` integrating
            pre-sampled values. Without it, sampled data falls back to the
            rectangle rule.
        aliases: Additional accepted spellings.
    """
    spec = _REGISTRY.register(name, function, aliases=aliases)
    _SAMPLED_RULES.pop(spec.name, None)
    _ITERATIVE.discard(spec.name)
    if sampled is not None:
        _SAMPLED_RULES[spec.name] = sampled


def available_methods() -> list[str]:
    """List canonical quadrature rule names.

    Returns:
        List of method names.
    """
    return _REGISTRY.available()


class Integration:
    """Numerical quadrature over a finite interval.

    Attributes:
        method: Canonical name of the selected rule.
        eps: Relative tolerance of the Romberg table, clamped into ``(0, 1)``.
    """

    def __init__(self, method: str = "rectangle", eps: float = 1e-8):
        """Initializes the integrator.

        Args:
            method: Rule name or alias (``"rectangle"``, ``"midpoint"``,
                ``"trapezoidal"``, ``"simpson"`` or ``"romberg"``).
            eps: Romberg tolerance in ``(0, 1)``; out-of-range values are clamped.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        self.method = method
        self.eps = eps

    @property
    def method(self) -> str:
        """Canonical name of the selected rule."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = _REGISTRY.resolve(value).name

    @property
    def eps(self) -> float:
        """Romberg tolerance in ``(0, 1)``."""
        return self._eps

    @eps.setter
    def eps(self, value: float) -> None:
        self._eps = clamp_tolerance(value)

    def compute(
        self,
        function: ScalarFunction | ArrayLike1D,
        a: Scalar,
        b: Scalar,
        n: int | None = None,
        *,
        return_info: bool = False,
    ) -> Scalar | tuple[Scalar, IterationInfo]:
        """Approximates the integral over ``[a, b]``.

        Args:
            function: Callable integrand, or a 1D array of integrand values
                sampled at equally spaced points of ``[a, b]``.
            a: Lower bound.
            b: Upper bound.
            n: For a callable, the number of partitions (the number of nodes
                for Simpson, the maximum number of table rows for Romberg);
                required. For samples, the number of leading samples to use;
                defaults to all of them.
            return_info: If True, also return the iteration report. Rules that
                do not iterate report ``converged`` after zero iterations.

        Returns:
            The integral as ``float`` or ``complex`` (NaN when Simpson has too
            few nodes or an empty interval), or ``(value, info)`` if
            ``return_info`` is True.

        Raises:
            ValueError: If ``n`` is missing for a callable, smaller than 1, or
                larger than the number of samples.
        """
        if callable(function):
            value, info = self._integrate_function(function, a, b, n)
        else:
            value, info = self._integrate_samples(function, a, b, n)

        value = as_python_scalar(value)
        if return_info:
            return value, info
        return value

    def _integrate_function(self, function, a, b, n):
        if n is None:
            raise ValueError("n is required when integrating a callable.")
        n = validate_int_setting(n, "n", 1)
        spec = _REGISTRY.resolve(self._method)
        if spec.name in _ITERATIVE:
            return spec.function(function, a, b, n, self._eps)
        return spec.function(function, a, b, n), IterationInfo(0, ConvergenceStatus.CONVERGED)

    def _integrate_samples(self, samples, a, b, n):
        y = as_scalar_array(samples, name="y")
        n = y.shape[0] if n is None else validate_int_setting(n, "n", 1)
        if n > y.shape[0]:
            raise ValueError(f"n={n} exceeds the number of samples ({y.shape[0]}).")

        method = self._method
        rule = _SAMPLED_RULES.get(method)
        if rule is None:
            analysiskit_logger.warning(
                "Integration method '%s' needs a callable integrand; "
                "using '%s' for pre-sampled data.",
                method,
                _SAMPLED_FALLBACK,
            )
            rule = rectangle_samples
        return rule(y, a, b, n), IterationInfo(0, ConvergenceStatus.CONVERGED)
