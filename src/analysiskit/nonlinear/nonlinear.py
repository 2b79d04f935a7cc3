"""Provides the Nonlinear class.

The class solves scalar equations ``f(x) = 0`` on a bracket ``[a, b]`` with
one of the strategies in :mod:`analysiskit.nonlinear.bracketing`.

Example:
    >>> from analysiskit.nonlinear import Nonlinear
    >>> solver = Nonlinear(method="bisection")
    >>> round(solver.compute(lambda x: x**2 - 2.0, 0.0, 2.0), 8)
    1.41421356
"""

from __future__ import annotations

from typing import Callable, Iterable

from analysiskit.logger import analysiskit_logger
from analysiskit.methods import MethodRegistry, MethodSpec
from analysiskit.nonlinear.bracketing import bisection, chord, false_position, secant
from analysiskit.utils.convergence import IterationInfo
from analysiskit.utils.numerics import as_python_scalar, clamp_tolerance, is_complex_mode
from analysiskit.utils.types import Scalar, ScalarFunction

__all__ = [
    "Nonlinear",
    "available_methods",
    "register_method",
]

# Fallback used when the configured method cannot handle complex scalars.
_COMPLEX_FALLBACK = "secant"

_REGISTRY = MethodRegistry(
    "nonlinear",
    [
        MethodSpec("bisection", bisection, ("bisect", "halving", "interval-halving"), supports_complex=False),
        MethodSpec("chord", chord, ("chords",)),
        MethodSpec("secant", secant, ("secants",)),
        MethodSpec("false_position", false_position, ("regula-falsi", "falpo")),
    ],
)


def register_method(
    name: str,
    function: Callable,
    *,
    aliases: Iterable[str] = (),
    supports_complex: bool = True,
) -> None:
    """Register a new root-finding strategy.

    Args:
        name: Canonical public name of the method.
        function: Callable ``(function, a, b, eps) -> (root, IterationInfo)``.
        aliases: Additional accepted spellings.
        supports_complex: Whether the strategy accepts complex brackets.
    """
    _REGISTRY.register(name, function, aliases=aliases, supports_complex=supports_complex)


def available_methods() -> list[str]:
    """List canonical root-finding method names.

    Returns:
        List of method names.
    """
    return _REGISTRY.available()


class Nonlinear:
    """Root finder for scalar nonlinear equations.

    Attributes:
        eps: Tolerance, clamped into ``(0, 1)`` on assignment.
        method: Canonical name of the selected strategy.
    """

    def __init__(self, eps: float = 1e-8, method: str = "secant"):
        """Initializes the solver.

        Args:
            eps: Tolerance in ``(0, 1)``; out-of-range values are clamped.
            method: Method name or alias (``"bisection"``, ``"chord"``,
                ``"secant"`` or ``"false_position"``).

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        self.eps = eps
        self.method = method

    @property
    def eps(self) -> float:
        """Tolerance in ``(0, 1)``."""
        return self._eps

    @eps.setter
    def eps(self, value: float) -> None:
        self._eps = clamp_tolerance(value)

    @property
    def method(self) -> str:
        """Canonical name of the selected strategy."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = _REGISTRY.resolve(value).name

    def compute(
        self,
        function: ScalarFunction,
        a: Scalar,
        b: Scalar,
        *,
        return_info: bool = False,
    ) -> Scalar | tuple[Scalar, IterationInfo]:
        """Finds a root of ``function`` in the bracket ``[a, b]``.

        A complex bracket switches the call to complex arithmetic. Strategies
        that need an ordering (bisection) are replaced by the secant method
        for such calls, and a warning is logged.

        Args:
            function: Continuous scalar function, real to real or complex to complex.
            a: Start of the bracket.
            b: End of the bracket.
            return_info: If True, also return the iteration report.

        Returns:
            The root estimate as ``float`` or ``complex``, or a tuple
            ``(root, info)`` if ``return_info`` is True.
        """
        spec = _REGISTRY.resolve(self._method)
        if is_complex_mode(a, b):
            a, b = complex(a), complex(b)
            if not spec.supports_complex:
                analysiskit_logger.warning(
                    "Nonlinear method '%s' does not support complex scalars; using '%s'.",
                    spec.name,
                    _COMPLEX_FALLBACK,
                )
                spec = _REGISTRY.resolve(_COMPLEX_FALLBACK)
        else:
            a, b = float(a), float(b)

        root, info = spec.function(function, a, b, self._eps)
        root = as_python_scalar(root)
        if return_info:
            return root, info
        return root
