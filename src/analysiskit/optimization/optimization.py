"""Provides the Optimization class.

Example:
    >>> from analysiskit.optimization import Optimization
    >>> x = Optimization().compute(lambda x: (x - 2.0) ** 2, 0.0, 5.0)
    >>> round(x, 6)
    2.0
"""

from __future__ import annotations

from analysiskit.optimization.golden import golden_section
from analysiskit.utils.convergence import IterationInfo
from analysiskit.utils.numerics import clamp_tolerance, is_complex_mode
from analysiskit.utils.types import ScalarFunction

__all__ = ["Optimization"]


class Optimization:
    """Extremum search on an interval by golden-section search.

    Attributes:
        eps: Interval width tolerance, clamped into ``(0, 1)`` on assignment.
    """

    def __init__(self, eps: float = 1e-8):
        self.eps = eps

    @property
    def eps(self) -> float:
        """Interval width tolerance in ``(0, 1)``."""
        return self._eps

    @eps.setter
    def eps(self, value: float) -> None:
        self._eps = clamp_tolerance(value)

    def compute(
        self,
        function: ScalarFunction,
        a: float,
        b: float,
        maximize: bool = False,
        *,
        return_info: bool = False,
    ) -> float | tuple[float, IterationInfo]:
        """Locates the minimum (or maximum) of ``function`` on ``[a, b]``.

        Args:
            function: Real scalar function, assumed unimodal on ``[a, b]``.
            a: Left end of the interval.
            b: Right end of the interval.
            maximize: If True, search for the maximum.
            return_info: If True, also return the iteration report.

        Returns:
            The extremum location, or ``(x, info)`` if ``return_info`` is True.

        Raises:
            TypeError: If ``a`` or ``b`` is complex.
        """
        if is_complex_mode(a, b):
            raise TypeError("golden-section search requires a real interval.")

        x, info = golden_section(function, float(a), float(b), self._eps, maximize=bool(maximize))
        if return_info:
            return float(x), info
        return float(x)
