"""Provides the Roots class.

Roots of a polynomial are the eigenvalues of its companion matrix; the
inverse operation expands ``prod (x - r_i)`` back into coefficients.

Example:
    >>> import numpy as np
    >>> from analysiskit.roots import Roots
    >>> roots = Roots()
    >>> p = roots.expand([1.0, 2.0, 3.0])
    >>> p
    array([ 1., -6., 11., -6.])
    >>> np.sort(roots.compute(p).real)
    array([1., 2., 3.])
"""

from __future__ import annotations

import numpy as np

from analysiskit.logger import analysiskit_logger
from analysiskit.utils.linalg import companion_matrix, eigenvalues
from analysiskit.utils.numerics import clamp_tolerance
from analysiskit.utils.types import ArrayLike1D, ScalarArray
from analysiskit.utils.validate import as_scalar_array

__all__ = ["Roots"]


class Roots:
    """Polynomial roots by companion-matrix eigenvalues.

    Attributes:
        eps: Imaginary parts smaller than this in magnitude are set to zero.
            Clamped into ``(0, 1)`` on assignment.
    """

    def __init__(self, eps: float = 1e-16):
        self.eps = eps

    @property
    def eps(self) -> float:
        """Threshold below which imaginary parts are dropped."""
        return self._eps

    @eps.setter
    def eps(self, value: float) -> None:
        self._eps = clamp_tolerance(value)

    def compute(self, polynomial: ArrayLike1D) -> np.ndarray:
        """Finds the roots of a polynomial.

        Leading zero coefficients are dropped before the degree is determined,
        so ``[0, 1, -3, 2]`` is treated as the quadratic ``x**2 - 3x + 2``.

        Args:
            polynomial: Coefficients, highest degree first.

        Returns:
            Complex array of roots (empty for a constant or all-zero polynomial).
        """
        p = as_scalar_array(polynomial, name="polynomial")
        nonzero = np.flatnonzero(p)
        if nonzero.size == 0:
            return np.empty(0, dtype=complex)

        p = p[nonzero[0]:]
        if nonzero[0] > 0:
            analysiskit_logger.debug(
                "Dropped %d leading zero coefficient(s); solving a degree-%d polynomial.",
                nonzero[0],
                p.shape[0] - 1,
            )
        roots = eigenvalues(companion_matrix(p[1:] / p[0]))
        roots.imag[np.abs(roots.imag) < self._eps] = 0.0
        return roots

    @staticmethod
    def expand(roots: ArrayLike1D) -> ScalarArray:
        """Expands ``prod (x - r_i)`` into polynomial coefficients.

        Args:
            roots: Roots of the polynomial.

        Returns:
            Coefficients, highest degree first, with leading coefficient 1.
            Real when all imaginary parts cancel to rounding.
        """
        r = as_scalar_array(roots, name="roots")
        coefficients = np.ones(1, dtype=r.dtype)
        for root in r:
            coefficients = np.convolve(coefficients, np.array([1.0, -root], dtype=r.dtype))
        return np.real_if_close(coefficients)
