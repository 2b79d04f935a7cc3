"""Polynomial least-squares engine shared by the approximation methods.

The fit of ``degree`` basis functions ``1, t, t**2, ...`` solves the normal
equations ``sum_k t_k**(i + j) c_j = sum_k y_k t_k**i`` built from power sums.
The sums are plain (not conjugated) so the same code serves complex data.
"""

from __future__ import annotations

import numpy as np

from analysiskit.utils.linalg import solve_or_pinv
from analysiskit.utils.types import ScalarArray

__all__ = [
    "power_sums_system",
    "fit_coefficients",
    "evaluate_polynomial",
    "variance_ratio",
    "format_equation",
]


def power_sums_system(t: ScalarArray, y: ScalarArray, degree: int) -> tuple[np.ndarray, np.ndarray]:
    """Builds the normal equations of a polynomial least-squares fit.

    Args:
        t: Abscissae (possibly transformed).
        y: Ordinates (possibly transformed).
        degree: Number of basis functions.

    Returns:
        Tuple ``(matrix, rhs)`` with ``matrix[i, j] = sum(t**(i + j))`` and
        ``rhs[i] = sum(y * t**i)``.
    """
    vander = np.power.outer(t, np.arange(degree))
    return vander.T @ vander, vander.T @ y


def fit_coefficients(t: ScalarArray, y: ScalarArray, degree: int) -> np.ndarray:
    """Least-squares coefficients in ascending powers of ``t``.

    Args:
        t: Abscissae.
        y: Ordinates.
        degree: Number of basis functions (at least 1).

    Returns:
        Array of ``degree`` coefficients.
    """
    degree = max(int(degree), 1)
    matrix, rhs = power_sums_system(t, y, degree)
    return solve_or_pinv(
        matrix,
        rhs,
        assume_symmetric=not np.iscomplexobj(matrix),
        warn_context="least-squares normal equations",
    )


def evaluate_polynomial(t: ScalarArray, coefficients: np.ndarray) -> ScalarArray:
    """Evaluates ``sum_i coefficients[i] * t**i`` by Horner's scheme."""
    t = np.asarray(t)
    value = np.zeros_like(t, dtype=np.result_type(t, coefficients))
    for c in coefficients[::-1]:
        value = value * t + c
    return value


def variance_ratio(fitted: ScalarArray, observed: ScalarArray) -> float:
    """Ratio ``min(var) / max(var)`` of the fitted and observed spreads.

    The result lies in ``[0, 1]``; 1 means both samples have the same spread
    (also returned when both variances are zero). For complex data the
    variance is the mean squared modulus of the deviations.
    """
    var_fitted = float(np.var(fitted))
    var_observed = float(np.var(observed))
    lo, hi = sorted((var_fitted, var_observed))
    if hi == 0.0:
        return 1.0
    return lo / hi


def _format_coefficient(c) -> str:
    if isinstance(c, complex) or np.iscomplexobj(c):
        return f"({complex(c):.15g})"
    return f"{float(c):.15g}"


def format_equation(coefficients: np.ndarray, basis: str = " * X^") -> str:
    """Renders a fitted polynomial for display, e.g. ``"1 + 2 * X^1"``.

    Args:
        coefficients: Coefficients in ascending powers.
        basis: Text placed between a coefficient and its power
            (``" * LN(X)^"`` for logarithmic bases).

    Returns:
        The equation text. A negative real coefficient carries its own sign,
        so it is joined with a space instead of ``" + "``.
    """
    parts = []
    n = len(coefficients)
    for i, c in enumerate(coefficients):
        parts.append(_format_coefficient(c))
        if i > 0:
            parts.append(f"{basis}{i}")
        if i < n - 1:
            following = coefficients[i + 1]
            negative = not np.iscomplexobj(following) and following < 0
            parts.append(" " if negative else " + ")
    return "".join(parts)
