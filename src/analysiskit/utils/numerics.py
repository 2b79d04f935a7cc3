"""Numerical utilities."""

from __future__ import annotations

import math

import numpy as np

from analysiskit.utils.types import Scalar

__all__ = [
    "GOLDEN_RATIO",
    "clamp_tolerance",
    "as_python_scalar",
    "is_complex_mode",
    "secant_step",
]

GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0

_TOL_LOWER = np.finfo(float).tiny
_TOL_UPPER = 1.0 - np.finfo(float).epsneg


def clamp_tolerance(eps: float) -> float:
    """Range-limits a tolerance into the open interval ``(0, 1)``.

    Out-of-range values are never rejected: anything at or below zero maps to
    the smallest positive normal double and anything at or above one maps to
    the largest double below one. ``nan`` maps to the lower bound.

    Args:
        eps: Requested tolerance.

    Returns:
        The clamped tolerance as a float.
    """
    value = float(eps)
    if not value > _TOL_LOWER:
        return float(_TOL_LOWER)
    return float(min(value, _TOL_UPPER))


def as_python_scalar(value) -> Scalar:
    """Converts a NumPy or Python number into a plain ``float`` or ``complex``.

    Complex values with an exactly zero imaginary part stay complex, since the
    scalar kind of a call is decided by its inputs rather than by its result.

    Args:
        value: Number-like value (0D array, NumPy scalar, ``int``, ``float`` or ``complex``).

    Returns:
        ``complex`` when the value has a complex dtype, ``float`` otherwise.
    """
    if np.iscomplexobj(value):
        return complex(value)
    return float(value)


def is_complex_mode(*values) -> bool:
    """Returns True if any of the given scalars or arrays is complex-valued."""
    return any(np.iscomplexobj(v) for v in values)


def secant_step(x1: Scalar, x2: Scalar, f1: Scalar, f2: Scalar) -> Scalar | None:
    """Returns the secant extrapolation ``x2 - (x2 - x1) f2 / (f2 - f1)``.

    Args:
        x1: Older abscissa.
        x2: Newer abscissa.
        f1: Residual at ``x1``.
        f2: Residual at ``x2``.

    Returns:
        The root of the line through ``(x1, f1)`` and ``(x2, f2)``, or ``None``
        if the two residuals are equal and the line has no root.
    """
    denom = f2 - f1
    if denom == 0:
        return None
    return x2 - (x2 - x1) * f2 / denom
