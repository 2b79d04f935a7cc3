"""Forward finite-difference stencils built from an inverted Taylor table."""

from __future__ import annotations

from functools import lru_cache
from math import factorial

import numpy as np

from analysiskit.utils.linalg import invert_matrix

__all__ = [
    "taylor_table",
    "difference_coefficients",
]


def taylor_table(length: int) -> np.ndarray:
    """Builds the ``length x length`` table ``T[j, k] = j**k / k!``.

    Row ``j`` holds the Taylor coefficients of ``f(x + j h)`` in powers of
    ``h``, so ``T @ [f(x), h f'(x), h**2 f''(x), ...]`` reproduces the
    samples on the stencil ``x, x + h, ..., x + (length - 1) h``.

    Args:
        length: Number of stencil points.

    Returns:
        The table as a float array.
    """
    j = np.arange(length, dtype=float)[:, None]
    k = np.arange(length)
    inverse_factorials = np.array([1.0 / factorial(int(m)) for m in k])
    return np.power(j, k) * inverse_factorials


@lru_cache(maxsize=32)
def _cached_coefficients(length: int) -> np.ndarray:
    coefficients = invert_matrix(taylor_table(length), warn_context="finite-difference table")
    coefficients.flags.writeable = False
    return coefficients


def difference_coefficients(length: int) -> np.ndarray:
    """Returns the inverse of :func:`taylor_table`.

    Row ``order`` of the result holds the weights that turn the samples on a
    ``length``-point forward stencil into ``h**order`` times the derivative of
    that order.

    Args:
        length: Number of stencil points (at least 1).

    Returns:
        A fresh ``length x length`` float array.

    Raises:
        ValueError: If ``length < 1``.
    """
    if length < 1:
        raise ValueError(f"length must be >= 1; got {length}.")
    return np.array(_cached_coefficients(int(length)))
