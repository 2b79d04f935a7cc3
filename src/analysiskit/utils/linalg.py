"""Linear algebra helper functions with diagnostics.

These wrap the dense solvers from :mod:`scipy.linalg` that back the
finite-difference table, the Adams–Bashforth weights, the least-squares
normal equations and the companion-matrix root finder.
"""

from __future__ import annotations

import warnings

import numpy as np
import scipy.linalg as sla
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "solve_or_pinv",
    "invert_matrix",
    "companion_matrix",
    "eigenvalues",
]


def _work_dtype(*arrays: np.ndarray) -> type:
    """Returns ``complex`` if any array is complex, ``float`` otherwise."""
    return complex if any(np.iscomplexobj(a) for a in arrays) else float


def solve_or_pinv(matrix: ArrayLike, vector: ArrayLike, *, rcond: float = 1e-12,
                  assume_symmetric: bool = False, warn_context: str = "linear solve") -> np.ndarray:
    """Solve ``matrix @ x = vector`` with pseudoinverse fallback.

    If ``assume_symmetric`` is True (e.g., real normal equations), attempt a
    Cholesky-based solve. If the matrix is not symmetric positive definite
    or is singular, emit a warning and fall back to
    ``np.linalg.pinv(matrix, rcond) @ vector``. Complex systems are solved in
    complex arithmetic with a general LU solve.

    Args:
      matrix: Coefficient matrix of shape ``(n, n)``.
      vector: Right-hand side vector or matrix of shape ``(n,)`` or ``(n, k)``.
      rcond: Cutoff for small singular values used by ``np.linalg.pinv``.
      assume_symmetric: If True, prefer a Cholesky solve for real matrices.
      warn_context: Short label included in the warning message.

    Returns:
      Solution array ``x`` with shape matching ``vector`` (``(n,)`` or ``(n, k)``).

    Raises:
      ValueError: If shapes of ``matrix`` and ``vector`` are incompatible.
    """
    dtype = _work_dtype(matrix, vector)
    matrix = np.asarray(matrix, dtype=dtype)
    vector = np.asarray(vector, dtype=dtype)

    # Shape checks
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"matrix must be square 2D; got shape {matrix.shape}.")
    n = matrix.shape[0]
    if vector.ndim not in (1, 2) or vector.shape[0] != n:
        raise ValueError(f"vector must have shape (n,) or (n,k) with n={n}; got {vector.shape}.")

    try:
        rank = np.linalg.matrix_rank(matrix)
    except np.linalg.LinAlgError:
        rank = n
    if rank < n:
        warnings.warn(
            f"In {warn_context}, matrix is rank-deficient (rank={rank} < {n}); "
            f"falling back to pseudoinverse with rcond={rcond}.",
            RuntimeWarning,
        )
        return (np.linalg.pinv(matrix, rcond=rcond) @ vector).astype(dtype, copy=False)

    try:
        if assume_symmetric and dtype is float:
            return sla.cho_solve(sla.cho_factor(matrix), vector)
        return sla.solve(matrix, vector)
    except (np.linalg.LinAlgError, sla.LinAlgError):
        cond_msg = ""
        try:
            cond_val = np.linalg.cond(matrix)
            if np.isfinite(cond_val):
                cond_msg = f" (cond≈{cond_val:.2e})"
        except np.linalg.LinAlgError:
            pass

        warnings.warn(
            f"In {warn_context}, the matrix was not SPD or was singular; "
            f"falling back to pseudoinverse with rcond={rcond}{cond_msg}.",
            RuntimeWarning,
        )
        return (np.linalg.pinv(matrix, rcond=rcond) @ vector).astype(dtype, copy=False)


def invert_matrix(matrix: ArrayLike, *, rcond: float = 1e-12,
                  warn_context: str = "matrix inversion") -> NDArray[np.floating]:
    """Return the inverse of a square matrix; fall back to pseudoinverse when needed.

    Args:
        matrix: Square matrix of shape ``(n, n)``.
        rcond: Cutoff for small singular values used by ``np.linalg.pinv``.
        warn_context: Short label included in the warning message.

    Returns:
        The inverse (or pseudoinverse) as a 2D array.

    Raises:
        ValueError: If ``matrix`` is not square 2D.
    """
    matrix = np.asarray(matrix, dtype=_work_dtype(matrix))
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"matrix must be square 2D; got shape {matrix.shape}.")

    try:
        return sla.inv(matrix)
    except (np.linalg.LinAlgError, sla.LinAlgError):
        warnings.warn(
            f"In {warn_context}, the matrix is singular; using pseudoinverse.",
            RuntimeWarning,
        )
        return np.linalg.pinv(matrix, rcond=rcond)


def companion_matrix(coefficients: ArrayLike) -> np.ndarray:
    """Builds the companion matrix of the monic polynomial ``x^m + c_0 x^(m-1) + ... + c_(m-1)``.

    The first row holds ``-c`` and the sub-diagonal holds ones, so the
    characteristic polynomial of the result is the given monic polynomial.

    Args:
        coefficients: The ``m`` trailing coefficients ``c`` of the monic
            polynomial, highest degree first (the leading 1 is implied).

    Returns:
        Array of shape ``(m, m)``.
    """
    c = np.atleast_1d(np.asarray(coefficients))
    c = c.astype(_work_dtype(c), copy=False)
    m = c.shape[0]
    matrix = np.zeros((m, m), dtype=c.dtype)
    if m == 0:
        return matrix
    matrix[0, :] = -c
    if m > 1:
        matrix[np.arange(1, m), np.arange(m - 1)] = 1.0
    return matrix


def eigenvalues(matrix: ArrayLike) -> NDArray[np.complex128]:
    """Returns the (complex) eigenvalues of a square matrix."""
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"matrix must be square 2D; got shape {matrix.shape}.")
    if matrix.shape[0] == 0:
        return np.empty(0, dtype=complex)
    return np.asarray(sla.eigvals(matrix), dtype=complex)
