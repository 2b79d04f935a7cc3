"""Romberg integration by Richardson extrapolation of the trapezoidal rule."""

from __future__ import annotations

import numpy as np

from analysiskit.utils.convergence import ConvergenceStatus, IterationInfo, finish_iteration
from analysiskit.utils.types import Scalar, ScalarFunction

__all__ = ["romberg"]


def romberg(
    function: ScalarFunction,
    a: Scalar,
    b: Scalar,
    rows: int,
    eps: float = 1e-8,
) -> tuple[Scalar, IterationInfo]:
    """Integrates ``function`` over ``[a, b]`` with a Romberg table of at most ``rows`` rows.

    Row ``j`` starts from the trapezoidal estimate with ``2**j`` partitions,
    reusing the previous row's function values, and is extrapolated across
    its columns. From the third row on the table stops as soon as the last
    two entries of a row agree to within ``eps`` relative to the diagonal
    (magnitudes are compared for complex integrands). With fewer than 3 rows
    the test is never reached, so the call always reports ``cap-reached``.

    Args:
        function: Real or complex scalar function.
        a: Lower bound.
        b: Upper bound.
        rows: Maximum number of table rows (at least 1).
        eps: Relative agreement tolerance.

    Returns:
        Tuple ``(integral, info)``; ``info.iterations`` is the number of rows
        built after the first.
    """
    h = b - a
    table = [[h * (function(a) + function(b)) / 2.0]]
    partitions = 1
    status = ConvergenceStatus.CAP_REACHED

    for j in range(1, rows):
        partitions *= 2
        h = h / 2.0
        odd_nodes = a + np.arange(1, partitions, 2) * h
        row = [table[j - 1][0] / 2.0 + h * sum(function(x) for x in odd_nodes)]
        factor = 4.0
        for k in range(1, j + 1):
            row.append((factor * row[k - 1] - table[j - 1][k - 1]) / (factor - 1.0))
            factor *= 4.0
        table.append(row)
        if j >= 2 and abs(row[j] - row[j - 1]) < eps * abs(row[j]):
            status = ConvergenceStatus.CONVERGED
            break

    last = table[-1]
    return last[-1], finish_iteration("romberg", len(table) - 1, status, cap=rows - 1)
