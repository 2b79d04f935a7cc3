"""Bilinear interpolation on a rectangular grid."""

from __future__ import annotations

import numpy as np

from analysiskit.interpolation.univariate import locate_interval

__all__ = ["bilinear"]


def bilinear(x: np.ndarray, y: np.ndarray, z: np.ndarray, xl: float, yl: float) -> float:
    """Blends the four corners of the grid cell containing ``(xl, yl)``.

    ``z[i, j]`` is the value at ``(x[i], y[j])``. Cells are half-open in both
    directions; a query outside every cell gives 0.

    Args:
        x: Increasing first-axis nodes.
        y: Increasing second-axis nodes.
        z: Values of shape ``(len(x), len(y))``.
        xl: First coordinate of the query.
        yl: Second coordinate of the query.

    Returns:
        The interpolated value.
    """
    i = locate_interval(x, xl)
    j = locate_interval(y, yl)
    if i is None or j is None:
        return 0.0

    area = (x[i + 1] - x[i]) * (y[j + 1] - y[j])
    return (
        z[i, j] * (x[i + 1] - xl) * (y[j + 1] - yl)
        + z[i + 1, j] * (xl - x[i]) * (y[j + 1] - yl)
        + z[i, j + 1] * (x[i + 1] - xl) * (yl - y[j])
        + z[i + 1, j + 1] * (xl - x[i]) * (yl - y[j])
    ) / area
