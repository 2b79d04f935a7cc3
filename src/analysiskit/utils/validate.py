"""Validation utilities for AnalysisKit."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from analysiskit.utils.types import ScalarArray

__all__ = [
    "as_scalar_array",
    "validate_samples_xy",
    "validate_surface_grid",
    "validate_int_setting",
]


def as_scalar_array(values: ArrayLike, *, name: str = "x") -> ScalarArray:
    """Converts input to a 1D float or complex array.

    The dtype follows the data: ``complex128`` if the input holds complex
    values, ``float64`` otherwise.

    Args:
        values: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64 or complex128.

    Raises:
        ValueError: If the converted array is not 1D.
    """
    arr = np.asarray(values)
    dtype = complex if np.iscomplexobj(arr) else float
    arr = arr.astype(dtype, copy=False)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr


def validate_samples_xy(
    x: ArrayLike,
    y: ArrayLike,
    *,
    min_length: int = 1,
) -> tuple[ScalarArray, ScalarArray]:
    """Validates and converts sampled ``x`` and ``y`` arrays into NumPy arrays.

    Requirements:
      - ``x`` and ``y`` are 1D and have the same length.
      - At least ``min_length`` samples are given.

    Ordering of ``x`` is a caller precondition and is not checked.

    Args:
        x: 1D array-like of abscissae.
        y: 1D array-like of sample values aligned with ``x``.
        min_length: Minimum number of samples.

    Returns:
        Tuple of (x_array, y_array) as NumPy arrays.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = as_scalar_array(x, name="x")
    y_arr = as_scalar_array(y, name="y")

    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    if x_arr.shape[0] < min_length:
        raise ValueError(f"at least {min_length} samples are required; got {x_arr.shape[0]}.")

    return x_arr, y_arr


def validate_surface_grid(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Validates a rectangular grid ``z[i, j] = f(x[i], y[j])``.

    Args:
        x: 1D array-like of first-axis nodes.
        y: 1D array-like of second-axis nodes.
        z: 2D array-like of values with shape ``(len(x), len(y))``.

    Returns:
        Tuple of (x_array, y_array, z_array) as float arrays.

    Raises:
        TypeError: If any input is complex-valued.
        ValueError: If shapes are inconsistent.
    """
    if any(np.iscomplexobj(v) for v in (x, y, z)):
        raise TypeError("bilinear interpolation requires real-valued grids.")

    x_arr = as_scalar_array(x, name="x")
    y_arr = as_scalar_array(y, name="y")
    z_arr = np.asarray(z, dtype=float)

    if z_arr.ndim != 2:
        raise ValueError(f"z must be two-dimensional; got ndim={z_arr.ndim}.")
    if z_arr.shape != (x_arr.shape[0], y_arr.shape[0]):
        raise ValueError(
            f"z shape {z_arr.shape} != ({x_arr.shape[0]}, {y_arr.shape[0]})."
        )
    return x_arr, y_arr, z_arr


def validate_int_setting(value: Any, name: str, minimum: int) -> int:
    """Validates an integer configuration value at assignment time.

    Args:
        value: Value being assigned.
        name: Setting name used in error messages.
        minimum: Smallest allowed value.

    Returns:
        The value as a Python ``int``.

    Raises:
        TypeError: If ``value`` is not an integer.
        ValueError: If ``value < minimum``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer; got {type(value).__name__}.")
    value = int(value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}; got {value}.")
    return value
