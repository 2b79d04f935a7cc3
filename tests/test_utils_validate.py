"""Tests for analysiskit.utils.validate."""

import numpy as np
import pytest

from analysiskit.utils.validate import (
    as_scalar_array,
    validate_int_setting,
    validate_samples_xy,
    validate_surface_grid,
)


def test_as_scalar_array_dtypes():
    """Tests that the dtype follows the data."""
    assert as_scalar_array([1, 2, 3]).dtype == np.float64
    assert as_scalar_array([1, 2j]).dtype == np.complex128


def test_as_scalar_array_rejects_non_1d():
    """Tests that only 1D input is accepted."""
    with pytest.raises(ValueError, match="must be 1D"):
        as_scalar_array([[1.0, 2.0]], name="y")
    with pytest.raises(ValueError):
        as_scalar_array(1.0)


def test_validate_samples_xy():
    """Tests length checks of aligned samples."""
    x, y = validate_samples_xy([0, 1, 2], [1.0, 2.0, 3.0])
    assert x.shape == y.shape == (3,)

    with pytest.raises(ValueError, match="same length"):
        validate_samples_xy([0, 1], [1.0])
    with pytest.raises(ValueError, match="at least 3"):
        validate_samples_xy([0, 1], [1.0, 2.0], min_length=3)


def test_validate_surface_grid():
    """Tests grid shape checks and the real-only rule."""
    x, y, z = validate_surface_grid([0, 1], [0, 1, 2], np.zeros((2, 3)))
    assert z.shape == (2, 3)

    with pytest.raises(ValueError):
        validate_surface_grid([0, 1], [0, 1, 2], np.zeros((3, 2)))
    with pytest.raises(ValueError):
        validate_surface_grid([0, 1], [0, 1], np.zeros(4))
    with pytest.raises(TypeError):
        validate_surface_grid([0, 1j], [0, 1], np.zeros((2, 2)))


def test_validate_int_setting():
    """Tests integer validation of configuration values."""
    assert validate_int_setting(np.int64(3), "points", 0) == 3
    with pytest.raises(ValueError, match="points must be >= 0"):
        validate_int_setting(-1, "points", 0)
    with pytest.raises(TypeError):
        validate_int_setting(2.0, "points", 0)
    with pytest.raises(TypeError):
        validate_int_setting(True, "points", 0)
