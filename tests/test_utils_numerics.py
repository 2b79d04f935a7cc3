"""Tests for analysiskit.utils.numerics."""

import math

import numpy as np
import pytest

from analysiskit.utils.numerics import (
    GOLDEN_RATIO,
    as_python_scalar,
    clamp_tolerance,
    is_complex_mode,
    secant_step,
)


@pytest.mark.parametrize("eps", [5.0, 1.0, 0.0, -1.0, float("nan"), float("inf")])
def test_clamp_tolerance_range_limits(eps):
    """Tests that any tolerance ends up in the open interval (0, 1)."""
    value = clamp_tolerance(eps)
    assert 0.0 < value < 1.0


def test_clamp_tolerance_keeps_valid_values():
    """Tests that valid tolerances pass through unchanged."""
    assert clamp_tolerance(1e-8) == 1e-8
    assert clamp_tolerance(0.5) == 0.5


def test_golden_ratio():
    """Tests φ^2 = φ + 1."""
    assert GOLDEN_RATIO**2 == pytest.approx(GOLDEN_RATIO + 1.0)


def test_as_python_scalar():
    """Tests conversion of NumPy scalars to plain Python numbers."""
    assert type(as_python_scalar(np.float64(1.5))) is float
    assert type(as_python_scalar(np.complex128(1.0))) is complex
    assert type(as_python_scalar(np.array(2.0))) is float
    assert type(as_python_scalar(3)) is float


def test_is_complex_mode():
    """Tests complex detection over mixed scalars and arrays."""
    assert not is_complex_mode(1.0, np.ones(3))
    assert is_complex_mode(1.0, 2.0j)
    assert is_complex_mode(np.ones(2, dtype=complex))


def test_secant_step():
    """Tests the secant extrapolation and the degenerate case."""
    assert secant_step(0.0, 2.0, -2.0, 2.0) == pytest.approx(1.0)
    assert secant_step(0.0, 1.0, 3.0, 3.0) is None
    assert math.isclose(secant_step(1.0, 2.0, -1.0, 2.0), 4.0 / 3.0)
