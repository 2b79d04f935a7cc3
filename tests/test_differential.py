"""Tests for analysiskit.differential."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

import analysiskit.differential.differential as differential_module
from analysiskit.differential import Differential, available_methods, register_method
from analysiskit.methods import MethodRegistry


def growth(x, y):
    """Right-hand side of y' = y."""
    return y


def test_rk4_exponential_growth():
    """Tests RK4 on y' = y, y(0) = 1 over [0, 1]."""
    x = np.linspace(0.0, 1.0, 101)
    y = Differential().compute(growth, x, 1.0)

    assert y.shape == (100,)
    assert y[-1] == pytest.approx(math.e, abs=1e-3)
    assert_allclose(y, np.exp(x[1:]), rtol=1e-8)


def test_trajectory_excludes_initial_value():
    """Tests that element i approximates y(x[i + 1])."""
    x = np.array([0.0, 1.0, 2.0, 3.0])
    y = Differential(method="euler").compute(lambda x, y: 1.0, x, 0.0)
    assert_allclose(y, [1.0, 2.0, 3.0])


def test_euler_steps():
    """Tests two explicit Euler steps of y' = y."""
    y = Differential(method="euler").compute(growth, [0.0, 0.5, 1.0], 1.0)
    assert_allclose(y, [1.5, 2.25])


def test_rk2_exact_for_linear_right_hand_side():
    """Tests that the midpoint method integrates y' = 2x exactly on a non-uniform grid."""
    x = np.array([0.0, 0.1, 0.35, 0.5, 0.9, 1.0])
    y = Differential(method="rk2").compute(lambda x, y: 2.0 * x, x, 0.0)
    assert_allclose(y, x[1:] ** 2, atol=1e-14)


def test_fehlberg_exponential_growth():
    """Tests the Fehlberg stages on y' = y."""
    x = np.linspace(0.0, 1.0, 51)
    y = Differential(method="fehlberg").compute(growth, x, 1.0)
    assert y[-1] == pytest.approx(math.e, abs=1e-6)


def test_complex_oscillation():
    """Tests y' = i y, whose solution at π is -1."""
    x = np.linspace(0.0, math.pi, 201)
    y = Differential().compute(lambda x, y: 1j * y, x, 1.0 + 0.0j)

    assert np.iscomplexobj(y)
    assert abs(y[-1] + 1.0) < 1e-6


@pytest.mark.parametrize(
    "order, expected",
    [
        (1, [1.0]),
        (2, [1.5, -0.5]),
        (3, [23.0 / 12.0, -16.0 / 12.0, 5.0 / 12.0]),
        (4, [55.0 / 24.0, -59.0 / 24.0, 37.0 / 24.0, -9.0 / 24.0]),
    ],
)
def test_adams_bashforth_coefficients(order, expected):
    """Tests the Adams–Bashforth weights against the textbook values."""
    assert_allclose(Differential.get_coefficients(order), expected, rtol=1e-12)


@pytest.mark.parametrize("method", ["euler", "runge_kutta2", "runge_kutta4", "fehlberg"])
def test_order_one_matches_one_step_method(method):
    """Tests that order=1 gives exactly the one-step trajectory."""
    x = np.linspace(0.0, 1.0, 11)
    solver = Differential(method=method)
    assert np.array_equal(solver.compute(growth, x, 1.0, order=1), solver.compute(growth, x, 1.0))


def test_order_too_large_falls_back_to_one_step():
    """Tests that the multistep scheme needs order < len(x) - 1."""
    x = np.linspace(0.0, 1.0, 5)
    solver = Differential()
    assert np.array_equal(solver.compute(growth, x, 1.0, order=4), solver.compute(growth, x, 1.0))


def test_adams_bashforth_starts_with_one_step_values():
    """Tests that the first `order` values come from the one-step method."""
    x = np.linspace(0.0, 1.0, 21)
    solver = Differential()
    multistep = solver.compute(growth, x, 1.0, order=3)
    start = solver.compute(growth, x[:4], 1.0)

    assert multistep.shape == (20,)
    assert_allclose(multistep[:3], start[:3], rtol=0, atol=0)


def test_adams_bashforth_accuracy():
    """Tests the four-step scheme on y' = y."""
    x = np.linspace(0.0, 1.0, 201)
    y = Differential().compute(growth, x, 1.0, order=4)
    assert y[-1] == pytest.approx(math.e, abs=1e-4)


def test_non_integer_order_raises():
    """Tests that the step count must be an integer."""
    with pytest.raises(TypeError):
        Differential().compute(growth, [0.0, 1.0, 2.0], 1.0, order=2.5)


def test_method_aliases():
    """Tests method normalisation and the canonical names."""
    assert Differential(method="RK4").method == "runge_kutta4"
    assert Differential(method="Runge-Kutta-Fehlberg").method == "fehlberg"
    assert available_methods() == ["euler", "runge_kutta2", "runge_kutta4", "fehlberg"]
    with pytest.raises(ValueError, match="Unknown differential method"):
        Differential(method="dopri5")


def test_register_method_makes_solver_selectable(monkeypatch):
    """Tests that a registered one-step solver runs alone and as the multistep starter."""
    registry = MethodRegistry("differential", differential_module._REGISTRY._specs)
    monkeypatch.setattr(differential_module, "_REGISTRY", registry)
    grids = []

    def recording_euler(function, x, y0):
        grids.append(len(x))
        return Differential(method="euler").compute(function, x, y0)

    register_method("recording-euler", recording_euler, aliases=("rec",))

    assert "recording-euler" in available_methods()
    x = np.linspace(0.0, 1.0, 11)
    solver = Differential(method="REC")
    assert_allclose(solver.compute(growth, x, 1.0), Differential(method="euler").compute(growth, x, 1.0))
    assert grids == [11]

    solver.compute(growth, x, 1.0, order=3)
    assert grids == [11, 4]
