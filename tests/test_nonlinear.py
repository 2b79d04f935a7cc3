"""Tests for analysiskit.nonlinear."""

from __future__ import annotations

import math

import pytest

from analysiskit.methods import MethodRegistry
from analysiskit.nonlinear import Nonlinear, available_methods, register_method
from analysiskit.nonlinear import nonlinear as nonlinear_module
from analysiskit.utils.convergence import ConvergenceStatus, IterationInfo


def f_sqrt2(x):
    """Test function with a root at sqrt(2)."""
    return x * x - 2.0


@pytest.mark.parametrize("method", ["bisection", "secant", "false_position"])
def test_root_of_quadratic_on_bracket(method):
    """Tests that bracketing methods find sqrt(2) on [0, 2]."""
    solver = Nonlinear(method=method)
    root = solver.compute(f_sqrt2, 0.0, 2.0)

    assert isinstance(root, float)
    assert abs(f_sqrt2(root)) < 1e-8
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-8)


def test_chord_holds_left_end_fixed():
    """Tests that the chord method converges from the midpoint of [2, 5]."""
    root, info = Nonlinear(method="chord").compute(f_sqrt2, 2.0, 5.0, return_info=True)

    assert root == pytest.approx(math.sqrt(2.0), abs=1e-7)
    assert info.converged


def test_chord_reports_cap_when_iterates_cycle(analysis_caplog):
    """Tests that a 2-cycle of the chord iteration stops at the cap with a warning."""
    # From x0 = 1 with a = 0 the iterates alternate between 1 and 2.
    root, info = Nonlinear(method="chord").compute(f_sqrt2, 0.0, 2.0, return_info=True)

    assert info.status is ConvergenceStatus.CAP_REACHED
    assert not info.converged
    assert root in (1.0, 2.0)
    assert any(
        r.levelname == "WARNING" and "iteration cap" in r.getMessage()
        for r in analysis_caplog.records
    )


def test_return_info_reports_convergence():
    """Tests that return_info yields the same root plus an IterationInfo."""
    solver = Nonlinear(method="bisection")
    plain = solver.compute(f_sqrt2, 0.0, 2.0)
    root, info = solver.compute(f_sqrt2, 0.0, 2.0, return_info=True)

    assert root == plain
    assert isinstance(info, IterationInfo)
    assert info.status is ConvergenceStatus.CONVERGED
    assert info.iterations > 0


def test_secant_stalls_on_flat_function(analysis_caplog):
    """Tests that equal residuals stop the secant method with a stalled status."""
    root, info = Nonlinear(method="secant").compute(lambda x: 1.0, 0.0, 1.0, return_info=True)

    assert root == 1.0
    assert info.status is ConvergenceStatus.STALLED
    assert any("stalled" in r.getMessage() for r in analysis_caplog.records)


def test_complex_secant_converges_to_imaginary_unit():
    """Tests that the secant method works on complex brackets."""
    root = Nonlinear().compute(lambda z: z * z + 1.0, 0.1 + 0.9j, 0.2 + 1.2j)

    assert isinstance(root, complex)
    assert abs(root - 1j) < 1e-6


def test_complex_bisection_falls_back_to_secant(analysis_caplog):
    """Tests that bisection on complex input uses the secant method and warns."""
    solver = Nonlinear(method="bisection")
    root = solver.compute(lambda z: z * z + 1.0, 0.1 + 0.9j, 0.2 + 1.2j)
    expected = Nonlinear(method="secant").compute(lambda z: z * z + 1.0, 0.1 + 0.9j, 0.2 + 1.2j)

    assert root == expected
    assert solver.method == "bisection"
    assert any("does not support complex" in r.getMessage() for r in analysis_caplog.records)


def test_complex_false_position_linear_function():
    """Tests that false position solves a complex linear equation in one step."""
    target = 1.0 + 1.0j
    root = Nonlinear(method="false_position").compute(lambda z: z - target, 0.0j, 2.0 + 2.0j)

    assert root == pytest.approx(target, abs=1e-12)


@pytest.mark.parametrize("name", ["False-Position", "false_position", "regula falsi", "FALPO"])
def test_method_name_normalisation(name):
    """Tests that spellings and aliases resolve to the canonical name."""
    assert Nonlinear(method=name).method == "false_position"


def test_unknown_method_raises():
    """Tests that unknown method names are rejected at assignment."""
    solver = Nonlinear()
    with pytest.raises(ValueError, match="Unknown nonlinear method"):
        solver.method = "newton-raphson"
    assert solver.method == "secant"


@pytest.mark.parametrize("eps", [5.0, -1.0, 0.0, 1.0])
def test_eps_is_clamped_into_unit_interval(eps):
    """Tests that out-of-range tolerances are clamped, not rejected."""
    solver = Nonlinear(eps=eps)
    assert 0.0 < solver.eps < 1.0


def test_available_methods_lists_canonical_names():
    """Tests the canonical names of the built-in strategies."""
    assert available_methods() == ["bisection", "chord", "secant", "false_position"]


def test_register_method_makes_strategy_selectable(monkeypatch):
    """Tests that a registered strategy can be selected by name and alias."""
    registry = MethodRegistry("nonlinear", nonlinear_module._REGISTRY._specs)
    monkeypatch.setattr(nonlinear_module, "_REGISTRY", registry)

    def midpoint_guess(function, a, b, eps):
        return 0.5 * (a + b), IterationInfo(0, ConvergenceStatus.CONVERGED)

    register_method("midpoint-guess", midpoint_guess, aliases=("mg",))

    assert "midpoint-guess" in available_methods()
    assert Nonlinear(method="MG").compute(f_sqrt2, 0.0, 3.0) == 1.5


def test_user_callable_errors_propagate():
    """Tests that exceptions raised by the function reach the caller unchanged."""
    def broken(x):
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError, match="boom"):
        Nonlinear(method="bisection").compute(broken, 0.0, 1.0)
