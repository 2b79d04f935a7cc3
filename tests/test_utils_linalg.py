"""Tests for analysiskit.utils.linalg."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from analysiskit.utils.linalg import (
    companion_matrix,
    eigenvalues,
    invert_matrix,
    solve_or_pinv,
)


def test_solve_or_pinv_full_rank():
    """Tests that a regular system is solved exactly."""
    a = np.array([[4.0, 1.0], [1.0, 3.0]])
    b = np.array([1.0, 2.0])

    assert_allclose(solve_or_pinv(a, b, assume_symmetric=True), np.linalg.solve(a, b))
    assert_allclose(solve_or_pinv(a, b), np.linalg.solve(a, b))


def test_solve_or_pinv_complex_system():
    """Tests that complex systems are solved in complex arithmetic."""
    a = np.array([[1.0, 1.0j], [0.0, 2.0]])
    b = np.array([1.0 + 1.0j, 2.0j])
    x = solve_or_pinv(a, b)

    assert np.iscomplexobj(x)
    assert_allclose(a @ x, b)


def test_solve_or_pinv_singular_warns_and_uses_pseudoinverse():
    """Tests the pseudoinverse fallback for a rank-deficient matrix."""
    a = np.array([[1.0, 0.0], [0.0, 0.0]])
    b = np.array([2.0, 0.0])

    with pytest.warns(RuntimeWarning, match="pseudoinverse"):
        x = solve_or_pinv(a, b, warn_context="test")
    assert_allclose(x, np.linalg.pinv(a) @ b)


def test_solve_or_pinv_shape_errors():
    """Tests that incompatible shapes raise ValueError."""
    with pytest.raises(ValueError):
        solve_or_pinv(np.ones((2, 3)), np.ones(2))
    with pytest.raises(ValueError):
        solve_or_pinv(np.eye(2), np.ones(3))


def test_invert_matrix():
    """Tests regular inversion and the singular fallback."""
    a = np.array([[2.0, 0.0], [0.0, 5.0]])
    assert_allclose(invert_matrix(a), [[0.5, 0.0], [0.0, 0.2]])

    singular = np.array([[1.0, 1.0], [1.0, 1.0]])
    with pytest.warns(RuntimeWarning, match="pseudoinverse"):
        inv = invert_matrix(singular)
    assert_allclose(inv, np.linalg.pinv(singular))

    with pytest.raises(ValueError):
        invert_matrix(np.ones(3))


def test_companion_matrix_layout():
    """Tests the first row and the sub-diagonal of the companion matrix."""
    m = companion_matrix([-6.0, 11.0, -6.0])
    expected = np.array(
        [
            [6.0, -11.0, 6.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
        ]
    )
    assert_allclose(m, expected)
    assert companion_matrix([]).shape == (0, 0)


def test_companion_eigenvalues_are_roots():
    """Tests that the companion eigenvalues are the polynomial roots."""
    roots = np.sort(eigenvalues(companion_matrix([-6.0, 11.0, -6.0])).real)
    assert_allclose(roots, [1.0, 2.0, 3.0])
    assert eigenvalues(np.zeros((0, 0))).size == 0
