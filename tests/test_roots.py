"""Tests for analysiskit.roots."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from analysiskit.roots import Roots


def test_expand_then_solve_round_trip():
    """Tests that roots {1, 2, 3} survive expansion and eigen-solve."""
    roots = Roots()
    p = roots.expand([1.0, 2.0, 3.0])

    assert_allclose(p, [1.0, -6.0, 11.0, -6.0])
    found = roots.compute(p)
    assert found.shape == (3,)
    assert_allclose(np.sort(found.real), [1.0, 2.0, 3.0], rtol=1e-10)
    assert_allclose(found.imag, 0.0, atol=1e-10)


def test_leading_zeros_are_dropped():
    """Tests that leading zero coefficients lower the degree."""
    found = Roots().compute([0.0, 0.0, 1.0, -3.0, 2.0])
    assert found.shape == (2,)
    assert_allclose(np.sort(found.real), [1.0, 2.0], rtol=1e-12)


def test_scaling_by_leading_coefficient():
    """Tests that a non-monic polynomial is normalised before the eigen-solve."""
    found = Roots().compute([2.0, -4.0])
    assert_allclose(found, [2.0])


@pytest.mark.parametrize("polynomial", [[0.0, 0.0, 0.0], [5.0], [0.0, 7.0]])
def test_constant_or_zero_polynomial_has_no_roots(polynomial):
    """Tests the empty result for polynomials without roots."""
    found = Roots().compute(polynomial)
    assert found.size == 0
    assert np.iscomplexobj(found)


def test_complex_roots():
    """Tests that x^2 + 1 has roots ±i."""
    found = Roots().compute([1.0, 0.0, 1.0])
    assert_allclose(sorted(found, key=lambda z: z.imag), [-1.0j, 1.0j], atol=1e-12)


def test_eps_zeroes_small_imaginary_parts():
    """Tests that imaginary parts below eps are removed."""
    found = Roots(eps=1e-6).compute([1.0, -2.0, 1.0])
    assert np.all(found.imag == 0.0)
    assert_allclose(found.real, [1.0, 1.0], atol=1e-6)


def test_expand_conjugate_pair_is_real():
    """Tests that conjugate roots expand to real coefficients."""
    p = Roots.expand([1.0j, -1.0j])
    assert not np.iscomplexobj(p)
    assert_allclose(p, [1.0, 0.0, 1.0])


def test_expand_complex_root_stays_complex():
    """Tests that a lone complex root gives complex coefficients."""
    p = Roots.expand([2.0j])
    assert np.iscomplexobj(p)
    assert_allclose(p, [1.0, -2.0j])


def test_expand_no_roots():
    """Tests that the empty product is the constant 1."""
    assert_allclose(Roots.expand([]), [1.0])


def test_eps_is_clamped():
    """Tests that eps is range-limited into (0, 1)."""
    assert 0.0 < Roots(eps=0.0).eps < 1.0
    assert 0.0 < Roots(eps=2.0).eps < 1.0
