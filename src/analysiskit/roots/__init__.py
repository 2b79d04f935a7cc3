"""Polynomial roots and their expansion into coefficients."""

from analysiskit.roots.roots import Roots

__all__ = ["Roots"]
