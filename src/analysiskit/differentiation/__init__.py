"""Finite-difference derivatives of arbitrary order."""

from analysiskit.differentiation.differentiation import Differentiation

__all__ = ["Differentiation"]
