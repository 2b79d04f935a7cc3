"""Univariate and bilinear interpolation."""

from analysiskit.interpolation.interpolation import Interpolation, available_methods, register_method

__all__ = [
    "Interpolation",
    "available_methods",
    "register_method",
]
