"""Root finding for scalar nonlinear equations."""

from analysiskit.nonlinear.nonlinear import Nonlinear, available_methods, register_method

__all__ = [
    "Nonlinear",
    "available_methods",
    "register_method",
]
