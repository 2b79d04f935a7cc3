"""Least-squares curve approximation."""

from analysiskit.approximation.approximation import (
    Approximation,
    FitResult,
    available_methods,
    register_method,
)

__all__ = [
    "Approximation",
    "FitResult",
    "available_methods",
    "register_method",
]
