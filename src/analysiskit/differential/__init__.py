"""Initial-value problems for ordinary differential equations."""

from analysiskit.differential.differential import Differential, available_methods, register_method

__all__ = [
    "Differential",
    "available_methods",
    "register_method",
]
