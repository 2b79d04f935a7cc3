"""Definite integrals of callables and of pre-sampled data."""

from analysiskit.integration.integration import Integration, available_methods, register_method

__all__ = [
    "Integration",
    "available_methods",
    "register_method",
]
