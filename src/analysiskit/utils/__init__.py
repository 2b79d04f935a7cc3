"""Utility functions for AnalysisKit package."""

from .convergence import (
    MAX_ITERATIONS,
    ConvergenceStatus,
    IterationInfo,
)
from .linalg import (
    companion_matrix,
    eigenvalues,
    invert_matrix,
    solve_or_pinv,
)
from .numerics import clamp_tolerance

__all__ = [
    "MAX_ITERATIONS",
    "ConvergenceStatus",
    "IterationInfo",
    "clamp_tolerance",
    "solve_or_pinv",
    "invert_matrix",
    "companion_matrix",
    "eigenvalues",
]
