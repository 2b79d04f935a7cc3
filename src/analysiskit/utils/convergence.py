"""Iteration cap and convergence reporting shared by the iterative solvers.

Every iterative routine in AnalysisKit is bounded by :data:`MAX_ITERATIONS`.
Reaching the cap is not an error: the last estimate is returned and the
outcome is described by an :class:`IterationInfo` when the caller asks for it
with ``return_info=True``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from analysiskit.logger import analysiskit_logger

__all__ = [
    "MAX_ITERATIONS",
    "ConvergenceStatus",
    "IterationInfo",
    "finish_iteration",
]

MAX_ITERATIONS = 32767


class ConvergenceStatus(str, Enum):
    """How an iterative routine terminated."""

    CONVERGED = "converged"
    CAP_REACHED = "cap-reached"
    STALLED = "stalled"


@dataclass(frozen=True)
class IterationInfo:
    """Report attached to the result of an iterative routine.

    Attributes:
        iterations: Number of update steps that were carried out.
        status: Termination reason.
    """

    iterations: int
    status: ConvergenceStatus

    @property
    def converged(self) -> bool:
        """Whether the tolerance test was met."""
        return self.status is ConvergenceStatus.CONVERGED


def finish_iteration(
    routine: str,
    iterations: int,
    status: ConvergenceStatus,
    cap: int = MAX_ITERATIONS,
) -> IterationInfo:
    """Builds the :class:`IterationInfo` for a finished loop and logs its outcome.

    Args:
        routine: Short name of the routine, used in log messages.
        iterations: Number of update steps performed.
        status: Termination reason.
        cap: Iteration bound the routine ran under, reported in the warning.

    Returns:
        The iteration report.
    """
    if status is ConvergenceStatus.CAP_REACHED:
        analysiskit_logger.warning(
            "%s reached the iteration cap (%d) without meeting its tolerance; "
            "returning the last estimate.",
            routine,
            cap,
        )
    elif status is ConvergenceStatus.STALLED:
        analysiskit_logger.warning(
            "%s stalled after %d iterations (degenerate secant step); "
            "returning the last estimate.",
            routine,
            iterations,
        )
    else:
        analysiskit_logger.debug("%s converged after %d iterations.", routine, iterations)
    return IterationInfo(iterations=iterations, status=status)
