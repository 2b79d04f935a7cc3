"""Provides all analysiskit methods.

Thread safety:
    Every computation reads the settings of its instance (``method``,
    ``eps``, ``points``, ``power``) when the call starts and keeps no other
    state between calls. Changing a setting affects later calls only, and
    the change is not synchronized with calls already running on other
    threads. Changing the settings of an instance while another thread
    computes with it is unsupported. Separate instances, and instances whose
    settings are left unchanged, can be shared across threads.
"""

from importlib.metadata import PackageNotFoundError, version

from analysiskit.approximation import Approximation, FitResult
from analysiskit.differential import Differential
from analysiskit.differentiation import Differentiation
from analysiskit.integration import Integration
from analysiskit.interpolation import Interpolation
from analysiskit.nonlinear import Nonlinear
from analysiskit.optimization import Optimization
from analysiskit.roots import Roots
from analysiskit.utils.convergence import ConvergenceStatus, IterationInfo

try:
    __version__ = version("analysiskit")
except PackageNotFoundError:
    pass

__all__ = [
    "Approximation",
    "ConvergenceStatus",
    "Differential",
    "Differentiation",
    "FitResult",
    "Integration",
    "Interpolation",
    "IterationInfo",
    "Nonlinear",
    "Optimization",
    "Roots",
]
