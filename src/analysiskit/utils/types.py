"""Shared typing aliases for AnalysisKit."""

from __future__ import annotations

from collections.abc import Callable
from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Scalar: TypeAlias = float | complex
ScalarArray: TypeAlias = NDArray[np.float64] | NDArray[np.complex128]

ArrayLike1D: TypeAlias = Sequence[Scalar] | NDArray[np.floating] | NDArray[np.complexfloating]
ArrayLike2D: TypeAlias = Sequence[Sequence[float]] | NDArray[np.floating]

ScalarFunction: TypeAlias = Callable[[Scalar], Scalar]
MeshFunction: TypeAlias = Callable[[Scalar, Scalar], Scalar]
