"""Provides the Approximation class and its FitResult.

Each method maps the data to a space where a polynomial least-squares fit
applies, fits there with :mod:`analysiskit.approximation.least_squares`, and
maps the fitted values back:

* ``polynomial``: ``y ≈ P(x)``
* ``logarithmic``: ``y ≈ P(ln x)``
* ``exponential``: ``y ≈ exp(P(x))``
* ``power``: ``y ≈ exp(P(ln x))``

Example:
    >>> import numpy as np
    >>> from analysiskit.approximation import Approximation
    >>> x = np.linspace(0.0, 4.0, 9)
    >>> fit = Approximation(power=2).compute(x, 1.0 + 2.0 * x - 0.5 * x**2)
    >>> np.round(fit.coefficients, 8)
    array([ 1. ,  2. , -0.5])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

import numpy as np

from analysiskit.approximation.least_squares import (
    evaluate_polynomial,
    fit_coefficients,
    format_equation,
    variance_ratio,
)
from analysiskit.methods import MethodRegistry, MethodSpec
from analysiskit.utils.types import ArrayLike1D, ScalarArray
from analysiskit.utils.validate import validate_int_setting, validate_samples_xy

__all__ = [
    "FitResult",
    "Approximation",
    "available_methods",
    "register_method",
]

_POWER_BASIS = " * X^"
_LOG_BASIS = " * LN(X)^"


@dataclass(frozen=True)
class FitResult:
    """Outcome of a least-squares approximation.

    Attributes:
        values: Fitted values at the input abscissae.
        coefficients: Polynomial coefficients in ascending powers of the
            (possibly log-transformed) abscissa.
        error: Variance ratio ``min(var(values), var(y)) / max(...)`` in
            ``[0, 1]``; 1 means equal spread.
        method: Canonical name of the method that produced the fit.
        basis: Display text for the basis functions.
        exponentiated: Whether the fitted polynomial is wrapped in ``exp``.
    """

    values: ScalarArray
    coefficients: np.ndarray
    error: float
    method: str
    basis: str = _POWER_BASIS
    exponentiated: bool = False

    @property
    def equation(self) -> str:
        """Human-readable form of the fitted curve, e.g. ``"EXP(0.69 + 0.5 * X^1)"``."""
        text = format_equation(self.coefficients, self.basis)
        return f"EXP({text})" if self.exponentiated else text


def polynomial(x: ScalarArray, y: ScalarArray, degree: int) -> FitResult:
    """Fits ``y ≈ P(x)``."""
    cf = fit_coefficients(x, y, degree)
    values = evaluate_polynomial(x, cf)
    return FitResult(values, cf, variance_ratio(values, y), "polynomial")


def logarithmic(x: ScalarArray, y: ScalarArray, degree: int) -> FitResult:
    """Fits ``y ≈ P(ln x)``."""
    t = np.log(x)
    cf = fit_coefficients(t, y, degree)
    values = evaluate_polynomial(t, cf)
    return FitResult(values, cf, variance_ratio(values, y), "logarithmic", basis=_LOG_BASIS)


def exponential(x: ScalarArray, y: ScalarArray, degree: int) -> FitResult:
    """Fits ``ln y ≈ P(x)``, i.e. ``y ≈ exp(P(x))``."""
    cf = fit_coefficients(x, np.log(y), degree)
    values = np.exp(evaluate_polynomial(x, cf))
    return FitResult(values, cf, variance_ratio(values, y), "exponential", exponentiated=True)


def power(x: ScalarArray, y: ScalarArray, degree: int) -> FitResult:
    """Fits ``ln y ≈ P(ln x)``, i.e. ``y ≈ exp(P(ln x))``."""
    t = np.log(x)
    cf = fit_coefficients(t, np.log(y), degree)
    values = np.exp(evaluate_polynomial(t, cf))
    return FitResult(
        values, cf, variance_ratio(values, y), "power", basis=_LOG_BASIS, exponentiated=True
    )


_REGISTRY = MethodRegistry(
    "approximation",
    [
        MethodSpec("polynomial", polynomial, ("poly",)),
        MethodSpec("logarithmic", logarithmic, ("log", "logc")),
        MethodSpec("exponential", exponential, ("exp", "expn")),
        MethodSpec("power", power, ("powr", "power-law")),
    ],
)


def register_method(name: str, function: Callable, *, aliases: Iterable[str] = ()) -> None:
    """Register a new approximation method.

    Args:
        name: Canonical public name of the method.
        function: Callable ``(x, y, terms) -> FitResult``, where ``terms`` is
            the number of basis functions (``power + 1``).
        aliases: Additional accepted spellings.
    """
    _REGISTRY.register(name, function, aliases=aliases)


def available_methods() -> list[str]:
    """List canonical approximation method names.

    Returns:
        List of method names.
    """
    return _REGISTRY.available()


class Approximation:
    """Least-squares curve fitting.

    Attributes:
        power: Polynomial degree of the fit (``power + 1`` basis functions).
        method: Canonical name of the selected transform.
    """

    def __init__(self, power: int = 1, method: str = "polynomial"):
        """Initializes the fitter.

        Args:
            power: Polynomial degree, at least 1.
            method: Method name or alias (``"polynomial"``, ``"logarithmic"``,
                ``"exponential"`` or ``"power"``).

        Raises:
            TypeError: If ``power`` is not an integer.
            ValueError: If ``power < 1`` or ``method`` is not recognized.
        """
        self.power = power
        self.method = method

    @property
    def power(self) -> int:
        """Polynomial degree of the fit."""
        return self._power

    @power.setter
    def power(self, value: int) -> None:
        self._power = validate_int_setting(value, "power", 1)

    @property
    def method(self) -> str:
        """Canonical name of the selected transform."""
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = _REGISTRY.resolve(value).name

    def compute(self, x: ArrayLike1D, y: ArrayLike1D) -> FitResult:
        """Fits the data and evaluates the fit at ``x``.

        Logarithmic transforms need positive real data (or complex data, for
        which the principal logarithm is used).

        Args:
            x: 1D array of abscissae.
            y: 1D array of observations.

        Returns:
            The fit.

        Raises:
            ValueError: If ``x`` and ``y`` are not 1D arrays of the same, nonzero length.
        """
        x_arr, y_arr = validate_samples_xy(x, y, min_length=1)
        if np.iscomplexobj(x_arr) or np.iscomplexobj(y_arr):
            x_arr, y_arr = x_arr.astype(complex), y_arr.astype(complex)
        return _REGISTRY.resolve(self._method).function(x_arr, y_arr, self._power + 1)
