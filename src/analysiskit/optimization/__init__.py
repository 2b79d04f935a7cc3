"""Extremum search for unimodal real functions."""

from analysiskit.optimization.optimization import Optimization

__all__ = ["Optimization"]
