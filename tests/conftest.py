"""Pytest configuration file with shared fixtures for AnalysisKit tests."""

import logging
import os

import numpy as np
import pytest

from analysiskit.logger import logger_name

__all__ = ["analysis_caplog", "cubic_samples"]


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
    os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")


@pytest.fixture
def analysis_caplog(caplog):
    """Return ``caplog`` capturing every record of the package logger from DEBUG up."""
    caplog.set_level(logging.DEBUG, logger=logger_name)
    return caplog


@pytest.fixture(scope="session")
def cubic_samples():
    """Nodes and values of ``x**3 - 2x + 1`` on eight points of ``[-1, 2.5]``."""
    x = np.linspace(-1.0, 2.5, 8)
    return x, x**3 - 2.0 * x + 1.0
