"""Contains the name for the logger of AnalysisKit modules.

``analysiskit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Iteration counts of converged solvers.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a solver stopped at the
    iteration cap or a method fell back to another strategy.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``analysiskit.logger.analysiskit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "analysiskit"
analysiskit_logger = logging.getLogger(logger_name)
