"""Diagnostic logging for check scripts.

Console narration is separate and goes through the Narrator. This module only
wires the ``scriptunit`` logger to the ``TEST_DEBUG_LOG`` file and, with
``-v/--verbose``, to stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "scriptunit",
) -> logging.Logger:
    """
    Point the run's diagnostic logger at its destinations.

    Recorded outcomes, tool detection and report writes are logged by
    ``scriptunit.*`` modules and propagate here. With neither a debug file nor
    verbose output the logger has no handlers and the run logs nothing.

    Args:
        debug_file: Debug log appended to across runs; parent directories are created.
        verbose: Mirror the log on stderr so it stays out of a stdout report.
        logger_name: Logger to configure; tests pass their own to stay isolated.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)

    # A second initialize() in the same process must not stack handlers.
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    destinations: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        destinations.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        destinations.append(logging.StreamHandler(sys.stderr))

    for handler in destinations:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
