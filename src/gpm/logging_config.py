"""Logging configuration for gpm.

Diagnostics go through the standard :mod:`logging` module.  Only the
``gpm`` package logger is configured so that host applications (and
pytest's ``caplog``) keep control of the root logger.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "GPM_LOG_LEVEL"


def level_from_verbosity(verbosity: int) -> str:
    """Map the count of ``-v`` flags to a level name.

    Without flags the ``GPM_LOG_LEVEL`` environment variable decides,
    falling back to ``WARNING``.
    """
    if verbosity >= 2:
        return "DEBUG"
    if verbosity == 1:
        return "INFO"
    return os.environ.get(LOG_LEVEL_ENV, "WARNING")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    level_upper = level.upper()
    log_level = getattr(logging, level_upper, logging.WARNING)

    logger = logging.getLogger("gpm")
    logger.setLevel(log_level)

    # Remove handlers from a previous call to avoid duplicate lines.
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    logger.addHandler(handler)
    return logger
