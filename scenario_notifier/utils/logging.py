# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging configuration for scenario-notifier."""

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    """Log levels selectable on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_LEVELS: dict[VerbosityLevel, int] = {
    VerbosityLevel.DEBUG: logging.DEBUG,
    VerbosityLevel.INFO: logging.INFO,
    VerbosityLevel.WARNING: logging.WARNING,
    VerbosityLevel.ERROR: logging.ERROR,
    VerbosityLevel.CRITICAL: logging.CRITICAL,
}


def configure_logging(
    level: VerbosityLevel | str,
    error_handler: errorhandler.ErrorHandler | None = None,
) -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Minimum level of records to emit
        error_handler: Error handler to reset, so that only errors logged
            from now on make it fire
    """
    lev = _LEVELS.get(VerbosityLevel(level), logging.WARNING)

    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if getattr(handler, "_scenario_notifier", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    handler._scenario_notifier = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(lev)

    if error_handler is not None:
        error_handler.reset()
