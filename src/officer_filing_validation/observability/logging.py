"""Shared logging utilities for validation passes and gateway calls.

Usage example:
    from officer_filing_validation.observability.logging import get_logger

    logger = get_logger("officer_filing_validation.application.appointment")
    logger.info("Validated filing for %s with %s errors", company_number, error_count)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str, *, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that writes UTC-stamped lines to stderr.

    The handler is attached once per name, so repeated calls share it.

    Args:
        name: Logger name (use a stable module-qualified name).
        level: Level applied when the logger is first configured.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
    formatter.converter = time.gmtime
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
