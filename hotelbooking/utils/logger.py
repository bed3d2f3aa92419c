"""Logging setup shared by the booking engine, stores and HTTP adapter.

Log lines use ``key=value`` pairs separated by ``|`` so booking decisions
(room chosen, no capacity, rows persisted) can be grepped by field.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from hotelbooking.utils.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "hotelbooking"

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stdout handler to the package logger once per process."""
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    resolved_level = (level or get_settings().log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved_level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    # httpx logs every TestClient request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
