"""
Logging helpers for blazenaming.

The library only emits records; attaching a handler is left to the host,
which calls :func:`configure_logging` once while setting up its schema build.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "blazenaming"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, fmt: str = LOG_FORMAT) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
