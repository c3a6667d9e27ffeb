"""Logger helpers shared by registries and populators."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "dynamic_registry"

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package logger.

    Output and level are left to the host application until
    :func:`configure_logging` is called.
    """

    _package_logger()
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level."""

    logger = _package_logger()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}.")
        level = resolved

    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
