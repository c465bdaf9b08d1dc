# hems_scenarios/utils/logger.py
from __future__ import annotations

import logging
from typing import Optional

from hems_scenarios.utils.constants import LOGGER_NAME

_LOGGERS: dict[str, logging.Logger] = {}


def get_logger(name: str = LOGGER_NAME, level: str | int | None = None) -> logging.Logger:
    """Return a logger writing to stderr so it stays out of the console prompts."""
    if name in _LOGGERS:
        logger = _LOGGERS[name]
        if level is not None:
            logger.setLevel(level)
        return logger

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else logging.WARNING)
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def configure_logging(level: str | int) -> logging.Logger:
    """Set the level of the package logger, falling back to WARNING for unknown names."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    return get_logger(LOGGER_NAME, level)


def reset_logger(name: str) -> None:
    """Remove cached loggers, useful for testing."""
    existing: Optional[logging.Logger] = _LOGGERS.pop(name, None)
    if existing:
        for handler in list(existing.handlers):
            existing.removeHandler(handler)
            handler.close()
