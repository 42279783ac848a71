"""Centralized logging helpers."""

from __future__ import annotations

import logging
import os
from typing import Final

_LOGGER_NAME: Final = "structops"

LOG_LEVEL_ENV: Final = "STRUCTOPS_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final = "WARNING"
LOG_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATEFMT: Final = "%Y-%m-%d %H:%M:%S"


def configured_level() -> int:
    """Level named by $STRUCTOPS_LOG_LEVEL, WARNING if unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(component: str | None = None) -> logging.Logger:
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(configured_level())
    return logger
