"""Logging setup shared by every module of the picker."""

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOGGER_NAME = "calendar_picker"
_DEFAULT_LEVEL = os.getenv("CALENDAR_PICKER_LOG_LEVEL", "WARNING").upper()


def resolve_level(name: str) -> int:
    """Map a level name to its number, WARNING for anything unknown."""
    level = logging.getLevelName(name.upper())
    # getLevelName echoes unknown names back as "Level X" strings
    if not isinstance(level, int):
        return logging.WARNING
    return level


def setup_logging() -> logging.Logger:
    """Configure the package logger once and return it."""
    level = resolve_level(_DEFAULT_LEVEL)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate console handlers on re-import
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        ch.setLevel(level)
        logger.addHandler(ch)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(LOGGER_NAME)
    return base.getChild(name) if name else base


logger = setup_logging()
