from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"

_level = logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger for a module."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(_level)
    return logger


def configure_level(level: str) -> None:
    """Apply LOG_LEVEL from settings to loggers already handed out."""
    global _level
    resolved = logging.getLevelName(str(level).upper())
    _level = resolved if isinstance(resolved, int) else logging.INFO
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and "faculty_attendance" in name:
            logger.setLevel(_level)
