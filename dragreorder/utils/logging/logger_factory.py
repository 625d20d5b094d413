"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-02

Cached access to module loggers.
"""

import logging
import threading

from dragreorder.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """One logger per name, created under a lock."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                logger = get_logger(name)
                cls._loggers[name] = logger
            return logger

    @classmethod
    def get_cached_names(cls) -> list[str]:
        with cls._lock:
            return sorted(cls._loggers)


def get_cached_logger(name: str = "dragreorder") -> logging.Logger:
    """Return the cached logger for ``name``, usually the caller's ``__name__``."""
    return LoggerFactory.get_logger(name)
