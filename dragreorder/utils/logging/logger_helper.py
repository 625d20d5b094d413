"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-10-02

Helpers shared by the logging setup.

Functions:
    get_logger(name): Returns a named logger that hands its records to the root handlers.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.

Classes:
    DevOnlyFilter: Hides ``dev_only`` records from the console.
    ConsoleFormatter: Falls back to ASCII-safe text on consoles that cannot encode it.
"""

import logging
import re

from dragreorder.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",
    "—": "--",
    "–": "-",
    "…": "...",
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS)))


def safe_text(text: str) -> str:
    """Replace symbols that legacy console code pages cannot print.

    Args:
        text (str): Text that may contain arrows, dashes or ellipses.

    Returns:
        str: The same text with those symbols spelled in ASCII.

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that propagates to the root handlers.

    Module loggers never own handlers; ConfigureLogger installs them once on
    the root logger.
    """
    logger = logging.getLogger(name or "dragreorder")
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    logger.handlers.clear()
    return logger


class DevOnlyFilter(logging.Filter):
    """Drops records tagged with ``extra={"dev_only": True}`` unless enabled in config."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


class ConsoleFormatter(logging.Formatter):
    """Formatter that degrades to ASCII when the target stream cannot encode a message."""

    def __init__(self, fmt: str, encoding: str | None = None):
        super().__init__(fmt)
        self.encoding = encoding or "utf-8"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        try:
            text.encode(self.encoding)
        except (UnicodeEncodeError, LookupError):
            return safe_text(text).encode("ascii", "replace").decode("ascii")
        return text
