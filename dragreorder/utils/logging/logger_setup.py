"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-02

ConfigureLogger installs the process-wide handlers on the root logger.

Which handlers exist is decided by the LOG_* settings in dragreorder.config:
a console stream, <name>.log for regular activity and, when enabled,
<name>_debug.log with everything down to DEBUG.
"""

import logging
import os
import sys

from dragreorder.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from dragreorder.utils.logging.logger_file_helper import add_file_handler
from dragreorder.utils.logging.logger_helper import ConsoleFormatter, DevOnlyFilter

CONSOLE_LOG_FORMAT = "[%(levelname)s] %(message)s"


class ConfigureLogger:
    """Configures the root logger once per process.

    Nothing is installed when the root logger already has handlers, which
    keeps repeated calls (and pytest's own capture handlers) intact.
    """

    def __init__(self, log_name: str = "dragreorder", log_dir: str = "logs"):
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers do the level filtering

        if self.logger.hasHandlers():
            return

        if LOG_TO_CONSOLE:
            self._setup_console_handler(_level(LOG_CONSOLE_LEVEL))

        if LOG_TO_FILE:
            os.makedirs(log_dir, exist_ok=True)
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}.log"),
                level=_level(LOG_FILE_LEVEL),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )
            if LOG_DEBUG_FILE_ENABLED:
                add_file_handler(
                    logger=self.logger,
                    log_path=os.path.join(log_dir, f"{log_name}_debug.log"),
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )

    def _setup_console_handler(self, level: int) -> None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.addFilter(DevOnlyFilter())
        handler.setFormatter(
            ConsoleFormatter(CONSOLE_LOG_FORMAT, getattr(sys.stdout, "encoding", None))
        )
        self.logger.addHandler(handler)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
