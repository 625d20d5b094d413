"""Module: init_logging.py

Author: Michael Economou
Date: 2026-10-02

Provides a single entry point to initialize the logging system
for the application with app-specific log file names.

Functions:
    init_logging(app_name): Sets up the root handlers and returns the app logger.
"""

import logging

from dragreorder.utils.logging.logger_factory import get_cached_logger
from dragreorder.utils.logging.logger_setup import ConfigureLogger


def init_logging(app_name: str = "dragreorder", log_dir: str = "logs") -> logging.Logger:
    """Initializes logging for the application.

    Args:
        app_name (str): The base name for log files (e.g., 'dragreorder').
        log_dir (str): Directory for the rotating log files.

    Returns:
        logging.Logger: The logger for the application package.

    """
    ConfigureLogger(log_name=app_name, log_dir=log_dir)
    return get_cached_logger(app_name)
