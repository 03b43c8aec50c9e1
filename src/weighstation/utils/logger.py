"""Logging configuration.

Sets up the package logger with a console handler and an optional log
file. Modules log through logging.getLogger(__name__) and inherit this
configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from weighstation.config import Config

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logger(
    name: str = "weighstation",
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Set up and configure logger.

    Args:
        name: Logger name
        level: Logging level (default: WARNING)
        log_file: Optional file path for log output
        format_string: Custom format string (optional)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding duplicate handlers
    if logger.handlers:
        set_log_level(logger, logging.getLevelName(level))
        return logger

    formatter = logging.Formatter(format_string or Config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def set_log_level(logger: logging.Logger, level: str) -> None:
    """Set log level from string ('DEBUG', 'INFO', ...). Unknown names mean INFO."""
    log_level = LEVELS.get(str(level).upper(), logging.INFO)
    logger.setLevel(log_level)

    for handler in logger.handlers:
        handler.setLevel(log_level)
