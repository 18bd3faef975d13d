"""Logging for Allot.

Everything goes through the "allot" logger. Command output and diagnostics
share it: the console shows bare messages, the daily log file keeps
timestamps and levels.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from config import Config

LOGGER_NAME = "allot"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def get_log_file(config: Config, day: Optional[date] = None) -> Path:
    """Get the log file used on a given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"allot-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Attach the file and console handlers to the allot logger.

    Safe to call again, e.g. after the configuration changed: handlers from
    an earlier call are closed and replaced.

    Args:
        config: Supplies the log level and directory.

    Returns:
        The configured logger.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = get_logger()
    logger.setLevel(config.log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(get_log_file(config), encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    for handler in (file_handler, console_handler):
        handler.setLevel(config.log_level)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
