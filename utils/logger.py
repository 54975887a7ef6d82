# -*- coding: utf-8 -*-
"""
Logging configuration.

Modules take child loggers of the "blockcast" logger with get_logger().
Handlers are attached once by the entry point through setup_logger(),
so importing a module never touches the log directory.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "blockcast"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"


def setup_logger(console_level: Optional[str] = None) -> logging.Logger:
    """
    Attach file and console handlers to the application logger.

    Args:
        console_level: Console threshold name, defaults to Config.LOG_LEVEL.
                       The rotating file always records DEBUG.
    """
    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    level_name = (console_level or Config.LOG_LEVEL).upper()
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level_name, logging.INFO))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger of the application logger for a module."""
    return logging.getLogger(APP_LOGGER_NAME).getChild(name)
