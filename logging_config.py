"""Logging setup shared by the app and the maintenance scripts."""
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Attach a console handler and a rotating file handler to the root logger"""
    logger = logging.getLogger()
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel((level or config.LOG_LEVEL).upper())
    console_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(log_file or config.LOG_FILE,
                                       maxBytes=2000000,
                                       backupCount=3,
                                       encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    return logger
