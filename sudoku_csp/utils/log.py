# -*- coding: utf-8 -*-
"""Logger utilities."""
import logging
import os
import sys
from typing import Optional

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "SUDOKU_CSP_LOG_LEVEL"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger with a single stream handler.

    Args:
        name (str): The name of the logger, usually `__name__`.
        level (Optional[str]): The log level. Defaults to the value of the
            `SUDOKU_CSP_LOG_LEVEL` environment variable, or `INFO`.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_log_level(level: str) -> None:
    """Set the level of every logger created under `sudoku_csp`."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("sudoku_csp") and isinstance(logger, logging.Logger):
            logger.setLevel(level.upper())
