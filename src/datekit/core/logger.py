"""Structured logging for datekit."""

import logging
import sys
from typing import Optional, Union

from datekit.core.config import get_setting, load_default_config

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a `datekit.<name>` logger with consistent formatting.

    The level defaults to `logging.level` from config (INFO when unset).
    """
    logger = logging.getLogger(f"datekit.{name}")
    if not logger.handlers:
        if level is None:
            level = get_setting(load_default_config(), "logging.level", "INFO")
        if isinstance(level, str):
            level = level.upper()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
