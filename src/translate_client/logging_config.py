"""Logging setup for the translate client."""

import logging
from typing import Optional, Union

from .config import get_settings


LOGGER_NAMESPACE = "translate_client"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Falls back to ``LOG_LEVEL`` from the settings when no level is given.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    return logger
