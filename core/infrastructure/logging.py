"""
Logging infrastructure.

Provides logging utilities for the infrastructure and application layers.
"""
import logging
from typing import Optional

from core.settings import LoggingSettings, get_app_settings


def get_logger(name: str, settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        settings: Logging settings, defaults to the application settings

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        settings = settings or get_app_settings().logging
        handler = logging.StreamHandler()
        formatter = logging.Formatter(settings.format)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(settings.level)
    return logger
