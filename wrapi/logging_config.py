"""
Logging Configuration Module.

Helpers for applications that want wrapi's request logging on a console.
wrapi never configures logging on import; call `setup_logging` explicitly.

Features:
- Simple, detailed and JSON line formats
- Level and format defaults taken from `WrapiSettings`
- Module-specific levels to keep httpx noise down
"""

import logging
from typing import Optional

from wrapi.config import get_settings

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Third-party libraries (reduce noise)
MODULE_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

_HANDLER_NAME = "wrapi-console"


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> logging.Handler:
    """
    Attach a console handler to the ``wrapi`` logger.

    Calling it again replaces the previously installed handler rather than
    adding a second one.

    Args:
        log_level: Override the configured level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the configured format (simple, detailed, json)

    Returns:
        The installed handler.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()
    format_str = FORMATS.get(fmt, DETAILED_FORMAT)

    logger = logging.getLogger("wrapi")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    logger.debug("Logging configured: level=%s, format=%s", level, fmt)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
