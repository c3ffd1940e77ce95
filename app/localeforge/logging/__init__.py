"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for localeforge using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_locale_context(): Context manager binding a locale to log entries

Example:
    from localeforge.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from localeforge.logging.context import bind_locale_context
from localeforge.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_locale_context",
]
