"""Structlog configuration for localeforge.

Translation lookups log structured snake_case events (``loaded_translations``,
``used_fallback_translation``, ...). This module wires structlog on top of the
standard library so those events render as console lines in development and
as JSON in production, with the locale bound by
:func:`localeforge.logging.bind_locale_context` merged into every entry.

Usage:
    from localeforge.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("loaded_translations", locale="de_DE")

Dependencies:
    - localeforge.configuration.Settings
"""

import inspect
import logging
import sys
from types import FrameType
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from localeforge.configuration import Settings
from localeforge.configuration import settings as default_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _resolve_level(level_name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant (default INFO)."""
    if not level_name:
        return logging.INFO
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(prod_mode: bool) -> List[Any]:
    """Return the structlog processor chain.

    Args:
        prod_mode: Render JSON instead of console output.

    Returns:
        Processors, renderer last.
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
    ]

    if prod_mode:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # ConsoleRenderer formats exc_info itself
        processors.append(structlog.dev.ConsoleRenderer())

    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the application.

    Under pytest every entry is dropped by raising the root level above
    CRITICAL; loggers still work so code paths that log are exercised.

    Args:
        settings: Settings instance (default: application settings).
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console output).

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=_resolve_level(log_level or settings.LOG_LEVEL),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name(frame: Optional[FrameType]) -> Optional[str]:
    """Name of the module two frames above the helper that calls this."""
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return None
    module = inspect.getmodule(caller)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a name.

    Args:
        name: Logger name (default: the calling module's name).

    Returns:
        Logger with ``logger_name`` bound.
    """
    name = name or _caller_module_name(inspect.currentframe()) or "unknown"
    return logger.bind(logger_name=name)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path``.

    Example:
        # In localeforge/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "localeforge.i18n.loader"}
    """
    module_name = _caller_module_name(inspect.currentframe())
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
