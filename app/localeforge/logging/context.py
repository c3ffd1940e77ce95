"""Locale context binding for structured logging.

Binds the locale a block of code renders in to every log entry emitted
inside it, so translation events can be traced back to the request locale.

Usage:
    from localeforge.logging import bind_locale_context

    with bind_locale_context("fr_FR", request_path="/about"):
        logger.info("rendering_page")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Any, Generator

import structlog


@contextmanager
def bind_locale_context(
    locale: str,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind locale information to all logs within the context manager.

    Previously bound values for the same keys are restored on exit, so
    nested blocks behave as expected.

    Args:
        locale: Locale the enclosed code renders in (e.g. "de_AT").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"locale": locale}
    context.update(extra_context)

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        restore = {key: previous[key] for key in context if key in previous}
        if restore:
            structlog.contextvars.bind_contextvars(**restore)

