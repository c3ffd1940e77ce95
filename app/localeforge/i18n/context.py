"""Current locale state.

The current locale is held in a context variable so that every thread and
asyncio task sees the value set for its own request. When nothing has been
set, the configured default locale applies.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from itertools import count
from types import MappingProxyType
from typing import Generator, Mapping, Optional

from localeforge.logging import bind_locale_context, get_module_logger

logger = get_module_logger()

# Current locale of every LocaleContext, keyed by instance. Replaced, never mutated.
_current_locales: ContextVar[Mapping[int, str]] = ContextVar(
    "localeforge_current_locales", default=MappingProxyType({})
)
_instance_keys = count()


class LocaleContext:
    """Holds the locale translations are rendered in.

    Usage:
        context = LocaleContext(default_locale="en_US")

        # At bootstrap or in request middleware
        context.set_locale("de_DE")

        # Temporarily, e.g. for an e-mail sent in the recipient's language
        with context.use("fr_FR"):
            message = translator.translate("Email.SUBJECT", "Welcome")

    Attributes:
        default_locale: Locale used when no locale has been set.
    """

    def __init__(self, default_locale: str = "en_US"):
        self.default_locale = default_locale
        self._key = next(_instance_keys)

    def get_locale(self) -> str:
        """Return the current locale, or the default locale if unset."""
        return _current_locales.get().get(self._key) or self.default_locale

    def set_locale(self, locale: Optional[str]) -> None:
        """Set the current locale.

        Empty values are ignored and leave the current locale unchanged.

        Args:
            locale: Locale to set (e.g. "de_AT").
        """
        if locale:
            self._store(locale)
            logger.debug("set_current_locale", locale=locale)

    def reset(self) -> None:
        """Forget the current locale so the default applies again."""
        self._store(None)

    @contextmanager
    def use(self, locale: str) -> Generator[str, None, None]:
        """Render in a locale for the duration of a block.

        The locale is also bound to the logging context.

        Args:
            locale: Locale to use inside the block.

        Yields:
            The active locale.
        """
        token = self._store(locale or None)
        active = self.get_locale()
        try:
            with bind_locale_context(active):
                yield active
        finally:
            _current_locales.reset(token)

    def _store(self, locale: Optional[str]):
        locales = dict(_current_locales.get())
        if locale:
            locales[self._key] = locale
        else:
            locales.pop(self._key, None)
        return _current_locales.set(MappingProxyType(locales))
