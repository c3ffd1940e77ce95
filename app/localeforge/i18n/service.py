"""Translation service facade.

Provides a class-based interface to the i18n system for dependency
injection and testing. All work is delegated to the wired components.
"""

from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Dict, Generator, Mapping, Optional

from localeforge.i18n.context import LocaleContext
from localeforge.i18n.loader import TranslationLoader
from localeforge.i18n.models import Injection, TextDirection
from localeforge.i18n.resolvers import LocaleResolver
from localeforge.i18n.sources import TranslationSource
from localeforge.i18n.translator import Translator
from localeforge.logging import get_module_logger

logger = get_module_logger()


class TranslationService:
    """Class-based translation service.

    Usage:
        from localeforge.i18n import create_translation_service

        service = create_translation_service(base_path=Path("/srv/site"))
        service.set_locale("de_DE")

        service.translate("Member.FIRSTNAME", "First name")
        service.translate("Cart.ITEMS", "one item|{count} items", {"count": 3})

    Attributes:
        translator: Translator resolving messages.
        source: TranslationSource locating translation files.
        resolver: LocaleResolver for locale identifiers.
        locale_context: LocaleContext holding the current locale.
        loader: Optional TranslationLoader, used for preloading and reloading.
    """

    def __init__(
        self,
        translator: Translator,
        source: TranslationSource,
        resolver: LocaleResolver,
        locale_context: LocaleContext,
        loader: Optional[TranslationLoader] = None,
    ):
        self.translator = translator
        self.source = source
        self.resolver = resolver
        self.locale_context = locale_context
        self.loader = loader

    def translate(self, entity: str, *args: Any) -> str:
        """Translate an entity in the current locale.

        Args:
            entity: Entity key ("Namespace.Entity").
            *args: Default template, injection and context, in any order.

        Returns:
            Rendered message.

        Raises:
            InvalidInjectionError: If positional values are passed for a
                message without positional placeholders.
        """
        return self.translator.translate(entity, *args)

    def render(
        self,
        entity: str,
        default: Optional[str] = None,
        injection: Optional[Injection] = None,
    ) -> str:
        """Translate an entity with explicitly typed arguments."""
        return self.translator.render(entity, default, injection)

    def get_locale(self) -> str:
        """Return the current locale."""
        return self.locale_context.get_locale()

    def set_locale(self, locale: Optional[str]) -> None:
        """Set the current locale. Empty values are ignored."""
        self.locale_context.set_locale(locale)

    @contextmanager
    def use_locale(self, locale: str) -> Generator[str, None, None]:
        """Render in a locale for the duration of a block."""
        with self.locale_context.use(locale) as active:
            yield active

    def script_direction(self, locale: Optional[str] = None) -> TextDirection:
        """Return the script direction of a locale (default: current locale)."""
        return self.resolver.script_direction(locale or self.get_locale())

    def existing_translations(self) -> Dict[str, str]:
        """Return locales with translation files as {locale: name}."""
        return self.source.existing_translations()

    def closest_translation(self, locale: str) -> Optional[str]:
        """Match a locale with the closest existing translation.

        Args:
            locale: Requested locale.

        Returns:
            Locale of the closest available translation, or None.
        """
        return self.resolver.closest_translation(
            locale, self.existing_translations()
        )

    def template_globals(self) -> Mapping[str, str]:
        """Values exposed to template renderers.

        Returns:
            Read-only mapping with the current locale and script direction.
        """
        return MappingProxyType(
            {
                "i18nLocale": self.get_locale(),
                "i18nScriptDirection": self.script_direction().value,
            }
        )

    def load_all(self) -> None:
        """Load catalogs of every locale with translation files."""
        if self.loader is None:
            return
        catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", locale_count=len(catalogs))

    def reload(self) -> None:
        """Forget loaded catalogs so translation files are read again."""
        reload = getattr(self.translator.backend, "reload", None)
        if callable(reload):
            reload()
        elif self.loader is not None:
            self.loader.clear_cache()
        logger.info("reloaded_all_translations")
