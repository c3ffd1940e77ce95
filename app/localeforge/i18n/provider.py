"""Message providers.

A MessageProvider looks up the stored translation of an entity for the
current locale and renders it with the injected values. Both lookups fall
back to the caller's default template when no translation is stored.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Set, Tuple

from localeforge.i18n.context import LocaleContext
from localeforge.i18n.loader import TranslationLoader
from localeforge.i18n.models import PluralForm, TranslationCatalog, TranslationKey
from localeforge.i18n.plurals import PluralCodec, select_plural_form
from localeforge.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class MessageProvider(ABC):
    """Backend used by the Translator to look up messages."""

    @abstractmethod
    def translate(
        self,
        entity: str,
        default: Optional[str],
        injection: Mapping[str, Any],
    ) -> str:
        """Return the rendered message for an entity.

        Args:
            entity: Entity key ("Namespace.Entity").
            default: Default template used when no translation is stored.
            injection: Values for "{name}" placeholders.

        Returns:
            Rendered message.
        """
        pass

    @abstractmethod
    def pluralise(
        self,
        entity: str,
        default: Optional[str],
        injection: Mapping[str, Any],
        count: Any,
    ) -> str:
        """Return the rendered plural form of an entity for a count.

        Args:
            entity: Entity key ("Namespace.Entity").
            default: Default pipe-delimited plural template.
            injection: Values for "{name}" placeholders.
            count: Number selecting the plural form.

        Returns:
            Rendered message.
        """
        pass


class CatalogMessageProvider(MessageProvider):
    """MessageProvider backed by catalogs from a TranslationLoader.

    Lookup order: catalog of the current locale, catalog of the fallback
    locale, the default template, and finally the entity key itself.

    Attributes:
        loader: TranslationLoader for loading catalogs.
        locale_context: LocaleContext holding the current locale.
        codec: PluralCodec for pipe-delimited plural templates.
        fallback_locale: Locale consulted when the current one lacks a key.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        locale_context: LocaleContext,
        codec: Optional[PluralCodec] = None,
        fallback_locale: Optional[str] = None,
    ):
        self.loader = loader
        self.locale_context = locale_context
        self.codec = codec or PluralCodec()
        self.fallback_locale = fallback_locale or locale_context.default_locale
        self._missing_locales: Set[str] = set()

    def translate(
        self,
        entity: str,
        default: Optional[str],
        injection: Mapping[str, Any],
    ) -> str:
        message, _ = self._lookup(entity)

        if isinstance(message, dict):
            message = self._collapse_plurals(message)

        if message is None:
            message = default if default is not None else entity

        return self._interpolate(str(message), injection)

    def pluralise(
        self,
        entity: str,
        default: Optional[str],
        injection: Mapping[str, Any],
        count: Any,
    ) -> str:
        message, locale = self._lookup(entity)
        forms = self._plural_forms(message)

        if message is None and default:
            forms = self.codec.parse(default)
            locale = self.fallback_locale

        variables = {**injection, "count": count}
        if not forms:
            text = message if isinstance(message, str) else default
            return self._interpolate(text if text is not None else entity, variables)

        form = select_plural_form(_as_number(count), locale, forms.keys())
        text = forms.get(form)
        if text is None:
            # Neither the selected form nor "other" was authored
            text = list(forms.values())[-1]
        return self._interpolate(text, variables)

    def reload(self) -> None:
        """Drop cached catalogs so translation files are read again."""
        self.loader.clear_cache()
        self._missing_locales.clear()

    def _lookup(self, entity: str) -> Tuple[Optional[Any], str]:
        """Find the stored message for an entity.

        Returns:
            Tuple of (message or None, locale the message belongs to).
        """
        locale = self.locale_context.get_locale()
        try:
            key = TranslationKey.from_string(entity)
        except ValueError:
            logger.warning("invalid_translation_key", key=entity)
            return None, locale

        catalog = self._catalog(locale)
        message = catalog.get_message(key) if catalog else None
        if message is not None:
            return message, locale

        if locale != self.fallback_locale:
            fallback_catalog = self._catalog(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None
            if message is not None:
                logger.info(
                    "used_fallback_translation",
                    key=entity,
                    requested_locale=locale,
                    fallback_locale=self.fallback_locale,
                )
                return message, self.fallback_locale

        logger.debug("translation_not_found", key=entity, locale=locale)
        return None, locale

    def _catalog(self, locale: str) -> Optional[TranslationCatalog]:
        if locale in self._missing_locales:
            return None
        try:
            return self.loader.load(locale)
        except FileNotFoundError:
            logger.debug("no_translations_for_locale", locale=locale)
            self._missing_locales.add(locale)
            return None

    def _plural_forms(self, message: Optional[Any]) -> Dict[str, str]:
        if isinstance(message, dict):
            return {str(form): str(text) for form, text in message.items()}
        if isinstance(message, str):
            return self.codec.parse(message)
        return {}

    def _collapse_plurals(self, message: Dict[Any, Any]) -> Optional[str]:
        forms = self._plural_forms(message)
        if PluralForm.OTHER.value in forms:
            return forms[PluralForm.OTHER.value]
        return self.codec.encode(forms)

    def _interpolate(self, message: str, variables: Mapping[str, Any]) -> str:
        """Replace {name} placeholders with injected values.

        Placeholders without a value are left untouched.
        """
        missing = []

        def replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in variables:
                return str(variables[name])
            missing.append(name)
            return match.group(0)

        rendered = PLACEHOLDER_PATTERN.sub(replace, message)
        if missing and variables:
            logger.warning(
                "missing_interpolation_variable",
                variables=missing,
                available_variables=list(variables.keys()),
            )
        return rendered


def _as_number(count: Any) -> Any:
    if isinstance(count, (int, float)):
        return count
    try:
        value = float(count)
    except (TypeError, ValueError):
        logger.warning("invalid_plural_count", count=repr(count))
        return 0
    return int(value) if value.is_integer() else value
