"""Locale resolution logic.

Canonicalizes and validates locale identifiers, derives the most likely
locale for a short language code and matches locales against the pool of
available translations.
"""

import re
from typing import Collection, Dict, Optional

from localeforge.i18n.models import TextDirection
from localeforge.i18n.tables import LocaleTable
from localeforge.logging import get_module_logger

logger = get_module_logger()

SEPARATOR_PATTERN = re.compile(r"[_-]")


class LocaleResolver:
    """Resolves locale identifiers against the locale reference table.

    Locales are "language_REGION" strings such as "de_AT". Hyphenated tags
    ("de-AT") are accepted on input and normalized to underscores.

    Attributes:
        table: LocaleTable with the reference data.
    """

    def __init__(self, table: LocaleTable):
        """Initialize locale resolver.

        Args:
            table: Locale reference data.
        """
        self.table = table

    @staticmethod
    def language_from_locale(locale: str) -> str:
        """Return the short language code of a locale.

        Everything from the first "_" or "-" onward is dropped, e.g.
        "en_US" -> "en". The input is not validated.

        Args:
            locale: Locale or language tag.

        Returns:
            Language code.
        """
        return SEPARATOR_PATTERN.split(locale, 1)[0]

    def locale_from_language(self, lang: str) -> str:
        """Return the likely locale for a short language code.

        A tag that already contains a separator is treated as a full locale
        and only has its hyphens normalized. Otherwise the likely subtag
        table is consulted ("de" -> "de_DE"); unknown languages produce the
        guess "xx_XX". The result is not guaranteed to be a valid locale.

        Args:
            lang: Language code or locale.

        Returns:
            Candidate locale.
        """
        if SEPARATOR_PATTERN.search(lang):
            return lang.replace("-", "_")
        if lang in self.table.likely_subtags:
            return self.table.likely_subtags[lang]
        return f"{lang}_{lang.upper()}"

    def validate(self, locale: str) -> bool:
        """Check a locale against the reference table.

        Only hyphens are normalized; the comparison is case-sensitive.

        Args:
            locale: Locale string (e.g. "en_US" or "en-US").

        Returns:
            True if the locale is known.
        """
        return locale.replace("-", "_") in self.table.locales

    def script_direction(self, locale: str) -> TextDirection:
        """Return the script direction of a locale.

        The full locale is looked up first, then its language. Anything not
        listed is left-to-right.

        Args:
            locale: Locale incl. region (underscored).

        Returns:
            TextDirection.RTL or TextDirection.LTR.
        """
        directions = self.table.text_direction
        direction = directions.get(locale)
        if direction is None:
            direction = directions.get(self.language_from_locale(locale))
        if direction == TextDirection.RTL.value:
            return TextDirection.RTL
        return TextDirection.LTR

    def closest_translation(
        self,
        locale: str,
        available: Collection[str],
    ) -> Optional[str]:
        """Match a locale with the closest available translation.

        Tries an exact match first, then the likely locale of the locale's
        language. There is no further fallback: "de_CH" matches "de_DE" when
        available but never "de_AT".

        Args:
            locale: Requested locale.
            available: Locales that have translations.

        Returns:
            Matching locale, or None.
        """
        if locale in available:
            return locale

        candidate = self.locale_from_language(self.language_from_locale(locale))
        if candidate in available:
            logger.debug(
                "matched_closest_translation",
                requested_locale=locale,
                matched_locale=candidate,
            )
            return candidate

        logger.debug("no_closest_translation", requested_locale=locale)
        return None

    @staticmethod
    def convert_rfc1766(locale: str) -> str:
        """Return the RFC 1766 spelling of a locale ("en_US" -> "en-US")."""
        return locale.replace("_", "-")

    def locale_name(self, locale: str) -> Optional[str]:
        """Return the display name of a locale ("de_AT" -> "German (Austria)")."""
        return self.table.locale_name(locale)

    def language_name(self, code: str, native: bool = False) -> Optional[str]:
        """Return the name of a common language.

        Args:
            code: Language code (e.g. "de").
            native: Return the native name instead of the English one.

        Returns:
            Language name, or None if the language is not a common one.
        """
        entry = self.table.common_languages.get(code)
        if entry is None:
            return None
        return entry.native if native else entry.name

    def language_code(self, name: str) -> str:
        """Return the code of a common language from its English name.

        Args:
            name: English language name (e.g. "German").

        Returns:
            Language code, or the name itself if it is not found.
        """
        for code, language in self.common_languages().items():
            if language == name:
                return code
        return name

    def common_languages(self, native: bool = False) -> Dict[str, str]:
        """Return commonly used languages as {code: name}."""
        return _names(self.table.common_languages, native)

    def common_locales(self, native: bool = False) -> Dict[str, str]:
        """Return commonly used locales as {locale: name}."""
        return _names(self.table.common_locales, native)


def _names(entries, native: bool) -> Dict[str, str]:
    return {
        code: (entry.native if native else entry.name)
        for code, entry in entries.items()
    }
