"""Catalog loading.

A TranslationLoader turns the translation files of one locale into a single
TranslationCatalog. The YAML loader reads every lang/ directory reported by a
TranslationSource and merges them by module priority.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import yaml

from localeforge.i18n.models import TranslationCatalog
from localeforge.i18n.sources import TranslationSource
from localeforge.logging import get_module_logger

logger = get_module_logger()

YAML_BOOLEAN_SPELLINGS = {
    True: frozenset({"yes", "true", "on"}),
    False: frozenset({"no", "false", "off"}),
}


class TranslationLoader(ABC):
    """Produces one merged TranslationCatalog per locale."""

    @abstractmethod
    def load(self, locale: str) -> TranslationCatalog:
        """Build the catalog of a locale.

        Args:
            locale: Locale such as "de_AT".

        Returns:
            Merged TranslationCatalog.

        Raises:
            FileNotFoundError: If no source provides the locale.
            ValueError: If a source cannot be parsed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Build the catalogs of every locale that has translations."""
        pass

    def clear_cache(self) -> None:
        """Forget cached catalogs. Loaders without a cache do nothing."""
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files in module lang/ directories.

    Every file contributing to a locale is merged into one catalog, lowest
    priority first, so entries of higher priority modules win. Files use
    the format::

        de:
          Member:
            FIRSTNAME: Vorname
            PLURALS:
              one: Ein Mitglied
              other: "{count} Mitglieder"

    The top-level locale header is optional.

    Attributes:
        source: TranslationSource locating the files.
        use_cache: Whether loaded catalogs are cached in memory.
        cache: Cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        source: TranslationSource,
        use_cache: bool = True,
    ):
        self.source = source
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        logger.info("initialized_yaml_loader", use_cache=use_cache)

    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Args:
            locale: Locale to load (e.g. "de_DE").

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self.source.locale_files(locale)
        if not yaml_files:
            raise FileNotFoundError(f"No translation files found for locale {locale}")

        catalog = TranslationCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data:
                catalog.merge(self._read_catalog(locale, data, yaml_file))

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for every locale with translation files.

        Returns:
            Dict mapping each locale to its TranslationCatalog.
        """
        result = {}
        for locale in self.source.existing_translations():
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)

        return result

    def _read_catalog(
        self,
        locale: str,
        data: Any,
        source_file: Path,
    ) -> TranslationCatalog:
        """Build the catalog of a single file."""
        file_catalog = TranslationCatalog(locale=locale)
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return file_catalog

        data = self._strip_locale_header(data, source_file)

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    file=str(source_file),
                    namespace=namespace,
                    expected="dict",
                )
                continue

            file_catalog.messages[str(namespace)] = {
                str(entity): message for entity, message in messages.items()
            }
        return file_catalog

    def _strip_locale_header(self, data: Dict, source_file: Path) -> Dict:
        """Unwrap the optional top-level "de:" / "de_DE:" header."""
        if len(data) != 1:
            return data

        header, body = next(iter(data.items()))
        if _is_locale_header(header, source_file.stem) and isinstance(body, dict):
            return body
        return data

    def clear_cache(self) -> None:
        """Forget cached catalogs so files are read again."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


def _is_locale_header(header: Any, stem: str) -> bool:
    # YAML 1.1 reads unquoted "no:" (Norwegian) as False
    if isinstance(header, bool):
        return stem.lower() in YAML_BOOLEAN_SPELLINGS[header]
    return str(header) == stem
