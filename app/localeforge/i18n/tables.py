"""Locale reference data.

The locale table is loaded once from the YAML asset shipped in
``localeforge/i18n/data/locales.yml`` and exposed through read-only mappings.
Tests and applications can build a table from their own mapping to work with
a subset of the reference data.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from localeforge.logging import get_module_logger

logger = get_module_logger()

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "locales.yml"


@dataclass(frozen=True)
class LanguageName:
    """English and native name of a language or locale."""

    name: str
    native: str


@dataclass(frozen=True)
class LocaleTable:
    """Immutable locale reference data.

    Attributes:
        locales: Exhaustive locale -> display name map (e.g. "de_AT" -> "German (Austria)").
        likely_subtags: Language -> most likely locale map (e.g. "de" -> "de_DE").
        text_direction: Locale or language -> "rtl"/"ltr" map.
        common_languages: Language code -> LanguageName for commonly used languages.
        common_locales: Locale -> LanguageName for commonly used locales.
        plural_forms: Canonical plural form order.
        default_plural_forms: Plural forms used by the default locale.
    """

    locales: Mapping[str, str]
    likely_subtags: Mapping[str, str]
    text_direction: Mapping[str, str]
    common_languages: Mapping[str, LanguageName]
    common_locales: Mapping[str, LanguageName]
    plural_forms: Tuple[str, ...]
    default_plural_forms: Tuple[str, ...]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LocaleTable":
        """Build a table from parsed reference data.

        Missing sections are treated as empty, except the plural form lists
        which default to the CLDR order and the "one|other" default scheme.

        Args:
            data: Mapping with the same sections as the YAML asset.

        Returns:
            LocaleTable instance.
        """
        return cls(
            locales=_freeze(data.get("locales")),
            likely_subtags=_freeze(data.get("likely_subtags")),
            text_direction=_freeze(data.get("text_direction")),
            common_languages=_freeze_names(data.get("common_languages")),
            common_locales=_freeze_names(data.get("common_locales")),
            plural_forms=tuple(
                data.get("plural_forms")
                or ("zero", "one", "two", "few", "many", "other")
            ),
            default_plural_forms=tuple(
                data.get("default_plural_forms") or ("one", "other")
            ),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "LocaleTable":
        """Load a table from a YAML file.

        Args:
            path: Path to the YAML reference data.

        Returns:
            LocaleTable instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid YAML or not a mapping.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("locale_data_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Locale data in {path} must be a mapping")

        table = cls.from_mapping(data)
        logger.info(
            "loaded_locale_table",
            file=str(path),
            locale_count=len(table.locales),
            likely_subtag_count=len(table.likely_subtags),
        )
        return table

    def locale_name(self, locale: str) -> Optional[str]:
        """Display name of a locale, or None if unknown."""
        return self.locales.get(locale)


def _freeze(section: Optional[Mapping[str, Any]]) -> Mapping[str, str]:
    return MappingProxyType({str(k): str(v) for k, v in (section or {}).items()})


def _freeze_names(
    section: Optional[Mapping[str, Mapping[str, str]]],
) -> Mapping[str, LanguageName]:
    names: Dict[str, LanguageName] = {}
    for code, entry in (section or {}).items():
        names[str(code)] = LanguageName(
            name=str(entry.get("name", "")),
            native=str(entry.get("native", "")),
        )
    return MappingProxyType(names)


@lru_cache(maxsize=None)
def load_locale_table(path: Optional[Path] = None) -> LocaleTable:
    """Load the reference locale table once per path.

    Args:
        path: Optional alternate data file. Defaults to the packaged asset.

    Returns:
        Shared LocaleTable instance.
    """
    return LocaleTable.from_yaml(Path(path) if path else DEFAULT_DATA_PATH)
