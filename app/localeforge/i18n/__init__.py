"""i18n system - locale resolution, pluralization and translation.

Provides locale reference data, locale resolution, plural form handling,
translation file discovery and message rendering for multiple languages.

Main components:
- models: TranslationKey, TranslationCatalog, PluralForm, NamedArgs, PositionalArgs
- tables: LocaleTable holding locale reference data
- resolvers: LocaleResolver for locale and language identifiers
- plurals: PluralCodec and plural form selection
- priority: SourcePrioritizer ordering modules by priority
- sources: ModuleManifest and TranslationSource locating translation files
- loader: TranslationLoader and YAMLTranslationLoader
- provider: MessageProvider and CatalogMessageProvider
- translator: Translator rendering messages
- service: TranslationService facade
"""

from localeforge.i18n.context import LocaleContext
from localeforge.i18n.exceptions import I18nError, InvalidInjectionError
from localeforge.i18n.factory import create_translation_service
from localeforge.i18n.loader import TranslationLoader, YAMLTranslationLoader
from localeforge.i18n.models import (
    Injection,
    Module,
    NamedArgs,
    PluralForm,
    PositionalArgs,
    TextDirection,
    TranslationCatalog,
    TranslationKey,
)
from localeforge.i18n.plurals import PluralCodec, select_plural_form
from localeforge.i18n.priority import OTHER_MODULES, SourcePrioritizer
from localeforge.i18n.provider import CatalogMessageProvider, MessageProvider
from localeforge.i18n.resolvers import LocaleResolver
from localeforge.i18n.service import TranslationService
from localeforge.i18n.sources import ModuleManifest, TranslationSource
from localeforge.i18n.tables import LanguageName, LocaleTable, load_locale_table
from localeforge.i18n.translator import Translator, format_legacy

__all__ = [
    "I18nError",
    "InvalidInjectionError",
    "PluralForm",
    "TextDirection",
    "TranslationKey",
    "TranslationCatalog",
    "Module",
    "NamedArgs",
    "PositionalArgs",
    "Injection",
    "LanguageName",
    "LocaleTable",
    "load_locale_table",
    "LocaleResolver",
    "PluralCodec",
    "select_plural_form",
    "OTHER_MODULES",
    "SourcePrioritizer",
    "ModuleManifest",
    "TranslationSource",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "LocaleContext",
    "MessageProvider",
    "CatalogMessageProvider",
    "Translator",
    "format_legacy",
    "TranslationService",
    "create_translation_service",
]
