"""Factory functions for creating i18n components.

Provides convenience functions for wiring a TranslationService from the
application settings.
"""

from pathlib import Path
from typing import Optional

from localeforge.configuration import I18nSettings
from localeforge.configuration import settings as app_settings
from localeforge.i18n.context import LocaleContext
from localeforge.i18n.loader import YAMLTranslationLoader
from localeforge.i18n.plurals import PluralCodec
from localeforge.i18n.priority import SourcePrioritizer
from localeforge.i18n.provider import CatalogMessageProvider
from localeforge.i18n.resolvers import LocaleResolver
from localeforge.i18n.service import TranslationService
from localeforge.i18n.sources import ModuleManifest, TranslationSource
from localeforge.i18n.tables import LocaleTable, load_locale_table
from localeforge.i18n.translator import Translator
from localeforge.logging import get_module_logger

logger = get_module_logger()


def create_translation_service(
    base_path: Optional[Path] = None,
    settings: Optional[I18nSettings] = None,
    manifest: Optional[ModuleManifest] = None,
    table: Optional[LocaleTable] = None,
    preload: bool = False,
) -> TranslationService:
    """Create and configure a TranslationService instance.

    Every sub-directory of base_path, except the themes directory, is a
    module. Modules and themes hold their translations in a lang/ directory.

    Args:
        base_path: Application root holding the modules (default: working directory)
        settings: I18nSettings to use (default: application settings)
        manifest: Known modules (default: discovered from base_path)
        table: Locale reference data (default: bundled or configured data file)
        preload: Whether to load all locales immediately (default: False)

    Returns:
        TranslationService: Configured service instance

    Raises:
        ValueError: If base_path is not a directory

    Usage:
        # Use defaults (modules under the working directory, lazy loading)
        service = create_translation_service()

        # Custom application root, preloaded
        service = create_translation_service(base_path=Path("/srv/site"), preload=True)
    """
    settings = settings or app_settings.i18n
    base_path = Path(base_path) if base_path is not None else Path.cwd()

    if table is None:
        table = load_locale_table(settings.locale_data_path)
    if manifest is None:
        manifest = ModuleManifest.from_directory(
            base_path, exclude=(settings.themes_dir,)
        )

    resolver = LocaleResolver(table)
    codec = PluralCodec.from_table(table)
    locale_context = LocaleContext(default_locale=settings.default_locale)

    source = TranslationSource(
        manifest=manifest,
        resolver=resolver,
        prioritizer=SourcePrioritizer(),
        module_priority=settings.module_priority,
        project_module=settings.project_module,
        themes=settings.themes,
        themes_dir=base_path / settings.themes_dir,
        extensions=settings.translation_extensions,
    )
    loader = YAMLTranslationLoader(source=source, use_cache=settings.use_cache)
    provider = CatalogMessageProvider(
        loader=loader,
        locale_context=locale_context,
        codec=codec,
    )
    translator = Translator(
        backend=provider,
        codec=codec,
        missing_default_warning=settings.missing_default_warning,
    )

    service = TranslationService(
        translator=translator,
        source=source,
        resolver=resolver,
        locale_context=locale_context,
        loader=loader,
    )

    if preload:
        service.load_all()
        logger.info(
            "translation_service_created_with_preload",
            base_path=str(base_path),
            module_count=len(manifest),
        )
    else:
        logger.info(
            "translation_service_created_lazy",
            base_path=str(base_path),
            module_count=len(manifest),
        )

    return service
