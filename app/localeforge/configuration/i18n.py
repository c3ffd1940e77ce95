"""Internationalization settings."""

from typing import Any, Optional

from pydantic import Field, field_validator

from localeforge.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale resolution and translation configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when no current locale is set (default: en_US)
        I18N_MODULE_PRIORITY: JSON list of modules, lowest to highest priority.
            May contain the "other_modules" placeholder.
        I18N_PROJECT_MODULE: Name of the application's own module, always
            searched first unless listed in the priority order (default: app)
        I18N_MISSING_DEFAULT_WARNING: Warn when a message is requested without
            a default template (default: True)
        I18N_THEMES: JSON list of theme names whose lang/ directories are searched
        I18N_THEMES_DIR: Directory holding themes, relative to the base path
        I18N_TRANSLATION_EXTENSIONS: JSON list of translation file extensions
        I18N_USE_CACHE: Cache loaded catalogs in memory (default: True)
        I18N_LOCALE_DATA_PATH: Optional path to an alternate locale data YAML file

    Example:
        ```python
        from localeforge.configuration import settings

        default_locale = settings.i18n.default_locale
        priority = settings.i18n.module_priority
        ```
    """

    default_locale: str = Field(
        default="en_US",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when no current locale is set",
    )
    module_priority: list[str] = Field(
        default_factory=list,
        alias="I18N_MODULE_PRIORITY",
        description="Modules in lowest to highest priority order",
    )
    project_module: str = Field(
        default="app",
        alias="I18N_PROJECT_MODULE",
        description="Module holding the application's own translations",
    )
    missing_default_warning: bool = Field(
        default=True,
        alias="I18N_MISSING_DEFAULT_WARNING",
        description="Warn when a message is requested without a default",
    )
    themes: list[str] = Field(
        default_factory=list,
        alias="I18N_THEMES",
        description="Themes whose lang/ directories are searched",
    )
    themes_dir: str = Field(
        default="themes",
        alias="I18N_THEMES_DIR",
        description="Directory holding themes, relative to the base path",
    )
    translation_extensions: list[str] = Field(
        default=["yml", "yaml"],
        alias="I18N_TRANSLATION_EXTENSIONS",
        description="Recognized translation file extensions",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache loaded catalogs in memory",
    )
    locale_data_path: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALE_DATA_PATH",
        description="Alternate locale reference data file",
    )

    @field_validator("translation_extensions", mode="before")
    @classmethod
    def validate_translation_extensions(cls, v: Any) -> Any:
        """Strip leading dots so ".yml" and "yml" are equivalent."""
        if isinstance(v, list):
            return [str(ext).lstrip(".") for ext in v]
        return v
