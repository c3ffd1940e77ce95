"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Internationalization settings class

Example:
    ```python
    from localeforge.configuration import settings

    default_locale = settings.i18n.default_locale
    ```
"""

from localeforge.configuration.i18n import I18nSettings
from localeforge.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
