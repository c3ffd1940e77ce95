"""Top-level settings object."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localeforge.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Application settings.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Sections:
        i18n: I18nSettings, read from the I18N_* variables

    Example:
        ```python
        from localeforge.configuration import settings

        if settings.is_production:
            locale = settings.i18n.default_locale
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """True when no deployment prefix is set."""
        return not self.PREFIX

    def __init__(self, **kwargs):
        """Build missing sections from the environment.

        Args:
            **kwargs: Field values or ready-made sections (e.g. i18n=I18nSettings(...)).
        """
        sections = {
            "i18n": I18nSettings,
        }

        for name, section_class in sections.items():
            if name not in kwargs:
                kwargs[name] = section_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
