"""Locale Master configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_BASE_PATH: Root directory of translation files (default: lang)
        I18N_DEFAULT_LOCALE: Locale active at startup (default: en)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: en)
        I18N_FIELDS_NAMESPACE: Namespace used by field() lookups (default: fields)
        I18N_SUPPORTED_LOCALES: Explicit list of supported locales. When empty,
            the locales discovered on disk are used.

    Example:
        ```python
        from locale_master.core.config import settings

        base_path = settings.i18n.base_path
        fallback = settings.i18n.fallback_locale
        ```
    """

    base_path: str = Field(
        default="lang",
        alias="I18N_BASE_PATH",
        description="Root directory containing <locale>/<namespace>.json files",
    )
    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale active at startup",
    )
    fallback_locale: str = Field(
        default="en",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when a key is missing in the active locale",
    )
    fields_namespace: str = Field(
        default="fields",
        alias="I18N_FIELDS_NAMESPACE",
        description="Namespace used by field() lookups",
    )
    supported_locales: list[str] = Field(
        default_factory=list,
        alias="I18N_SUPPORTED_LOCALES",
        description="Explicit supported locales; empty means discover from files",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Locale Master configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name; "production" switches
            logging to JSON output.
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
