"""linguatree configuration settings - main aggregator."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linguatree.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Catalog loading and persistence configuration.

    Environment Variables:
        LINGUATREE_LOCALES_DIR: Directory holding catalog documents (default: ./locales)
        LINGUATREE_FALLBACK_LOCALE: Locale code of the fallback catalog (default: en-US)
        LINGUATREE_DEFAULT_LOCALE: Locale code selected at startup (default: fallback)
        LINGUATREE_BACKUP_SUFFIX: Suffix appended to a catalog file before it is
            overwritten (default: .bak)

    Example:
        ```python
        from linguatree.configuration import settings

        locales_dir = settings.i18n.locales_dir
        fallback = settings.i18n.fallback_locale
        ```
    """

    locales_dir: Path = Field(
        default=Path("locales"),
        alias="LINGUATREE_LOCALES_DIR",
        description="Directory containing *.json / *.yml catalog documents",
    )
    fallback_locale: str = Field(
        default="en-US",
        alias="LINGUATREE_FALLBACK_LOCALE",
        description="Locale code of the catalog that receives missing keys",
    )
    default_locale: Optional[str] = Field(
        default=None,
        alias="LINGUATREE_DEFAULT_LOCALE",
        description="Locale code active after startup; defaults to the fallback",
    )
    backup_suffix: str = Field(
        default=".bak",
        alias="LINGUATREE_BACKUP_SUFFIX",
        description="Suffix for the backup file written before a save",
    )

    @field_validator("fallback_locale")
    @classmethod
    def validate_fallback_locale(cls, v: str) -> str:
        """Reject an empty fallback locale code."""
        if not v or not v.strip():
            raise ValueError("fallback locale must be a non-empty locale code")
        return v.strip()

    @field_validator("backup_suffix")
    @classmethod
    def validate_backup_suffix(cls, v: str) -> str:
        """Backup suffix must look like a file extension (e.g. '.bak')."""
        if len(v) < 2 or not v.startswith("."):
            raise ValueError(f"backup suffix must start with '.': {v!r}")
        return v


class Settings(BaseSettings):
    """linguatree configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from linguatree.configuration import settings

        if settings.is_production:
            ...
        settings.i18n.fallback_locale
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
