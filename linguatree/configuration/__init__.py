"""Configuration module - public API.

Centralized configuration for linguatree using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Catalog loading/persistence settings class

Example:
    ```python
    from linguatree.configuration import settings

    settings.i18n.locales_dir
    settings.LOG_LEVEL
    ```
"""

from linguatree.configuration.settings import I18nSettings, Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
