"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation files settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    locales_dir = settings.i18n.locales_dir
    excluded = settings.i18n.excluded_locales
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
