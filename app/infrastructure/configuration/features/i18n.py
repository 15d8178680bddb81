"""Translation files feature settings."""

from pathlib import Path
from typing import FrozenSet

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale directory layout and translation split job configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Root holding <locale>/<module>.yml fragments
            (default: config/locales)
        I18N_SOURCE_FILE: Monolithic translation file split by the migration
            job (default: config/locales/application.yml)
        I18N_EXCLUDED_LOCALES: Comma-separated locales the split job leaves
            untouched (default: none)

    Example:
        ```python
        from infrastructure.configuration import settings

        locales_dir = settings.i18n.locales_dir
        if "en" in settings.i18n.excluded_locales:
            ...
        ```
    """

    locales_dir: Path = Field(
        default=Path("config/locales"),
        alias="I18N_LOCALES_DIR",
        description="Root directory of modular translation files",
    )
    source_file: Path = Field(
        default=Path("config/locales/application.yml"),
        alias="I18N_SOURCE_FILE",
        description="Single translation file split into module fragments",
    )
    excluded_locales_raw: str = Field(
        default="",
        alias="I18N_EXCLUDED_LOCALES",
        description="Comma-separated locales skipped by the split job",
    )

    @property
    def excluded_locales(self) -> FrozenSet[str]:
        """Parsed set of excluded locale identifiers."""
        return frozenset(
            part.strip() for part in self.excluded_locales_raw.split(",") if part.strip()
        )
