"""Factory functions for wiring the modular loader at startup."""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import settings
from infrastructure.i18n.loader import (
    ModularTranslationLoader,
    TranslationBackend,
    YAMLTranslationBackend,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def load_modular_translations(
    locales_dir: Optional[Path] = None,
    backend: Optional[TranslationBackend] = None,
) -> TranslationBackend:
    """Load every module translation file into a backend.

    Args:
        locales_dir: Locales root (default: settings.i18n.locales_dir).
        backend: Backend to register files with (default: a new
            YAMLTranslationBackend).

    Returns:
        The backend, reloaded when files were found.

    Usage:
        # At application startup
        backend = load_modular_translations()

        # Custom directory
        backend = load_modular_translations(locales_dir=Path("/srv/app/locales"))
    """
    if locales_dir is None:
        locales_dir = settings.i18n.locales_dir
    if backend is None:
        backend = YAMLTranslationBackend()

    loader = ModularTranslationLoader(locales_dir=locales_dir, backend=backend)
    paths = loader.load()
    logger.info(
        "modular_translations_ready",
        locales_dir=str(locales_dir),
        file_count=len(paths),
    )
    return backend
