"""Modular translation loading.

Discovers ``<locales_dir>/<locale>/<module>.yml`` files and hands them to a
translation backend, which is then reloaded once.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def discover_translation_files(root: Path) -> List[Path]:
    """Find module translation files two levels below root.

    Args:
        root: Locales directory.

    Returns:
        Paths matching ``<root>/*/*.yml``, sorted lexically. Empty if root
        does not exist.
    """
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(path for path in root.glob("*/*.yml") if path.is_file())


def deep_merge(target: Dict[Any, Any], source: Dict[Any, Any]) -> None:
    """Merge source into target in place; nested mappings merge, leaves replace."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = value


class TranslationBackend(ABC):
    """Abstract translation registry fed by file paths.

    Callers extend ``load_path`` and then call ``load_translations()``.
    """

    def __init__(self) -> None:
        self.load_path: List[Path] = []

    @abstractmethod
    def load_translations(self) -> None:
        """(Re)load translations from every file on the load path."""
        pass


class YAMLTranslationBackend(TranslationBackend):
    """Backend merging YAML documents shaped as ``{locale: {...}}``.

    Attributes:
        load_path: Files read in order by load_translations().
        translations: Merged nested dict {locale: {key: value}}.
    """

    def __init__(self) -> None:
        super().__init__()
        self.translations: Dict[str, Dict[Any, Any]] = {}

    def load_translations(self) -> None:
        """Rebuild translations from the load path.

        Later files override earlier ones on conflicting leaves.

        Raises:
            ValueError: If a file is not valid YAML.
        """
        translations: Dict[str, Dict[Any, Any]] = {}
        for path in self.load_path:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e

            if data:
                self._merge_yaml_data(translations, data, Path(path))

        self.translations = translations
        logger.info(
            "loaded_translations",
            file_count=len(self.load_path),
            locale_count=len(self.translations),
        )

    def available_locales(self) -> List[str]:
        return list(self.translations.keys())

    def _merge_yaml_data(
        self,
        translations: Dict[str, Dict[Any, Any]],
        data: Any,
        source_file: Path,
    ) -> None:
        """Merge one parsed file into the translations.

        Expected format:
        locale:
          key1: message1
          key2: message2

        Args:
            translations: Dict to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for locale, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_locale_format",
                    file=str(source_file),
                    locale=locale,
                    expected="dict",
                )
                continue

            if str(locale) != source_file.parent.name:
                logger.warning(
                    "locale_directory_mismatch",
                    file=str(source_file),
                    locale=locale,
                    directory=source_file.parent.name,
                )

            deep_merge(translations.setdefault(locale, {}), messages)


class ModularTranslationLoader:
    """Registers modular translation files with a backend.

    Attributes:
        locales_dir: Root of the <locale>/<module>.yml tree.
        backend: Translation backend receiving the paths.
    """

    def __init__(self, locales_dir: Path, backend: TranslationBackend):
        self.locales_dir = Path(locales_dir)
        self.backend = backend

    def load(self) -> List[Path]:
        """Append discovered files to the backend load path and reload it.

        Nothing happens when no files are found.

        Returns:
            The registered paths, sorted.
        """
        paths = discover_translation_files(self.locales_dir)
        if not paths:
            logger.info("no_modular_translation_files", locales_dir=str(self.locales_dir))
            return []

        self.backend.load_path += paths
        self.backend.load_translations()

        logger.info(
            "loaded_modular_translation_files",
            file_count=len(paths),
            locales_dir=str(self.locales_dir),
        )
        return paths
