"""Writes categorized translations as per-module YAML files.

Each non-empty module bucket of a locale becomes
``<destination_root>/<locale>/<module>.yml`` holding ``{locale: {...}}``,
the layout the modular loader discovers at startup.
"""

from pathlib import Path
from typing import Any, Dict, List, Set

import yaml

from infrastructure.i18n.models import CategorizedOutput, EmittedArtifact
from infrastructure.logging import get_module_logger

logger = get_module_logger()

MODULE_FILE_SUFFIX = ".yml"


def dump_fragment(locale: str, translations: Dict[Any, Any]) -> str:
    """Serialize one module fragment as YAML.

    Key order is preserved and non-ASCII text is written as is.

    Args:
        locale: Top-level locale key.
        translations: Keys and values of the module.

    Returns:
        YAML document text.
    """
    return yaml.safe_dump(
        {locale: translations},
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=float("inf"),
    )


def module_path(destination_root: Path, locale: str, module: str) -> Path:
    return Path(destination_root) / locale / f"{module}{MODULE_FILE_SUFFIX}"


def emit(
    locale: str,
    categorized_output: CategorizedOutput,
    destination_root: Path,
) -> List[EmittedArtifact]:
    """Write the non-empty module buckets of a locale.

    The locale directory is owned by the run: existing module files are
    overwritten and every other ``*.yml`` file left in it afterwards is
    removed, so the directory holds exactly the current buckets.

    Args:
        locale: Locale the output belongs to.
        categorized_output: Buckets produced by the categorizer.
        destination_root: Root of the locale directories.

    Returns:
        Written files with their key counts, in module order.

    Raises:
        ValueError: If locale differs from the output's locale.
        OSError: If the destination cannot be created or written.
    """
    if locale != categorized_output.locale:
        raise ValueError(
            f"Cannot emit {categorized_output.locale} translations as {locale}"
        )

    locale_dir = Path(destination_root) / locale
    locale_dir.mkdir(parents=True, exist_ok=True)

    artifacts: List[EmittedArtifact] = []
    for module, translations in categorized_output.emittable().items():
        path = module_path(destination_root, locale, module)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(dump_fragment(locale, translations))
        except OSError as e:
            logger.error(
                "module_file_write_failed",
                locale=locale,
                module=module,
                path=str(path),
                error=str(e),
            )
            raise

        artifacts.append(
            EmittedArtifact(module=module, path=path, key_count=len(translations))
        )
        logger.info(
            "module_file_written",
            locale=locale,
            module=module,
            key_count=len(translations),
        )

    prune_stale_files(locale_dir, {artifact.path.name for artifact in artifacts})
    return artifacts


def prune_stale_files(locale_dir: Path, keep: Set[str]) -> None:
    """Remove module files in locale_dir not named in keep."""
    for path in sorted(locale_dir.glob(f"*{MODULE_FILE_SUFFIX}")):
        if path.is_file() and path.name not in keep:
            path.unlink()
            logger.info(
                "removed_stale_module_file",
                locale=locale_dir.name,
                module=path.stem,
            )
