"""One-time migration splitting a monolithic translation file into modules.

Reads ``{locale: {key: value}}`` from the configured source file, assigns
each key to a module with the default keyword rules and writes
``<locales_dir>/<locale>/<module>.yml`` for every non-empty module.

Usage:
    split-translations
    split-translations --source config/locales/pl.yml --exclude en
"""

import argparse
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import yaml
from dotenv import load_dotenv

from infrastructure.configuration import settings
from infrastructure.i18n.categorizer import categorize, validate_table
from infrastructure.i18n.emitter import emit
from infrastructure.i18n.errors import MalformedInputError
from infrastructure.i18n.models import EmittedArtifact, ModuleRule, TranslationTable
from infrastructure.i18n.rules import DEFAULT_RULES
from infrastructure.logging import configure_logging, get_module_logger

logger = get_module_logger()


def read_source_table(source: Path) -> TranslationTable:
    """Load and validate the monolithic translation file.

    Args:
        source: Path to the YAML source.

    Returns:
        Parsed table locale -> key -> value.

    Raises:
        MalformedInputError: If the file is missing, empty, not valid YAML or
            not shaped as locale -> key -> value.
    """
    source = Path(source)
    if not source.is_file():
        raise MalformedInputError(f"Source translation file not found: {source}")

    try:
        with open(source, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(source), error=str(e))
        raise MalformedInputError(f"Failed to parse {source}: {e}") from e

    return validate_table(data)


def split_translations(
    source: Path,
    destination: Path,
    ruleset: Sequence[ModuleRule] = DEFAULT_RULES,
    excluded_locales: Iterable[str] = (),
) -> Dict[str, List[EmittedArtifact]]:
    """Split the source file into per-module files, locale by locale.

    Files written for earlier locales stay in place if a later locale fails.

    Args:
        source: Monolithic YAML file.
        destination: Locales root receiving <locale>/<module>.yml.
        ruleset: Module rules in declared order.
        excluded_locales: Locales left untouched.

    Returns:
        Dict mapping each processed locale to the files written for it.

    Raises:
        MalformedInputError: If the source is absent or misshapen.
        OSError: If a module file cannot be written.
    """
    table = read_source_table(source)
    categorized = categorize(table, ruleset, excluded_locales)

    report: Dict[str, List[EmittedArtifact]] = {}
    for locale, output in categorized.items():
        report[locale] = emit(locale, output, destination)

    logger.info(
        "split_translations_completed",
        source=str(source),
        destination=str(destination),
        locale_count=len(report),
        file_count=sum(len(artifacts) for artifacts in report.values()),
    )
    return report


def format_summary(report: Dict[str, List[EmittedArtifact]]) -> List[str]:
    lines = []
    for locale, artifacts in report.items():
        for artifact in artifacts:
            lines.append(f"{locale}/{artifact.path.name}: {artifact.key_count} keys")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a translation file into per-module locale files"
    )
    parser.add_argument(
        "--source",
        type=Path,
        help="Source translation file (defaults to I18N_SOURCE_FILE)",
    )
    parser.add_argument(
        "--destination",
        type=Path,
        help="Locales root for module files (defaults to I18N_LOCALES_DIR)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="LOCALE",
        help="Locale to leave untouched; may be repeated (defaults to I18N_EXCLUDED_LOCALES)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the split job and print a per-locale, per-module summary."""
    load_dotenv()
    configure_logging()

    args = build_parser().parse_args(argv)
    source = args.source or settings.i18n.source_file
    destination = args.destination or settings.i18n.locales_dir
    excluded = (
        args.exclude if args.exclude is not None else settings.i18n.excluded_locales
    )

    report = split_translations(source, destination, DEFAULT_RULES, excluded)
    for line in format_summary(report):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
