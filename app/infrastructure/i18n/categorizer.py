"""Keyword-based categorization of translation keys into modules.

Splits each locale of a flat translation table into module buckets. A key
belongs to the first rule (in declared order) with a pattern contained in
the key; keys matching no rule fall into the ``other`` bucket.
"""

from typing import Any, Dict, Iterable, Mapping, Sequence

from infrastructure.i18n.errors import MalformedInputError
from infrastructure.i18n.models import (
    OTHER_MODULE,
    CategorizedOutput,
    ModuleRule,
    TranslationTable,
)
from infrastructure.i18n.rules import validate_ruleset
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def validate_table(table: Any) -> TranslationTable:
    """Check that a table is shaped as locale -> key -> value.

    Args:
        table: Parsed source translations.

    Returns:
        The table, unchanged.

    Raises:
        MalformedInputError: If the table is absent, not a mapping, has a
            non-string locale, or a locale entry that is not a mapping.
    """
    if table is None:
        raise MalformedInputError("Translation table is empty")
    if not isinstance(table, Mapping):
        raise MalformedInputError(
            f"Translation table must be a mapping of locales, got {type(table).__name__}"
        )
    for locale, keys in table.items():
        if not isinstance(locale, str):
            raise MalformedInputError(f"Locale identifier must be a string: {locale!r}")
        if not isinstance(keys, Mapping):
            raise MalformedInputError(
                f"Translations for locale {locale} must be a mapping, got {type(keys).__name__}"
            )
    return table


def assign_module(key: Any, ruleset: Sequence[ModuleRule]) -> str:
    """Return the module a single key belongs to.

    Args:
        key: Translation key.
        ruleset: Rules in declared order.

    Returns:
        Name of the first matching rule, or ``other``.
    """
    for rule in ruleset:
        if rule.matches(key):
            return rule.name
    return OTHER_MODULE


def categorize_locale(
    locale: str,
    translations: Mapping[Any, Any],
    ruleset: Sequence[ModuleRule],
) -> CategorizedOutput:
    """Partition one locale's translations into module buckets.

    Args:
        locale: Locale identifier.
        translations: Flat mapping key -> value for the locale.
        ruleset: Rules in declared order.

    Returns:
        CategorizedOutput with a bucket per rule plus ``other``; key order
        within each bucket follows the source order.
    """
    buckets: Dict[str, Dict[Any, Any]] = {rule.name: {} for rule in ruleset}
    buckets[OTHER_MODULE] = {}

    for key, value in translations.items():
        buckets[assign_module(key, ruleset)][key] = value

    return CategorizedOutput(locale=locale, buckets=buckets)


def categorize(
    table: Any,
    ruleset: Iterable[ModuleRule],
    excluded_locales: Iterable[str] = (),
) -> Dict[str, CategorizedOutput]:
    """Categorize every locale of a translation table.

    Excluded locales are passed over entirely and get no output.

    Args:
        table: Mapping locale -> key -> value.
        ruleset: Rules in declared order.
        excluded_locales: Locales to leave untouched; a single locale string
            is accepted.

    Returns:
        Dict mapping each processed locale to its CategorizedOutput, in
        table order.

    Raises:
        MalformedInputError: If the table is not shaped as locale -> key -> value.
        ValueError: If the rule set is invalid.
    """
    table = validate_table(table)
    rules = validate_ruleset(ruleset)
    if isinstance(excluded_locales, str):
        excluded = frozenset({excluded_locales})
    else:
        excluded = frozenset(excluded_locales)

    result: Dict[str, CategorizedOutput] = {}
    for locale, translations in table.items():
        if locale in excluded:
            logger.info("skipped_excluded_locale", locale=locale)
            continue

        output = categorize_locale(locale, translations, rules)
        result[locale] = output
        logger.info(
            "categorized_locale",
            locale=locale,
            key_count=output.key_count,
            uncategorized_count=len(output.buckets[OTHER_MODULE]),
        )

    return result
