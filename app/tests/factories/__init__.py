"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_categorized_output,
    make_module_rule,
    make_ruleset,
    make_translation_table,
)

__all__ = [
    "make_categorized_output",
    "make_module_rule",
    "make_ruleset",
    "make_translation_table",
]
