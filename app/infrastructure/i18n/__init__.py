"""Modular i18n toolkit.

Splits a monolithic translation file into per-module YAML fragments and
loads those fragments back at startup.

Main components:
- models: ModuleRule, CategorizedOutput, EmittedArtifact
- rules: DEFAULT_RULES and rule set validation
- categorizer: first-match-wins keyword categorization
- emitter: per-module YAML file writing
- loader: file discovery and translation backends
"""

from infrastructure.i18n.categorizer import (
    assign_module,
    categorize,
    categorize_locale,
    validate_table,
)
from infrastructure.i18n.emitter import dump_fragment, emit
from infrastructure.i18n.errors import MalformedInputError
from infrastructure.i18n.loader import (
    ModularTranslationLoader,
    TranslationBackend,
    YAMLTranslationBackend,
    discover_translation_files,
)
from infrastructure.i18n.models import (
    OTHER_MODULE,
    CategorizedOutput,
    EmittedArtifact,
    ModuleRule,
    TranslationTable,
)
from infrastructure.i18n.rules import DEFAULT_RULES, validate_ruleset

__all__ = [
    "OTHER_MODULE",
    "CategorizedOutput",
    "EmittedArtifact",
    "ModuleRule",
    "TranslationTable",
    "MalformedInputError",
    "DEFAULT_RULES",
    "validate_ruleset",
    "assign_module",
    "categorize",
    "categorize_locale",
    "validate_table",
    "dump_fragment",
    "emit",
    "ModularTranslationLoader",
    "TranslationBackend",
    "YAMLTranslationBackend",
    "discover_translation_files",
]
