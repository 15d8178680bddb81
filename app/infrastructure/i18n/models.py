"""Translation models for the modular i18n toolkit.

Defines the data structures shared by the categorizer, the emitter and the
split job.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

# locale -> translation key -> value (string or nested plural/group mapping)
TranslationTable = Dict[str, Dict[Any, Any]]

OTHER_MODULE = "other"


@dataclass(frozen=True)
class ModuleRule:
    """A named module paired with the substrings that route keys to it.

    Frozen to ensure rule sets can be shared as constants.

    Attributes:
        name: Module name, also the emitted file stem (e.g., "auth").
        patterns: Ordered substrings; any one contained in a key matches.
    """

    name: str
    patterns: Tuple[str, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of patterns, store as a tuple
        object.__setattr__(self, "patterns", tuple(self.patterns))

    def matches(self, key: Any) -> bool:
        """Check whether any pattern is a substring of the key.

        Matching is case-sensitive and unanchored: "email_" matches
        "send_email_reminder".

        Args:
            key: Translation key; non-string YAML keys are matched on str(key).

        Returns:
            True if at least one pattern occurs in the key.
        """
        key_string = str(key)
        return any(pattern in key_string for pattern in self.patterns)


@dataclass
class CategorizedOutput:
    """Module buckets for a single locale.

    Buckets are kept for every module of the rule set, in declared order,
    followed by the fallback bucket, even when empty. Only non-empty buckets
    are emitted.

    Attributes:
        locale: Locale identifier the buckets belong to.
        buckets: Ordered mapping {module: {key: value}}.
    """

    locale: str
    buckets: Dict[str, Dict[Any, Any]] = field(default_factory=dict)

    @property
    def modules(self) -> List[str]:
        """All module names, empty buckets included."""
        return list(self.buckets.keys())

    def emittable(self) -> Dict[str, Dict[Any, Any]]:
        """Non-empty buckets in declared order.

        Returns:
            Ordered mapping {module: {key: value}} without empty buckets.
        """
        return {module: keys for module, keys in self.buckets.items() if keys}

    def module_for(self, key: Any) -> str:
        """Return the module a key was assigned to.

        Raises:
            KeyError: If the key is not part of this locale's output.
        """
        for module, keys in self.buckets.items():
            if key in keys:
                return module
        raise KeyError(f"Key {key!r} not categorized for locale {self.locale}")

    @property
    def key_count(self) -> int:
        return sum(len(keys) for keys in self.buckets.values())


@dataclass(frozen=True)
class EmittedArtifact:
    """A module file written by the emitter.

    Attributes:
        module: Module name the file holds.
        path: Location of the written YAML file.
        key_count: Number of top-level keys written.
    """

    module: str
    path: Path
    key_count: int
