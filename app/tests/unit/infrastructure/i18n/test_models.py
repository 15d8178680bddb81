"""Tests for infrastructure.i18n.models module."""

from pathlib import Path

import pytest

from infrastructure.i18n.models import (
    OTHER_MODULE,
    CategorizedOutput,
    EmittedArtifact,
    ModuleRule,
)
from tests.factories.i18n import make_categorized_output, make_module_rule


class TestModuleRule:
    """Tests for ModuleRule dataclass."""

    def test_patterns_stored_as_tuple(self):
        """Patterns given as a list are stored as a tuple."""
        rule = ModuleRule("emails", ["email_", "mailer"])
        assert rule.patterns == ("email_", "mailer")

    def test_rule_is_frozen(self):
        """ModuleRule cannot be modified."""
        rule = make_module_rule()
        with pytest.raises(AttributeError):
            rule.name = "other_name"

    def test_rule_is_hashable(self):
        """Frozen rules can be used in sets."""
        assert len({make_module_rule(), make_module_rule()}) == 1

    def test_matches_unanchored_substring(self):
        """A pattern matches anywhere in the key."""
        rule = make_module_rule("emails", ["email_"])
        assert rule.matches("email_subject")
        assert rule.matches("send_email_reminder")

    def test_matches_is_case_sensitive(self):
        """Matching does not fold case."""
        rule = make_module_rule("auth", ["sign_in"])
        assert not rule.matches("SIGN_IN")

    def test_matches_any_pattern(self):
        """Any pattern of the rule is enough."""
        rule = make_module_rule("auth", ["login", "logout"])
        assert rule.matches("logout_link")
        assert not rule.matches("register")

    def test_matches_non_string_key(self):
        """Non-string keys are matched on their string form."""
        rule = make_module_rule("codes", ["40"])
        assert rule.matches(404)


class TestCategorizedOutput:
    """Tests for CategorizedOutput dataclass."""

    def test_modules_includes_empty_buckets(self):
        """modules lists every bucket in declared order."""
        output = make_categorized_output(
            buckets={"auth": {}, "common": {"save": "Zapisz"}, OTHER_MODULE: {}}
        )
        assert output.modules == ["auth", "common", OTHER_MODULE]

    def test_emittable_drops_empty_buckets(self):
        """emittable() keeps only non-empty buckets, order unchanged."""
        output = make_categorized_output(
            buckets={
                "auth": {"sign_in": "Zaloguj się"},
                "forms": {},
                "common": {"save": "Zapisz"},
                OTHER_MODULE: {},
            }
        )
        assert list(output.emittable()) == ["auth", "common"]

    def test_module_for(self):
        """module_for() returns the bucket holding a key."""
        output = make_categorized_output()
        assert output.module_for("sign_in") == "auth"
        assert output.module_for("mystery_key") == OTHER_MODULE

    def test_module_for_unknown_key(self):
        """module_for() raises KeyError for keys not in the output."""
        output = make_categorized_output()
        with pytest.raises(KeyError):
            output.module_for("missing")

    def test_key_count(self):
        """key_count sums keys over all buckets."""
        assert make_categorized_output().key_count == 3

    def test_default_buckets_empty(self):
        """A new output has no buckets."""
        output = CategorizedOutput(locale="pl")
        assert output.buckets == {}
        assert output.emittable() == {}


class TestEmittedArtifact:
    """Tests for EmittedArtifact dataclass."""

    def test_fields(self):
        artifact = EmittedArtifact(module="auth", path=Path("pl/auth.yml"), key_count=2)
        assert artifact.module == "auth"
        assert artifact.path.name == "auth.yml"
        assert artifact.key_count == 2
