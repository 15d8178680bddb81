"""Feature-level fixtures for modular i18n tests.

Provides translation tables, rule sets and locale directory trees.
"""

import pytest
import yaml

from tests.factories.i18n import make_ruleset, make_translation_table


@pytest.fixture
def sample_table():
    """Polish table with one key per module plus an unmatched key."""
    return make_translation_table()


@pytest.fixture
def sample_ruleset():
    """auth (sign_in) followed by common (save)."""
    return make_ruleset()


@pytest.fixture
def multi_locale_table():
    """Table with Polish and English locales, including plural groups."""
    return {
        "pl": {
            "sign_in": "Zaloguj się",
            "sign_out": "Wyloguj",
            "email_confirmation_subject": "Potwierdź adres e-mail",
            "form_title": "Formularz",
            "save": "Zapisz",
            "items_count": {
                "one": "%{count} element",
                "few": "%{count} elementy",
                "many": "%{count} elementów",
                "other": "%{count} elementu",
            },
            "welcome": "<b>Witaj</b>, %{name}!",
        },
        "en": {
            "sign_in": "Sign in",
            "save": "Save",
            "welcome": "<b>Welcome</b>, %{name}!",
        },
    }


@pytest.fixture
def source_file(tmp_path, multi_locale_table):
    """Monolithic source translation file on disk."""
    path = tmp_path / "application.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(multi_locale_table, f, allow_unicode=True, sort_keys=False)
    return path


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a locales tree with module files.

    Returns a directory structure like:
    - en/auth.yml
    - en/common.yml
    - pl/auth.yml
    - pl/common.yml
    """
    locales_dir = tmp_path / "locales"
    files = {
        ("en", "auth"): {"en": {"sign_in": "Sign in"}},
        ("en", "common"): {"en": {"save": "Save", "actions": {"edit": "Edit"}}},
        ("pl", "auth"): {"pl": {"sign_in": "Zaloguj się"}},
        ("pl", "common"): {"pl": {"save": "Zapisz"}},
    }
    for (locale, module), data in files.items():
        (locales_dir / locale).mkdir(parents=True, exist_ok=True)
        with open(locales_dir / locale / f"{module}.yml", "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)
    return locales_dir
