"""Unit tests for infrastructure.configuration settings.

Tests cover:
- I18nSettings defaults and environment overrides
- Settings aggregation and production detection
"""

from pathlib import Path

import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.mark.unit
class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("I18N_LOCALES_DIR", raising=False)
        monkeypatch.delenv("I18N_SOURCE_FILE", raising=False)
        monkeypatch.delenv("I18N_EXCLUDED_LOCALES", raising=False)

        i18n = I18nSettings()

        assert i18n.locales_dir == Path("config/locales")
        assert i18n.source_file == Path("config/locales/application.yml")
        assert i18n.excluded_locales == frozenset()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("I18N_LOCALES_DIR", "/srv/app/locales")
        monkeypatch.setenv("I18N_SOURCE_FILE", "/srv/app/pl.yml")
        monkeypatch.setenv("I18N_EXCLUDED_LOCALES", "en")

        i18n = I18nSettings()

        assert i18n.locales_dir == Path("/srv/app/locales")
        assert i18n.source_file == Path("/srv/app/pl.yml")
        assert i18n.excluded_locales == frozenset({"en"})

    def test_excluded_locales_parsing(self, monkeypatch):
        """Comma-separated values are trimmed and blanks dropped."""
        monkeypatch.setenv("I18N_EXCLUDED_LOCALES", " en, de ,,pl ")

        assert I18nSettings().excluded_locales == frozenset({"en", "de", "pl"})


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)

    def test_subsettings_override(self):
        i18n = I18nSettings(I18N_LOCALES_DIR="custom/locales")
        settings = Settings(i18n=i18n)
        assert settings.i18n.locales_dir == Path("custom/locales")

    def test_is_production_without_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"
