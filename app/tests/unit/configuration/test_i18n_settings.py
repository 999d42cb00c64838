"""Unit tests for configuration settings."""

import pytest

from swiftbase.configuration import I18nSettings, Settings
from swiftbase.services import get_settings


@pytest.mark.unit
class TestI18nSettings:
    """Test I18nSettings configuration."""

    def test_default_values(self):
        """Test I18nSettings with default values."""
        settings = I18nSettings()

        assert settings.default_language == "en"
        assert settings.fallback_language == "en"
        assert settings.debug is False
        assert settings.available_languages == ["en"]

    def test_environment_overrides(self, monkeypatch):
        """Test I18nSettings reads its environment variables."""
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "ja")
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "fr")
        monkeypatch.setenv("I18N_DEBUG", "true")
        monkeypatch.setenv("I18N_AVAILABLE_LANGUAGES", '["en", "ja"]')

        settings = I18nSettings()

        assert settings.default_language == "ja"
        assert settings.fallback_language == "fr"
        assert settings.debug is True
        assert settings.available_languages == ["en", "ja"]

    def test_languages_are_normalized(self, monkeypatch):
        """Test locale-style values are reduced to languages."""
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "ja_JP")
        monkeypatch.setenv("I18N_AVAILABLE_LANGUAGES", '["en-US", "EN", "pt_BR", ""]')

        settings = I18nSettings()

        assert settings.default_language == "ja"
        assert settings.available_languages == ["en", "pt"]

    def test_blank_language_falls_back_to_en(self, monkeypatch):
        """Test an empty default language becomes "en"."""
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "")

        assert I18nSettings().default_language == "en"

    def test_field_names_accepted(self):
        """Test settings can be built from field names."""
        settings = I18nSettings(default_language="de-CH", debug=True)

        assert settings.default_language == "de"
        assert settings.debug is True


@pytest.mark.unit
class TestSettings:
    """Test the Settings aggregator."""

    def test_subsettings_instantiated(self):
        """Test the i18n section is created automatically."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)

    def test_subsettings_override(self):
        """Test an explicit i18n section is kept."""
        i18n = I18nSettings(default_language="fr")

        assert Settings(i18n=i18n).i18n is i18n

    def test_is_production(self, monkeypatch):
        """Test production mode follows PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        """Test get_settings returns one instance per process."""
        assert get_settings() is get_settings()
