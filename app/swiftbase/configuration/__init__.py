"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization engine settings class
"""

from swiftbase.configuration.i18n import I18nSettings
from swiftbase.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
