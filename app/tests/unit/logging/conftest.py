"""Fixtures for swiftbase.logging tests."""

import pytest
from unittest.mock import Mock

from swiftbase.configuration import Settings


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock Settings instance patched into the logging setup module."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    settings.i18n = Mock(debug=False)
    monkeypatch.setattr("swiftbase.logging.setup.settings", settings)
    return settings
