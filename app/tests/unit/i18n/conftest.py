"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from swiftbase.i18n import MissingKeyAuditor
from tests.factories.i18n import make_registry, make_resolver, make_store


@pytest.fixture
def registry():
    """KeyRegistry holding Welcome, Goodbye and Inbox."""
    return make_registry()


@pytest.fixture
def store():
    """MessageStore with a full-ish English pack and a partial French one."""
    return make_store()


@pytest.fixture
def resolver(store):
    """MessageResolver over the sample store, English default."""
    return make_resolver(store)


@pytest.fixture
def auditor(registry, store):
    """MissingKeyAuditor over the sample registry and store."""
    return MissingKeyAuditor(registry, store)


@pytest.fixture
def parsed_pack():
    """Language data as parsed from a YAML language file."""
    return yaml.safe_load(
        """
langVersion: 3
welcome: "Hello, %s!"
goodbye: Goodbye
unknown: Not a registered key
nested:
  welcome: Nested paths do not match flat identifiers
count: 5
"""
    )
