import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so importing
# `swiftbase` works during pytest collection regardless of invocation.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from swiftbase.services import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop the cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
