"""Service providers."""

from swiftbase.services.providers import get_settings

__all__ = ["get_settings"]
