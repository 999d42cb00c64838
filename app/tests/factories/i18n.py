"""Test data factories for i18n system testing.

Provides deterministic message keys and builders for:
- KeyRegistry
- MessageStore
- MessageResolver
- Parsed language pack data
"""

from typing import Dict, Iterable, Mapping, Optional, Type

from swiftbase.i18n import (
    KeyRegistry,
    MessageKey,
    MessageResolver,
    MessageStore,
)


class SampleMessage(MessageKey):
    """Grouping class for the sample message keys below."""

    __abstract__ = True


class Welcome(SampleMessage):
    pass


class Goodbye(SampleMessage):
    pass


class Inbox(SampleMessage):
    pass


SAMPLE_KEYS = (Welcome, Goodbye, Inbox)


def make_registry(
    variants: Iterable[Type[MessageKey]] = SAMPLE_KEYS,
    debug: bool = False,
) -> KeyRegistry:
    """Create a KeyRegistry with the given variants registered.

    Args:
        variants: MessageKey subclasses to register, in order.
        debug: Registry debug flag.

    Returns:
        KeyRegistry instance.
    """
    return KeyRegistry(variants, debug=debug)


def make_store(
    messages: Optional[Mapping[str, Mapping[MessageKey, str]]] = None,
) -> MessageStore:
    """Create a MessageStore populated per language.

    Args:
        messages: {language: {MessageKey: template}}. Defaults to a small
            English pack plus a partial French one.

    Returns:
        MessageStore instance.
    """
    if messages is None:
        messages = {
            "en": {
                Welcome(): "Hello, %s!",
                Inbox(): "Hi %s, you have %d messages",
            },
            "fr": {
                Welcome(): "Bonjour, %s !",
            },
        }

    store = MessageStore()
    for language, templates in messages.items():
        store.replace_language(language, templates)
    return store


def make_resolver(
    store: Optional[MessageStore] = None,
    default_language: str = "en",
    fallback_language: str = "en",
) -> MessageResolver:
    """Create a MessageResolver over a store (default: make_store())."""
    return MessageResolver(
        store if store is not None else make_store(),
        default_language=default_language,
        fallback_language=fallback_language,
    )


def make_pack_data(version: Optional[str] = "1") -> Dict[str, object]:
    """Parsed language data as a loader would hand it over."""
    data: Dict[str, object] = {
        "welcome": "Hello, %s!",
        "goodbye": "Goodbye",
        "inbox": "Hi %s, you have %d messages",
    }
    if version is not None:
        data["langVersion"] = version
    return data
