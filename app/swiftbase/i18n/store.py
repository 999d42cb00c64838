"""Per-language message template store.

Holds, for each language, a read-only mapping from MessageKey to template.
Writers serialize on a lock and publish a complete new mapping for the
language they change; readers never lock and always see either the old or
the new mapping, never a partial one.
"""

import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from swiftbase.i18n.keys import MessageKey
from swiftbase.i18n.loader import is_version_newer
from swiftbase.i18n.models import LanguagePack
from swiftbase.languages import normalize_language
from swiftbase.logging import get_module_logger

logger = get_module_logger()

_EMPTY: Mapping[MessageKey, str] = MappingProxyType({})


class MessageStore:
    """Process-wide store of message templates, one mapping per language."""

    def __init__(self):
        self._languages: Dict[str, Mapping[MessageKey, str]] = {}
        self._versions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, language: str, key: MessageKey) -> Optional[str]:
        """Return the template for ``key`` in ``language``.

        Returns:
            Template string, or None if the language is unknown or the key
            has no translation in it.
        """
        messages = self._languages.get(normalize_language(language))
        if messages is None:
            return None
        return messages.get(key)

    def has(self, language: str, key: MessageKey) -> bool:
        """Check whether ``key`` has a template in ``language``."""
        return key in self.messages(language)

    def put(self, language: str, key: MessageKey, template: str) -> None:
        """Add or replace a single template.

        Args:
            language: Language code.
            key: MessageKey the template belongs to.
            template: printf-style template.
        """
        lang = normalize_language(language)
        with self._lock:
            updated = dict(self._languages.get(lang, _EMPTY))
            updated[key] = template
            self._languages[lang] = MappingProxyType(updated)

    def replace_language(
        self, language: str, messages: Mapping[MessageKey, str]
    ) -> None:
        """Atomically replace every template of a language.

        Args:
            language: Language code.
            messages: Complete mapping of MessageKey to template.
        """
        lang = normalize_language(language)
        snapshot = MappingProxyType(dict(messages))
        with self._lock:
            self._languages[lang] = snapshot
            self._versions.pop(lang, None)
        logger.info(
            "replaced_language_messages",
            language=lang,
            message_count=len(snapshot),
        )

    def install(self, pack: LanguagePack) -> None:
        """Install a language pack, replacing the language's templates."""
        with self._lock:
            self._languages[pack.language] = pack.messages
            self._versions[pack.language] = pack.version
        logger.info(
            "installed_language_pack",
            language=pack.language,
            version=pack.version,
            message_count=len(pack),
        )

    def install_if_newer(self, pack: LanguagePack) -> bool:
        """Install a pack only if it is newer than the installed one.

        A language without an installed pack always accepts the pack.

        Returns:
            True if the pack was installed.
        """
        with self._lock:
            current = self._versions.get(pack.language)
            if current is not None and not is_version_newer(pack.version, current):
                logger.info(
                    "kept_installed_language_pack",
                    language=pack.language,
                    installed_version=current,
                    offered_version=pack.version,
                )
                return False
            self._languages[pack.language] = pack.messages
            self._versions[pack.language] = pack.version

        logger.info(
            "upgraded_language_pack",
            language=pack.language,
            previous_version=current,
            version=pack.version,
        )
        return True

    def version(self, language: str) -> Optional[str]:
        """Version of the installed pack for ``language``, if any."""
        return self._versions.get(normalize_language(language))

    def messages(self, language: str) -> Mapping[MessageKey, str]:
        """Read-only snapshot of a language's templates (empty if unknown)."""
        return self._languages.get(normalize_language(language), _EMPTY)

    def languages(self) -> FrozenSet[str]:
        """Languages that currently have templates loaded."""
        with self._lock:
            return frozenset(self._languages)

    def clear(self) -> None:
        """Remove every language.

        Primarily used for testing.
        """
        with self._lock:
            self._languages.clear()
            self._versions.clear()
        logger.debug("message_store_cleared")
