"""Localization service for dependency injection.

Bundles the registry, store, resolver and auditor behind one object that
is built once at startup and passed to every caller needing messages.
"""

from typing import Any, Dict, FrozenSet, List, Mapping

from swiftbase.i18n.auditor import MissingKeyAuditor
from swiftbase.i18n.context import ResolutionContext
from swiftbase.i18n.keys import FormattedMessage, MessageKey
from swiftbase.i18n.loader import build_language_pack
from swiftbase.i18n.models import LanguagePack
from swiftbase.i18n.registry import KeyRegistry
from swiftbase.i18n.resolver import MessageResolver
from swiftbase.i18n.store import MessageStore


class LocalizationService:
    """Class-based localization service.

    This is a thin facade - resolution is delegated to the MessageResolver,
    audits to the MissingKeyAuditor.

    Usage:
        service = create_localization_service(packs={"en": {"welcome": "Hi %s"}})
        service.translate(UserContext("en"), Welcome(), "Ann").text
        service.find_missing("fr")
    """

    def __init__(
        self,
        registry: KeyRegistry,
        store: MessageStore,
        resolver: MessageResolver,
        auditor: MissingKeyAuditor,
    ):
        self.registry = registry
        self.store = store
        self.resolver = resolver
        self.auditor = auditor

    def translate(
        self, context: ResolutionContext, key: MessageKey, *args: Any
    ) -> FormattedMessage:
        """Resolve a key for a context.

        Raises:
            FormatError: If the stored template does not accept ``args``.
        """
        return self.resolver.resolve(context, key, *args)

    def translate_or_default(
        self,
        context: ResolutionContext,
        key: MessageKey,
        default: str,
        *args: Any,
    ) -> FormattedMessage:
        """Resolve a key, falling back to ``default`` when untranslated."""
        return self.resolver.resolve_or_default(context, key, default, *args)

    def translate_text(
        self, context: ResolutionContext, key: MessageKey, *args: Any
    ) -> str:
        """Resolve a key into plain text."""
        return self.resolver.resolve_text(context, key, *args)

    def raw_message(self, context: ResolutionContext, key: MessageKey) -> str:
        """Unformatted template, or the raw identifier when untranslated."""
        return self.resolver.resolve_raw(context, key)

    def system_message(self, key: MessageKey, *args: Any) -> str:
        """Resolve a key in the process default language."""
        return self.resolver.system_message(key, *args)

    def has_translation(self, context: ResolutionContext, key: MessageKey) -> bool:
        return self.resolver.has_translation(context, key)

    def load_pack(self, language: str, data: Mapping[str, Any]) -> LanguagePack:
        """Map parsed language data and install it, replacing the language."""
        pack = build_language_pack(language, data, self.registry)
        self.store.install(pack)
        return pack

    def reload_pack(self, language: str, data: Mapping[str, Any]) -> bool:
        """Install parsed language data only if its version is newer.

        Returns:
            True if the store now holds the new pack.
        """
        pack = build_language_pack(language, data, self.registry)
        return self.store.install_if_newer(pack)

    def find_missing(self, language: str) -> List[str]:
        return self.auditor.find_missing(language)

    def audit_all(self) -> Dict[str, List[str]]:
        return self.auditor.audit_all()

    def languages(self) -> FrozenSet[str]:
        """Languages with loaded templates."""
        return self.store.languages()
