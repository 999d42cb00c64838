"""Missing translation audit.

Compares the registered message keys against the templates loaded for a
language and reports the identifiers that have no translation.
"""

from typing import Dict, List

from swiftbase.i18n.registry import KeyRegistry
from swiftbase.i18n.store import MessageStore
from swiftbase.languages import normalize_language
from swiftbase.logging import get_module_logger

logger = get_module_logger()


class MissingKeyAuditor:
    """Reports registered keys that lack a translation.

    Discovery walks the registry, so audits should run at startup or from
    a single background job rather than concurrently.
    """

    def __init__(self, registry: KeyRegistry, store: MessageStore):
        self.registry = registry
        self.store = store

    def find_missing(self, language: str) -> List[str]:
        """List the identifiers with no template in ``language``.

        Every missing key is logged at WARN. A language with nothing loaded
        reports every registered identifier.

        Args:
            language: Language code to audit.

        Returns:
            Missing identifiers, in registry order.
        """
        lang = normalize_language(language)
        messages = self.store.messages(lang)
        if lang not in self.store.languages():
            logger.warning("language_not_loaded", language=lang)

        missing: List[str] = []
        for identifier, key in self.registry.discover_all().items():
            if key not in messages:
                missing.append(identifier)
                logger.warning(
                    "missing_translation_key", key=identifier, language=lang
                )

        logger.info(
            "translation_audit_completed",
            language=lang,
            missing_count=len(missing),
        )
        return missing

    def audit_all(self) -> Dict[str, List[str]]:
        """Run ``find_missing`` for every loaded language.

        Returns:
            Dict mapping language code to its missing identifiers, sorted by
            language.
        """
        return {lang: self.find_missing(lang) for lang in sorted(self.store.languages())}
