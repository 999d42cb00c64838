"""Factory functions for creating i18n components.

Wires a LocalizationService from application settings.
"""

from typing import Any, Mapping, Optional

from swiftbase.configuration import Settings
from swiftbase.i18n.auditor import MissingKeyAuditor
from swiftbase.i18n.registry import KeyRegistry
from swiftbase.i18n.resolver import MessageResolver
from swiftbase.i18n.service import LocalizationService
from swiftbase.i18n.store import MessageStore
from swiftbase.logging import get_module_logger
from swiftbase.services import get_settings

logger = get_module_logger()


def create_localization_service(
    settings: Optional[Settings] = None,
    registry: Optional[KeyRegistry] = None,
    packs: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> LocalizationService:
    """Create and configure a LocalizationService instance.

    Args:
        settings: Application settings (default: get_settings()).
        registry: Registry holding the application's message keys. A new,
            empty registry is created when omitted.
        packs: Optional parsed language data by language code, installed
            immediately.

    Returns:
        LocalizationService: Configured service instance

    Usage:
        registry = KeyRegistry()
        registry.register_subclasses(AppMessage)

        service = create_localization_service(
            registry=registry,
            packs={"en": yaml.safe_load(en_text), "ja": yaml.safe_load(ja_text)},
        )
    """
    settings = settings or get_settings()
    i18n = settings.i18n

    if registry is None:
        registry = KeyRegistry(debug=i18n.debug)
    elif i18n.debug:
        registry.debug = True

    store = MessageStore()
    resolver = MessageResolver(
        store,
        default_language=i18n.default_language,
        fallback_language=i18n.fallback_language,
    )
    service = LocalizationService(
        registry=registry,
        store=store,
        resolver=resolver,
        auditor=MissingKeyAuditor(registry, store),
    )

    for language, data in (packs or {}).items():
        service.load_pack(language, data)

    unloaded = [lang for lang in i18n.available_languages if lang not in store.languages()]
    if packs is not None and unloaded:
        logger.warning("language_packs_not_supplied", languages=unloaded)

    logger.info(
        "localization_service_created",
        default_language=resolver.default_language,
        fallback_language=resolver.fallback_language,
        key_count=len(registry),
        languages=sorted(store.languages()),
    )
    return service
