"""i18n system - message-key localization engine.

Resolves strongly identified message keys into formatted, per-language
text with a fallback chain, and audits missing translations.

Main components:
- keys: MessageKey base class and FormattedMessage display form
- registry: KeyRegistry mapping canonical identifiers to key variants
- store: MessageStore holding per-language templates
- resolver: MessageResolver with the fallback chain
- formatting: printf-style template formatting
- auditor: MissingKeyAuditor reporting untranslated keys
- loader: mapping of parsed language data onto keys
- service / factory: LocalizationService facade and its wiring
"""

from swiftbase.i18n.auditor import MissingKeyAuditor
from swiftbase.i18n.context import (
    LanguageAware,
    ResolutionContext,
    SystemContext,
    UserContext,
)
from swiftbase.i18n.errors import FormatError, I18nError, InstantiationError
from swiftbase.i18n.factory import create_localization_service
from swiftbase.i18n.formatting import format_template
from swiftbase.i18n.keys import FormattedMessage, MessageKey
from swiftbase.i18n.loader import (
    build_language_pack,
    is_version_newer,
    map_messages,
    read_pack_version,
)
from swiftbase.i18n.models import LanguagePack
from swiftbase.i18n.registry import KeyRegistry, canonical_identifier, is_grouping
from swiftbase.i18n.resolver import MessageResolver
from swiftbase.i18n.service import LocalizationService
from swiftbase.i18n.store import MessageStore

__all__ = [
    "MessageKey",
    "FormattedMessage",
    "KeyRegistry",
    "canonical_identifier",
    "is_grouping",
    "MessageStore",
    "LanguagePack",
    "MessageResolver",
    "MissingKeyAuditor",
    "UserContext",
    "SystemContext",
    "ResolutionContext",
    "LanguageAware",
    "I18nError",
    "InstantiationError",
    "FormatError",
    "format_template",
    "build_language_pack",
    "map_messages",
    "read_pack_version",
    "is_version_newer",
    "LocalizationService",
    "create_localization_service",
]
