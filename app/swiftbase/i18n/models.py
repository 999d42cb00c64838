"""Language pack model."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from swiftbase.i18n.keys import MessageKey
from swiftbase.languages import normalize_language

DEFAULT_PACK_VERSION = "0"


@dataclass(frozen=True)
class LanguagePack:
    """Complete set of templates for one language.

    Frozen and backed by a read-only mapping so a pack can be shared
    between threads once built.

    Attributes:
        language: Normalized language code (e.g., "en").
        messages: Mapping of MessageKey to printf-style template.
        version: Pack version as declared by its source (``langVersion``).
    """

    language: str
    messages: Mapping[MessageKey, str] = field(default_factory=dict)
    version: str = DEFAULT_PACK_VERSION

    def __post_init__(self):
        object.__setattr__(self, "language", normalize_language(self.language))
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "version", str(self.version))

    def __len__(self) -> int:
        return len(self.messages)
