"""Resolution contexts.

A context tells the resolver which language applies to a call: the
language a user declared, or the process default for system messages.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Union, runtime_checkable

from swiftbase.languages import normalize_language


@runtime_checkable
class LanguageAware(Protocol):
    """Anything that can report a declared language (e.g., a connected client)."""

    def get_language(self) -> Optional[str]: ...


@dataclass(frozen=True)
class UserContext:
    """Context for a message addressed to a user.

    Attributes:
        language: Language code declared by the user, possibly empty.
    """

    language: Optional[str] = None

    @classmethod
    def of(cls, source: LanguageAware) -> "UserContext":
        """Build a context from an object exposing ``get_language()``."""
        return cls(language=source.get_language())

    @property
    def declared_language(self) -> str:
        """Normalized declared language, empty when none was declared."""
        return normalize_language(self.language)


@dataclass(frozen=True)
class SystemContext:
    """Context for messages addressed to operators or the console.

    Resolves to the process default language.
    """


ResolutionContext = Union[UserContext, SystemContext]
