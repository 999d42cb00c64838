"""Message key taxonomy.

Every localizable message is a subclass of ``MessageKey``. Subclasses are
stateless markers: two instances of the same subclass are interchangeable
and share one canonical identifier, the lower-cased class name.

A class that only groups related keys declares ``__abstract__ = True`` in its
body; registries skip it when walking subclasses.

Example:
    class Greeting(MessageKey):
        __abstract__ = True

    class Welcome(Greeting):
        pass

    Welcome().raw()              # "welcome"
    Welcome() == Welcome()       # True
    Welcome().resolve_for(UserContext("fr"), resolver, "Ann")
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from swiftbase.logging import get_module_logger

if TYPE_CHECKING:
    from swiftbase.i18n.context import ResolutionContext
    from swiftbase.i18n.resolver import MessageResolver

logger = get_module_logger()


@dataclass(frozen=True)
class FormattedMessage:
    """Display form of a resolved message.

    Attributes:
        text: Final text shown to the user.
        translated: True when the text comes from a stored template,
            False for fallbacks (explicit default or raw identifier).
    """

    text: str
    translated: bool = False

    def __str__(self) -> str:
        return self.text


class MessageKey:
    """Base class for all message keys.

    Identity is structural: equality and hashing depend on the concrete
    subclass only, so keys can be used directly as mapping keys.
    """

    __slots__ = ()

    def raw(self) -> str:
        """Return the canonical identifier of this key.

        Returns:
            Lower-cased simple class name (e.g., "welcome").
        """
        return type(self).__name__.lower()

    def default_display(self) -> FormattedMessage:
        """Return the fallback display form used when no translation exists."""
        return FormattedMessage(text=self.raw())

    def log(self, level: str = "INFO") -> None:
        """Write the raw identifier to the log.

        Args:
            level: INFO, WARN or ERROR (case-insensitive). Anything else
                logs at DEBUG.
        """
        message = self.raw()
        normalized = (level or "").upper()
        if normalized == "INFO":
            logger.info(message)
        elif normalized == "WARN":
            logger.warning(message)
        elif normalized == "ERROR":
            logger.error(message)
        else:
            logger.debug(message)

    def resolve_for(
        self,
        context: "ResolutionContext",
        resolver: "MessageResolver",
        *args: Any,
    ) -> FormattedMessage:
        """Resolve this key for a context through the given resolver."""
        return resolver.resolve(context, self, *args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageKey):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}()"
