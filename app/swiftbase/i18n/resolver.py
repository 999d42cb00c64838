"""Message resolution with fallback.

Resolution order for a (context, key, args) request:
1. Effective language: the user's declared language (fallback language if
   none was declared), or the process default language for system contexts.
2. Stored template for (language, key), formatted printf-style with args
   (see swiftbase.i18n.formatting).
3. Explicit default message, for callers that supply one.
4. The key's raw identifier.
"""

from typing import Any, Optional, Tuple

from swiftbase.i18n.context import ResolutionContext, SystemContext, UserContext
from swiftbase.i18n.errors import FormatError
from swiftbase.i18n.formatting import format_template
from swiftbase.i18n.keys import FormattedMessage, MessageKey
from swiftbase.i18n.store import MessageStore
from swiftbase.languages import FALLBACK_LANGUAGE, normalize_language
from swiftbase.logging import get_module_logger

logger = get_module_logger()


class MessageResolver:
    """Resolves message keys into formatted text.

    Stateless apart from the store it reads; formatted results are not
    cached, so the same inputs against an unchanged store always produce
    the same output.

    Attributes:
        store: MessageStore to read templates from.
        default_language: Language used for system contexts.
        fallback_language: Language used when a user declares none.
    """

    def __init__(
        self,
        store: MessageStore,
        default_language: str = FALLBACK_LANGUAGE,
        fallback_language: str = FALLBACK_LANGUAGE,
    ):
        self.store = store
        self.default_language = normalize_language(default_language) or FALLBACK_LANGUAGE
        self.fallback_language = (
            normalize_language(fallback_language) or FALLBACK_LANGUAGE
        )

    def effective_language(self, context: ResolutionContext) -> str:
        """Determine which language applies to a context."""
        if isinstance(context, UserContext):
            return context.declared_language or self.fallback_language
        if isinstance(context, SystemContext):
            return self.default_language
        raise TypeError(f"Unsupported resolution context: {context!r}")

    def resolve(
        self, context: ResolutionContext, key: MessageKey, *args: Any
    ) -> FormattedMessage:
        """Resolve a key into its display form.

        Returns:
            The formatted translation, or the key's default display form
            when no translation exists.

        Raises:
            FormatError: If the stored template does not accept ``args``.
        """
        language = self.effective_language(context)
        template = self.store.get(language, key)
        if template is None:
            return key.default_display()
        return FormattedMessage(
            text=self._format(language, key, template, args), translated=True
        )

    def resolve_or_default(
        self,
        context: ResolutionContext,
        key: MessageKey,
        default: str,
        *args: Any,
    ) -> FormattedMessage:
        """Resolve a key, falling back to an explicit default message.

        The default is returned as given, without interpolation.

        Raises:
            FormatError: If the stored template does not accept ``args``.
        """
        language = self.effective_language(context)
        template = self.store.get(language, key)
        if template is None:
            return FormattedMessage(text=default)
        return FormattedMessage(
            text=self._format(language, key, template, args), translated=True
        )

    def resolve_text(
        self, context: ResolutionContext, key: MessageKey, *args: Any
    ) -> str:
        """Resolve a key into plain text, without the display wrapper."""
        return self.resolve(context, key, *args).text

    def resolve_raw(self, context: ResolutionContext, key: MessageKey) -> str:
        """Return the unformatted template, or the raw identifier if missing."""
        template = self.store.get(self.effective_language(context), key)
        return template if template is not None else key.raw()

    def system_message(self, key: MessageKey, *args: Any) -> str:
        """Resolve a key in the process default language as plain text."""
        return self.resolve_text(SystemContext(), key, *args)

    def has_translation(self, context: ResolutionContext, key: MessageKey) -> bool:
        """Check whether a translation exists, without formatting it."""
        return self.store.has(self.effective_language(context), key)

    def _format(
        self,
        language: str,
        key: MessageKey,
        template: str,
        args: Tuple[Any, ...],
    ) -> str:
        try:
            return format_template(template, args)
        except (TypeError, ValueError, KeyError) as e:
            logger.error(
                "message_format_failed",
                key=key,
                language=language,
                template=template,
                arg_count=len(args),
                error=str(e),
            )
            raise FormatError(key.raw(), language, template, tuple(args), e) from e
