"""Errors raised by the localization engine.

A missing translation is not an error: it is reported through the fallback
chain. Only variant construction and template formatting can fail.
"""

from typing import Any, Optional, Tuple


class I18nError(Exception):
    """Base class for localization engine errors."""


class InstantiationError(I18nError):
    """A registered MessageKey variant cannot be default-constructed.

    Attributes:
        variant: The variant class that failed to instantiate.
    """

    def __init__(self, variant: type, reason: Optional[BaseException] = None):
        self.variant = variant
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(
            f"Cannot instantiate message key {variant.__name__}{detail}"
        )


class FormatError(I18nError, ValueError):
    """A stored template does not accept the supplied arguments.

    Attributes:
        key: Canonical identifier of the message key.
        language: Language the template was taken from.
        template: The offending template.
        arguments: Positional arguments passed to the formatter.
    """

    def __init__(
        self,
        key: str,
        language: str,
        template: str,
        args: Tuple[Any, ...],
        reason: Optional[BaseException] = None,
    ):
        self.key = key
        self.language = language
        self.template = template
        self.arguments = args
        self.reason = reason
        super().__init__(
            f"Cannot format message '{key}' ({language}) "
            f"with {len(args)} argument(s): {reason}"
        )
