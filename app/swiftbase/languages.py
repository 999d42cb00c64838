"""Language code helpers shared by configuration and the i18n engine."""

import re
from typing import Optional

FALLBACK_LANGUAGE = "en"

_SEPARATORS = re.compile(r"[-_.@]")


def normalize_language(code: Optional[str]) -> str:
    """Reduce a locale string to its lower-case language part.

    Args:
        code: Language or locale code (e.g., "en", "en-US", "pt_BR", "EN").

    Returns:
        Language part (e.g., "en", "pt"), or an empty string when the
        code is missing or blank.
    """
    if not code:
        return ""
    return _SEPARATORS.split(code.strip(), maxsplit=1)[0].lower()
