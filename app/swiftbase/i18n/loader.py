"""Mapping of parsed language data onto message keys.

The engine never reads language files itself. A loader hands over data
that has already been parsed (for example with ``yaml.safe_load``) and
this module turns it into a ``LanguagePack``:

    langVersion: 2
    welcome: "Hello, %s!"
    goodbye: "Bye"

Nested mappings are walked and their dot-joined paths matched against the
registry identifiers. String leaves without a matching key are skipped.

Template values are stored as given. They may use printf conversions and the
``String.format`` style ``%2$s`` argument indices and ``%n`` line breaks;
see ``swiftbase.i18n.formatting``.
"""

from typing import Any, Dict, Mapping

from swiftbase.i18n.keys import MessageKey
from swiftbase.i18n.models import DEFAULT_PACK_VERSION, LanguagePack
from swiftbase.i18n.registry import KeyRegistry
from swiftbase.logging import get_module_logger

logger = get_module_logger()

VERSION_FIELD = "langVersion"


def read_pack_version(data: Mapping[str, Any]) -> str:
    """Return the ``langVersion`` entry of parsed pack data, or "0"."""
    value = data.get(VERSION_FIELD) if isinstance(data, Mapping) else None
    return str(value) if value is not None else DEFAULT_PACK_VERSION


def is_version_newer(candidate: str, current: str) -> bool:
    """Compare dotted version strings numerically.

    Non-numeric parts count as 0 and missing parts are padded with 0, so
    "1.2" equals "1.2.0" and "1.10" is newer than "1.9".

    Returns:
        True if ``candidate`` is strictly newer than ``current``.
    """
    left = [_to_int(part) for part in str(candidate).split(".")]
    right = [_to_int(part) for part in str(current).split(".")]
    width = max(len(left), len(right))
    left += [0] * (width - len(left))
    right += [0] * (width - len(right))
    return left > right


def map_messages(
    data: Mapping[str, Any],
    registry: KeyRegistry,
) -> Dict[MessageKey, str]:
    """Map parsed language data onto registered message keys.

    Args:
        data: Parsed nested mapping of path segments to templates.
        registry: Registry providing identifier to key resolution.

    Returns:
        Dict mapping MessageKey to template.
    """
    keys = registry.discover_all()
    messages: Dict[MessageKey, str] = {}
    _walk("", data, keys, messages, registry.debug)
    return messages


def build_language_pack(
    language: str,
    data: Mapping[str, Any],
    registry: KeyRegistry,
) -> LanguagePack:
    """Build a complete LanguagePack from parsed language data.

    Args:
        language: Language code of the data.
        data: Parsed nested mapping (``langVersion`` read as pack version).
        registry: Registry providing identifier to key resolution.

    Returns:
        LanguagePack ready to install in a MessageStore.

    Raises:
        TypeError: If ``data`` is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise TypeError(
            f"Language data for '{language}' must be a mapping, "
            f"got {type(data).__name__}"
        )

    body = {k: v for k, v in data.items() if k != VERSION_FIELD}
    pack = LanguagePack(
        language=language,
        messages=map_messages(body, registry),
        version=read_pack_version(data),
    )
    logger.info(
        "built_language_pack",
        language=pack.language,
        version=pack.version,
        message_count=len(pack),
    )
    return pack


def _walk(
    prefix: str,
    data: Mapping[str, Any],
    keys: Mapping[str, MessageKey],
    messages: Dict[MessageKey, str],
    debug: bool,
) -> None:
    for segment, value in data.items():
        path = f"{prefix}.{segment}" if prefix else str(segment)

        if isinstance(value, Mapping):
            _walk(path, value, keys, messages, debug)
        elif isinstance(value, str):
            key = keys.get(path)
            if key is not None:
                messages[key] = value
            elif debug:
                logger.warning("message_key_not_found_for_path", path=path)
            else:
                logger.debug("message_key_not_found_for_path", path=path)


def _to_int(part: str) -> int:
    try:
        return int(part)
    except ValueError:
        return 0
