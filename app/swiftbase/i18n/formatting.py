"""Printf-style template formatting.

Templates use printf conversions (``%s``, ``%d``, ``%.2f``, ``%%``). Language
packs written for ``String.format`` also work: explicit argument indices
(``%2$d of %1$s``) pick arguments by position and ``%n`` is a line break.

Stricter than the bare ``%`` operator:
- integer conversions (``%d``, ``%i``, ``%o``, ``%u``, ``%x``, ``%X``) reject
  floats, bools and other non-integral values instead of truncating them
- every argument must be consumed by some conversion

Mapping keys (``%(name)s``) and ``*`` widths are not supported.
"""

import numbers
import re
from typing import Any, List, Sequence, Set

_CONVERSION = re.compile(
    r"%(?:(?P<index>[1-9]\d*)\$)?(?P<spec>[-#+ 0]*\d*(?:\.\d+)?)(?P<type>[a-zA-Z%])"
)

INTEGER_CONVERSIONS = frozenset("diouxX")


def format_template(template: str, args: Sequence[Any]) -> str:
    """Fill a printf-style template with positional arguments.

    Args:
        template: Template text.
        args: Arguments, referenced in order or by ``%n$`` index.

    Returns:
        The formatted text.

    Raises:
        TypeError: If an argument is missing, unused or of the wrong type.
        ValueError: If the template is malformed.
    """
    ordered: List[Any] = []
    used: Set[int] = set()
    position = 0

    def convert(match: "re.Match[str]") -> str:
        nonlocal position
        conversion = match.group("type")
        index = match.group("index")
        spec = match.group("spec")

        if conversion == "%":
            if index:
                raise ValueError("argument index on a literal percent sign")
            return f"%{spec}%"
        if conversion == "n" and not index and not spec:
            return "\n"

        if index is None:
            position += 1
            number = position
        else:
            number = int(index)
        if number > len(args):
            raise TypeError(
                f"not enough arguments for format string: %{conversion} "
                f"needs argument {number}, got {len(args)}"
            )

        value = args[number - 1]
        if conversion in INTEGER_CONVERSIONS and (
            isinstance(value, bool) or not isinstance(value, numbers.Integral)
        ):
            raise TypeError(
                f"%{conversion} format requires an integer, "
                f"not {type(value).__name__}"
            )

        used.add(number)
        ordered.append(value)
        return f"%{spec}{conversion}"

    rewritten = _CONVERSION.sub(convert, template)
    if len(used) < len(args):
        raise TypeError("not all arguments converted during string formatting")
    return rewritten % tuple(ordered)
