"""JSONP wrapping with callback validation.

The callback must be a plain JavaScript function reference
(``cb``, ``jQuery.cb``, ``handlers["routes"]``). Anything else is
rejected outright rather than sanitized.
"""

import re
import unicodedata

from jsrouting.errors import InvalidCallback

# Leading empty comment defeats content-sniffing of the response as
# another file type (Rosetta Flash). Part of the wire format.
JSONP_PREFIX = "/**/"

# One dotted part: a head identifier followed by bracketed property
# accesses. Quoted keys may not contain whitespace or ";".
_PART = re.compile(
    r"""([^.\[\]"']*)((?:\[(?:"(?:\\[^\s;]|[^"\\\s;])*"|'(?:\\[^\s;]|[^'\\\s;])*'|\d+)\])*)"""
)

_ZWNJ = "\u200c"
_ZWJ = "\u200d"

RESERVED_WORDS = frozenset({
    "break", "do", "instanceof", "typeof", "case", "else", "new", "var",
    "catch", "finally", "return", "void", "continue", "for", "switch",
    "while", "debugger", "function", "this", "with", "default", "if",
    "throw", "delete", "in", "try", "class", "enum", "extends", "super",
    "const", "export", "import", "implements", "let", "private", "public",
    "yield", "interface", "package", "protected", "static", "null", "true",
    "false",
})  # fmt: skip


def _is_identifier_start(char: str) -> bool:
    return char in "$_" or unicodedata.category(char).startswith("L")


def _is_identifier_part(char: str) -> bool:
    if _is_identifier_start(char) or char in (_ZWNJ, _ZWJ):
        return True
    return unicodedata.category(char) in ("Mn", "Mc", "Nd", "Pc")


def is_identifier(name: str) -> bool:
    """Whether *name* is a non-reserved JavaScript identifier."""
    if not name or name in RESERVED_WORDS:
        return False
    return _is_identifier_start(name[0]) and all(_is_identifier_part(c) for c in name[1:])


class JsonpCallbackValidator:
    """Validates JSONP callback names.

    The callback is a ``.``-separated chain. Each part is an identifier,
    optionally followed by bracketed accesses (``["key"]``, ``[0]``); a
    ``.`` inside a quoted key does not separate parts.
    """

    __slots__ = ()

    def validate(self, callback: str) -> bool:
        pos = 0
        while True:
            part = _PART.match(callback, pos)
            if part is None or not is_identifier(part.group(1)):
                return False
            pos = part.end()
            if pos == len(callback):
                return True
            if callback[pos] != ".":
                return False
            pos += 1


_default_validator = JsonpCallbackValidator()


def wrap(
    content: str,
    callback: str | None,
    validator: JsonpCallbackValidator | None = None,
) -> str:
    """Wrap *content* as a call to *callback*.

    Returns *content* untouched when *callback* is ``None``. Raises
    ``InvalidCallback`` (HTTP 400) when the callback fails validation.
    """
    if callback is None:
        return content
    if not (validator or _default_validator).validate(callback):
        raise InvalidCallback()
    return f"{JSONP_PREFIX}{callback}({content});"
