"""Render schemer values as source-like text."""

from __future__ import annotations

import re

from schemer import LispValue
from schemer.types.quit import QuitSignal
from schemer.types.unspecified import UnspecifiedType


def to_string(value: LispValue, readable: bool = True) -> str:
    """Return the printed form of `value`.

    With readable=False strings are written raw, which is what display wants.
    """
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, str):
        if not readable:
            return value
        return '"' + _LITERAL_RE.sub(_quote_literal, value) + '"'
    if isinstance(value, list):
        return "(" + " ".join(to_string(x, readable) for x in value) + ")"
    if isinstance(value, tuple) and len(value) == 2:
        items, tail = value
        head = " ".join(to_string(x, readable) for x in items)
        return f"({head} . {to_string(tail, readable)})"
    if isinstance(value, UnspecifiedType):
        return ""
    if isinstance(value, QuitSignal):
        return repr(value)
    # Symbol, Primitive, Closure and int all print through __str__
    return str(value)


# Strings hold their escapes verbatim, as read. Printing keeps existing escape
# pairs and only escapes a bare quote or a trailing lone backslash.
_LITERAL_RE = re.compile(r'\\.|"|\\\Z', re.DOTALL)


def _quote_literal(m: re.Match) -> str:
    text = m.group(0)
    if text == '"':
        return '\\"'
    if text == "\\":
        return "\\\\"
    return text


_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "e": "\x1b",
    "s": " ",
    "0": "\0",
    "\\": "\\",
    '"': '"',
}


def unescape(text: str) -> str:
    """Interpret backslash escapes; unknown escapes keep the escaped character."""

    def _replace(m: re.Match) -> str:
        code = m.group(1)
        if len(code) > 1:
            return chr(int(code[1:], 16))
        return _SIMPLE_ESCAPES.get(code, code)

    return _ESCAPE_RE.sub(_replace, text)
