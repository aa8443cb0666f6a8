# topmark:header:start
#
#   project      : CargoFmt
#   file         : encoding.py
#   file_relpath : src/cargofmt/toml/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical rendering of TOML keys and strings from their decoded text.

Rules:
    - Keys are bare when every character is ``A-Za-z0-9_-``; otherwise basic
      quoted, or literal quoted when the key contains ``"`` and a literal form
      exists.
    - Single-line strings are basic quoted unless they contain ``"`` or ``\\``
      and a literal form exists, in which case they are literal quoted.
    - Strings containing a newline become multi-line basic strings that start
      with a newline.
"""

from __future__ import annotations

import re
from typing import Final

from cargofmt.toml.tokens import Encoding

_BARE_KEY_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")

_ESCAPE_NAMES: Final[dict[str, str]] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _is_control(ch: str) -> bool:
    code: int = ord(ch)
    return (code < 0x20 and ch != "\t") or code == 0x7F


def is_bare_key(text: str) -> bool:
    """Whether ``text`` can be written as a bare key."""
    return _BARE_KEY_RE.fullmatch(text) is not None


def can_be_literal(text: str) -> bool:
    """Whether ``text`` fits in a single-line literal string."""
    return "'" not in text and not any(_is_control(ch) for ch in text)


def escape_basic(text: str, *, multiline: bool = False) -> str:
    """Escape ``text`` for use inside a basic string.

    Tabs stay literal. In multi-line mode newlines stay literal too, and runs of
    quotes are broken up so they never close the string early.
    """
    out: list[str] = []
    for ch in text:
        if multiline and ch == "\n":
            out.append(ch)
        elif ch == "\t" or (multiline and ch == '"'):
            out.append(ch)
        elif ch in _ESCAPE_NAMES:
            out.append(_ESCAPE_NAMES[ch])
        elif _is_control(ch):
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    escaped: str = "".join(out)
    if multiline:
        escaped = escaped.replace('"""', '""\\"')
    return escaped


def render_key(decoded: str) -> tuple[str, Encoding | None]:
    """Return ``(raw, encoding)`` for a key with the given decoded text."""
    if is_bare_key(decoded):
        return decoded, None
    if '"' in decoded and can_be_literal(decoded):
        return f"'{decoded}'", Encoding.LITERAL
    return f'"{escape_basic(decoded)}"', Encoding.BASIC


def render_string(decoded: str) -> tuple[str, Encoding]:
    """Return ``(raw, encoding)`` for a string value with the given decoded text."""
    if "\n" in decoded:
        return f'"""\n{escape_basic(decoded, multiline=True)}"""', Encoding.MULTILINE_BASIC
    if ('"' in decoded or "\\" in decoded) and can_be_literal(decoded):
        return f"'{decoded}'", Encoding.LITERAL
    return f'"{escape_basic(decoded)}"', Encoding.BASIC
