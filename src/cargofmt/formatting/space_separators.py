# topmark:header:start
#
#   project      : CargoFmt
#   file         : space_separators.py
#   file_relpath : src/cargofmt/formatting/space_separators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical spacing between tokens on a line.

- one space on each side of ``=``;
- no space around ``.`` in dotted keys;
- no space just inside table header brackets: ``[a.b]``, ``[[bin]]``;
- inline tables read ``{ a = 1, b = 2 }`` and ``{}`` when empty;
- single-line arrays read ``[1, 2, 3]``: no space inside the brackets or
  before a comma, one space after it;
- one space before a comment that follows code, outside of arrays.

Multi-line arrays belong to the array layout engine and are left alone here.
Indentation (whitespace at the start of a line) is left to the indent pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from cargofmt.config.logging import get_logger
from cargofmt.formatting.overflow import find_close
from cargofmt.toml.tokens import TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)

_OPENERS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.ARRAY_OPEN,
        TokenKind.INLINE_TABLE_OPEN,
        TokenKind.STD_TABLE_OPEN,
        TokenKind.ARRAY_TABLE_OPEN,
    }
)
_CLOSERS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.ARRAY_CLOSE,
        TokenKind.INLINE_TABLE_CLOSE,
        TokenKind.STD_TABLE_CLOSE,
        TokenKind.ARRAY_TABLE_CLOSE,
    }
)


def _single_line_arrays(tokens: TomlTokens) -> set[int]:
    """Return the indices of array open brackets whose close is on the same line."""
    found: set[int] = set()
    toks: list[TomlToken] = tokens.tokens
    for i, tok in enumerate(toks):
        if tok.kind is not TokenKind.ARRAY_OPEN:
            continue
        close: int | None = find_close(tokens, i)
        if close is not None and all(
            toks[j].kind is not TokenKind.NEWLINE for j in range(i + 1, close)
        ):
            found.add(i)
    return found


def _desired_gap(
    prev: TomlToken, tok: TomlToken, stack: list[TokenKind], flat_array: bool
) -> str | None:
    """Return the whitespace wanted between two tokens on one line; None keeps it as is."""
    top: TokenKind | None = stack[-1] if stack else None
    if tok.kind is TokenKind.COMMENT:
        return None if TokenKind.ARRAY_OPEN in stack else " "
    if TokenKind.KEY_VAL_SEP in (prev.kind, tok.kind):
        return " "
    if TokenKind.KEY_SEP in (prev.kind, tok.kind):
        return ""
    if prev.kind in (TokenKind.STD_TABLE_OPEN, TokenKind.ARRAY_TABLE_OPEN):
        return ""
    if tok.kind in (TokenKind.STD_TABLE_CLOSE, TokenKind.ARRAY_TABLE_CLOSE):
        return ""
    if top is TokenKind.INLINE_TABLE_OPEN:
        if prev.kind is TokenKind.INLINE_TABLE_OPEN and tok.kind is TokenKind.INLINE_TABLE_CLOSE:
            return ""
        if prev.kind is TokenKind.INLINE_TABLE_OPEN or tok.kind is TokenKind.INLINE_TABLE_CLOSE:
            return " "
        if tok.kind is TokenKind.VALUE_SEP:
            return ""
        if prev.kind is TokenKind.VALUE_SEP:
            return " "
    if top is TokenKind.ARRAY_OPEN and flat_array:
        if prev.kind is TokenKind.ARRAY_OPEN or tok.kind is TokenKind.ARRAY_CLOSE:
            return ""
        if tok.kind is TokenKind.VALUE_SEP:
            return ""
        if prev.kind is TokenKind.VALUE_SEP:
            return " "
    return None


def normalize_space_separators(tokens: TomlTokens) -> None:
    """Rewrite the whitespace between tokens that share a line."""
    logger.trace("normalize_space_separators()")
    flat_opens: set[int] = _single_line_arrays(tokens)
    out: list[TomlToken] = []
    pending: list[TomlToken] = []
    prev: TomlToken | None = None
    stack: list[TokenKind] = []
    flat: list[bool] = []

    for i, tok in enumerate(tokens.tokens):
        if tok.kind is TokenKind.WHITESPACE:
            pending.append(tok)
            continue
        if tok.kind is TokenKind.NEWLINE:
            out.extend(pending)
            pending.clear()
            out.append(tok)
            prev = None
            continue

        gap: str | None = None
        if prev is not None:
            gap = _desired_gap(prev, tok, stack, bool(flat) and flat[-1])
        if gap is None:
            out.extend(pending)
        elif gap:
            out.append(TomlToken.whitespace(gap))
        pending.clear()
        out.append(tok)
        prev = tok

        if tok.kind in _OPENERS:
            stack.append(tok.kind)
            flat.append(i in flat_opens)
        elif tok.kind in _CLOSERS and stack:
            stack.pop()
            flat.pop()

    out.extend(pending)
    tokens.tokens[:] = out
