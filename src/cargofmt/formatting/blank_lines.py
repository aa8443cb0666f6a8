# topmark:header:start
#
#   project      : CargoFmt
#   file         : blank_lines.py
#   file_relpath : src/cargofmt/formatting/blank_lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Clamp runs of blank lines.

Between two lines that sit outside any array, the number of blank lines is
clamped to ``[lower, upper]``. Blank lines at the top of the document are
removed and a non-empty document ends with exactly one newline. Blank lines
inside arrays are owned by the array layout engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.toml.tokens import TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def _gap_end(toks: list[TomlToken], start: int) -> int:
    """Return the index just past a run of newlines and whitespace."""
    i: int = start
    while i < len(toks) and toks[i].kind in (TokenKind.NEWLINE, TokenKind.WHITESPACE):
        i += 1
    return i


def constrain_blank_lines(tokens: TomlTokens, lower: int, upper: int) -> None:
    """Clamp blank-line runs to ``[lower, upper]`` and fix both document ends.

    Args:
        tokens (TomlTokens): The token stream, edited in place.
        lower (int): Minimum number of blank lines between two lines.
        upper (int): Maximum number of blank lines between two lines.
    """
    logger.trace("constrain_blank_lines(lower=%d, upper=%d)", lower, upper)
    toks: list[TomlToken] = tokens.tokens
    out: list[TomlToken] = []
    depth: int = 0
    i: int = _gap_end(toks, 0)
    # Keep the indentation of the first line.
    if i > 0 and toks[i - 1].kind is TokenKind.WHITESPACE and i < len(toks):
        i -= 1

    while i < len(toks):
        tok: TomlToken = toks[i]
        if tok.kind is not TokenKind.NEWLINE:
            if tok.kind is TokenKind.ARRAY_OPEN:
                depth += 1
            elif tok.kind is TokenKind.ARRAY_CLOSE:
                depth = max(depth - 1, 0)
            out.append(tok)
            i += 1
            continue

        end: int = _gap_end(toks, i)
        gap: list[TomlToken] = toks[i:end]
        if end == len(toks):
            out.append(tok)
            break
        if depth > 0:
            out.extend(gap)
            i = end
            continue

        newlines: list[TomlToken] = [t for t in gap if t.kind is TokenKind.NEWLINE]
        blank: int = min(max(len(newlines) - 1, lower), upper)
        out.extend(newlines[: blank + 1])
        out.extend(TomlToken.newline() for _ in range(blank + 1 - len(newlines)))
        if gap[-1].kind is TokenKind.WHITESPACE:
            out.append(gap[-1])
        i = end

    if out and out[-1].kind is not TokenKind.NEWLINE:
        out.append(TomlToken.newline())
    toks[:] = out
