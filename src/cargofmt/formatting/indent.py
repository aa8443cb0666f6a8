# topmark:header:start
#
#   project      : CargoFmt
#   file         : indent.py
#   file_relpath : src/cargofmt/formatting/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Re-derive line indentation from bracket nesting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.toml.tokens import CLOSERS, OPENERS, TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def _leading_closers(toks: list[TomlToken], start: int) -> int:
    count: int = 0
    i: int = start
    while i < len(toks) and toks[i].kind in CLOSERS:
        count += 1
        i += 1
    return count


def normalize_indent(tokens: TomlTokens, hard_tabs: bool, tab_spaces: int) -> None:
    """Indent each line by its nesting level.

    The level of a line is the number of arrays and inline tables open at its
    start, minus the closing brackets the line starts with. Empty lines get no
    indentation. Text inside multi-line strings is never touched.

    Args:
        tokens (TomlTokens): The token stream, edited in place.
        hard_tabs (bool): Indent with one tab per level.
        tab_spaces (int): Spaces per level when not using tabs.
    """
    logger.trace("normalize_indent(hard_tabs=%s, tab_spaces=%d)", hard_tabs, tab_spaces)
    unit: str = "\t" if hard_tabs else " " * tab_spaces
    toks: list[TomlToken] = tokens.tokens
    out: list[TomlToken] = []
    depth: int = 0
    at_line_start: bool = True
    i: int = 0
    while i < len(toks):
        tok: TomlToken = toks[i]
        if at_line_start:
            at_line_start = False
            content: int = i + 1 if tok.kind is TokenKind.WHITESPACE else i
            if content >= len(toks) or toks[content].kind is TokenKind.NEWLINE:
                i = content
                continue
            level: int = max(depth - _leading_closers(toks, content), 0)
            if level:
                out.append(TomlToken.whitespace(unit * level))
            i = content
            continue

        if tok.kind in OPENERS:
            depth += 1
        elif tok.kind in CLOSERS:
            depth = max(depth - 1, 0)
        elif tok.kind is TokenKind.NEWLINE:
            at_line_start = True
        out.append(tok)
        i += 1
    toks[:] = out
