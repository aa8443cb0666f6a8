# topmark:header:start
#
#   project      : CargoFmt
#   file         : comment.py
#   file_relpath : src/cargofmt/formatting/comment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Word-wrap long standalone comments.

A standalone comment is alone on its line. When its line is wider than
``comment_width`` it is split greedily at spaces into several comment lines
with the same indentation and ``#`` prefix. A word wider than the budget stays
whole on its own line. Comments that follow code are never wrapped.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from cargofmt.config.logging import get_logger
from cargofmt.formatting.width import display_width
from cargofmt.toml.tokens import TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)

# "#", "##", "#!" ... followed by at most one space.
_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"^(#+!?\s?)")

# Width used for tabs in comment indentation.
_TAB_WIDTH: Final[int] = 4


def _wrap_words(words: list[str], budget: int) -> list[str]:
    lines: list[str] = []
    current: list[str] = []
    width: int = 0
    for word in words:
        w: int = display_width(word, _TAB_WIDTH)
        if current and width + 1 + w > budget:
            lines.append(" ".join(current))
            current, width = [], 0
        width = w if not current else width + 1 + w
        current.append(word)
    if current:
        lines.append(" ".join(current))
    return lines


def _wrapped(indent: str, comment: str, comment_width: int) -> list[TomlToken] | None:
    match = _PREFIX_RE.match(comment)
    prefix: str = match.group(1) if match else "#"
    words: list[str] = comment[len(prefix) :].split()
    if len(words) < 2:
        return None
    if not prefix.endswith(" "):
        prefix += " "
    budget: int = comment_width - display_width(indent, _TAB_WIDTH) - display_width(
        prefix, _TAB_WIDTH
    )
    lines: list[str] = _wrap_words(words, budget)
    if len(lines) < 2:
        return None
    out: list[TomlToken] = []
    for n, line in enumerate(lines):
        if n:
            out.append(TomlToken.newline())
            if indent:
                out.append(TomlToken.whitespace(indent))
        out.append(TomlToken(TokenKind.COMMENT, prefix + line))
    return out


def wrap_comment_lines(tokens: TomlTokens, wrap: bool, comment_width: int) -> None:
    """Wrap standalone comments wider than ``comment_width``; no-op unless ``wrap``."""
    logger.trace("wrap_comment_lines(wrap=%s, comment_width=%d)", wrap, comment_width)
    if not wrap:
        return
    toks: list[TomlToken] = tokens.tokens
    # Walk backwards so splices do not shift the comments still to visit.
    for i in range(len(toks) - 1, -1, -1):
        tok: TomlToken = toks[i]
        if tok.kind is not TokenKind.COMMENT:
            continue
        j: int = i - 1
        indent: str = ""
        if j >= 0 and toks[j].kind is TokenKind.WHITESPACE:
            indent = toks[j].raw
            j -= 1
        if j >= 0 and toks[j].kind is not TokenKind.NEWLINE:
            continue
        width: int = display_width(indent, _TAB_WIDTH) + display_width(tok.raw, _TAB_WIDTH)
        if width <= comment_width:
            continue
        replacement: list[TomlToken] | None = _wrapped(indent, tok.raw, comment_width)
        if replacement is not None:
            logger.trace("Wrapping comment at token %d (width %d)", i, width)
            toks[i : i + 1] = replacement
