# topmark:header:start
#
#   project      : CargoFmt
#   file         : trailing_spaces.py
#   file_relpath : src/cargofmt/formatting/trailing_spaces.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Remove whitespace at the end of lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.toml.tokens import TokenKind

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def trim_trailing_spaces(tokens: TomlTokens) -> None:
    """Drop whitespace before newlines and at the end of the stream; right-trim comments."""
    logger.trace("trim_trailing_spaces()")
    toks = tokens.tokens
    if toks and toks[-1].kind is TokenKind.WHITESPACE:
        toks[-1].raw = ""
    for i in range(1, len(toks)):
        if toks[i].kind is TokenKind.NEWLINE and toks[i - 1].kind is TokenKind.WHITESPACE:
            toks[i - 1].raw = ""
    tokens.trim_empty_whitespace()

    for tok in tokens:
        if tok.kind is TokenKind.COMMENT:
            tok.raw = tok.raw.rstrip()
