# topmark:header:start
#
#   project      : CargoFmt
#   file         : string.py
#   file_relpath : src/cargofmt/formatting/string.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Re-render keys and string values in a canonical quoting style.

See [`cargofmt.toml.encoding`][cargofmt.toml.encoding] for the rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.toml.encoding import render_key, render_string
from cargofmt.toml.tokens import ScalarKind, TokenKind

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def normalize_strings(tokens: TomlTokens) -> None:
    """Rewrite quoted keys and string scalars from their decoded text."""
    logger.trace("normalize_strings()")
    for tok in tokens:
        if tok.decoded is None:
            continue
        if tok.kind is TokenKind.SIMPLE_KEY and tok.encoding is not None:
            tok.raw, tok.encoding = render_key(tok.decoded)
        elif tok.kind is TokenKind.SCALAR and tok.scalar is ScalarKind.STRING:
            tok.raw, tok.encoding = render_string(tok.decoded)
