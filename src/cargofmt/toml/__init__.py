# topmark:header:start
#
#   project      : CargoFmt
#   file         : __init__.py
#   file_relpath : src/cargofmt/toml/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML token stream: token types, lexer, table spans and string encoders."""

from __future__ import annotations

from cargofmt.toml.tokens import Encoding, ScalarKind, TokenKind, TomlToken, TomlTokens

__all__ = [
    "Encoding",
    "ScalarKind",
    "TokenKind",
    "TomlToken",
    "TomlTokens",
]
