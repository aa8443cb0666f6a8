# topmark:header:start
#
#   project      : CargoFmt
#   file         : tokens.py
#   file_relpath : src/cargofmt/toml/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token stream shared by every formatting pass.

A manifest is turned into a flat, mutable list of `TomlToken` records once per
file. Every pass edits that list in place by index splicing; the formatted
document is the concatenation of all ``raw`` fields.

Index discipline:
    Inserting or removing tokens invalidates every index at or after the edit.
    Passes either apply edits in descending index order or return/track the
    updated index they resume from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenKind(Enum):
    """Closed set of token kinds produced by the lexer."""

    STD_TABLE_OPEN = "std-table-open"
    STD_TABLE_CLOSE = "std-table-close"
    ARRAY_TABLE_OPEN = "array-table-open"
    ARRAY_TABLE_CLOSE = "array-table-close"
    ARRAY_OPEN = "array-open"
    ARRAY_CLOSE = "array-close"
    INLINE_TABLE_OPEN = "inline-table-open"
    INLINE_TABLE_CLOSE = "inline-table-close"
    SIMPLE_KEY = "simple-key"
    KEY_SEP = "key-sep"
    KEY_VAL_SEP = "key-val-sep"
    SCALAR = "scalar"
    VALUE_SEP = "value-sep"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    NEWLINE = "newline"
    ERROR = "error"


class ScalarKind(Enum):
    """Type of a scalar value token."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DATETIME = "datetime"


class Encoding(Enum):
    """Quoting style of a key or string scalar in the source."""

    BASIC = "basic"
    LITERAL = "literal"
    MULTILINE_BASIC = "multiline-basic"
    MULTILINE_LITERAL = "multiline-literal"


# Tokens that open / close a value-level bracket pair.
OPENERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.ARRAY_OPEN, TokenKind.INLINE_TABLE_OPEN}
)
CLOSERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.ARRAY_CLOSE, TokenKind.INLINE_TABLE_CLOSE}
)
# Tokens that carry no value: layout only.
TRIVIA: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT}
)


@dataclass(slots=True)
class TomlToken:
    """One token of a TOML document.

    Attributes:
        kind (TokenKind): Syntactic kind.
        raw (str): Exact source text, or a replacement written by a pass.
        decoded (str | None): Unescaped text of a key or string scalar.
        scalar (ScalarKind | None): Type tag for scalar tokens.
        encoding (Encoding | None): Quoting of keys and strings; None when bare.
    """

    kind: TokenKind
    raw: str
    decoded: str | None = None
    scalar: ScalarKind | None = None
    encoding: Encoding | None = None

    @classmethod
    def whitespace(cls, raw: str) -> TomlToken:
        """Return a whitespace token holding ``raw``."""
        return cls(TokenKind.WHITESPACE, raw)

    @classmethod
    def space(cls) -> TomlToken:
        """Return a single-space whitespace token."""
        return cls(TokenKind.WHITESPACE, " ")

    @classmethod
    def newline(cls) -> TomlToken:
        """Return a ``\\n`` newline token."""
        return cls(TokenKind.NEWLINE, "\n")

    @classmethod
    def comma(cls) -> TomlToken:
        """Return a value separator."""
        return cls(TokenKind.VALUE_SEP, ",")

    @property
    def is_trivia(self) -> bool:
        """Whether this token is whitespace, a newline or a comment."""
        return self.kind in TRIVIA


@dataclass
class TomlTokens:
    """Owned, growable sequence of tokens plus the source length hint.

    Attributes:
        tokens (list[TomlToken]): The tokens in document order.
        len_hint (int): Length of the source text; used to presize output.
    """

    tokens: list[TomlToken] = field(default_factory=lambda: [])
    len_hint: int = 0

    @classmethod
    def parse(cls, text: str) -> TomlTokens:
        """Tokenize ``text`` into a new stream."""
        from cargofmt.toml.lexer import tokenize

        return cls(tokens=tokenize(text), len_hint=len(text))

    def to_string(self) -> str:
        """Serialize the stream back to document text."""
        return "".join(t.raw for t in self.tokens)

    def trim_empty_whitespace(self) -> None:
        """Drop whitespace tokens whose text became empty."""
        self.tokens[:] = [
            t for t in self.tokens if not (t.kind is TokenKind.WHITESPACE and not t.raw)
        ]

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[TomlToken]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> TomlToken:
        return self.tokens[index]
