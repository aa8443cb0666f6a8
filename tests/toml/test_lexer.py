# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_lexer.py
#   file_relpath : tests/toml/test_lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless tokenizer: round trips, token kinds and decoded values."""

from __future__ import annotations

from cargofmt.toml.lexer import tokenize
from cargofmt.toml.tokens import Encoding, ScalarKind, TokenKind, TomlToken, TomlTokens
from tests.conftest import parametrize

MANIFEST: str = """\
# A workspace member
[package]
name = "demo"   # trailing
version = '0.1.0'
edition = "2021"
description = \"\"\"
Multi-line with ] and # inside
\"\"\"

[dependencies]
serde = { version = "1.0", features = ["derive", "rc"] }
"my crate".path = "../x"

[[bin]]
name = "demo"
test = false
harness = true

[package.metadata]
released = 1979-05-27 07:32:00Z
ratio = 0.5e-3
limits = [ 1_000, 0x1F, -inf, +12 ]
"""


def _kinds(text: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(text) if not t.is_trivia]


def test_round_trip_is_lossless() -> None:
    """Concatenating the raw texts gives back the input exactly."""
    assert "".join(t.raw for t in tokenize(MANIFEST)) == MANIFEST
    assert TomlTokens.parse(MANIFEST).to_string() == MANIFEST


def test_round_trip_keeps_crlf() -> None:
    """``\\r\\n`` line endings are single newline tokens."""
    text: str = "a = 1\r\nb = [\r\n  2,\r\n]\r\n"
    tokens: list[TomlToken] = tokenize(text)
    assert "".join(t.raw for t in tokens) == text
    assert [t.raw for t in tokens if t.kind is TokenKind.NEWLINE] == ["\r\n"] * 4


def test_table_headers() -> None:
    """Standard and array table headers get their own bracket kinds."""
    assert _kinds("[a.b]\n[[c]]\n") == [
        TokenKind.STD_TABLE_OPEN,
        TokenKind.SIMPLE_KEY,
        TokenKind.KEY_SEP,
        TokenKind.SIMPLE_KEY,
        TokenKind.STD_TABLE_CLOSE,
        TokenKind.ARRAY_TABLE_OPEN,
        TokenKind.SIMPLE_KEY,
        TokenKind.ARRAY_TABLE_CLOSE,
    ]


def test_arrays_and_inline_tables() -> None:
    """Brackets in value position open arrays; braces open inline tables."""
    assert _kinds("a = [1, { b = 2 }]\n") == [
        TokenKind.SIMPLE_KEY,
        TokenKind.KEY_VAL_SEP,
        TokenKind.ARRAY_OPEN,
        TokenKind.SCALAR,
        TokenKind.VALUE_SEP,
        TokenKind.INLINE_TABLE_OPEN,
        TokenKind.SIMPLE_KEY,
        TokenKind.KEY_VAL_SEP,
        TokenKind.SCALAR,
        TokenKind.INLINE_TABLE_CLOSE,
        TokenKind.ARRAY_CLOSE,
    ]


@parametrize(
    "raw, kind",
    [
        ("true", ScalarKind.BOOLEAN),
        ("42", ScalarKind.INTEGER),
        ("1_000", ScalarKind.INTEGER),
        ("0xdead_beef", ScalarKind.INTEGER),
        ("-17", ScalarKind.INTEGER),
        ("3.14", ScalarKind.FLOAT),
        ("6e-3", ScalarKind.FLOAT),
        ("nan", ScalarKind.FLOAT),
        ("1979-05-27", ScalarKind.DATETIME),
        ("1979-05-27T07:32:00-08:00", ScalarKind.DATETIME),
        ("1979-05-27 07:32:00", ScalarKind.DATETIME),
        ("07:32:00", ScalarKind.DATETIME),
        ('"text"', ScalarKind.STRING),
    ],
)
def test_scalar_kinds(raw: str, kind: ScalarKind) -> None:
    """Scalars are tagged with their TOML type."""
    tokens: list[TomlToken] = [t for t in tokenize(f"v = {raw}\n") if t.kind is TokenKind.SCALAR]
    assert len(tokens) == 1
    assert tokens[0].raw == raw
    assert tokens[0].scalar is kind


@parametrize(
    "raw, decoded, encoding",
    [
        ('"plain"', "plain", Encoding.BASIC),
        ('"tab\\there"', "tab\there", Encoding.BASIC),
        ('"\\u00e9t\\u00e9"', "été", Encoding.BASIC),
        ("'C:\\path'", "C:\\path", Encoding.LITERAL),
        ('"""\nline \\\n    joined"""', "line joined", Encoding.MULTILINE_BASIC),
        ("'''\nraw\\n'''", "raw\\n", Encoding.MULTILINE_LITERAL),
        ('""""quoted""""', '"quoted"', Encoding.MULTILINE_BASIC),
    ],
)
def test_strings_are_decoded(raw: str, decoded: str, encoding: Encoding) -> None:
    """String scalars carry their unescaped value and quoting style."""
    scalar: TomlToken = next(t for t in tokenize(f"v = {raw}\n") if t.kind is TokenKind.SCALAR)
    assert scalar.raw == raw
    assert scalar.decoded == decoded
    assert scalar.encoding is encoding


def test_quoted_keys_are_decoded() -> None:
    """Quoted keys keep their quoting style; bare keys have none."""
    keys: list[TomlToken] = [
        t for t in tokenize("'lit'.\"bas ic\".bare = 1\n") if t.kind is TokenKind.SIMPLE_KEY
    ]
    assert [(k.decoded, k.encoding) for k in keys] == [
        ("lit", Encoding.LITERAL),
        ("bas ic", Encoding.BASIC),
        ("bare", None),
    ]


def test_comments_run_to_end_of_line() -> None:
    """A comment token holds everything from ``#`` to the line break."""
    comments: list[str] = [t.raw for t in tokenize(MANIFEST) if t.kind is TokenKind.COMMENT]
    assert comments == ["# A workspace member", "# trailing"]


def test_invalid_input_becomes_error_token() -> None:
    """Unrecognized input is an error token up to the end of the line."""
    tokens: list[TomlToken] = tokenize("a = @oops\nb = 1\n")
    errors: list[TomlToken] = [t for t in tokens if t.kind is TokenKind.ERROR]
    assert [e.raw for e in errors] == ["@oops"]
    assert "".join(t.raw for t in tokens) == "a = @oops\nb = 1\n"


def test_unterminated_string_becomes_error_token() -> None:
    """The lexer never raises on malformed strings."""
    tokens: list[TomlToken] = tokenize('a = "open\n')
    assert any(t.kind is TokenKind.ERROR for t in tokens)
    assert "".join(t.raw for t in tokens) == 'a = "open\n'
