# topmark:header:start
#
#   project      : CargoFmt
#   file         : lexer.py
#   file_relpath : src/cargofmt/toml/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless TOML tokenizer.

`tokenize` splits a document into `TomlToken` records whose ``raw`` texts
concatenate back to the input exactly. TOML parsers (``tomlkit`` included)
expose a document model, not a token stream, so the formatter carries its own
lexer and uses ``tomlkit`` only to validate and compare documents.

The lexer tracks just enough context to tell keys from values and table
headers from arrays:

- at the start of a top-level line, after ``{`` or after a comma inside an
  inline table, it expects a key;
- after ``=``, ``[`` (value position) or a comma inside an array it expects a
  value.

Anything it cannot classify becomes an `ERROR` token running to the end of the
line; the lexer itself never raises. Input is validated by ``tomlkit`` before
formatting, so error tokens only show up for invalid documents.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from cargofmt.config.logging import get_logger
from cargofmt.toml.tokens import Encoding, ScalarKind, TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger

logger: CargofmtLogger = get_logger(__name__)

_BARE_KEY_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")
_WS_RE: Final[re.Pattern[str]] = re.compile(r"[ \t]+")
_SCALAR_RUN_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_+\-.:]+")

_DATETIME_RE: Final[re.Pattern[str]] = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:[Tt ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:[Zz]|[+-]\d{2}:\d{2})?)?"
    r"|\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?"
)
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:0|[1-9](?:_?\d)*)"
    r"|0x[0-9A-Fa-f](?:_?[0-9A-Fa-f])*"
    r"|0o[0-7](?:_?[0-7])*"
    r"|0b[01](?:_?[01])*"
)
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:0|[1-9](?:_?\d)*)"
    r"(?:\.\d(?:_?\d)*(?:[eE][+-]?\d(?:_?\d)*)?|[eE][+-]?\d(?:_?\d)*)"
    r"|[+-]?(?:inf|nan)"
)

# Characters that end a scalar in value position.
_VALUE_DELIMITERS: Final[str] = " \t\r\n,]}#"

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    "e": "\x1b",
    '"': '"',
    "\\": "\\",
}

# Container kinds on the context stack.
_HEADER: Final[str] = "header"
_ARRAY_HEADER: Final[str] = "array-header"
_ARRAY: Final[str] = "array"
_INLINE: Final[str] = "inline"


class _StringError(ValueError):
    """Unterminated string or invalid escape sequence."""


def _decode_escapes(body: str, *, multiline: bool) -> str:
    """Unescape the body of a basic string."""
    out: list[str] = []
    i: int = 0
    n: int = len(body)
    while i < n:
        ch: str = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise _StringError("dangling backslash")
        esc: str = body[i + 1]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in "uUx":
            size: int = {"u": 4, "U": 8, "x": 2}[esc]
            digits: str = body[i + 2 : i + 2 + size]
            if len(digits) != size or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise _StringError(f"invalid \\{esc} escape")
            out.append(chr(int(digits, 16)))
            i += 2 + size
        elif multiline and esc in " \t\r\n":
            # Line-ending backslash: trim whitespace up to the next content.
            j: int = i + 1
            while j < n and body[j] in " \t":
                j += 1
            if j >= n or body[j] not in "\r\n":
                raise _StringError("invalid escape")
            while j < n and body[j] in " \t\r\n":
                j += 1
            i = j
        else:
            raise _StringError(f"invalid escape \\{esc}")
    return "".join(out)


def _scan_string(text: str, pos: int) -> tuple[int, str, Encoding]:
    """Scan a string starting at ``pos``; return ``(end, decoded, encoding)``.

    Raises:
        _StringError: If the string is unterminated or malformed.
    """
    quote: str = text[pos]
    triple: str = quote * 3
    if text.startswith(triple, pos):
        start: int = pos + 3
        end: int = start
        while True:
            found: int = text.find(triple, end)
            if found < 0:
                raise _StringError("unterminated multi-line string")
            if quote == '"':
                # Skip quotes preceded by an odd number of backslashes.
                k: int = found - 1
                slashes: int = 0
                while k >= start and text[k] == "\\":
                    slashes += 1
                    k -= 1
                if slashes % 2:
                    end = found + 1
                    continue
            break
        close: int = found
        # Up to two quotes adjacent to the closing delimiter belong to the content.
        extra: int = 0
        while extra < 2 and close + 3 + extra < len(text) and text[close + 3 + extra] == quote:
            extra += 1
        body: str = text[start : close + extra]
        if body.startswith("\r\n"):
            body = body[2:]
        elif body.startswith("\n"):
            body = body[1:]
        if quote == '"':
            decoded: str = _decode_escapes(body, multiline=True)
            return close + 3 + extra, decoded, Encoding.MULTILINE_BASIC
        return close + 3 + extra, body, Encoding.MULTILINE_LITERAL

    i: int = pos + 1
    n: int = len(text)
    if quote == "'":
        while i < n and text[i] not in "'\r\n":
            i += 1
        if i >= n or text[i] != "'":
            raise _StringError("unterminated literal string")
        return i + 1, text[pos + 1 : i], Encoding.LITERAL
    while i < n and text[i] not in '"\r\n':
        i += 2 if text[i] == "\\" else 1
    if i >= n or text[i] != '"':
        raise _StringError("unterminated basic string")
    return i + 1, _decode_escapes(text[pos + 1 : i], multiline=False), Encoding.BASIC


def _classify_scalar(raw: str) -> ScalarKind | None:
    if raw in ("true", "false"):
        return ScalarKind.BOOLEAN
    if _DATETIME_RE.fullmatch(raw):
        return ScalarKind.DATETIME
    if _INTEGER_RE.fullmatch(raw):
        return ScalarKind.INTEGER
    if _FLOAT_RE.fullmatch(raw):
        return ScalarKind.FLOAT
    return None


class _Lexer:
    """Single-use tokenizer state."""

    def __init__(self, text: str) -> None:
        self.text: str = text
        self.pos: int = 0
        self.tokens: list[TomlToken] = []
        self.stack: list[str] = []
        self.expect_key: bool = True

    def emit(self, kind: TokenKind, end: int, **extra: object) -> None:
        raw: str = self.text[self.pos : end]
        self.tokens.append(TomlToken(kind, raw, **extra))  # type: ignore[arg-type]
        self.pos = end

    def error_to_eol(self) -> None:
        end: int = self.pos
        while end < len(self.text) and self.text[end] not in "\r\n":
            end += 1
        logger.debug("Unrecognized input at offset %d: %r", self.pos, self.text[self.pos : end])
        self.emit(TokenKind.ERROR, max(end, self.pos + 1))

    def in_key_context(self) -> bool:
        top: str | None = self.stack[-1] if self.stack else None
        return top in (_HEADER, _ARRAY_HEADER) or self.expect_key

    def run(self) -> list[TomlToken]:
        text: str = self.text
        n: int = len(text)
        while self.pos < n:
            ch: str = text[self.pos]
            if ch in " \t":
                m = _WS_RE.match(text, self.pos)
                assert m is not None
                self.emit(TokenKind.WHITESPACE, m.end())
            elif ch == "\n" or text.startswith("\r\n", self.pos):
                self.emit(TokenKind.NEWLINE, self.pos + (1 if ch == "\n" else 2))
                if not self.stack:
                    self.expect_key = True
            elif ch == "#":
                end: int = self.pos
                while end < n and text[end] != "\n" and not text.startswith("\r\n", end):
                    end += 1
                self.emit(TokenKind.COMMENT, end)
            elif self.in_key_context():
                self.lex_key_position(ch)
            else:
                self.lex_value_position(ch)
        return self.tokens

    def lex_key_position(self, ch: str) -> None:
        text: str = self.text
        top: str | None = self.stack[-1] if self.stack else None
        if ch in "\"'":
            try:
                end, decoded, encoding = _scan_string(text, self.pos)
            except _StringError:
                self.error_to_eol()
                return
            if encoding in (Encoding.MULTILINE_BASIC, Encoding.MULTILINE_LITERAL):
                self.error_to_eol()
                return
            self.emit(TokenKind.SIMPLE_KEY, end, decoded=decoded, encoding=encoding)
        elif m := _BARE_KEY_RE.match(text, self.pos):
            self.emit(TokenKind.SIMPLE_KEY, m.end(), decoded=m.group(0))
        elif ch == ".":
            self.emit(TokenKind.KEY_SEP, self.pos + 1)
        elif ch == "=" and top not in (_HEADER, _ARRAY_HEADER):
            self.emit(TokenKind.KEY_VAL_SEP, self.pos + 1)
            self.expect_key = False
        elif ch == "[" and not self.stack:
            if text.startswith("[[", self.pos):
                self.emit(TokenKind.ARRAY_TABLE_OPEN, self.pos + 2)
                self.stack.append(_ARRAY_HEADER)
            else:
                self.emit(TokenKind.STD_TABLE_OPEN, self.pos + 1)
                self.stack.append(_HEADER)
        elif ch == "]" and top == _ARRAY_HEADER and text.startswith("]]", self.pos):
            self.emit(TokenKind.ARRAY_TABLE_CLOSE, self.pos + 2)
            self.stack.pop()
            self.expect_key = False
        elif ch == "]" and top == _HEADER:
            self.emit(TokenKind.STD_TABLE_CLOSE, self.pos + 1)
            self.stack.pop()
            self.expect_key = False
        elif ch == "}" and top == _INLINE:
            self.emit(TokenKind.INLINE_TABLE_CLOSE, self.pos + 1)
            self.stack.pop()
            self.expect_key = False
        elif ch == "," and top == _INLINE:
            # Doubled comma or comma after the opening brace; let the parser reject it.
            self.emit(TokenKind.VALUE_SEP, self.pos + 1)
        else:
            self.error_to_eol()

    def lex_value_position(self, ch: str) -> None:
        text: str = self.text
        top: str | None = self.stack[-1] if self.stack else None
        if ch == "[":
            self.emit(TokenKind.ARRAY_OPEN, self.pos + 1)
            self.stack.append(_ARRAY)
        elif ch == "]" and top == _ARRAY:
            self.emit(TokenKind.ARRAY_CLOSE, self.pos + 1)
            self.stack.pop()
        elif ch == "{":
            self.emit(TokenKind.INLINE_TABLE_OPEN, self.pos + 1)
            self.stack.append(_INLINE)
            self.expect_key = True
        elif ch == "}" and top == _INLINE:
            self.emit(TokenKind.INLINE_TABLE_CLOSE, self.pos + 1)
            self.stack.pop()
        elif ch == "," and top in (_ARRAY, _INLINE):
            self.emit(TokenKind.VALUE_SEP, self.pos + 1)
            if top == _INLINE:
                self.expect_key = True
        elif ch in "\"'":
            try:
                end, decoded, encoding = _scan_string(text, self.pos)
            except _StringError:
                self.error_to_eol()
                return
            self.emit(
                TokenKind.SCALAR,
                end,
                decoded=decoded,
                scalar=ScalarKind.STRING,
                encoding=encoding,
            )
        else:
            dt = _DATETIME_RE.match(text, self.pos)
            if dt and (dt.end() >= len(text) or text[dt.end()] in _VALUE_DELIMITERS):
                self.emit(TokenKind.SCALAR, dt.end(), scalar=ScalarKind.DATETIME)
                return
            run = _SCALAR_RUN_RE.match(text, self.pos)
            kind: ScalarKind | None = _classify_scalar(run.group(0)) if run else None
            if run is None or kind is None:
                self.error_to_eol()
                return
            self.emit(TokenKind.SCALAR, run.end(), scalar=kind)


def tokenize(text: str) -> list[TomlToken]:
    """Split ``text`` into tokens; concatenating their ``raw`` reproduces ``text``."""
    tokens: list[TomlToken] = _Lexer(text).run()
    logger.trace("Tokenized %d chars into %d tokens", len(text), len(tokens))
    return tokens
