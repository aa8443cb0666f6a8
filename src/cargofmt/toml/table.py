# topmark:header:start
#
#   project      : CargoFmt
#   file         : table.py
#   file_relpath : src/cargofmt/toml/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Table header spans over a token stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cargofmt.toml.tokens import TokenKind

if TYPE_CHECKING:
    from cargofmt.toml.tokens import TomlTokens

_HEADER_OPEN = (TokenKind.STD_TABLE_OPEN, TokenKind.ARRAY_TABLE_OPEN)
_HEADER_CLOSE = (TokenKind.STD_TABLE_CLOSE, TokenKind.ARRAY_TABLE_CLOSE)


@dataclass(frozen=True)
class Table:
    """One ``[name]`` or ``[[name]]`` section of a document.

    Attributes:
        name (tuple[str, ...]): Decoded key path of the header.
        is_array_table (bool): True for ``[[name]]``.
        start (int): First token of the section, including comment lines directly
            above the header.
        header_open (int): Index of the header's opening bracket.
        header_close (int): Index of the header's closing bracket.
        end (int): Index of the next section's ``start``, or the token count.
    """

    name: tuple[str, ...]
    is_array_table: bool
    start: int
    header_open: int
    header_close: int
    end: int

    def is_parent_of(self, other: Table) -> bool:
        """Whether ``other`` is named strictly under this table."""
        return len(other.name) > len(self.name) and other.name[: len(self.name)] == self.name


def _leading_comment_start(tokens: TomlTokens, header_open: int) -> int:
    """Extend a header start upward over directly adjacent comment lines."""
    start: int = header_open
    i: int = header_open - 1
    # Indentation before the header
    if i >= 0 and tokens[i].kind is TokenKind.WHITESPACE:
        i -= 1
    while i >= 0 and tokens[i].kind is TokenKind.NEWLINE:
        j: int = i - 1
        if j >= 0 and tokens[j].kind is TokenKind.WHITESPACE:
            j -= 1
        if j < 0 or tokens[j].kind is not TokenKind.COMMENT:
            break
        # The comment must be alone on its line.
        k: int = j - 1
        if k >= 0 and tokens[k].kind is TokenKind.WHITESPACE:
            k -= 1
        if k >= 0 and tokens[k].kind is not TokenKind.NEWLINE:
            break
        start = k + 1
        i = k
    return start


def collect_tables(tokens: TomlTokens) -> list[Table]:
    """Return every table header span in document order."""
    headers: list[tuple[tuple[str, ...], bool, int, int]] = []
    i: int = 0
    n: int = len(tokens)
    while i < n:
        kind: TokenKind = tokens[i].kind
        if kind in _HEADER_OPEN:
            j: int = i + 1
            name: list[str] = []
            while j < n and tokens[j].kind not in _HEADER_CLOSE:
                if tokens[j].kind is TokenKind.SIMPLE_KEY:
                    name.append(tokens[j].decoded or tokens[j].raw)
                j += 1
            if j >= n:
                break
            headers.append((tuple(name), kind is TokenKind.ARRAY_TABLE_OPEN, i, j))
            i = j
        i += 1

    starts: list[int] = [_leading_comment_start(tokens, h[2]) for h in headers]
    tables: list[Table] = []
    for idx, (name, is_array, open_idx, close_idx) in enumerate(headers):
        end: int = starts[idx + 1] if idx + 1 < len(headers) else n
        tables.append(Table(name, is_array, starts[idx], open_idx, close_idx, end))
    return tables
