# topmark:header:start
#
#   project      : CargoFmt
#   file         : unused_parents.py
#   file_relpath : src/cargofmt/formatting/unused_parents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Remove ``[parent]`` headers that only exist to name a deeper table.

A header such as ``[target]`` followed directly by ``[target.'cfg(unix)'.dependencies]``
defines nothing: TOML creates ``target`` implicitly. It is removed when:

- it is a standard table (``[[array]]`` tables are values and always stay),
- another table is named under it,
- it holds no key/value pairs, and
- no comment is attached to it, neither above the header, on the header line
  nor in its body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.toml.table import Table, collect_tables
from cargofmt.toml.tokens import TokenKind

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def _is_removable(tokens: TomlTokens, table: Table, tables: list[Table]) -> bool:
    if table.is_array_table or table.start != table.header_open:
        return False
    body = tokens.tokens[table.header_close + 1 : table.end]
    if any(t.kind not in (TokenKind.WHITESPACE, TokenKind.NEWLINE) for t in body):
        return False
    return any(table.is_parent_of(other) for other in tables)


def remove_unused_parent_tables(tokens: TomlTokens) -> None:
    """Delete empty parent table headers."""
    logger.trace("remove_unused_parent_tables()")
    tables: list[Table] = collect_tables(tokens)
    removable: list[Table] = [t for t in tables if _is_removable(tokens, t, tables)]
    for table in reversed(removable):
        start: int = table.header_open
        if start > 0 and tokens[start - 1].kind is TokenKind.WHITESPACE:
            start -= 1
        logger.debug("Removing unused parent table [%s]", ".".join(table.name))
        del tokens.tokens[start : table.end]
