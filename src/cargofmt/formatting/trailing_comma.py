# topmark:header:start
#
#   project      : CargoFmt
#   file         : trailing_comma.py
#   file_relpath : src/cargofmt/formatting/trailing_comma.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Add or remove the comma after the last element of arrays.

The comma goes directly after the last value, ahead of any comment that
follows it on the same line. Inline tables never keep a trailing comma.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.config.types import SeparatorTactic
from cargofmt.toml.tokens import CLOSERS, OPENERS, TokenKind, TomlToken

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


def _matching_close(toks: list[TomlToken], open_index: int) -> int | None:
    depth: int = 0
    for i in range(open_index, len(toks)):
        if toks[i].kind in OPENERS:
            depth += 1
        elif toks[i].kind in CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return None


def _last_significant(toks: list[TomlToken], open_index: int, close_index: int) -> int:
    i: int = close_index - 1
    while i > open_index and toks[i].is_trivia:
        i -= 1
    return i


def _wants_comma(tactic: SeparatorTactic, multiline: bool) -> bool:
    match tactic:
        case SeparatorTactic.ALWAYS:
            return True
        case SeparatorTactic.NEVER:
            return False
        case _:
            return multiline


def adjust_trailing_comma(tokens: TomlTokens, tactic: SeparatorTactic) -> None:
    """Apply ``tactic`` to every array outside inline tables.

    Args:
        tokens (TomlTokens): The token stream, edited in place.
        tactic (SeparatorTactic): ``ALWAYS``, ``NEVER`` or ``VERTICAL``
            (multi-line arrays only).
    """
    logger.trace("adjust_trailing_comma(tactic=%s)", tactic.value)
    toks: list[TomlToken] = tokens.tokens

    opens: list[tuple[int, bool]] = []
    inline_depth: int = 0
    for i, tok in enumerate(toks):
        if tok.kind is TokenKind.INLINE_TABLE_OPEN:
            opens.append((i, False))
            inline_depth += 1
        elif tok.kind is TokenKind.INLINE_TABLE_CLOSE:
            inline_depth = max(inline_depth - 1, 0)
        elif tok.kind is TokenKind.ARRAY_OPEN:
            opens.append((i, inline_depth == 0))

    # Edits sit after their opener: walking backwards keeps earlier indices valid.
    for open_index, is_array in reversed(opens):
        close: int | None = _matching_close(toks, open_index)
        if close is None:
            continue
        last: int = _last_significant(toks, open_index, close)
        if last == open_index:
            continue
        has_comma: bool = toks[last].kind is TokenKind.VALUE_SEP
        if not is_array:
            if has_comma:
                del toks[last]
            continue
        multiline: bool = any(
            t.kind is TokenKind.NEWLINE for t in toks[open_index + 1 : close]
        )
        want: bool = _wants_comma(tactic, multiline)
        if want and not has_comma:
            toks.insert(last + 1, TomlToken.comma())
        elif has_comma and not want:
            del toks[last]
