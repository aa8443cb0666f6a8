# topmark:header:start
#
#   project      : CargoFmt
#   file         : overflow.py
#   file_relpath : src/cargofmt/formatting/overflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Array layout engine.

`reflow_arrays` makes one left-to-right pass over the token stream. For every
array outside an inline table it decides between five layouts and rewrites the
array's tokens in place:

| shape | comments | fits? | action |
|---|---|---|---|
| vertical | none / last element only | yes | collapse (keep the close bracket on its own line after a trailing comment) |
| vertical | none / last element only | no | keep when properly vertical, else normalize |
| vertical | non-last element / before close | uniform element widths | grouped reflow |
| vertical | non-last element / before close | mixed widths | normalize |
| horizontal | (none possible) | no | expand |
| horizontal | (none possible) | yes | collapse (canonical spacing only) |

"Fits" means the array's collapsed width, counted from the column of its open
bracket, is at most ``array_width`` and no element is wider than
``element_width_threshold``. A single-line array is also measured as written, so
tabs and extra spaces between its brackets count. A comma that follows the
close bracket on the same line (an element of an expanded parent) takes one
more column. Collapse and expand share this predicate so that formatting
canonically spaced input twice gives the same result.

Nesting depth, inline-table depth and the current column are tracked as plain
counters during the scan. Each array is rewritten only between its brackets and
before the scan walks into it, so the counters stay valid and nested arrays are
laid out afterwards with the column their parent's new layout gives them.

An open bracket without a matching close is skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.formatting.width import display_width, line_tail_width
from cargofmt.toml.tokens import CLOSERS, OPENERS, TokenKind, TomlToken, TomlTokens

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cargofmt.config.logging import CargofmtLogger

logger: CargofmtLogger = get_logger(__name__)


class CommentPosition(Enum):
    """Where comments sit inside one array."""

    NONE = "none"
    LAST_ELEMENT_ONLY = "last-element-only"
    NON_LAST_ELEMENT = "non-last-element"
    BEFORE_CLOSE = "before-close"

    @property
    def allows_collapse(self) -> bool:
        """Whether an array with this comment position may become a single line."""
        return self in (CommentPosition.NONE, CommentPosition.LAST_ELEMENT_ONLY)


# ----------------------------- structure -----------------------------


def find_close(tokens: TomlTokens, open_index: int) -> int | None:
    """Return the index of the bracket closing the array opened at ``open_index``.

    Args:
        tokens (TomlTokens): The token stream.
        open_index (int): Index of an ``ARRAY_OPEN`` token.

    Returns:
        int | None: Index of the matching ``ARRAY_CLOSE``, or None when the stream
            ends first.
    """
    depth: int = 0
    toks: list[TomlToken] = tokens.tokens
    for i in range(open_index, len(toks)):
        kind: TokenKind = toks[i].kind
        if kind is TokenKind.ARRAY_OPEN:
            depth += 1
        elif kind is TokenKind.ARRAY_CLOSE:
            depth -= 1
            if depth == 0:
                return i
    return None


def _element_end(toks: Sequence[TomlToken], start: int, limit: int) -> int:
    """Return the last index of the element starting at ``start``.

    Nested arrays and inline tables form one element up to their matching close.
    """
    if toks[start].kind not in OPENERS:
        return start
    depth: int = 0
    for i in range(start, limit):
        kind: TokenKind = toks[i].kind
        if kind in OPENERS:
            depth += 1
        elif kind in CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return limit - 1


def _is_element_start(kind: TokenKind) -> bool:
    return kind not in (
        TokenKind.WHITESPACE,
        TokenKind.NEWLINE,
        TokenKind.COMMENT,
        TokenKind.VALUE_SEP,
    )


def _has_newline(toks: Sequence[TomlToken], open_index: int, close_index: int) -> bool:
    return any(toks[i].kind is TokenKind.NEWLINE for i in range(open_index + 1, close_index))


# ------------------------- comment classifier -------------------------


def classify_comments(tokens: TomlTokens, open_index: int, close_index: int) -> CommentPosition:
    """Classify the comments between an array's brackets.

    A comment is *trailing* when a value precedes it on the same line and
    *standalone* otherwise. Any comment followed by a later value makes the
    array ``NON_LAST_ELEMENT``; so does a comment inside a nested array or
    inline table. Otherwise a standalone comment gives ``BEFORE_CLOSE`` and a
    trailing one gives ``LAST_ELEMENT_ONLY``.

    Args:
        tokens (TomlTokens): The token stream.
        open_index (int): Index of the array's open bracket.
        close_index (int): Index of its matching close bracket.

    Returns:
        CommentPosition: The classification gating collapse.
    """
    toks: list[TomlToken] = tokens.tokens
    depth: int = 0
    value_on_line: bool = False
    seen_comment: bool = False
    seen_standalone: bool = False
    seen_trailing: bool = False

    for i in range(open_index + 1, close_index):
        kind: TokenKind = toks[i].kind
        if depth > 0:
            if kind is TokenKind.COMMENT:
                return CommentPosition.NON_LAST_ELEMENT
            if kind in OPENERS:
                depth += 1
            elif kind in CLOSERS:
                depth -= 1
                if depth == 0:
                    value_on_line = True
            continue

        if kind is TokenKind.NEWLINE:
            value_on_line = False
        elif kind is TokenKind.COMMENT:
            seen_comment = True
            if value_on_line:
                seen_trailing = True
            else:
                seen_standalone = True
        elif kind in (TokenKind.WHITESPACE, TokenKind.VALUE_SEP):
            continue
        else:
            if seen_comment:
                return CommentPosition.NON_LAST_ELEMENT
            value_on_line = True
            if kind in OPENERS:
                depth += 1

    if seen_standalone:
        return CommentPosition.BEFORE_CLOSE
    if seen_trailing:
        return CommentPosition.LAST_ELEMENT_ONLY
    return CommentPosition.NONE


# ------------------------ element width collector ------------------------


def collect_widths(
    tokens: TomlTokens, open_index: int, close_index: int, tab_width: int
) -> list[int]:
    """Return the display width of each top-level element of an array.

    Nested arrays and inline tables count as one element whose width is the
    width of all their tokens. Whitespace, newlines and comments between
    elements do not count.
    """
    toks: list[TomlToken] = tokens.tokens
    widths: list[int] = []
    depth: int = 0
    current: int = 0
    in_element: bool = False

    for i in range(open_index + 1, close_index):
        tok: TomlToken = toks[i]
        kind: TokenKind = tok.kind
        if depth > 0:
            current += display_width(tok.raw, tab_width)
            if kind in OPENERS:
                depth += 1
            elif kind in CLOSERS:
                depth -= 1
            continue
        if kind is TokenKind.VALUE_SEP:
            if in_element:
                widths.append(current)
            current = 0
            in_element = False
            continue
        if tok.is_trivia:
            continue
        current += display_width(tok.raw, tab_width)
        in_element = True
        if kind in OPENERS:
            depth += 1

    if in_element:
        widths.append(current)
    return widths


def collapsed_width(widths: Sequence[int]) -> int:
    """Width of ``[a, b, c]`` for elements of the given widths."""
    if not widths:
        return 2
    return 2 + sum(widths) + 2 * (len(widths) - 1)


def fits(
    column: int,
    widths: Sequence[int],
    array_width: int,
    element_width_threshold: int,
    *,
    rendered_width: int | None = None,
    suffix: int = 0,
) -> bool:
    """Whether an array may sit on one line starting at ``column``.

    The array takes its collapsed width, or ``rendered_width`` when that is
    wider, plus ``suffix`` columns for a comma that follows its close bracket on
    the same line. Empty arrays always fit.
    """
    if not widths:
        return True
    width: int = collapsed_width(widths)
    if rendered_width is not None:
        width = max(width, rendered_width)
    return column + width + suffix <= array_width and all(
        w <= element_width_threshold for w in widths
    )


def written_width(
    tokens: TomlTokens, open_index: int, close_index: int, tab_width: int
) -> int:
    """Display width of a single-line array as written.

    Commas directly before a close bracket are not counted: collapsing drops
    them.
    """
    toks: list[TomlToken] = tokens.tokens
    width: int = 0
    for i in range(open_index, close_index + 1):
        tok: TomlToken = toks[i]
        if tok.kind is TokenKind.VALUE_SEP:
            nxt: int | None = _next_significant_index(toks, i + 1, close_index + 1)
            if nxt is not None and toks[nxt].kind is TokenKind.ARRAY_CLOSE:
                continue
        width += display_width(tok.raw, tab_width)
    return width


def _separator_after(toks: Sequence[TomlToken], close_index: int) -> int:
    """1 when a comma follows the close bracket on the same line, else 0."""
    i: int = _ws_run_end(toks, close_index + 1)
    return 1 if i < len(toks) and toks[i].kind is TokenKind.VALUE_SEP else 0


# ------------------------------ collapse ------------------------------


def _next_significant_index(toks: Sequence[TomlToken], start: int, limit: int) -> int | None:
    for i in range(start, limit):
        if not toks[i].is_trivia:
            return i
    return None


def _collapsed(span: Sequence[TomlToken]) -> list[TomlToken]:
    """Return the single-line form of ``span`` (an array from open to close bracket).

    Line breaks and their indentation disappear, whitespace before commas and
    inside array brackets is dropped, trailing commas of arrays are removed and
    each remaining array comma is followed by exactly one space. Inline tables
    keep their own spacing; a line break inside one becomes a space.
    """
    flat: list[TomlToken] = []
    stack: list[TokenKind] = []
    i: int = 0
    while i < len(span):
        tok: TomlToken = span[i]
        if tok.kind is TokenKind.NEWLINE:
            i += 1
            while i < len(span) and span[i].kind is TokenKind.WHITESPACE:
                i += 1
            if stack and stack[-1] is TokenKind.INLINE_TABLE_OPEN:
                if flat and flat[-1].kind is not TokenKind.WHITESPACE:
                    flat.append(TomlToken.space())
            continue
        if tok.kind in OPENERS:
            stack.append(tok.kind)
        elif tok.kind in CLOSERS and stack:
            stack.pop()
        flat.append(tok)
        i += 1

    out: list[TomlToken] = []
    stack.clear()
    for idx, tok in enumerate(flat):
        kind: TokenKind = tok.kind
        in_array: bool = bool(stack) and stack[-1] is TokenKind.ARRAY_OPEN
        if kind is TokenKind.WHITESPACE:
            prev: TomlToken | None = out[-1] if out else None
            nxt_idx: int = idx + 1
            while nxt_idx < len(flat) and flat[nxt_idx].kind is TokenKind.WHITESPACE:
                nxt_idx += 1
            nxt: TomlToken | None = flat[nxt_idx] if nxt_idx < len(flat) else None
            if prev is None or nxt is None:
                continue
            if nxt.kind in (TokenKind.VALUE_SEP, TokenKind.ARRAY_CLOSE):
                continue
            if prev.kind is TokenKind.ARRAY_OPEN:
                continue
            if prev.kind is TokenKind.VALUE_SEP and in_array:
                continue
            if prev.kind is TokenKind.WHITESPACE:
                continue
            out.append(tok)
            continue
        if kind is TokenKind.VALUE_SEP and in_array:
            following: int | None = _next_significant_index(flat, idx + 1, len(flat))
            if following is None or flat[following].kind is TokenKind.ARRAY_CLOSE:
                continue
        if in_array and out and out[-1].kind is TokenKind.VALUE_SEP:
            out.append(TomlToken.space())
        out.append(tok)
        if kind in OPENERS:
            stack.append(kind)
        elif kind in CLOSERS and stack:
            stack.pop()
    return out


def _collapse(
    toks: list[TomlToken],
    open_index: int,
    close_index: int,
    close_indent: str,
) -> int:
    """Collapse the array in place; return the new index of its close bracket.

    A trailing comment on the last element is kept: it follows the last element
    after one space, and the close bracket moves to the next line.
    """
    span: list[TomlToken] = toks[open_index : close_index + 1]
    comment: TomlToken | None = next(
        (t for t in span if t.kind is TokenKind.COMMENT),
        None,
    )
    if comment is not None:
        span = [t for t in span if t is not comment]
    new_span: list[TomlToken] = _collapsed(span)
    if comment is not None:
        tail: list[TomlToken] = [TomlToken.space(), comment, TomlToken.newline()]
        if close_indent:
            tail.append(TomlToken.whitespace(close_indent))
        new_span[-1:-1] = tail
    toks[open_index : close_index + 1] = new_span
    return open_index + len(new_span) - 1


# ------------------------------- expand -------------------------------


@dataclass(frozen=True)
class _Edit:
    """Replace ``toks[start:end]`` with ``replacement``."""

    start: int
    end: int
    replacement: list[TomlToken]


def _ws_run_end(toks: Sequence[TomlToken], start: int) -> int:
    i: int = start
    while i < len(toks) and toks[i].kind is TokenKind.WHITESPACE:
        i += 1
    return i


def _plan_expand(
    toks: Sequence[TomlToken],
    open_index: int,
    close_index: int,
    indent: str,
    close_indent: str,
) -> list[_Edit]:
    """Plan the edits turning a single-line array into one element per line.

    A line break goes after the open bracket and after every top-level comma
    except a trailing one or one followed by a comment. The last element gets a
    comma if it has none, and the close bracket moves to its own line.
    """

    def line_break(ws: str) -> list[TomlToken]:
        return [TomlToken.newline(), TomlToken.whitespace(ws)] if ws else [TomlToken.newline()]

    edits: list[_Edit] = [
        _Edit(open_index + 1, _ws_run_end(toks, open_index + 1), line_break(indent))
    ]

    depth: int = 0
    last_value: int = open_index
    trailing_comma: int | None = None
    for i in range(open_index + 1, close_index):
        kind: TokenKind = toks[i].kind
        if depth > 0:
            if kind in OPENERS:
                depth += 1
            elif kind in CLOSERS:
                depth -= 1
            last_value = i
            continue
        if kind is TokenKind.VALUE_SEP:
            if _next_significant_index(toks, i + 1, close_index) is None:
                trailing_comma = i
                continue
            ws_end: int = _ws_run_end(toks, i + 1)
            if toks[ws_end].kind is TokenKind.COMMENT:
                continue
            edits.append(_Edit(i + 1, ws_end, line_break(indent)))
        elif not toks[i].is_trivia:
            last_value = i
            if kind in OPENERS:
                depth += 1

    tail_start: int = (trailing_comma if trailing_comma is not None else last_value) + 1
    tail: list[TomlToken] = [] if trailing_comma is not None else [TomlToken.comma()]
    tail += line_break(close_indent)
    edits.append(_Edit(tail_start, close_index, tail))
    return edits


def _apply_edits(toks: list[TomlToken], edits: Sequence[_Edit]) -> int:
    """Apply planned edits in descending index order; return the net length change."""
    delta: int = 0
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        toks[edit.start : edit.end] = edit.replacement
        delta += len(edit.replacement) - (edit.end - edit.start)
    return delta


def _expand(
    toks: list[TomlToken],
    open_index: int,
    close_index: int,
    indent: str,
    close_indent: str,
) -> int:
    """Expand a single-line array in place; return the new close index."""
    edits: list[_Edit] = _plan_expand(toks, open_index, close_index, indent, close_indent)
    return close_index + _apply_edits(toks, edits)


# ----------------------- normalize / grouped reflow -----------------------


@dataclass
class _Item:
    """One line-level item of a vertical array: an element or a standalone comment."""

    tokens: list[TomlToken]
    width: int = 0
    comment: TomlToken | None = None

    @property
    def is_comment(self) -> bool:
        return len(self.tokens) == 1 and self.tokens[0].kind is TokenKind.COMMENT


def _split_items(
    toks: Sequence[TomlToken], open_index: int, close_index: int, tab_width: int
) -> list[_Item]:
    """Split an array body into elements (with any same-line comment) and standalone comments."""
    items: list[_Item] = []
    current: _Item | None = None
    newline_since_element: bool = True
    i: int = open_index + 1
    while i < close_index:
        tok: TomlToken = toks[i]
        kind: TokenKind = tok.kind
        if kind is TokenKind.NEWLINE:
            newline_since_element = True
        elif kind is TokenKind.COMMENT:
            if current is not None and not newline_since_element and current.comment is None:
                current.comment = tok
            else:
                items.append(_Item(tokens=[tok]))
                current = None
        elif _is_element_start(kind):
            end: int = _element_end(toks, i, close_index)
            element: list[TomlToken] = list(toks[i : end + 1])
            width: int = sum(display_width(t.raw, tab_width) for t in element)
            current = _Item(tokens=element, width=width)
            items.append(current)
            newline_since_element = False
            i = end
        i += 1
    return items


def _render_vertical(
    items: Sequence[_Item],
    indent: str,
    close_indent: str,
    tab_width: int,
    pack_width: int | None,
) -> list[TomlToken]:
    """Render array items between the brackets, one line per group.

    With ``pack_width`` None every element gets its own line. Otherwise elements
    share a line while it stays within ``pack_width`` columns. Standalone
    comments and elements with a trailing comment end the current line.
    """
    indent_width: int = display_width(indent, tab_width)
    out: list[TomlToken] = [TomlToken.newline()]
    line: list[TomlToken] = []
    line_width: int = indent_width

    def flush() -> None:
        nonlocal line_width
        if line:
            if indent:
                out.append(TomlToken.whitespace(indent))
            out.extend(line)
            out.append(TomlToken.newline())
            line.clear()
        line_width = indent_width

    for item in items:
        if item.is_comment:
            flush()
            line.append(item.tokens[0])
            flush()
            continue
        needed: int = item.width + 1
        if line and (pack_width is None or line_width + 1 + needed > pack_width):
            flush()
        if line:
            line.append(TomlToken.space())
            line_width += 1
        line.extend(item.tokens)
        line.append(TomlToken.comma())
        line_width += needed
        if item.comment is not None:
            line.extend((TomlToken.space(), item.comment))
            flush()
    flush()
    if close_indent:
        out.append(TomlToken.whitespace(close_indent))
    return out


def _rerender(
    toks: list[TomlToken],
    open_index: int,
    close_index: int,
    indent: str,
    close_indent: str,
    tab_width: int,
    pack_width: int | None,
) -> int:
    items: list[_Item] = _split_items(toks, open_index, close_index, tab_width)
    body: list[TomlToken] = _render_vertical(items, indent, close_indent, tab_width, pack_width)
    toks[open_index + 1 : close_index] = body
    return open_index + 1 + len(body)


def _line_rest(toks: Sequence[TomlToken], start: int, close_index: int) -> int | None:
    """Skip optional whitespace and comment up to a newline; return the index after it."""
    i: int = _ws_run_end(toks, start)
    if i < close_index and toks[i].kind is TokenKind.COMMENT:
        i = _ws_run_end(toks, i + 1)
    if i < close_index and toks[i].kind is TokenKind.NEWLINE:
        return i + 1
    return None


def is_properly_vertical(tokens: TomlTokens, open_index: int, close_index: int) -> bool:
    """Whether an array already has one element per line.

    Every element starts its own line and is followed directly by a comma
    (the last one included), only a comment may follow that comma on the same
    line, and the close bracket sits on its own line. Blank lines and
    standalone comment lines are allowed.
    """
    toks: list[TomlToken] = tokens.tokens
    i: int | None = _line_rest(toks, open_index + 1, close_index)
    while i is not None:
        i = _ws_run_end(toks, i)
        if i >= close_index:
            return i == close_index
        kind: TokenKind = toks[i].kind
        if kind is TokenKind.NEWLINE:
            i += 1
        elif kind is TokenKind.COMMENT:
            i = _line_rest(toks, i + 1, close_index)
        elif _is_element_start(kind):
            end: int = _element_end(toks, i, close_index)
            if end + 1 >= close_index or toks[end + 1].kind is not TokenKind.VALUE_SEP:
                return False
            i = _line_rest(toks, end + 2, close_index)
        else:
            return False
    return False


# ------------------------------- driver -------------------------------


def _layout_array(
    tokens: TomlTokens,
    open_index: int,
    close_index: int,
    depth: int,
    column: int,
    array_width: int,
    element_width_threshold: int,
    tab_width: int,
) -> None:
    """Choose and apply the layout of one array."""
    toks: list[TomlToken] = tokens.tokens
    indent: str = " " * ((depth + 1) * tab_width)
    close_indent: str = " " * (depth * tab_width)
    position: CommentPosition = classify_comments(tokens, open_index, close_index)

    if not _has_newline(toks, open_index, close_index):
        canonical: list[TomlToken] = _collapsed(toks[open_index : close_index + 1])
        widths: list[int] = collect_widths(
            TomlTokens(canonical), 0, len(canonical) - 1, tab_width
        )
        written: int = written_width(tokens, open_index, close_index, tab_width)
        horizontal_fits: bool = fits(
            column,
            widths,
            array_width,
            element_width_threshold,
            rendered_width=written,
            suffix=_separator_after(toks, close_index),
        )
        close_index = _collapse(toks, open_index, close_index, close_indent)
        if horizontal_fits:
            logger.trace("array@%d: horizontal, fits (widths=%s)", open_index, widths)
            return
        logger.trace("array@%d: horizontal, too wide -> expand (widths=%s)", open_index, widths)
        _expand(toks, open_index, close_index, indent, close_indent)
        return

    if position.allows_collapse:
        span: list[TomlToken] = [
            t for t in toks[open_index : close_index + 1] if t.kind is not TokenKind.COMMENT
        ]
        collapsed: list[TomlToken] = _collapsed(span)
        widths = collect_widths(TomlTokens(collapsed), 0, len(collapsed) - 1, tab_width)
        # The close bracket of a collapse with a trailing comment moves to the next line.
        suffix: int = (
            _separator_after(toks, close_index) if position is CommentPosition.NONE else 0
        )
        if fits(column, widths, array_width, element_width_threshold, suffix=suffix):
            logger.trace("array@%d: vertical, %s, fits -> collapse", open_index, position.value)
            _collapse(toks, open_index, close_index, close_indent)
        elif is_properly_vertical(tokens, open_index, close_index):
            logger.trace("array@%d: vertical, already one element per line", open_index)
        else:
            logger.trace("array@%d: vertical, mixed -> normalize", open_index)
            _rerender(toks, open_index, close_index, indent, close_indent, tab_width, None)
        return

    widths = collect_widths(tokens, open_index, close_index, tab_width)
    if len(set(widths)) <= 1:
        logger.trace(
            "array@%d: %s, uniform widths -> grouped reflow", open_index, position.value
        )
        _rerender(toks, open_index, close_index, indent, close_indent, tab_width, array_width)
    else:
        logger.trace("array@%d: %s, mixed widths -> normalize", open_index, position.value)
        _rerender(toks, open_index, close_index, indent, close_indent, tab_width, None)


def _advance_column(column: int, tok: TomlToken, tab_width: int) -> int:
    if tok.kind is TokenKind.NEWLINE:
        return 0
    tail: int | None = line_tail_width(tok.raw, tab_width)
    if tail is not None:
        return tail
    return column + display_width(tok.raw, tab_width)


def reflow_arrays(
    tokens: TomlTokens,
    array_width: int,
    element_width_threshold: int,
    tab_width: int,
) -> None:
    """Lay out every array of the document that is not inside an inline table.

    Args:
        tokens (TomlTokens): The token stream, edited in place.
        array_width (int): Maximum line width of a single-line array, counted from
            the start of its line. 0 makes every non-empty array vertical.
        element_width_threshold (int): Single-line arrays with a wider element
            are expanded.
        tab_width (int): Indentation unit and tab display width.
    """
    logger.trace(
        "reflow_arrays(array_width=%d, threshold=%d, tab_width=%d)",
        array_width,
        element_width_threshold,
        tab_width,
    )
    toks: list[TomlToken] = tokens.tokens
    depth: int = 0
    inline_depth: int = 0
    column: int = 0
    i: int = 0
    while i < len(toks):
        tok: TomlToken = toks[i]
        kind: TokenKind = tok.kind
        if kind is TokenKind.INLINE_TABLE_OPEN:
            inline_depth += 1
        elif kind is TokenKind.INLINE_TABLE_CLOSE:
            inline_depth = max(inline_depth - 1, 0)
        elif kind is TokenKind.ARRAY_OPEN and inline_depth == 0:
            close: int | None = find_close(tokens, i)
            if close is None:
                logger.debug("Unmatched array bracket at token %d; skipping", i)
            else:
                _layout_array(
                    tokens,
                    i,
                    close,
                    depth,
                    column,
                    array_width,
                    element_width_threshold,
                    tab_width,
                )
            depth += 1
        elif kind is TokenKind.ARRAY_CLOSE and inline_depth == 0:
            depth = max(depth - 1, 0)
        column = _advance_column(column, toks[i], tab_width)
        i += 1
