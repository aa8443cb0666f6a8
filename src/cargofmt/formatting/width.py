# topmark:header:start
#
#   project      : CargoFmt
#   file         : width.py
#   file_relpath : src/cargofmt/formatting/width.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display width of token text.

Each character contributes its East-Asian-width-aware column count as
reported by ``wcwidth``: 2 for wide CJK and emoji, 0 for combining marks,
1 otherwise. A tab contributes exactly ``tab_width``. Line breaks and other
control characters (for which ``wcwidth`` returns -1) contribute 0.
"""

from __future__ import annotations

from wcwidth import wcwidth


def display_width(raw: str, tab_width: int) -> int:
    """Return the rendered column width of ``raw``.

    Args:
        raw (str): Token text.
        tab_width (int): Columns taken by a tab character.

    Returns:
        int: The non-negative display width.
    """
    if raw.isascii():
        width: int = 0
        for ch in raw:
            if ch == "\t":
                width += tab_width
            elif " " <= ch < "\x7f":
                width += 1
        return width

    total: int = 0
    for ch in raw:
        if ch == "\t":
            total += tab_width
            continue
        w: int = wcwidth(ch)
        if w > 0:
            total += w
    return total


def line_tail_width(raw: str, tab_width: int) -> int | None:
    """Width of the text after the last line break in ``raw``, or None if it has none."""
    cut: int = max(raw.rfind("\n"), raw.rfind("\r"))
    if cut < 0:
        return None
    return display_width(raw[cut + 1 :], tab_width)
