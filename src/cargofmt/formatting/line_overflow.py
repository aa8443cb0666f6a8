# topmark:header:start
#
#   project      : CargoFmt
#   file         : line_overflow.py
#   file_relpath : src/cargofmt/formatting/line_overflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report lines that stay wider than ``max_width`` after formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cargofmt.formatting.width import display_width

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class LineOverflow:
    """One line wider than the configured maximum.

    Attributes:
        line (int): 1-based line number.
        width (int): Display width of the line.
        max_width (int): The configured maximum.
    """

    line: int
    width: int
    max_width: int

    def render(self, path: Path | str) -> str:
        """Return the warning text for ``path``."""
        return (
            f"warning: {path}:{self.line} line exceeds max_width "
            f"({self.width} > {self.max_width})"
        )


def check_line_overflow(text: str, max_width: int, tab_spaces: int) -> list[LineOverflow]:
    """Return every line of ``text`` wider than ``max_width``."""
    return [
        LineOverflow(n, width, max_width)
        for n, line in enumerate(text.splitlines(), start=1)
        if (width := display_width(line, tab_spaces)) > max_width
    ]
