# topmark:header:start
#
#   project      : CargoFmt
#   file         : newline_style.py
#   file_relpath : src/cargofmt/formatting/newline_style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line ending normalization.

Passes work on ``\\n`` only: the input is normalized before tokenizing and the
configured style is applied to the serialized output.
"""

from __future__ import annotations

import os

from cargofmt.config.types import NewlineStyle

WINDOWS_NEWLINE = "\r\n"
UNIX_NEWLINE = "\n"


def normalize_newlines(text: str) -> str:
    """Replace every ``\\r\\n`` with ``\\n``."""
    return text.replace(WINDOWS_NEWLINE, UNIX_NEWLINE)


def detect_newline(raw_input: str) -> str | None:
    """Return the line ending of the first line of ``raw_input``, or None without any."""
    index: int = raw_input.find("\n")
    if index < 0:
        return None
    return WINDOWS_NEWLINE if index > 0 and raw_input[index - 1] == "\r" else UNIX_NEWLINE


def _native_newline() -> str:
    return WINDOWS_NEWLINE if os.linesep == WINDOWS_NEWLINE else UNIX_NEWLINE


def resolve_newline(style: NewlineStyle, raw_input: str) -> str:
    """Return the line ending ``style`` selects for a file whose source was ``raw_input``."""
    match style:
        case NewlineStyle.WINDOWS:
            return WINDOWS_NEWLINE
        case NewlineStyle.UNIX:
            return UNIX_NEWLINE
        case NewlineStyle.NATIVE:
            return _native_newline()
        case _:
            return detect_newline(raw_input) or _native_newline()


def apply_newline_style(style: NewlineStyle, text: str, raw_input: str) -> str:
    """Convert the ``\\n`` line endings of ``text`` to the configured style.

    Args:
        style (NewlineStyle): Configured style; ``AUTO`` follows the first line
            ending of ``raw_input``.
        text (str): Formatted text using ``\\n``.
        raw_input (str): The original file content.

    Returns:
        str: ``text`` with converted line endings.
    """
    newline: str = resolve_newline(style, raw_input)
    if newline == UNIX_NEWLINE:
        return text
    return text.replace(UNIX_NEWLINE, newline)
