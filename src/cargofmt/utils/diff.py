# topmark:header:start
#
#   project      : CargoFmt
#   file         : diff.py
#   file_relpath : src/cargofmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between a manifest and its formatted version."""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk


def unified_diff(before: str, after: str, path: str) -> str:
    """Return a unified diff from ``before`` to ``after``; empty when equal."""
    return "".join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (formatted)",
            n=3,
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or one multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The colorized diff. Carriage returns are shown as ``\\r``.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if line.startswith(("+++", "---")):
            return chalk.bold(content)
        match line[:1]:
            case "-":
                return chalk.red(content)
            case "+":
                return chalk.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
