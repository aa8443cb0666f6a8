# topmark:header:start
#
#   project      : CargoFmt
#   file         : status.py
#   file_relpath : src/cargofmt/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the formatting pipeline.

Each step writes only the axis it owns:

| axis | step |
|---|---|
| content | reader, parser |
| format | formatter, verifier |
| comparison | comparer |
| patch | patcher |
| write | writer |
"""

from __future__ import annotations

from yachalk import chalk

from cargofmt.rendering.colored_enum import ColoredStrEnum


class ContentStatus(ColoredStrEnum):
    """Result of reading and parsing the manifest."""

    PENDING = ("content pending", chalk.gray)
    OK = ("ok", chalk.green)
    UNREADABLE = ("unreadable", chalk.red_bright)
    INVALID_TOML = ("invalid TOML", chalk.red)


class FormatStatus(ColoredStrEnum):
    """Result of running the formatting passes."""

    PENDING = ("format pending", chalk.gray)
    FORMATTED = ("formatted", chalk.green)
    SKIPPED_DISABLED = ("formatting disabled", chalk.yellow)
    SKIPPED_GENERATED = ("generated file", chalk.yellow)
    VERIFY_FAILED = ("output changed document", chalk.red_bright)


class ComparisonStatus(ColoredStrEnum):
    """Whether formatting changed the manifest."""

    PENDING = ("comparison pending", chalk.gray)
    CHANGED = ("would reformat", chalk.yellow)
    UNCHANGED = ("up-to-date", chalk.green)


class PatchStatus(ColoredStrEnum):
    """Result of generating a unified diff."""

    PENDING = ("patch pending", chalk.gray)
    GENERATED = ("patch generated", chalk.yellow)
    SKIPPED = ("no patch", chalk.green)


class WriteStatus(ColoredStrEnum):
    """Result of writing the formatted manifest."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("written", chalk.green)
    SKIPPED = ("not written", chalk.gray)
    FAILED = ("write failed", chalk.red_bright)
