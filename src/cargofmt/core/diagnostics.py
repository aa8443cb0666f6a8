# topmark:header:start
#
#   project      : CargoFmt
#   file         : diagnostics.py
#   file_relpath : src/cargofmt/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while loading config or formatting.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self) -> str:
        """Return ``"<level>: <message>"`` colored for the terminal."""
        return self.level.color(f"{self.level.value}: {self.message}")


@dataclass
class DiagnosticLog:
    """Append-only collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Record a diagnostic."""
        self.items.append(Diagnostic(level, message))

    def add_warning(self, message: str) -> None:
        """Record a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
