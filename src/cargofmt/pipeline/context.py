# topmark:header:start
#
#   project      : CargoFmt
#   file         : context.py
#   file_relpath : src/cargofmt/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing context for the formatting pipeline.

A `ProcessingContext` carries everything known about one manifest as it moves
through the steps: the raw text, the token stream, the formatted text, the
diff, per-axis statuses and collected diagnostics. Steps mutate it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cargofmt.config.logging import get_logger
from cargofmt.core.diagnostics import Diagnostic, DiagnosticLevel
from cargofmt.pipeline.status import (
    ComparisonStatus,
    ContentStatus,
    FormatStatus,
    PatchStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.config.model import Config
    from cargofmt.formatting.line_overflow import LineOverflow
    from cargofmt.pipeline.steps.base import BaseStep
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "generated", "invalid-toml"
    at_step: str = ""


@dataclass
class ProcessingStatus:
    """Current status of each pipeline axis for one file."""

    content: ContentStatus = ContentStatus.PENDING
    format: FormatStatus = FormatStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    patch: PatchStatus = PatchStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

    def to_dict(self) -> dict[str, str]:
        """Return the axis labels keyed by axis name."""
        return {
            "content": self.content.value,
            "format": self.format.value,
            "comparison": self.comparison.value,
            "patch": self.patch.value,
            "write": self.write.value,
        }


@dataclass
class ProcessingContext:
    r"""Mutable state for one manifest.

    Attributes:
        path (Path): The manifest being processed.
        config (Config): Formatter configuration for this manifest.
        steps (list[BaseStep]): Steps executed so far, in order.
        status (ProcessingStatus): Per-axis status.
        flow (FlowControl): Set when a step halts the rest of the pipeline.
        text (str | None): File content as read, line endings untouched.
        document (dict[str, Any] | None): Plain value tree of ``text``, used to
            verify that formatting kept the document's meaning.
        tokens (TomlTokens | None): Token stream of ``text`` (``\n`` line endings).
        formatted (str | None): Formatted content.
        diff (str | None): Unified diff from ``text`` to ``formatted``.
        overflows (list[LineOverflow]): Lines of ``formatted`` wider than
            ``max_width``, when ``error_on_line_overflow`` is set.
        diagnostics (list[Diagnostic]): Messages collected while processing.
    """

    path: Path
    config: Config
    steps: list[BaseStep] = field(default_factory=lambda: [])
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)

    text: str | None = None
    document: dict[str, Any] | None = None
    tokens: TomlTokens | None = None
    formatted: str | None = None
    diff: str | None = None
    overflows: list[LineOverflow] = field(default_factory=lambda: [])

    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config) -> ProcessingContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config)

    @property
    def is_halted(self) -> bool:
        """Whether a step requested to stop the pipeline for this file."""
        return self.flow.halt

    @property
    def would_change(self) -> bool:
        """Whether the formatted manifest differs from the file on disk."""
        return self.status.comparison is ComparisonStatus.CHANGED

    def stop_flow(self, reason: str, at_step: BaseStep) -> None:
        """Request a graceful stop for the rest of the pipeline.

        Args:
            reason (str): Short machine-friendly reason code.
            at_step (BaseStep): Step requesting the halt.
        """
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.ERROR, message))

    def to_dict(self) -> dict[str, object]:
        """Return a summary suitable for debug logging."""
        return {
            "path": str(self.path),
            "status": self.status.to_dict(),
            "flow": {"halt": self.flow.halt, "reason": self.flow.reason},
            "steps": [s.name for s in self.steps],
            "diagnostics": [f"{d.level.value}: {d.message}" for d in self.diagnostics],
        }

    def summary(self) -> str:
        """Return a one-line, colored status summary for this file."""
        if self.status.format in (FormatStatus.SKIPPED_DISABLED, FormatStatus.SKIPPED_GENERATED):
            label: str = self.status.format.colored()
        elif self.status.content is not ContentStatus.OK:
            label = self.status.content.colored()
        elif self.status.format is FormatStatus.VERIFY_FAILED:
            label = self.status.format.colored()
        elif self.status.write is WriteStatus.WRITTEN:
            label = self.status.write.colored()
        else:
            label = self.status.comparison.colored()
        return f"{self.path}: {label}"
