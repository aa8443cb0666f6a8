# topmark:header:start
#
#   project      : CargoFmt
#   file         : patcher.py
#   file_relpath : src/cargofmt/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patcher step: unified diff for manifests that would change.

This step performs no I/O; the CLI decides how to display ``ctx.diff``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.pipeline.status import ComparisonStatus, PatchStatus
from cargofmt.pipeline.steps.base import BaseStep
from cargofmt.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


class PatcherStep(BaseStep):
    """Attach a unified diff to ``ctx.diff``.

    Axes written:
      - patch
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="patch")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run after the comparer."""
        return ctx.status.comparison is not ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Diff ``ctx.text`` against ``ctx.formatted``."""
        if ctx.status.comparison is ComparisonStatus.UNCHANGED or ctx.formatted is None:
            ctx.status.patch = PatchStatus.SKIPPED
            return
        ctx.diff = unified_diff(ctx.text or "", ctx.formatted, str(ctx.path))
        ctx.status.patch = PatchStatus.GENERATED
        logger.trace("Patch for %s:\n%s", ctx.path, render_patch(ctx.diff))
