# topmark:header:start
#
#   project      : CargoFmt
#   file         : writer.py
#   file_relpath : src/cargofmt/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step: replace changed manifests on disk.

Only manifests whose comparison is ``CHANGED`` are written, through an atomic
rename. Write errors propagate to the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.pipeline.status import ComparisonStatus, WriteStatus
from cargofmt.pipeline.steps.base import BaseStep
from cargofmt.utils.file import atomic_write_text

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``ctx.formatted`` back to ``ctx.path``.

    Axes written:
      - write
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="write")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run after the comparer."""
        return ctx.status.comparison is not ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Write when the manifest changed.

        Raises:
            OSError: The manifest could not be replaced.
        """
        if not ctx.would_change or ctx.formatted is None:
            ctx.status.write = WriteStatus.SKIPPED
            return
        try:
            atomic_write_text(ctx.path, ctx.formatted)
        except OSError:
            ctx.status.write = WriteStatus.FAILED
            raise
        ctx.status.write = WriteStatus.WRITTEN
        ctx.add_info("formatted")
