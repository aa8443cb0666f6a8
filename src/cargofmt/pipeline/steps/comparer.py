# topmark:header:start
#
#   project      : CargoFmt
#   file         : comparer.py
#   file_relpath : src/cargofmt/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comparer step: did formatting change the manifest?

Manifests that were skipped (generated files, formatting disabled) compare as
``UNCHANGED``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.pipeline.status import ComparisonStatus, FormatStatus
from cargofmt.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)

_SKIPPED = (FormatStatus.SKIPPED_DISABLED, FormatStatus.SKIPPED_GENERATED)


class ComparerStep(BaseStep):
    """Set ``status.comparison`` from ``ctx.text`` and ``ctx.formatted``.

    Axes written:
      - comparison
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="comparison")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run after formatting, or after a deliberate skip."""
        return ctx.status.format is FormatStatus.FORMATTED or ctx.status.format in _SKIPPED

    def run(self, ctx: ProcessingContext) -> None:
        """Compare the original and formatted text."""
        if ctx.formatted is None or ctx.formatted == ctx.text:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
        else:
            ctx.status.comparison = ComparisonStatus.CHANGED
        logger.debug("Comparer: %s -> %s", ctx.path, ctx.status.comparison.value)
