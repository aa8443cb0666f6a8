# topmark:header:start
#
#   project      : CargoFmt
#   file         : runner.py
#   file_relpath : src/cargofmt/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a pipeline for a single manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext
    from cargofmt.pipeline.steps.base import BaseStep

logger: CargofmtLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the steps sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered pipeline steps.

    Returns:
        ProcessingContext: The final processing context.
    """
    for step in steps:
        ctx = step(ctx)
    logger.debug("Processed %s: %s", ctx.path, ctx.to_dict())
    return ctx
