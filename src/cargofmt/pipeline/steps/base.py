# topmark:header:start
#
#   project      : CargoFmt
#   file         : base.py
#   file_relpath : src/cargofmt/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for pipeline steps.

The runner invokes steps as callables. `BaseStep` implements the lifecycle:

    ctx = step(ctx)  # internally: may_proceed -> run? -> hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclasses override ``may_proceed()``, ``run()`` and optionally ``hint()``.

    Attributes:
        name (str): Stable step identifier for logs.
        axis (str): Status axis this step writes.
    """

    name: str
    axis: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the lifecycle: gate, run when allowed, then hint."""
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.debug("%s: running for %s", self.name, ctx.path)
            self.run(ctx)
            if ctx.flow.halt:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("%s: may not proceed for %s", self.name, ctx.path)
        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run. Default: unless the flow is halted."""
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach follow-up diagnostics to ``ctx`` (optional)."""
        pass
