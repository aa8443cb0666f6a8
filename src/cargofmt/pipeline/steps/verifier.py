# topmark:header:start
#
#   project      : CargoFmt
#   file         : verifier.py
#   file_relpath : src/cargofmt/pipeline/steps/verifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verifier step: the formatted manifest must mean the same as the input.

The formatted text is parsed again with ``tomlkit`` and its value tree compared
with the one the parser recorded. A mismatch is a formatter bug; the manifest
is then neither written nor reported as formatted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tomlkit.exceptions import ParseError

from cargofmt.config.logging import get_logger
from cargofmt.errors import VerificationError
from cargofmt.pipeline.status import FormatStatus
from cargofmt.pipeline.steps.base import BaseStep
from cargofmt.pipeline.steps.parser import parse_document

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


class VerifierStep(BaseStep):
    """Re-parse ``ctx.formatted`` and compare it with ``ctx.document``.

    Axes written:
      - format (VERIFY_FAILED)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="format")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run after the formatter."""
        return (
            not ctx.is_halted
            and ctx.status.format is FormatStatus.FORMATTED
            and ctx.formatted is not None
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Compare value trees.

        Raises:
            VerificationError: The output does not parse, or parses to a
                different document.
        """
        assert ctx.formatted is not None
        reason: str | None = None
        try:
            after: dict[str, Any] = parse_document(ctx.formatted)
        except ParseError as e:
            reason = f"output is not valid TOML: {e}"
        else:
            if after != ctx.document:
                reason = "values differ"
        if reason is None:
            logger.trace("Verified %s", ctx.path)
            return
        ctx.status.format = FormatStatus.VERIFY_FAILED
        ctx.add_error(reason)
        ctx.stop_flow("verify-failed", self)
        raise VerificationError(ctx.path, reason)
