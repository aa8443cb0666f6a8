# topmark:header:start
#
#   project      : CargoFmt
#   file         : formatter.py
#   file_relpath : src/cargofmt/pipeline/steps/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter step: run the formatting passes over the token stream."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.formatting.line_overflow import check_line_overflow
from cargofmt.formatting.newline_style import apply_newline_style
from cargofmt.formatting.passes import format_tokens
from cargofmt.pipeline.status import FormatStatus
from cargofmt.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


class FormatterStep(BaseStep):
    """Produce ``ctx.formatted`` from ``ctx.tokens``.

    Axes written:
      - format (FORMATTED)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="format")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run when the parser produced a token stream."""
        return not ctx.is_halted and ctx.tokens is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Format the tokens and apply the configured line endings."""
        assert ctx.tokens is not None
        format_tokens(ctx.tokens, ctx.config)
        ctx.formatted = apply_newline_style(
            ctx.config.newline_style, ctx.tokens.to_string(), ctx.text or ""
        )
        ctx.status.format = FormatStatus.FORMATTED

    def hint(self, ctx: ProcessingContext) -> None:
        """Record lines still wider than ``max_width`` when asked to."""
        if ctx.formatted is None or not ctx.config.error_on_line_overflow:
            return
        ctx.overflows = check_line_overflow(
            ctx.formatted, ctx.config.max_width, ctx.config.tab_spaces
        )
        for overflow in ctx.overflows:
            ctx.add_warning(
                f"line {overflow.line} exceeds max_width "
                f"({overflow.width} > {overflow.max_width})"
            )
