# topmark:header:start
#
#   project      : CargoFmt
#   file         : parser.py
#   file_relpath : src/cargofmt/pipeline/steps/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser step: validate the manifest and build its token stream.

The manifest is first parsed with ``tomlkit``; invalid TOML is never formatted.
The resulting plain value tree is kept on the context so the verifier can check
that formatting did not change the document.

Generated manifests (``@generated`` near the top) are left alone unless
``format_generated_files`` is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError

from cargofmt.config.logging import get_logger
from cargofmt.errors import ManifestError
from cargofmt.formatting.generated import is_generated_file
from cargofmt.formatting.newline_style import normalize_newlines
from cargofmt.pipeline.status import ContentStatus, FormatStatus
from cargofmt.pipeline.steps.base import BaseStep
from cargofmt.toml.tokens import TomlTokens

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


def parse_document(text: str) -> dict[str, Any]:
    """Parse TOML ``text`` into plain Python values.

    Raises:
        tomlkit.exceptions.ParseError: ``text`` is not valid TOML.
    """
    return tomlkit.parse(normalize_newlines(text)).unwrap()


class ParserStep(BaseStep):
    """Validate, detect generated files and tokenize.

    Axes written:
      - content (OK, INVALID_TOML)
      - format (SKIPPED_GENERATED, SKIPPED_DISABLED)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="content")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run when the reader produced text."""
        return not ctx.is_halted and ctx.text is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Parse ``ctx.text``.

        Raises:
            ManifestError: The manifest is not valid TOML.
        """
        text: str = ctx.text or ""
        try:
            ctx.document = parse_document(text)
        except ParseError as e:
            ctx.status.content = ContentStatus.INVALID_TOML
            ctx.add_error(f"invalid TOML: {e}")
            ctx.stop_flow("invalid-toml", self)
            raise ManifestError(f"{ctx.path}: {e}") from e
        ctx.status.content = ContentStatus.OK

        if ctx.config.disable_all_formatting:
            ctx.status.format = FormatStatus.SKIPPED_DISABLED
            ctx.add_info("formatting disabled by configuration")
            ctx.stop_flow("disabled", self)
            return

        limit: int = ctx.config.generated_marker_line_search_limit
        if not ctx.config.format_generated_files and is_generated_file(text, limit):
            ctx.status.format = FormatStatus.SKIPPED_GENERATED
            ctx.add_info("generated file; skipped")
            ctx.stop_flow("generated", self)
            return

        ctx.tokens = TomlTokens.parse(normalize_newlines(text))
        logger.trace("Tokenized %s into %d tokens", ctx.path, len(ctx.tokens))
