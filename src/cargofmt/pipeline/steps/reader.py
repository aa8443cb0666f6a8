# topmark:header:start
#
#   project      : CargoFmt
#   file         : reader.py
#   file_relpath : src/cargofmt/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load a manifest as UTF-8 text.

The text is read with ``newline=""`` so ``\\r\\n`` line endings survive; the
formatter needs them to honor ``newline_style = "Auto"``. Filesystem and
decoding errors propagate to the engine, which maps them to exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.pipeline.status import ContentStatus
from cargofmt.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Read the manifest into ``ctx.text``.

    Axes written:
      - content (UNREADABLE on failure)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="content")

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path``.

        Raises:
            OSError: The file cannot be opened or read.
            UnicodeDecodeError: The file is not valid UTF-8.
        """
        try:
            with open(ctx.path, encoding="utf-8", newline="") as f:
                ctx.text = f.read()
        except (OSError, UnicodeDecodeError):
            ctx.status.content = ContentStatus.UNREADABLE
            ctx.stop_flow("unreadable", self)
            raise
        logger.debug("Read %d characters from %s", len(ctx.text), ctx.path)
