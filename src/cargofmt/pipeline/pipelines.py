# topmark:header:start
#
#   project      : CargoFmt
#   file         : pipelines.py
#   file_relpath : src/cargofmt/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

- ``FORMAT``: read -> parse -> format -> verify -> compare
- ``CHECK``: FORMAT + patch (``--check``: report, never write)
- ``APPLY``: FORMAT + write

```mermaid
flowchart TD
  R[reader] --> P[parser] --> F[formatter] --> V[verifier] --> C[comparer]
  C -->|check| H[patcher]
  C -->|apply| W[writer]
```
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from cargofmt.pipeline.steps import comparer, formatter, parser, patcher, reader, verifier, writer
from cargofmt.pipeline.steps.base import BaseStep

FORMAT_PIPELINE: Final[tuple[BaseStep, ...]] = (
    reader.ReaderStep(),
    parser.ParserStep(),
    formatter.FormatterStep(),
    verifier.VerifierStep(),
    comparer.ComparerStep(),
)

CHECK_PIPELINE: Final[tuple[BaseStep, ...]] = FORMAT_PIPELINE + (patcher.PatcherStep(),)

APPLY_PIPELINE: Final[tuple[BaseStep, ...]] = FORMAT_PIPELINE + (writer.WriterStep(),)


class Pipeline(Enum):
    """Registry of the pipelines the CLI can run."""

    FORMAT = "format"
    CHECK = "check"
    APPLY = "apply"

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        """The steps of this pipeline, in order."""
        return _STEPS[self]


_STEPS: Final[dict[Pipeline, tuple[BaseStep, ...]]] = {
    Pipeline.FORMAT: FORMAT_PIPELINE,
    Pipeline.CHECK: CHECK_PIPELINE,
    Pipeline.APPLY: APPLY_PIPELINE,
}
