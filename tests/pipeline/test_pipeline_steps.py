# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_pipeline_steps.py
#   file_relpath : tests/pipeline/test_pipeline_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-manifest pipeline behavior, step by step.

Each test runs one of the named pipelines over a single manifest through
`cargofmt.pipeline.runner.run` and inspects the per-axis statuses left on the
`ProcessingContext`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cargofmt.pipeline import runner
from cargofmt.pipeline.context import ProcessingContext
from cargofmt.pipeline.pipelines import Pipeline
from cargofmt.pipeline.status import (
    ComparisonStatus,
    ContentStatus,
    FormatStatus,
    PatchStatus,
    WriteStatus,
)
from tests.conftest import make_config, mark_pipeline, write_manifest

if TYPE_CHECKING:
    from pathlib import Path


def _run(path: Path, pipeline: Pipeline, **overrides: Any) -> ProcessingContext:
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=path, config=make_config(**overrides)
    )
    return runner.run(ctx, pipeline.steps)


@mark_pipeline
def test_check_reports_unformatted_manifest(tmp_path: Path) -> None:
    """An unformatted manifest compares as changed and gets a diff."""
    path: Path = write_manifest(tmp_path, "a=1\n")
    ctx: ProcessingContext = _run(path, Pipeline.CHECK)
    assert ctx.status.content is ContentStatus.OK
    assert ctx.status.format is FormatStatus.FORMATTED
    assert ctx.status.comparison is ComparisonStatus.CHANGED
    assert ctx.status.patch is PatchStatus.GENERATED
    assert ctx.would_change
    assert ctx.diff is not None
    assert "-a=1" in ctx.diff
    assert "+a = 1" in ctx.diff
    # --check never writes
    assert path.read_text(encoding="utf-8") == "a=1\n"


@mark_pipeline
def test_check_on_formatted_manifest(tmp_path: Path) -> None:
    """A formatted manifest is up-to-date and produces no diff."""
    path: Path = write_manifest(tmp_path, "a = 1\n")
    ctx: ProcessingContext = _run(path, Pipeline.CHECK)
    assert ctx.status.comparison is ComparisonStatus.UNCHANGED
    assert ctx.status.patch is PatchStatus.SKIPPED
    assert ctx.diff is None
    assert [step.name for step in ctx.steps] == [
        "ReaderStep",
        "ParserStep",
        "FormatterStep",
        "VerifierStep",
        "ComparerStep",
        "PatcherStep",
    ]


@mark_pipeline
def test_generated_manifest_is_skipped(tmp_path: Path) -> None:
    """A manifest marked ``@generated`` is left alone by default."""
    path: Path = write_manifest(tmp_path, "# @generated by a tool\na=1\n")
    ctx: ProcessingContext = _run(path, Pipeline.APPLY)
    assert ctx.status.format is FormatStatus.SKIPPED_GENERATED
    assert ctx.status.comparison is ComparisonStatus.UNCHANGED
    assert ctx.status.write is WriteStatus.SKIPPED
    assert ctx.flow.reason == "generated"
    assert path.read_text(encoding="utf-8") == "# @generated by a tool\na=1\n"


@mark_pipeline
def test_generated_manifest_formatted_on_request(tmp_path: Path) -> None:
    """``format_generated_files`` lifts the skip."""
    path: Path = write_manifest(tmp_path, "# @generated\na=1\n")
    ctx: ProcessingContext = _run(path, Pipeline.CHECK, format_generated_files=True)
    assert ctx.status.format is FormatStatus.FORMATTED
    assert ctx.formatted == "# @generated\na = 1\n"


@mark_pipeline
def test_disabled_formatting_is_skipped(tmp_path: Path) -> None:
    """``disable_all_formatting`` still validates, then stops."""
    path: Path = write_manifest(tmp_path, "a=1\n")
    ctx: ProcessingContext = _run(path, Pipeline.CHECK, disable_all_formatting=True)
    assert ctx.status.content is ContentStatus.OK
    assert ctx.status.format is FormatStatus.SKIPPED_DISABLED
    assert ctx.status.comparison is ComparisonStatus.UNCHANGED
    assert ctx.tokens is None


@mark_pipeline
def test_apply_writes_and_keeps_crlf(tmp_path: Path) -> None:
    """The writer replaces the file; ``Auto`` keeps Windows line endings."""
    path: Path = tmp_path / "Cargo.toml"
    path.write_bytes(b"a = 1\r\nb=[1,2]\r\n")
    ctx: ProcessingContext = _run(path, Pipeline.APPLY)
    assert ctx.status.write is WriteStatus.WRITTEN
    assert path.read_bytes() == b"a = 1\r\nb = [1, 2]\r\n"
    assert ctx.summary().startswith(f"{path}: ")


@mark_pipeline
def test_apply_leaves_formatted_manifest_alone(tmp_path: Path) -> None:
    """Nothing is written when nothing changed."""
    path: Path = write_manifest(tmp_path, "a = 1\n")
    before: int = path.stat().st_mtime_ns
    ctx: ProcessingContext = _run(path, Pipeline.APPLY)
    assert ctx.status.write is WriteStatus.SKIPPED
    assert path.stat().st_mtime_ns == before


@mark_pipeline
def test_line_overflow_warnings(tmp_path: Path) -> None:
    """Lines wider than ``max_width`` are reported when asked to."""
    path: Path = write_manifest(tmp_path, 'a = "' + "x" * 30 + '"\n')
    ctx: ProcessingContext = _run(
        path, Pipeline.CHECK, error_on_line_overflow=True, max_width=20
    )
    assert [(o.line, o.width) for o in ctx.overflows] == [(1, 36)]
    assert any("exceeds max_width" in d.message for d in ctx.diagnostics)

    quiet: ProcessingContext = _run(path, Pipeline.CHECK, max_width=20)
    assert quiet.overflows == []
