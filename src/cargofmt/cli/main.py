# topmark:header:start
#
#   project      : CargoFmt
#   file         : main.py
#   file_relpath : src/cargofmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``cargofmt`` command.

Formats the ``Cargo.toml`` manifests of a package or workspace in place, or
with ``--check`` prints a diff for every manifest that is not formatted.

Examples:

    $ cargofmt                      # the current package or workspace
    $ cargofmt --check              # report only; exit 2 when something would change
    $ cargofmt -p foo -p bar        # selected workspace members
    $ cargofmt --all                # workspace plus local path dependencies
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cargofmt.cli.console import ClickConsole
from cargofmt.cli.errors import (
    CargofmtConfigError,
    CargofmtManifestError,
    CargofmtTargetError,
)
from cargofmt.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from cargofmt.config.io import find_config_file, load_config
from cargofmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from cargofmt.constants import CARGOFMT_VERSION
from cargofmt.core.diagnostics import DiagnosticLevel
from cargofmt.core.exit_codes import ExitCode
from cargofmt.errors import ConfigError, ManifestError, TargetError
from cargofmt.file_resolver import Selection, resolve_manifests
from cargofmt.pipeline.engine import run_steps_for_files
from cargofmt.pipeline.pipelines import Pipeline
from cargofmt.utils.diff import render_patch
from cargofmt.utils.file import compute_relpath

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.config.model import Config
    from cargofmt.pipeline.context import ProcessingContext

logger: CargofmtLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> ClickConsole:
    """Initialize verbosity, logging and color on the Click context.

    ``CARGOFMT_LOG_LEVEL`` overrides the level derived from ``-v`` / ``-q``.

    Returns:
        ClickConsole: The console stored in ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}

    level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level
    setup_logging(level=resolve_env_log_level() or level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    return console


class ConfigLoader:
    """Return the config for each manifest, loading each config file once.

    Args:
        explicit (Path | None): ``--config``; applies to every manifest.
    """

    def __init__(self, explicit: Path | None = None) -> None:
        self.explicit = explicit
        self._cache: dict[Path | None, Config] = {}

    def __call__(self, manifest: Path) -> Config:
        source: Path | None = self.explicit or find_config_file(manifest)
        if source not in self._cache:
            self._cache[source] = load_config(source)
        return self._cache[source]


def _report(
    console: ClickConsole,
    results: list[ProcessingContext],
    *,
    check: bool,
    verbosity: int,
    base: Path,
) -> None:
    for ctx in results:
        shown: Path = compute_relpath(ctx.path, base)
        for overflow in ctx.overflows:
            console.warn(overflow.render(shown))
        for diag in ctx.diagnostics:
            if diag.level is DiagnosticLevel.ERROR:
                console.error(f"error: {shown}: {diag.message}")
        if check and ctx.diff:
            console.print(render_patch(ctx.diff), nl=False)
        elif verbosity <= 20:  # INFO and chattier
            console.print(ctx.summary())


@click.command(
    name="cargofmt",
    context_settings=CONTEXT_SETTINGS,
    help="Format Cargo.toml manifests.",
)
@click.option(
    "--manifest-path",
    "manifest_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    metavar="TOML",
    help="Path to Cargo.toml.",
)
@click.option(
    "-p",
    "--packages",
    "packages",
    multiple=True,
    metavar="SPEC",
    help="Package to format (repeatable).",
)
@click.option(
    "--all",
    "format_all",
    is_flag=True,
    help="Format all packages, and also their local path-based dependencies.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Report unformatted manifests with a diff instead of writing them.",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Skip manifests matching this gitignore-style pattern (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Use this rustfmt.toml instead of searching for one.",
)
@common_verbose_options
@common_color_options
@click.version_option(CARGOFMT_VERSION, prog_name="cargofmt")
@click.pass_context
def cli(
    ctx: click.Context,
    manifest_path: Path | None,
    packages: tuple[str, ...],
    format_all: bool,
    check: bool,
    exclude_patterns: tuple[str, ...],
    config_path: Path | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CargoFmt CLI.

    Exit Status:
        SUCCESS (0): Every manifest is formatted (or was written).
        WOULD_CHANGE (2): ``--check`` found manifests that are not formatted.
        FAILURE (1): The manifest or package selection is invalid.
        Other codes: see [`ExitCode`][cargofmt.core.exit_codes.ExitCode].
    """
    console: ClickConsole = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    selection = Selection.from_options(format_all=format_all, packages=packages)
    try:
        manifests: list[Path] = resolve_manifests(
            manifest_path, selection, exclude_patterns=exclude_patterns
        )
    except ManifestError as e:
        raise CargofmtManifestError(str(e)) from e
    except TargetError as e:
        raise CargofmtTargetError(str(e)) from e

    loader = ConfigLoader(config_path)
    if config_path is not None:
        # Fail early on an explicit, broken config.
        try:
            loader(manifests[0])
        except ConfigError as e:
            raise CargofmtConfigError(str(e)) from e

    pipeline: Pipeline = Pipeline.CHECK if check else Pipeline.APPLY
    results, error_code = run_steps_for_files(
        file_list=manifests, pipeline=pipeline.steps, config_loader=loader
    )

    _report(
        console,
        results,
        check=check,
        verbosity=ctx.obj["verbosity_level"],
        base=Path.cwd(),
    )

    if error_code is not None:
        ctx.exit(int(error_code))
    if check and any(r.would_change for r in results):
        ctx.exit(int(ExitCode.WOULD_CHANGE))


if __name__ == "__main__":
    cli()
