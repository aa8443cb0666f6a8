# topmark:header:start
#
#   project      : CargoFmt
#   file         : errors.py
#   file_relpath : src/cargofmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CargoFmt CLI.

Raise these from the command to signal errors with a standardized message and
exit code. They print through the project console when one is attached to the
Click context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cargofmt.core.exit_codes import ExitCode


class CargofmtCliError(click.ClickException):
    """Base class for all CargoFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text; color is applied in `show()`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class CargofmtUsageError(CargofmtCliError):
    """Invalid combination of command line options."""

    exit_code = ExitCode.USAGE_ERROR


class CargofmtManifestError(CargofmtCliError):
    """The manifest to start from is missing, misnamed or invalid."""

    exit_code = ExitCode.FAILURE


class CargofmtTargetError(CargofmtCliError):
    """No manifest matched the package selection."""

    exit_code = ExitCode.FAILURE


class CargofmtConfigError(CargofmtCliError):
    """The config file given with ``--config`` is missing or invalid."""

    exit_code = ExitCode.CONFIG_ERROR
