# topmark:header:start
#
#   project      : CargoFmt
#   file         : errors.py
#   file_relpath : src/cargofmt/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for CargoFmt.

These are plain exceptions raised by the config, discovery and pipeline layers.
They carry no exit code and no styling; the CLI maps them to
[`CargofmtCliError`][cargofmt.cli.errors.CargofmtCliError] subclasses.

The formatting passes raise nothing: malformed input degrades to "leave this
array alone" inside the layout engine.
"""

from __future__ import annotations

from pathlib import Path


class CargofmtError(Exception):
    """Base class for all CargoFmt library errors."""


class ConfigError(CargofmtError):
    """A formatter config file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ManifestError(CargofmtError):
    """A manifest is missing, misnamed or not valid TOML."""


class TargetError(CargofmtError):
    """No manifest matched the requested selection."""


class VerificationError(CargofmtError):
    """Formatted output does not parse back to the input document."""

    def __init__(self, path: Path | None, reason: str) -> None:
        where = str(path) if path is not None else "<string>"
        super().__init__(f"{where}: formatting changed the document ({reason})")
        self.path = path
        self.reason = reason
