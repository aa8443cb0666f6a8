# topmark:header:start
#
#   project      : CargoFmt
#   file         : constants.py
#   file_relpath : src/cargofmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CargoFmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    CARGOFMT_VERSION: str = get_version("cargofmt")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    CARGOFMT_VERSION = "0.0.0"

MANIFEST_FILE_NAME: str = "Cargo.toml"

# Looked up in this order in every directory from the manifest upward.
CONFIG_FILE_NAMES: tuple[str, ...] = (".rustfmt.toml", "rustfmt.toml")

GENERATED_MARKER: str = "@generated"
