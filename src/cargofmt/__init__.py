# topmark:header:start
#
#   project      : CargoFmt
#   file         : __init__.py
#   file_relpath : src/cargofmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CargoFmt package.

CargoFmt formats ``Cargo.toml`` manifests. It tokenizes each manifest, runs an
ordered list of formatting passes over the token stream (with an array layout
engine at its core), verifies that the result still parses to the same
document, and either writes the result back or reports a diff.
"""

from __future__ import annotations
