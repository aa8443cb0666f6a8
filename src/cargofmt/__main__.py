# topmark:header:start
#
#   project      : CargoFmt
#   file         : __main__.py
#   file_relpath : src/cargofmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CargoFmt via ``python -m cargofmt``.

Delegates to :func:`cargofmt.cli.main.cli`, the same entry point as the
``cargofmt`` console script.
"""

from __future__ import annotations

from cargofmt.cli.main import cli

if __name__ == "__main__":
    cli()
