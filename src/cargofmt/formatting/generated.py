# topmark:header:start
#
#   project      : CargoFmt
#   file         : generated.py
#   file_relpath : src/cargofmt/formatting/generated.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection of generated manifests."""

from __future__ import annotations

from itertools import islice

from cargofmt.constants import GENERATED_MARKER


def is_generated_file(text: str, limit: int) -> bool:
    """Whether ``@generated`` appears within the first ``limit`` lines of ``text``."""
    return any(GENERATED_MARKER in line for line in islice(text.splitlines(), limit))
