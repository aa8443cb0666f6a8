# topmark:header:start
#
#   project      : CargoFmt
#   file         : __init__.py
#   file_relpath : src/cargofmt/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting passes over the manifest token stream.

The entry points are [`format_text`][cargofmt.formatting.passes.format_text] and
[`format_tokens`][cargofmt.formatting.passes.format_tokens]; the array layout
engine is [`reflow_arrays`][cargofmt.formatting.overflow.reflow_arrays].
"""

from __future__ import annotations

from cargofmt.formatting.overflow import CommentPosition, reflow_arrays
from cargofmt.formatting.passes import format_text, format_tokens

__all__ = [
    "CommentPosition",
    "format_text",
    "format_tokens",
    "reflow_arrays",
]
