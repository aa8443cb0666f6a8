# topmark:header:start
#
#   project      : CargoFmt
#   file         : __init__.py
#   file_relpath : src/cargofmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter configuration: model, option enums, discovery and logging."""

from __future__ import annotations

from cargofmt.config.model import Config, MutableConfig
from cargofmt.config.types import Heuristics, NewlineStyle, SeparatorTactic

__all__ = [
    "Config",
    "Heuristics",
    "MutableConfig",
    "NewlineStyle",
    "SeparatorTactic",
]
