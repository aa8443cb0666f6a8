# topmark:header:start
#
#   project      : CargoFmt
#   file         : datetime.py
#   file_relpath : src/cargofmt/formatting/datetime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalize the date/time separator of datetime scalars.

TOML accepts ``2025-12-26T10:30:00``, ``2025-12-26t10:30:00`` and
``2025-12-26 10:30:00``. All three become the uppercase ``T`` form. Lone
dates and times have no separator and are left alone.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from cargofmt.config.logging import get_logger
from cargofmt.toml.tokens import ScalarKind, TokenKind

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.toml.tokens import TomlTokens

logger: CargofmtLogger = get_logger(__name__)

_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"^(\d{4}-\d{2}-\d{2})[t ](\d{2}:)")


def normalize_datetime_separators(tokens: TomlTokens) -> None:
    """Rewrite ``t`` and space date/time separators as ``T``."""
    logger.trace("normalize_datetime_separators()")
    for tok in tokens:
        if tok.kind is TokenKind.SCALAR and tok.scalar is ScalarKind.DATETIME:
            tok.raw = _SEPARATOR_RE.sub(r"\1T\2", tok.raw)
