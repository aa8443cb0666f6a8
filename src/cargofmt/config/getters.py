# topmark:header:start
#
#   project      : CargoFmt
#   file         : getters.py
#   file_relpath : src/cargofmt/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for formatter config tables.

Each getter returns ``None`` when the key is absent. When the key is present
but holds a value of the wrong shape, the getter records a **warning** in a
`DiagnosticLog`, logs it, and also returns ``None`` so the caller keeps its
default. User mistakes are surfaced without aborting the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from cargofmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.config.types import ConfigEnum
    from cargofmt.core.diagnostics import DiagnosticLog

logger: CargofmtLogger = get_logger(__name__)

_CE = TypeVar("_CE", bound="ConfigEnum")


def _warn(diagnostics: DiagnosticLog, message: str) -> None:
    logger.warning("%s", message)
    diagnostics.add_warning(message)


def get_bool_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Extract an optional boolean, warning on any other type.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.
        diagnostics (DiagnosticLog): Where type mismatches are recorded.

    Returns:
        bool | None: The value, or None when absent or mistyped.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if isinstance(value, bool):
        return value
    _warn(diagnostics, f"'{key}' must be a boolean, got {value!r}; using default")
    return None


def get_int_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    diagnostics: DiagnosticLog,
    minimum: int = 0,
) -> int | None:
    """Extract an optional non-negative integer, warning on any other value.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.
        diagnostics (DiagnosticLog): Where type mismatches are recorded.
        minimum (int): Smallest accepted value.

    Returns:
        int | None: The value, or None when absent or invalid.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if isinstance(value, int) and not isinstance(value, bool):
        if value >= minimum:
            return int(value)
        _warn(diagnostics, f"'{key}' must be >= {minimum}, got {value}; using default")
        return None
    _warn(diagnostics, f"'{key}' must be an integer, got {value!r}; using default")
    return None


def get_enum_checked(
    table: Mapping[str, Any],
    key: str,
    enum_cls: type[_CE],
    *,
    diagnostics: DiagnosticLog,
) -> _CE | None:
    """Extract an optional enum member from its string value.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.
        enum_cls (type[_CE]): The config enum to resolve against.
        diagnostics (DiagnosticLog): Where unknown names are recorded.

    Returns:
        The matching member, or None when absent or unknown.
    """
    if key not in table:
        return None
    value: Any = table[key]
    member: _CE | None = enum_cls.from_name(value) if isinstance(value, str) else None
    if member is None:
        allowed: str = ", ".join(m.value for m in enum_cls)
        _warn(
            diagnostics,
            f"'{key}' must be one of {allowed}, got {value!r}; using default",
        )
    return member
