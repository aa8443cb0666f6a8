# topmark:header:start
#
#   project      : CargoFmt
#   file         : types.py
#   file_relpath : src/cargofmt/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option enums shared by the config model and the formatting passes.

Values use the spelling of the config file (``newline_style = "Unix"``);
lookups are case-insensitive so ``"unix"`` works too.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_CE = TypeVar("_CE", bound="ConfigEnum")


class ConfigEnum(str, Enum):
    """String enum parsed from a config value."""

    @classmethod
    def from_name(cls: type[_CE], key_name: str | None) -> _CE | None:
        """Return the member whose value matches ``key_name`` case-insensitively.

        Args:
            key_name (str | None): The value as written in the config file, or None.

        Returns:
            The matching member, or None if ``key_name`` is None or unmatched.
        """
        if key_name is None:
            return None
        wanted: str = key_name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class NewlineStyle(ConfigEnum):
    """Line ending written to formatted output."""

    AUTO = "Auto"
    WINDOWS = "Windows"
    UNIX = "Unix"
    NATIVE = "Native"


class SeparatorTactic(ConfigEnum):
    """When arrays carry a trailing comma."""

    ALWAYS = "Always"
    NEVER = "Never"
    VERTICAL = "Vertical"


class Heuristics(ConfigEnum):
    """How ``array_width`` is derived from ``max_width`` when not set explicitly."""

    DEFAULT = "Default"
    OFF = "Off"
    MAX = "Max"
