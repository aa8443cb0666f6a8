# topmark:header:start
#
#   project      : CargoFmt
#   file         : colored_enum.py
#   file_relpath : src/cargofmt/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a terminal colorizer.

Pipeline statuses are declared as ``(label, colorizer)`` pairs:

    ```python
    from yachalk import chalk

    class WriteStatus(ColoredStrEnum):
        WRITTEN = ("written", chalk.green)
    ```

``WriteStatus.WRITTEN.value`` is the plain label; ``.color`` decorates text for
summaries.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the arguments joined by ``sep`` and decorated for display."""
        ...


class ColoredStrEnum(str, Enum):
    """``str`` enum whose members also carry a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The member's label."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The member's colorizer."""
        return self._color

    def colored(self) -> str:
        """Return the label decorated with the member's colorizer."""
        return self._color(self._value_)
