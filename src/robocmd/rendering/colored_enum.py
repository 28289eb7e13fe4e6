# topmark:header:start
#
#   project      : RoboCmd
#   file         : colored_enum.py
#   file_relpath : src/robocmd/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum whose members carry a yachalk style.

The member value stays a plain ``str`` (``OutcomeSeverity.FAILURE == "failure"``), so
members compare, hash and serialize like their text; the style only matters when
`color` is applied to a line of output.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ColoredStrEnum(str, Enum):
    """Enum of ``(text, style)`` pairs; ``value`` is the text."""

    _value_: str
    _color: Callable[..., str]

    def __new__(cls, text: str, color: Callable[..., str]) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Callable[..., str]:
        """The yachalk style of this member, e.g. ``chalk.red_bright``."""
        return self._color
