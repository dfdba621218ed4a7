# topmark:header:start
#
#   project      : Formate
#   file         : colored_enum.py
#   file_relpath : src/formate/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enums.

`ColoredStrEnum` members are plain strings (their ``.value`` is the text shown
to users) that also carry a colorizer, typically a ``yachalk`` style:

    ```python
    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)

    Outcome.OK.color("ok")  # green "ok"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated, ``sep``-joined arguments."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its display text and colorizer."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the display text of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, color: bool = False) -> str:
        """Return the display text, colorized when ``color`` is True."""
        return self._color(self._value_) if color else self._value_
