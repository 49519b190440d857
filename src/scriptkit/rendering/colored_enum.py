# topmark:header:start
#
#   project      : ScriptKit
#   file         : colored_enum.py
#   file_relpath : src/scriptkit/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitive for human-facing statuses.

`ColoredStrEnum` is a `str, Enum` whose members are declared as
``(text, colorizer)`` pairs. The enum `.value` stays the plain text, so members
compare, hash and serialize like strings, while `.color` exposes the colorizer
(typically a `yachalk` style) for rendering.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.value            # 'ok'
    Outcome.OK.color("done")    # green "done"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate ``args`` into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, enable_color: bool = True) -> str:
        """Return the member text, colorized when ``enable_color`` is True."""
        return self.color(self.value) if enable_color else self.value
