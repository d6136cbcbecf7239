# topmark:header:start
#
#   project      : NiceError
#   file         : colored_enum.py
#   file_relpath : src/nicerror/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum whose members each carry a colorizer.

Report code names a member (`StyleRole.CARET`) instead of a color; the member
knows how to paint text for that role. Any `yachalk` builder such as
``chalk.green`` satisfies `Colorizer`.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Turn one piece of text into its decorated form."""

    def __call__(self, text: str) -> str: ...


class ColoredStrEnum(str, Enum):
    """`str` enum defined by ``(value, colorizer)`` pairs.

    Only the text becomes the member value, so members compare, hash and
    look up (``Role("caret")``) exactly like a plain `str` enum.
    """

    _value_: str
    _colorizer: Colorizer

    def __new__(cls, text: str, colorizer: Colorizer) -> ColoredStrEnum:
        member: ColoredStrEnum = str.__new__(cls, text)
        member._value_ = text
        member._colorizer = colorizer
        return member

    @property
    def value(self) -> str:
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer bound to this member."""
        return self._colorizer

    def paint(self, text: str) -> str:
        """Return ``text`` decorated with this member's colorizer."""
        return self._colorizer(text)
