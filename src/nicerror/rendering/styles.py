# topmark:header:start
#
#   project      : NiceError
#   file         : styles.py
#   file_relpath : src/nicerror/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styling capability injected into report rendering.

A `Styler` maps a plain string and a `StyleRole` to display text. Styling is
purely decorative: removing every escape sequence from a styled report must
give back the plain layout produced by `plain_styler`.

Roles and their terminal colors:
    * ``LINE_NUMBER``: the ``"<line>:"`` gutter of a context line (blue).
    * ``SOURCE``: the source text of a context line (white).
    * ``CARET``: the column marker (green).
    * ``SUGGESTION``: the suggestion header and bullets (red).
"""

from __future__ import annotations

from typing import Protocol

from yachalk import chalk

from nicerror.rendering.colored_enum import ColoredStrEnum


class StyleRole(ColoredStrEnum):
    """Parts of a report that may receive decorative styling."""

    LINE_NUMBER = ("line_number", chalk.blue)
    SOURCE = ("source", chalk.white)
    CARET = ("caret", chalk.green)
    SUGGESTION = ("suggestion", chalk.red)


class Styler(Protocol):
    """Callable applying the decoration associated with a role."""

    def __call__(self, text: str, role: StyleRole) -> str:
        """Return ``text`` decorated for ``role``."""
        ...


def chalk_styler(text: str, role: StyleRole) -> str:
    """Color ``text`` with the yachalk colorizer bound to ``role``."""
    return role.paint(text)


def plain_styler(text: str, role: StyleRole) -> str:  # pylint: disable=unused-argument
    """Return ``text`` unchanged."""
    return text


def get_styler(enable_color: bool) -> Styler:
    """Return the styler matching a resolved color decision.

    Args:
        enable_color (bool): Whether ANSI styling should be emitted.

    Returns:
        Styler: `chalk_styler` when color is enabled, `plain_styler` otherwise.
    """
    return chalk_styler if enable_color else plain_styler
