# topmark:header:start
#
#   project      : NiceError
#   file         : context.py
#   file_relpath : src/nicerror/diagnostic/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source context extraction and formatting for diagnostic reports.

Two pure steps turn a source text and a 1-indexed target position into the
lines displayed under a report header:

* `extract_context` selects the window of lines around the target line,
  clipped to the bounds of the text.
* `format_context` renders each window line as ``"<line>: <text>"`` and
  inserts a caret line under the target column.

Lines are split on ``"\\n"`` only. A text ending with a line feed therefore
has a final empty line, and that line is addressable like any other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nicerror.config.logging import get_logger
from nicerror.constants import CARET_MARKER
from nicerror.rendering.styles import StyleRole, chalk_styler

if TYPE_CHECKING:
    from nicerror.config.logging import NicerrorLogger
    from nicerror.rendering.styles import Styler

logger: NicerrorLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ContextLine:
    """One physical source line tagged with its 1-indexed position."""

    line: int
    text: str


def extract_context(source: str, line: int, context_size: int) -> list[ContextLine]:
    """Return the lines within ``context_size`` of ``line``.

    The window covers ``[line - context_size, line + context_size]`` clipped to
    the text, in ascending order. Windows near the start or end of the text are
    shorter rather than padded.

    Args:
        source (str): Full source text.
        line (int): 1-indexed target line.
        context_size (int): Number of lines to include on each side of the target.
            Negative values are treated as 0.

    Returns:
        list[ContextLine]: The window, or an empty list when ``line`` lies past
            the last line of ``source``.
    """
    lines: list[str] = source.split("\n")
    total: int = len(lines)
    if line > total:
        logger.debug("Line %d is out of bounds (%d lines); no context", line, total)
        return []

    radius: int = max(context_size, 0)
    start: int = max(line - radius - 1, 0)
    end: int = min(line + radius, total)
    return [
        ContextLine(line=start + offset + 1, text=text)
        for offset, text in enumerate(lines[start:end])
    ]


def format_source_line(ctx_line: ContextLine, styler: Styler = chalk_styler) -> str:
    """Render a context line as ``"<line>: <text>"``.

    The ``"<line>:"`` gutter and the text are styled separately; the space
    between them is never styled.
    """
    gutter: str = styler(f"{ctx_line.line}:", StyleRole.LINE_NUMBER)
    return f"{gutter} {styler(ctx_line.text, StyleRole.SOURCE)}"


def caret_line(line: int, column: int, styler: Styler = chalk_styler) -> str:
    """Return the marker line pointing at ``column`` of a formatted line.

    The indent is the width of the plain ``"<line>: "`` prefix of the target
    line plus ``column - 1``, so the marker lands under that character.

    Args:
        line (int): 1-indexed number of the line the marker points into.
        column (int): 1-indexed column of the marked character.
        styler (Styler): Styling applied to the marker only.

    Returns:
        str: Indentation followed by the styled marker.
    """
    indent: int = len(f"{line}: ") + column - 1
    return " " * indent + styler(CARET_MARKER, StyleRole.CARET)


def format_context(
    source: str,
    line: int,
    column: int,
    context_size: int,
    styler: Styler = chalk_styler,
) -> list[str]:
    """Format the context window around a target position.

    Every line of the window yields one string; the target line is followed
    by its caret line.

    Args:
        source (str): Full source text.
        line (int): 1-indexed target line.
        column (int): 1-indexed target column.
        context_size (int): Number of lines to include on each side of the target.
        styler (Styler): Decoration applied to gutters, text and marker.

    Returns:
        list[str]: Display lines in order; empty when the target line does not exist.
    """
    formatted: list[str] = []
    for ctx_line in extract_context(source, line, context_size):
        formatted.append(format_source_line(ctx_line, styler))
        if ctx_line.line == line:
            formatted.append(caret_line(line, column, styler))
    return formatted
