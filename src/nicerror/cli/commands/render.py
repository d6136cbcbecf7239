# topmark:header:start
#
#   project      : NiceError
#   file         : render.py
#   file_relpath : src/nicerror/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError `render` command.

Loads a source file, builds a `NiceError` pointing at a line and column, and
prints its report to stdout:

    nicerror render src/app.cfg --line 12 --column 7 \
        --message "Unknown key 'colour'" --suggest "Did you mean 'color'?"

The file is decoded as UTF-8 without newline translation, so the report shows
the exact physical lines of the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from nicerror.cli.errors import (
    NicerrorEncodingError,
    NicerrorFileNotFoundError,
    NicerrorIOError,
)
from nicerror.config.logging import get_logger
from nicerror.diagnostic.context import extract_context
from nicerror.diagnostic.model import NiceError
from nicerror.rendering.styles import get_styler

if TYPE_CHECKING:
    from nicerror.cli_shared.console_api import ConsoleLike
    from nicerror.config.logging import NicerrorLogger
    from nicerror.config.settings import RenderSettings

logger: NicerrorLogger = get_logger(__name__)


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 text, keeping line endings untouched.

    Raises:
        NicerrorFileNotFoundError: If the file does not exist.
        NicerrorEncodingError: If the file is not valid UTF-8.
        NicerrorIOError: If the file cannot be read.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except FileNotFoundError as exc:
        raise NicerrorFileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise NicerrorEncodingError(f"Cannot decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise NicerrorIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc


@click.command(
    name="render",
    help="Render a diagnostic report pointing at LINE and COLUMN of SOURCE.",
)
@click.argument("source", type=click.Path(dir_okay=False, path_type=Path))
@click.option("-l", "--line", type=click.IntRange(min=1), required=True, help="1-indexed line.")
@click.option(
    "-c", "--column", type=click.IntRange(min=1), required=True, help="1-indexed column."
)
@click.option(
    "-m",
    "--message",
    default=None,
    help="Report message. Defaults to 'SOURCE:LINE:COLUMN'.",
)
@click.option(
    "-s",
    "--suggest",
    "suggestions",
    multiple=True,
    help="Suggestion to list under the message. Repeat for several.",
)
@click.option(
    "--context-size",
    type=click.IntRange(min=0),
    default=None,
    help="Lines of context on each side of LINE (default from config, else 2).",
)
def render_command(
    *,
    source: Path,
    line: int,
    column: int,
    message: str | None,
    suggestions: tuple[str, ...],
    context_size: int | None,
) -> None:
    """Print the report for a position in a source file.

    Args:
        source (Path): File to quote.
        line (int): 1-indexed target line.
        column (int): 1-indexed target column.
        message (str | None): Report message; derived from the position when None.
        suggestions (tuple[str, ...]): Suggestions in display order.
        context_size (int | None): Context radius overriding the configured one.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    settings: RenderSettings = ctx.obj["settings"]
    vlevel: int = ctx.obj["verbosity_level"]

    contents: str = read_source(source)
    radius: int = settings.context_size if context_size is None else context_size

    error = NiceError(
        f"{source}:{line}:{column}" if message is None else message,
        suggestions=list(suggestions),
        source_file=str(source),
        source_contents=contents,
        source_line=line,
        source_column=column,
    )

    if vlevel <= logging.INFO and not extract_context(contents, line, 0):
        console.warn(f"Line {line} is past the end of {source}; source context omitted.")

    logger.debug("Rendering %r with context size %d", error, radius)
    console.print(error.render(radius, styler=get_styler(ctx.obj["color_enabled"])))
