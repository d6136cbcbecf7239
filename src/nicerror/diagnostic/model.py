# topmark:header:start
#
#   project      : NiceError
#   file         : model.py
#   file_relpath : src/nicerror/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `NiceError` exception and its report renderer.

A `NiceError` holds a message plus optional metadata: remediation suggestions
and a pinpoint into a source file. `NiceError.render` turns that state into a
report made of up to three sections, separated by blank lines:

    Some kinda message

    Suggestions:
     * Always call your mother
     * Never lie to your mother about being robbed in Rio

    In ./fake.dx, line 2, column 6:
    1: some = fake, syntax
    2: next := some(1, 2, 3)
            ^
    3: def foo(bar) {
    4:   -- what language is this?

The message is always present. The suggestions section appears when there is
at least one suggestion. The source section appears only when the file name,
contents, line and column are all set and the target line exists; partial
metadata never produces a partial section. Rendering does not raise and does
not mutate the error.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypedDict

from nicerror.config.logging import get_logger
from nicerror.constants import DEFAULT_CONTEXT_SIZE, SUGGESTION_BULLET
from nicerror.diagnostic.context import format_context
from nicerror.rendering.styles import StyleRole, chalk_styler

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from nicerror.config.logging import NicerrorLogger
    from nicerror.rendering.styles import Styler

logger: NicerrorLogger = get_logger(__name__)


class NiceErrorOptions(TypedDict, total=False):
    """Optional metadata accepted by `NiceError` (all keys may be omitted)."""

    suggestions: Sequence[str] | None
    source_file: str | None
    source_contents: str | bytes | None
    source_line: int | None
    source_column: int | None


# Alternate spellings accepted by `NiceError.from_options`.
_OPTION_ALIASES: dict[str, str] = {
    "suggestions": "suggestions",
    "source_file": "source_file",
    "sourceFile": "source_file",
    "source_contents": "source_contents",
    "sourceContents": "source_contents",
    "source_line": "source_line",
    "sourceLine": "source_line",
    "source_column": "source_column",
    "sourceColumn": "source_column",
}


def _is_position(value: object) -> bool:
    """Return True if ``value`` is a usable 1-indexed line or column."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class NiceError(Exception):
    """Error carrying a message, suggestions and an optional source location.

    Attributes:
        suggestions (list[str] | None): Remediation hints, in display order.
        source_file (str | None): Display name or path of the referenced source.
        source_contents (str | bytes | None): Full text of the referenced source.
        source_line (int | None): 1-indexed line the report points at.
        source_column (int | None): 1-indexed column the report points at.
    """

    suggestions: list[str] | None
    source_file: str | None
    source_contents: str | bytes | None
    source_line: int | None
    source_column: int | None

    def __init__(
        self,
        message: str,
        *,
        suggestions: Sequence[str] | None = None,
        source_file: str | None = None,
        source_contents: str | bytes | None = None,
        source_line: int | None = None,
        source_column: int | None = None,
    ) -> None:
        super().__init__(message)
        self._message: str = message
        self.suggestions = list(suggestions) if suggestions is not None else None
        self.source_file = source_file
        self.source_contents = source_contents
        self.source_line = source_line
        self.source_column = source_column

    @classmethod
    def from_options(cls, message: str, options: Mapping[str, Any] | None = None) -> NiceError:
        """Build an error from a mapping of options.

        Keys may use either the snake_case attribute names or their camelCase
        spelling (``sourceFile``, ``sourceContents``, ``sourceLine``,
        ``sourceColumn``). Unknown keys are ignored.

        Args:
            message (str): The error message.
            options (Mapping[str, Any] | None): Optional metadata.

        Returns:
            NiceError: The new error.
        """
        kwargs: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name: str | None = _OPTION_ALIASES.get(key)
            if name is None:
                logger.debug("Ignoring unknown NiceError option %r", key)
                continue
            kwargs[name] = value
        return cls(message, **kwargs)

    @property
    def message(self) -> str:
        """The error message, always the first line of the report."""
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        location: str = ""
        if self.has_source_context():
            location = f", at {self.source_file}:{self.source_line}:{self.source_column}"
        return f"{type(self).__name__}({self._message!r}{location})"

    def has_source_context(self) -> bool:
        """Return True if file, contents, line and column are all usable."""
        return (
            bool(self.source_file)
            and isinstance(self.source_contents, (str, bytes))
            and bool(self.source_contents)
            and _is_position(self.source_line)
            and _is_position(self.source_column)
        )

    def _suggestion_list(self) -> list[str]:
        suggestions: object = self.suggestions
        if not suggestions:
            return []
        if isinstance(suggestions, str):
            return [suggestions]
        if isinstance(suggestions, Iterable):
            return [str(s) for s in suggestions]
        logger.debug("Ignoring suggestions of unsupported type %s", type(suggestions).__name__)
        return []

    def _source_text(self) -> str:
        contents: str | bytes | None = self.source_contents
        if isinstance(contents, bytes):
            return contents.decode("utf-8", errors="replace")
        return contents or ""

    def render(
        self, context_size: int | None = DEFAULT_CONTEXT_SIZE, *, styler: Styler | None = None
    ) -> str:
        """Render the full report for this error.

        Args:
            context_size (int | None): Number of source lines shown on each side of
                the target line. None, a bool or any other non-integer selects
                the default of 2.
            styler (Styler | None): Decoration for suggestions and source context.
                Defaults to `chalk_styler`; pass `plain_styler` for plain text.

        Returns:
            str: The report lines joined with ``"\\n"`` (no trailing newline).
        """
        style: Styler = styler or chalk_styler
        radius: int = (
            context_size
            if isinstance(context_size, int) and not isinstance(context_size, bool)
            else DEFAULT_CONTEXT_SIZE
        )
        results: list[str] = [self._message]

        suggestions: list[str] = self._suggestion_list()
        if suggestions:
            header: str = "Suggestions:" if len(suggestions) > 1 else "Suggestion:"
            results.append("")
            results.append(style(header, StyleRole.SUGGESTION))
            results.extend(
                style(f"{SUGGESTION_BULLET}{note}", StyleRole.SUGGESTION) for note in suggestions
            )

        if self.has_source_context():
            # Narrowed by has_source_context()
            line = int(self.source_line)  # type: ignore[arg-type]
            column = int(self.source_column)  # type: ignore[arg-type]
            formatted: list[str] = format_context(self._source_text(), line, column, radius, style)
            if formatted:
                results.append("")
                results.append(f"In {self.source_file}, line {line}, column {column}:")
                results.extend(formatted)
        elif any(
            v is not None
            for v in (self.source_file, self.source_contents, self.source_line, self.source_column)
        ):
            logger.trace("Incomplete source metadata on %r; omitting source context", self)

        return "\n".join(results)

    def nice_string(
        self, context_size: int | None = DEFAULT_CONTEXT_SIZE, *, styler: Styler | None = None
    ) -> str:
        """Alias of `render`."""
        return self.render(context_size, styler=styler)
