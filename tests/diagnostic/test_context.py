# topmark:header:start
#
#   project      : NiceError
#   file         : test_context.py
#   file_relpath : tests/diagnostic/test_context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Context extraction and formatting around a target line.

Covers window clipping at both ends of the text, the out-of-bounds guard, the
trailing empty line, and caret alignment under the target column.
"""

from __future__ import annotations

import pytest

from nicerror.diagnostic.context import (
    ContextLine,
    caret_line,
    extract_context,
    format_context,
    format_source_line,
)
from nicerror.rendering.styles import StyleRole, plain_styler


def _bracket_styler(text: str, role: StyleRole) -> str:
    return f"<{role.value}>{text}</{role.value}>"


# --- extract_context ----------------------------------------------------------


def test_one_line_of_context_from_the_middle(fake_file: str) -> None:
    assert extract_context(fake_file, 3, 1) == [
        ContextLine(line=2, text="next := some(1, 2, 3)"),
        ContextLine(line=3, text="def foo(bar) {"),
        ContextLine(line=4, text="  -- what language is this?"),
    ]


def test_size_two_context(fake_file: str) -> None:
    assert extract_context(fake_file, 3, 2) == [
        ContextLine(line=1, text="some = fake, syntax"),
        ContextLine(line=2, text="next := some(1, 2, 3)"),
        ContextLine(line=3, text="def foo(bar) {"),
        ContextLine(line=4, text="  -- what language is this?"),
        ContextLine(line=5, text="}"),
    ]


def test_size_two_context_with_one_line_above(fake_file: str) -> None:
    result = extract_context(fake_file, 2, 2)
    assert [c.line for c in result] == [1, 2, 3, 4]


def test_size_three_context_at_first_line(fake_file: str) -> None:
    result = extract_context(fake_file, 1, 3)
    assert [c.line for c in result] == [1, 2, 3, 4]
    assert result[0].text == "some = fake, syntax"


def test_trailing_empty_line_is_addressable(fake_file: str) -> None:
    assert extract_context(fake_file, 6, 3) == [
        ContextLine(line=3, text="def foo(bar) {"),
        ContextLine(line=4, text="  -- what language is this?"),
        ContextLine(line=5, text="}"),
        ContextLine(line=6, text=""),
    ]


@pytest.mark.parametrize("line", [7, 8, 100])
def test_line_out_of_bounds_gives_empty_context(fake_file: str, line: int) -> None:
    assert extract_context(fake_file, line, 3) == []


def test_zero_context_yields_only_the_target_line(fake_file: str) -> None:
    assert extract_context(fake_file, 4, 0) == [
        ContextLine(line=4, text="  -- what language is this?"),
    ]


def test_negative_context_is_treated_as_zero(fake_file: str) -> None:
    assert extract_context(fake_file, 4, -3) == extract_context(fake_file, 4, 0)


def test_symmetric_window_is_centered_on_target() -> None:
    source = "\n".join(f"line {i}" for i in range(1, 21))
    result = extract_context(source, 10, 4)
    assert len(result) == 9
    assert [c.line for c in result] == list(range(6, 15))
    assert result[4] == ContextLine(line=10, text="line 10")


def test_text_is_kept_raw() -> None:
    source = "a\r\n\tb  \nc"
    assert extract_context(source, 2, 0) == [ContextLine(line=2, text="\tb  ")]
    assert extract_context(source, 1, 0)[0].text == "a\r"


def test_empty_source_has_a_single_empty_line() -> None:
    assert extract_context("", 1, 2) == [ContextLine(line=1, text="")]
    assert extract_context("", 2, 2) == []


# --- formatting ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("ctx_line", "expected"),
    [
        (
            ContextLine(line=2, text="foo bar"),
            "<line_number>2:</line_number> <source>foo bar</source>",
        ),
        (
            ContextLine(line=200, text="baz wux"),
            "<line_number>200:</line_number> <source>baz wux</source>",
        ),
        (
            ContextLine(line=2000, text=" a b c d e"),
            "<line_number>2000:</line_number> <source> a b c d e</source>",
        ),
    ],
)
def test_source_line_styles_gutter_and_text_separately(
    ctx_line: ContextLine, expected: str
) -> None:
    assert format_source_line(ctx_line, _bracket_styler) == expected


def test_source_line_plain() -> None:
    assert format_source_line(ContextLine(line=12, text="x = 1"), plain_styler) == "12: x = 1"


def test_caret_line_offset_uses_target_line_width() -> None:
    assert caret_line(2, 6, plain_styler) == " " * 8 + "^"
    assert caret_line(10, 1, plain_styler) == " " * 4 + "^"
    assert caret_line(100, 3, plain_styler) == " " * 7 + "^"


def test_caret_marker_is_styled_alone() -> None:
    assert caret_line(1, 2, _bracket_styler) == "    <caret>^</caret>"


def test_format_context_inserts_caret_after_target(fake_file: str) -> None:
    assert format_context(fake_file, 2, 6, 2, plain_styler) == [
        "1: some = fake, syntax",
        "2: next := some(1, 2, 3)",
        "        ^",
        "3: def foo(bar) {",
        "4:   -- what language is this?",
    ]


@pytest.mark.parametrize("context_size", [0, 1, 2, 5])
def test_caret_lands_under_the_target_column(fake_file: str, context_size: int) -> None:
    lines = format_context(fake_file, 3, 5, context_size, plain_styler)
    target = lines.index("3: def foo(bar) {")
    caret = lines[target + 1]
    assert caret.index("^") == len("3: ") + 5 - 1
    assert lines[target][caret.index("^")] == "f"


def test_caret_alignment_ignores_wider_neighbours() -> None:
    source = "\n".join(f"v{i}" for i in range(1, 13))
    lines = format_context(source, 9, 1, 1, plain_styler)
    assert lines == ["8: v8", "9: v9", "   ^", "10: v10"]


def test_format_context_out_of_bounds_is_empty(fake_file: str) -> None:
    assert format_context(fake_file, 7, 1, 2, plain_styler) == []
