# topmark:header:start
#
#   project      : NiceError
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style roles and the styler functions injected into rendering."""

from __future__ import annotations

import click
import pytest
from yachalk import chalk

from nicerror.rendering.styles import StyleRole, chalk_styler, get_styler, plain_styler


def test_roles_keep_plain_string_values() -> None:
    assert [r.value for r in StyleRole] == ["line_number", "source", "caret", "suggestion"]
    assert StyleRole.CARET == "caret"
    assert StyleRole("suggestion") is StyleRole.SUGGESTION


@pytest.mark.parametrize(
    ("role", "colorizer"),
    [
        (StyleRole.LINE_NUMBER, chalk.blue),
        (StyleRole.SOURCE, chalk.white),
        (StyleRole.CARET, chalk.green),
        (StyleRole.SUGGESTION, chalk.red),
    ],
)
def test_chalk_styler_uses_role_color(role: StyleRole, colorizer: object) -> None:
    assert chalk_styler("text", role) == colorizer("text")  # type: ignore[operator]


@pytest.mark.parametrize("role", list(StyleRole))
def test_chalk_styler_strips_back_to_plain(role: StyleRole) -> None:
    assert click.unstyle(chalk_styler("12: x", role)) == plain_styler("12: x", role)


def test_plain_styler_is_identity() -> None:
    assert plain_styler(" * note", StyleRole.SUGGESTION) == " * note"


def test_get_styler() -> None:
    assert get_styler(True) is chalk_styler
    assert get_styler(False) is plain_styler
