# topmark:header:start
#
#   project      : NiceError
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: the entry point is callable and `--help`/`version` succeed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nicerror.cli_shared.exit_codes import ExitCode
from nicerror.constants import NICERROR_VERSION
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_cli_entry() -> None:
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    assert "Usage" in result.output
    assert "render" in result.output


def test_cli_without_subcommand_prints_hint() -> None:
    result: Result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "nicerror render FILE" in result.output


def test_version() -> None:
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == f"nicerror {NICERROR_VERSION}"


def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output
