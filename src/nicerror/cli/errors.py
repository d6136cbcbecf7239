# topmark:header:start
#
#   project      : NiceError
#   file         : errors.py
#   file_relpath : src/nicerror/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NiceError CLI.

Raise these from commands to stop with a standardized message and exit code.
They are reported through the project console when one is present on the
Click context, and through Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nicerror.cli_shared.exit_codes import ExitCode


class NicerrorCliError(click.ClickException):
    """Base class for all NiceError CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text, without Click's ``Error:`` prefix."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class NicerrorUsageError(NicerrorCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NicerrorConfigError(NicerrorCliError):
    """Error for invalid configuration values."""

    exit_code = ExitCode.CONFIG_ERROR


class NicerrorFileNotFoundError(NicerrorCliError):
    """Error when the source file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class NicerrorIOError(NicerrorCliError):
    """Error when the source file cannot be read."""

    exit_code = ExitCode.IO_ERROR


class NicerrorEncodingError(NicerrorCliError):
    """Error when the source file is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
