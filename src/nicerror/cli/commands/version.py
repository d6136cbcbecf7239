# topmark:header:start
#
#   project      : NiceError
#   file         : version.py
#   file_relpath : src/nicerror/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError `version` command.

Prints the NiceError version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nicerror.constants import NICERROR_VERSION

if TYPE_CHECKING:
    from nicerror.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NiceError.",
)
def version_command() -> None:
    """Show the current version of NiceError."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(f"nicerror {NICERROR_VERSION}")
