# topmark:header:start
#
#   project      : NiceError
#   file         : main.py
#   file_relpath : src/nicerror/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NiceError Click CLI: group-level state plus subcommands.

Group options (verbosity, color) are resolved once and stored in ``ctx.obj``
together with the effective `RenderSettings` and the program-output console,
so that subcommands only deal with their own arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from yachalk import chalk

from nicerror.cli.commands.render import render_command
from nicerror.cli.commands.version import version_command
from nicerror.cli.console import ClickConsole
from nicerror.cli.errors import NicerrorConfigError
from nicerror.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from nicerror.cli_shared.color import ColorMode, resolve_color_mode
from nicerror.config.logging import get_logger, resolve_env_log_level, setup_logging
from nicerror.config.settings import SettingsError, load_settings

if TYPE_CHECKING:
    from nicerror.cli_shared.console_api import ConsoleLike
    from nicerror.config.logging import NicerrorLogger
    from nicerror.config.settings import RenderSettings

logger: NicerrorLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, settings, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Raises:
        NicerrorConfigError: If a configuration source holds an invalid value.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    setup_logging(level=resolve_env_log_level())

    try:
        settings: RenderSettings = load_settings(Path.cwd())
    except SettingsError as exc:
        raise NicerrorConfigError(str(exc)) from exc
    ctx.obj["settings"] = settings

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or settings.color)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    if enable_color:
        # yachalk detects terminal support on its own; an explicit decision overrides it
        chalk.enable_full_colors()

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: settings=%s color=%s", settings, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NiceError CLI: render source-aware diagnostic reports.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the NiceError CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nicerror render FILE --line N --column N' to render a report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
