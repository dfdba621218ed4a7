# topmark:header:start
#
#   project      : Formate
#   file         : main.py
#   file_relpath : src/formate/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Formate CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
through `formate.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formate.cli.color import ColorMode, resolve_color_mode
from formate.cli.commands.check import check_command
from formate.cli.commands.config import config_command
from formate.cli.commands.format import format_command
from formate.cli.commands.version import version_command
from formate.cli.console import ClickConsole
from formate.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from formate.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from formate.cli.console_api import ConsoleLike
    from formate.config.logging import FormateLogger

logger: FormateLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Value of ``--color`` (or None).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    override: ColorMode | None = ColorMode(color_mode) if color_mode else None
    if no_color:
        override = ColorMode.NEVER
    enable_color: bool = resolve_color_mode(color_mode_override=override)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Formate: beautify stylesheets and vertically align their properties.",
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
    """Entry point for the Formate CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'formate check [PATHS...]' to check stylesheets.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(check_command)
cli.add_command(format_command)
cli.add_command(config_command)

if __name__ == "__main__":
    cli()
