# topmark:header:start
#
#   project      : Formate
#   file         : version.py
#   file_relpath : src/formate/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate `version` command.

Prints the Formate version installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formate.cli.cmd_common import get_console, get_effective_verbosity
from formate.constants import FORMATE_VERSION

if TYPE_CHECKING:
    from formate.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Formate.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Formate."""
    console: ConsoleLike = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Formate version:", bold=True, underline=True))
        console.print(f"    {console.styled(FORMATE_VERSION, bold=True)}")
    else:
        console.print(console.styled(FORMATE_VERSION, bold=True))
