# topmark:header:start
#
#   project      : Formate
#   file         : config.py
#   file_relpath : src/formate/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate `config` command group.

  * ``formate config dump``: show the effective merged configuration.
  * ``formate config defaults``: show the built-in default configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formate.cli.cmd_common import (
    build_config,
    formatting_overrides,
    get_console,
    get_effective_verbosity,
    render_config_diagnostics,
)
from formate.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_filtering_options,
    common_formatting_options,
)
from formate.config.loaders import load_defaults_dict, nest_under_tool_section, to_toml
from formate.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from formate.cli.console_api import ConsoleLike
    from formate.config import Config
    from formate.config.loaders import TomlTable


def emit_toml_block(
    *,
    console: ConsoleLike,
    title: str,
    toml_text: str,
    verbosity_level: int,
) -> None:
    """Emit a TOML snippet, with a banner and BEGIN/END markers when verbose."""
    if verbosity_level > 0:
        console.print(console.styled(title, bold=True, underline=True))
        console.print(console.styled(TOML_BLOCK_START, fg="cyan", dim=True))
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))
    if verbosity_level > 0:
        console.print(console.styled(TOML_BLOCK_END, fg="cyan", dim=True))


_pyproject_option = click.option(
    "--pyproject",
    is_flag=True,
    help="Nest the output under [tool.formate] for pyproject.toml.",
)


@click.group(
    name="config",
    help="Inspect Formate configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Dump the effective merged configuration (defaults, config files, CLI overrides) as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@_pyproject_option
@common_formatting_options
@common_config_options
@common_filtering_options
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    *,
    pyproject: bool,
    additional_spaces: int | None,
    align_colon: bool | None,
    vertical_align_properties: bool | None,
    beautify: bool | None,
    tab_size: int | None,
    use_tabs: bool | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> None:
    """Print the effective configuration."""
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)
    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        overrides=formatting_overrides(
            additional_spaces=additional_spaces,
            align_colon=align_colon,
            vertical_align_properties=vertical_align_properties,
            beautify=beautify,
            tab_size=tab_size,
            use_tabs=use_tabs,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
        ),
    )
    render_config_diagnostics(console, config, verbosity)
    if verbosity > 0:
        for path in config.config_files:
            console.print(f"# merged: {path}")

    table: TomlTable = config.to_toml_dict()
    emit_toml_block(
        console=console,
        title="Formate configuration (effective):",
        toml_text=to_toml(nest_under_tool_section(table) if pyproject else table),
        verbosity_level=verbosity,
    )


@config_command.command(
    name="defaults",
    help="Show the built-in default configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@_pyproject_option
@click.pass_context
def config_defaults_command(ctx: click.Context, *, pyproject: bool) -> None:
    """Print the built-in defaults."""
    table: TomlTable = load_defaults_dict()
    emit_toml_block(
        console=get_console(ctx),
        title="Formate configuration (defaults):",
        toml_text=to_toml(nest_under_tool_section(table) if pyproject else table),
        verbosity_level=get_effective_verbosity(ctx),
    )
