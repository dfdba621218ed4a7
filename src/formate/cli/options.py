# topmark:header:start
#
#   project      : Formate
#   file         : options.py
#   file_relpath : src/formate/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for Formate commands.

This module centralizes the option decorators shared by commands (verbosity,
color, configuration, alignment overrides, file filters) and the resolution
logic for the counted ``-v`` / ``-q`` flags.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from formate.cli.color import ColorMode
from formate.cli.errors import FormateUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Returns:
        int: ``-1`` (quiet: errors only), ``0`` (default), ``1`` (``-v``: every
            file), or ``2`` (``-vv`` or more: also per-file diagnostics).

    Raises:
        FormateUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FormateUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counted ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Merge this TOML config file after the project config (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore formate.toml / [tool.formate] found in the working tree.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the alignment and beautifier overrides.

    Tri-state flags default to None so that an absent flag keeps the
    configured value.
    """
    f = click.option(
        "--additional-spaces",
        type=click.IntRange(min=0),
        default=None,
        help="Extra spaces added to the furthest colon of each property group.",
    )(f)
    f = click.option(
        "--align-colon/--align-value",
        "align_colon",
        default=None,
        help="Pad before the colon (default) or after it, aligning the values.",
    )(f)
    f = click.option(
        "--vertical-align/--no-vertical-align",
        "vertical_align_properties",
        default=None,
        help="Enable or disable property alignment.",
    )(f)
    f = click.option(
        "--beautify/--no-beautify",
        "beautify",
        default=None,
        help="Run (or skip) the CSS beautifier before aligning.",
    )(f)
    f = click.option(
        "--tab-size",
        type=click.IntRange(min=1),
        default=None,
        help="Indent width used by the beautifier.",
    )(f)
    f = click.option(
        "--use-tabs/--use-spaces",
        "use_tabs",
        default=None,
        help="Indent with tabs or spaces.",
    )(f)
    return f


def common_filtering_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--include`` / ``--exclude`` gitwildmatch filters."""
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these patterns (intersection).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these patterns (subtraction).",
    )(f)
    return f
