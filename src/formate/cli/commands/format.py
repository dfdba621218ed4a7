# topmark:header:start
#
#   project      : Formate
#   file         : format.py
#   file_relpath : src/formate/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate `format` command.

Reads a stylesheet from STDIN (or a file), formats it and writes the result to
STDOUT. This is the entry point for editor integrations: ``--line-range``
formats only the given lines, like an editor's "format selection".

Examples:
  formate format - < theme.css
  cat theme.scss | formate format --line-range 10:24 --align-value
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from formate.cli.cmd_common import (
    build_config,
    formatting_overrides,
    get_console,
    get_effective_verbosity,
    render_config_diagnostics,
)
from formate.cli.errors import FormateEncodingError, FormatePipelineError, FormateUsageError
from formate.cli.options import CONTEXT_SETTINGS, common_config_options, common_formatting_options
from formate.config.logging import get_logger
from formate.formatting import TextRange, apply_edits, format_document, format_text

if TYPE_CHECKING:
    from formate.cli.console_api import ConsoleLike
    from formate.config import Config
    from formate.config.logging import FormateLogger
    from formate.formatting import TextEdit

logger: FormateLogger = get_logger(__name__)


def parse_line_range(value: str) -> TextRange:
    """Parse a one-based, inclusive ``START:END`` range into a zero-based `TextRange`.

    Raises:
        FormateUsageError: If ``value`` is malformed or not a valid range.
    """
    start_s, sep, end_s = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        start, end = int(start_s), int(end_s)
        if start < 1:
            raise ValueError(value)
        return TextRange(start - 1, end - 1)
    except ValueError:
        raise FormateUsageError(
            f"Invalid --line-range '{value}': expected START:END with 1 <= START <= END"
        ) from None


@click.command(
    name="format",
    help="Format a stylesheet read from STDIN ('-') or a file and print it to STDOUT.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--line-range",
    "line_range",
    default=None,
    metavar="START:END",
    help="Only format these lines (one-based, inclusive).",
)
@common_formatting_options
@common_config_options
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    source: IO[Any],
    line_range: str | None,
    additional_spaces: int | None,
    align_colon: bool | None,
    vertical_align_properties: bool | None,
    beautify: bool | None,
    tab_size: int | None,
    use_tabs: bool | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Format ``source`` and print the result."""
    console: ConsoleLike = get_console(ctx)
    text_range: TextRange | None = parse_line_range(line_range) if line_range else None

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
        ),
    )
    render_config_diagnostics(console, config, get_effective_verbosity(ctx))

    try:
        text: str = source.read()
    except UnicodeDecodeError as e:
        raise FormateEncodingError(f"Input is not valid UTF-8: {e.reason}") from e

    try:
        if text_range is None:
            result: str = format_text(text, config)
        else:
            edits: list[TextEdit] = format_document(text, config, text_range=text_range)
            result = apply_edits(text, edits)
    except ValueError as e:
        raise FormateUsageError(str(e)) from e
    except Exception as e:
        logger.error("Formatting failed: %s", e)
        raise FormatePipelineError(f"Formatting failed: {e}") from e

    console.print(result, nl=False)
