# topmark:header:start
#
#   project      : Formate
#   file         : check.py
#   file_relpath : src/formate/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate `check` command.

Formats stylesheet files (dry run by default) and reports which ones would
change. With ``--apply`` the formatted files are written back; with ``--diff``
a unified diff is printed for every changed file.

Examples:
  formate check src/styles
  formate check --diff "src/**/*.scss"
  formate check --apply --additional-spaces 2 theme.css
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import click

from formate.cli.cmd_common import (
    build_config,
    exit_code_for,
    formatting_overrides,
    get_console,
    get_effective_verbosity,
    is_color_enabled,
    render_config_diagnostics,
    resolve_exit_code,
)
from formate.cli.exit_codes import ExitCode
from formate.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_filtering_options,
    common_formatting_options,
)
from formate.config.logging import get_logger
from formate.file_resolver import resolve_file_list
from formate.pipeline import Pipeline, run_files
from formate.utils.diff import render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from formate.cli.console_api import ConsoleLike
    from formate.config import Config
    from formate.config.logging import FormateLogger
    from formate.pipeline import ProcessingContext

logger: FormateLogger = get_logger(__name__)


def _report_file(
    console: ConsoleLike, ctx: ProcessingContext, *, verbosity: int, color: bool
) -> None:
    failed: bool = exit_code_for(ctx) is not None
    if failed:
        console.error(ctx.format_summary(color=False))
        for diag in ctx.diagnostics:
            console.error(f"  {diag.render()}")
        return
    if verbosity >= 1 or (verbosity == 0 and ctx.would_change):
        console.print(ctx.format_summary(color=color))
    if verbosity >= 2:
        for diag in ctx.diagnostics:
            console.print(f"  {diag.render(color=color)}")


def _report_summary(console: ConsoleLike, results: list[ProcessingContext], color: bool) -> None:
    counts: Counter[str] = Counter(ctx.summary_status().value for ctx in results)
    console.print()
    console.print(console.styled("Summary:", bold=True, underline=True))
    for ctx in results:
        status = ctx.summary_status()
        if status.value in counts:
            console.print(f"  {status.render(color=color)}: {counts.pop(status.value)}")
    console.print(f"  total: {len(results)}")


@click.command(
    name="check",
    help="Format stylesheets (dry run unless --apply) and report files that would change.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option("--apply", "apply_changes", is_flag=True, help="Write formatted files to disk.")
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of the changes.")
@click.option("--summary", "show_summary", is_flag=True, help="Print per-status counts.")
@common_formatting_options
@common_config_options
@common_filtering_options
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    apply_changes: bool,
    show_diff: bool,
    show_summary: bool,
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
    """Check (and optionally reformat) the stylesheets under ``paths``.

    Without positional paths, the current directory is checked.

    Exit codes:
        SUCCESS when nothing needs formatting (or every change was written),
        WOULD_CHANGE on a dry run with changes, and the specific error code of
        the first file that failed otherwise.
    """
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)
    color: bool = is_color_enabled(ctx)

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

    files: list[Path]
    missing: list[Path]
    files, missing = resolve_file_list(paths or (".",), config)
    for path in missing:
        console.error(f"No such file or directory: {path}")

    if not files:
        if verbosity >= 0:
            console.print("No stylesheet files to process.")
        if missing:
            ctx.exit(ExitCode.FILE_NOT_FOUND)
        return

    pipeline: Pipeline = Pipeline.select(apply=apply_changes, diff=show_diff)
    logger.info("Running pipeline %s on %d file(s)", pipeline.value, len(files))
    results: list[ProcessingContext] = run_files(files, config, pipeline.steps)

    for result in results:
        if verbosity >= 0 or exit_code_for(result) is not None:
            _report_file(console, result, verbosity=verbosity, color=color)
        if show_diff and result.diff:
            console.print(render_patch(result.diff) if color else result.diff, nl=False)

    if show_summary:
        _report_summary(console, results, color)

    code: ExitCode = resolve_exit_code(results, apply=apply_changes, missing=missing)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
