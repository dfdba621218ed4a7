# topmark:header:start
#
#   project      : Formate
#   file         : cmd_common.py
#   file_relpath : src/formate/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: console and verbosity access, config
resolution from CLI options, diagnostics rendering and the mapping from
per-file pipeline statuses to exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from formate.cli.errors import FormateConfigError
from formate.cli.exit_codes import ExitCode
from formate.config import MutableConfig
from formate.config.logging import get_logger
from formate.core.diagnostics import DiagnosticLevel
from formate.pipeline.status import ContentStatus, FormatStatus, WriteStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from formate.cli.console_api import ConsoleLike
    from formate.config import ArgsLike, Config
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)

_CONTENT_EXIT_CODES: dict[ContentStatus, ExitCode] = {
    ContentStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    ContentStatus.NO_READ_PERMISSION: ExitCode.PERMISSION_DENIED,
    ContentStatus.UNREADABLE: ExitCode.IO_ERROR,
    ContentStatus.UNICODE_DECODE_ERROR: ExitCode.ENCODING_ERROR,
    ContentStatus.UNSUPPORTED: ExitCode.UNSUPPORTED_FILE_TYPE,
}


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the root group (default 0)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def is_color_enabled(ctx: click.Context) -> bool:
    """Return True if the root group enabled colored output."""
    ctx.ensure_object(dict)
    return bool(ctx.obj.get("color_enabled", False))


def formatting_overrides(
    *,
    additional_spaces: int | None = None,
    align_colon: bool | None = None,
    vertical_align_properties: bool | None = None,
    beautify: bool | None = None,
    tab_size: int | None = None,
    use_tabs: bool | None = None,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = (),
) -> dict[str, Any]:
    """Collect CLI option values into the override mapping understood by `MutableConfig`."""
    return {
        "additional_spaces": additional_spaces,
        "align_colon": align_colon,
        "vertical_align_properties": vertical_align_properties,
        "beautify": beautify,
        "tab_size": tab_size,
        "insert_spaces": None if use_tabs is None else not use_tabs,
        "include_patterns": list(include_patterns),
        "exclude_patterns": list(exclude_patterns),
    }


def build_config(
    *,
    config_paths: Sequence[str] = (),
    no_config: bool = False,
    overrides: ArgsLike | None = None,
) -> Config:
    """Resolve the effective configuration for a command.

    Layers defaults, the discovered project file (unless ``no_config``), the
    ``--config`` files and the CLI overrides.

    Raises:
        FormateConfigError: If any layer produced an ERROR diagnostic.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        use_project_config=not no_config,
    )
    if overrides:
        draft.apply_overrides(overrides)
    config: Config = draft.freeze()

    for diag in config.diagnostics:
        logger.debug("config diagnostic: %s", diag.render())
    if config.has_errors:
        errors: list[str] = [
            diag.message for diag in config.diagnostics if diag.level == DiagnosticLevel.ERROR
        ]
        raise FormateConfigError("Invalid configuration:\n  " + "\n  ".join(errors))
    return config


def render_config_diagnostics(console: ConsoleLike, config: Config, verbosity: int) -> None:
    """Print non-fatal config diagnostics (warnings) unless running quietly."""
    if verbosity < 0:
        return
    for diag in config.diagnostics:
        if diag.level == DiagnosticLevel.WARNING:
            console.warn(diag.render())
        elif verbosity > 1:
            console.print(diag.render())


def exit_code_for(ctx: ProcessingContext) -> ExitCode | None:
    """Return the error exit code for a processed file, or None if it succeeded."""
    content_code: ExitCode | None = _CONTENT_EXIT_CODES.get(ctx.status.content)
    if content_code is not None:
        return content_code
    if ctx.status.format == FormatStatus.FAILED:
        return ExitCode.PIPELINE_ERROR
    if ctx.status.write == WriteStatus.FAILED:
        return ExitCode.IO_ERROR
    return None


def resolve_exit_code(
    results: Sequence[ProcessingContext],
    *,
    apply: bool,
    missing: Sequence[Path] = (),
) -> ExitCode:
    """Return the exit code for a batch run.

    The first per-file error wins; missing input paths count as
    ``FILE_NOT_FOUND``. Without errors, a dry run with changes yields
    ``WOULD_CHANGE``.
    """
    for ctx in results:
        code: ExitCode | None = exit_code_for(ctx)
        if code is not None:
            return code
    if missing:
        return ExitCode.FILE_NOT_FOUND
    if not apply and any(ctx.would_change for ctx in results):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS
