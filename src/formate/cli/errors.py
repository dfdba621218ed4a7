# topmark:header:start
#
#   project      : Formate
#   file         : errors.py
#   file_relpath : src/formate/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Formate CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
They prefer the project console if one is stored on the Click context (see
`FormateError.show`) and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from formate.cli.exit_codes import ExitCode


class FormateError(click.ClickException):
    """Base class for all Formate CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class FormateUsageError(FormateError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FormateConfigError(FormateError):
    """Error for configuration errors (unreadable file, invalid values)."""

    exit_code = ExitCode.CONFIG_ERROR


class FormateEncodingError(FormateError):
    """Error for text decoding errors (input is not UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR


class FormatePipelineError(FormateError):
    """Error for formatting failures (e.g., the beautifier raised)."""

    exit_code = ExitCode.PIPELINE_ERROR
