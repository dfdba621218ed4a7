# topmark:header:start
#
#   project      : Formate
#   file         : logging.py
#   file_relpath : src/formate/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup for Formate.

Formate logs through the standard `logging` module with two additions: a
``TRACE`` level below ``DEBUG`` (used for per-line alignment and per-file
pipeline details) and a `ChalkFormatter` that colors records by severity.

The level comes from the ``FORMATE_LOG_LEVEL`` environment variable; without
it only CRITICAL records are shown. User-facing output never goes through
logging (see `formate.cli.console`).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from formate.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class FormateLogger(logging.Logger):
    """Logger class adding `trace` for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(FormateLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    # (threshold, style), highest threshold first
    LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level."""
        message: str = super().format(record)
        for threshold, style in self.LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``FORMATE_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (case-insensitive, including ``TRACE``) and numbers.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stdout handler.

    Args:
        level (int | None): Log level; the environment (or CRITICAL) when None.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> FormateLogger:
    """Return the `FormateLogger` called ``name``."""
    return cast("FormateLogger", logging.getLogger(name))
