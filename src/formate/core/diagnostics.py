# topmark:header:start
#
#   project      : Formate
#   file         : diagnostics.py
#   file_relpath : src/formate/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while loading config or processing files.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return a one-line ``[level] message`` representation."""
        text: str = f"[{self.level.value}] {self.message}"
        return self.level.color(text) if color else text


class DiagnosticLog(list[Diagnostic]):
    """Mutable list of diagnostics with convenience adders."""

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append a diagnostic with the given level."""
        self.append(Diagnostic(level, message))

    def add_info(self, message: str) -> None:
        """Append an INFO diagnostic."""
        self.add(DiagnosticLevel.INFO, message)

    def add_warning(self, message: str) -> None:
        """Append a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def add_error(self, message: str) -> None:
        """Append an ERROR diagnostic."""
        self.add(DiagnosticLevel.ERROR, message)

    @property
    def has_errors(self) -> bool:
        """Return True if at least one ERROR diagnostic was recorded."""
        return any(d.level == DiagnosticLevel.ERROR for d in self)
