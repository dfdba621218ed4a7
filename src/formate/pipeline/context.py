# topmark:header:start
#
#   project      : Formate
#   file         : context.py
#   file_relpath : src/formate/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing context for the Formate pipeline.

A `ProcessingContext` is created for each input file and handed from step to
step. Steps mutate it in place: they fill in the text buffers, set their status
axis and append diagnostics. The context never performs I/O itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from formate.core.diagnostics import DiagnosticLog
from formate.pipeline.status import (
    ComparisonStatus,
    ContentStatus,
    FormatStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from formate.config import Config
    from formate.pipeline.steps.base import BaseStep
    from formate.rendering.colored_enum import ColoredStrEnum


@dataclass
class ProcessingStatus:
    """Status of every pipeline axis for one file."""

    content: ContentStatus = ContentStatus.PENDING
    format: FormatStatus = FormatStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING


@dataclass
class ProcessingContext:
    """Mutable state for processing a single file.

    Attributes:
        path (Path): The file being processed.
        config (Config): Effective configuration.
        original_text (str | None): File content with newlines normalized to ``\\n``.
        newline (str): Newline sequence detected in the file; restored on write.
        formatted_text (str | None): Result of the formatter step.
        status (ProcessingStatus): Per-axis status.
        diagnostics (DiagnosticLog): Warnings and errors collected by the steps.
        diff (str | None): Unified diff between original and formatted text.
        steps (list[BaseStep]): Steps that have been invoked on this context.
    """

    path: Path
    config: Config
    original_text: str | None = None
    newline: str = "\n"
    formatted_text: str | None = None
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    diff: str | None = None
    steps: list[BaseStep] = field(default_factory=list)

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config) -> ProcessingContext:
        """Create a fresh context for ``path``."""
        return cls(path=path, config=config)

    @property
    def would_change(self) -> bool:
        """Return True if formatting changes the file content."""
        return self.status.comparison == ComparisonStatus.CHANGED

    @property
    def has_errors(self) -> bool:
        """Return True if any step recorded an ERROR diagnostic."""
        return self.diagnostics.has_errors

    def summary_status(self) -> ColoredStrEnum:
        """Return the most relevant status for a one-line file summary."""
        if self.status.content != ContentStatus.OK:
            return self.status.content
        if self.status.format not in (FormatStatus.FORMATTED, FormatStatus.PENDING):
            return self.status.format
        if self.status.write in (WriteStatus.WRITTEN, WriteStatus.FAILED):
            return self.status.write
        return self.status.comparison

    def format_summary(self, *, color: bool = False) -> str:
        """Return ``"<path>: <status>"`` for CLI output."""
        return f"{self.path}: {self.summary_status().render(color=color)}"
