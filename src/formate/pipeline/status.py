# topmark:header:start
#
#   project      : Formate
#   file         : status.py
#   file_relpath : src/formate/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the Formate file pipeline.

Each enum captures one phase (content, format, comparison, write). Steps only
write to the axis they declare. Values are the human-readable strings shown in
CLI summaries; compare members with ``==``.
"""

from __future__ import annotations

from enum import Enum

from yachalk import chalk

from formate.rendering.colored_enum import ColoredStrEnum


class Axis(str, Enum):
    """Status axes of a `ProcessingContext`."""

    CONTENT = "content"
    FORMAT = "format"
    COMPARISON = "comparison"
    WRITE = "write"


class ContentStatus(ColoredStrEnum):
    """Outcome of reading a file."""

    PENDING = ("pending", chalk.gray)
    OK = ("ok", chalk.green)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNREADABLE = ("read error", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.yellow)
    UNSUPPORTED = ("unsupported file type", chalk.yellow)


class FormatStatus(ColoredStrEnum):
    """Outcome of beautifying and aligning the file content."""

    PENDING = ("format pending", chalk.gray)
    FORMATTED = ("formatted", chalk.green)
    DISABLED = ("formatting disabled", chalk.yellow)
    SKIPPED = ("format skipped", chalk.yellow)
    FAILED = ("format failed", chalk.red_bright)


class ComparisonStatus(ColoredStrEnum):
    """Outcome of comparing the formatted text with the original."""

    PENDING = ("comparison pending", chalk.gray)
    CHANGED = ("would reformat", chalk.red)
    UNCHANGED = ("already formatted", chalk.green)
    SKIPPED = ("comparison skipped", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of writing the formatted text back to disk."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("reformatted", chalk.green)
    SKIPPED = ("write skipped", chalk.yellow)
    FAILED = ("write failed", chalk.red_bright)
