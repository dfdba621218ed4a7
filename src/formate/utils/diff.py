# topmark:header:start
#
#   project      : Formate
#   file         : diff.py
#   file_relpath : src/formate/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff helpers.

`make_patch` produces a unified diff between two texts and `render_patch`
formats a colorized preview of it for logging and CLI display.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def make_patch(current: str, updated: str, *, fromfile: str, tofile: str) -> list[str]:
    """Return the unified diff lines (with line endings) from ``current`` to ``updated``.

    An empty list means both texts are identical. Every returned line ends with
    a newline, also when the last line of either text has none.
    """
    return [
        line if line.endswith("\n") else line + "\n"
        for line in difflib.unified_diff(
            current.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=fromfile,
            tofile=tofile,
            n=3,
        )
    ]


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as a sequence of lines or a
            single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers is True:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
