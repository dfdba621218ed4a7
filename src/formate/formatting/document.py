# topmark:header:start
#
#   project      : Formate
#   file         : document.py
#   file_relpath : src/formate/formatting/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document-level formatting: beautify, then align, then hand back text edits.

This is the glue between a host (editor, CLI, pipeline) and the alignment core:

- `format_document` formats a whole document or a line range and returns the
  replacement as a list of `TextEdit` objects (empty when formatting is
  disabled);
- `apply_edits` applies such edits to the original text;
- `format_text` is the whole-document convenience wrapper used by the CLI and
  the file pipeline. It preserves the presence or absence of a final newline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formate.align import vertical_align
from formate.config.logging import get_logger
from formate.formatting.beautifier import BeautifyOptions, beautifier_for

if TYPE_CHECKING:
    from collections.abc import Sequence

    from formate.config import Config
    from formate.config.logging import FormateLogger
    from formate.formatting.beautifier import Beautifier

logger: FormateLogger = get_logger(__name__)


@dataclass(frozen=True)
class TextRange:
    """A range of whole lines, zero-based and inclusive on both ends."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 0 or self.end_line < self.start_line:
            raise ValueError(f"Invalid line range: {self.start_line}..{self.end_line}")

    def overlaps(self, other: TextRange) -> bool:
        """Return True if both ranges share at least one line."""
        return self.start_line <= other.end_line and other.start_line <= self.end_line


@dataclass(frozen=True)
class TextEdit:
    """Replacement of the lines covered by ``range`` with ``new_text``."""

    range: TextRange
    new_text: str


def full_range(text: str) -> TextRange:
    """Return the range spanning every line of ``text``."""
    return TextRange(0, text.count("\n"))


def _slice_lines(lines: Sequence[str], text_range: TextRange) -> str:
    if text_range.end_line >= len(lines):
        raise ValueError(
            f"Line range {text_range.start_line}..{text_range.end_line} "
            f"exceeds document of {len(lines)} line(s)"
        )
    return "\n".join(lines[text_range.start_line : text_range.end_line + 1])


def format_document(
    text: str,
    config: Config,
    *,
    text_range: TextRange | None = None,
    beautifier: Beautifier | None = None,
) -> list[TextEdit]:
    """Format ``text`` (or the lines in ``text_range``) and return the edits.

    Args:
        text (str): The full document text.
        config (Config): Effective configuration.
        text_range (TextRange | None): Lines to format; the whole document if None.
        beautifier (Beautifier | None): Beautifier to run first; selected from
            ``config`` if None.

    Returns:
        list[TextEdit]: A single edit replacing the range, or an empty list when
            formatting is disabled or produced no text.

    Raises:
        ValueError: If ``text_range`` lies outside the document.
    """
    if not config.enable:
        logger.info("Formatting disabled by configuration")
        return []

    target: TextRange = text_range or full_range(text)
    content: str = _slice_lines(text.split("\n"), target)

    active: Beautifier = beautifier or beautifier_for(config)
    formatted: str = active.beautify(content, BeautifyOptions.from_config(config))

    if config.vertical_align_properties:
        formatted = vertical_align(
            formatted,
            additional_spaces=config.additional_spaces,
            align_colon=config.align_colon,
        )

    if not formatted:
        return []
    return [TextEdit(target, formatted)]


def apply_edits(text: str, edits: Sequence[TextEdit]) -> str:
    """Apply non-overlapping line edits to ``text``.

    Args:
        text (str): The original document.
        edits (Sequence[TextEdit]): Edits expressed against the original line numbers.

    Returns:
        str: The edited document.

    Raises:
        ValueError: If two edits overlap or an edit lies outside the document.
    """
    ordered: list[TextEdit] = sorted(edits, key=lambda e: e.range.start_line, reverse=True)
    for later, earlier in zip(ordered, ordered[1:]):
        if later.range.overlaps(earlier.range):
            raise ValueError(f"Overlapping edits: {earlier.range} and {later.range}")

    lines: list[str] = text.split("\n")
    for edit in ordered:
        if edit.range.end_line >= len(lines):
            raise ValueError(f"Edit {edit.range} exceeds document of {len(lines)} line(s)")
        lines[edit.range.start_line : edit.range.end_line + 1] = edit.new_text.split("\n")
    return "\n".join(lines)


def format_text(text: str, config: Config, *, beautifier: Beautifier | None = None) -> str:
    """Format a whole document and return the new text.

    The final newline of ``text`` (or its absence) is preserved even though
    beautifiers typically strip it.

    Args:
        text (str): The document.
        config (Config): Effective configuration.
        beautifier (Beautifier | None): Optional beautifier override.

    Returns:
        str: The formatted document (``text`` itself when formatting is disabled).
    """
    edits: list[TextEdit] = format_document(text, config, beautifier=beautifier)
    if not edits:
        return text
    result: str = apply_edits(text, edits)
    if text.endswith("\n") and not result.endswith("\n"):
        result += "\n"
    elif not text.endswith("\n") and result.endswith("\n"):
        result = result[:-1]
    return result
