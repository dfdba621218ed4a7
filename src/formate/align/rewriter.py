# topmark:header:start
#
#   project      : Formate
#   file         : rewriter.py
#   file_relpath : src/formate/align/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line rewriting: insert padding around the first colon of a declaration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.align.columns import alignment_offset, resolve_target_column
from formate.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from formate.align.scanner import PropertyGroup
    from formate.config.logging import FormateLogger

logger: FormateLogger = get_logger(__name__)


def insert_padding(line: str, space_count: int, pad_before_colon: bool) -> str:
    """Insert ``space_count`` spaces next to the first colon of ``line``.

    Padding is additive: existing whitespace around the colon is preserved.

    Args:
        line (str): The line to rewrite.
        space_count (int): Number of spaces to insert; ``0`` (or less) is a no-op.
        pad_before_colon (bool): Insert before the colon (aligns colons) if True,
            after it (aligns values) otherwise.

    Returns:
        str: The rewritten line, or ``line`` unchanged when there is nothing to do.

    Example:
        >>> insert_padding("text-align: center;", 5, True)
        'text-align     : center;'
        >>> insert_padding("text-align: center;", 5, False)
        'text-align:      center;'
    """
    if space_count <= 0 or ":" not in line:
        return line
    padding: str = " " * space_count
    replacement: str = padding + ":" if pad_before_colon else ":" + padding
    return line.replace(":", replacement, 1)


def align_group(
    lines: MutableSequence[str],
    group: PropertyGroup,
    additional_spaces: int,
    align_colon: bool,
) -> int:
    """Align the member lines of ``group`` in place.

    Args:
        lines (MutableSequence[str]): The whole document, one entry per line.
        group (PropertyGroup): The group to align; only its members are touched.
        additional_spaces (int): Extra padding added to the furthest colon.
        align_colon (bool): Pad before the colon if True, after it otherwise.

    Returns:
        int: Number of lines rewritten.
    """
    target: int = resolve_target_column(
        (lines[i] for i in group.members), additional_spaces, align_colon
    )
    rewritten = 0
    for i in group.members:
        offset: int | None = alignment_offset(lines[i], align_colon)
        if offset is None or offset >= target:
            continue
        lines[i] = insert_padding(lines[i], target - offset, align_colon)
        rewritten += 1
    logger.trace(
        "Aligned group %d..%d to column %d (%d of %d line(s) rewritten)",
        group.start,
        group.end,
        target,
        rewritten,
        len(group.members),
    )
    return rewritten
