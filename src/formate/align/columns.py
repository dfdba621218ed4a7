# topmark:header:start
#
#   project      : Formate
#   file         : columns.py
#   file_relpath : src/formate/align/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column resolution for property groups.

Offsets are measured on the *raw* lines (original indentation included), so
they are comparable across the lines of one group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def colon_offset(line: str) -> int | None:
    """Return the zero-based index of the first ``:`` in ``line``, or None."""
    idx: int = line.find(":")
    return idx if idx >= 0 else None


def furthest_colon_offset(lines: Iterable[str]) -> int:
    """Return the largest first-colon offset among ``lines``.

    Lines without a colon do not take part in the computation. An empty input
    (or one without any colon) yields ``0``.

    Args:
        lines (Iterable[str]): Raw group lines.

    Returns:
        int: The furthest colon offset.

    Example:
        >>> furthest_colon_offset(["    color: #333;", "    text-align: center;"])
        14
    """
    offsets: list[int] = [off for off in map(colon_offset, lines) if off is not None]
    return max(offsets, default=0)


def natural_line(line: str) -> str:
    """Return ``line`` with the whitespace directly before its first colon removed.

    This undoes padding inserted before the colon, so the natural key extent of
    an already aligned line can be measured.
    """
    idx: int | None = colon_offset(line)
    if idx is None:
        return line
    return line[:idx].rstrip() + line[idx:]


def alignment_offset(line: str, align_colon: bool) -> int | None:
    """Return the column a line currently occupies for alignment purposes.

    When aligning colons this is the colon offset. When aligning values the
    padding lives after the colon: the offset is the value column minus two, so
    ``"a: b"`` sits at the colon offset and ``"a:b"`` one column to the left of it.

    Args:
        line (str): Raw line.
        align_colon (bool): True when padding goes before the colon.

    Returns:
        int | None: The offset, or None when the line has no colon.
    """
    idx: int | None = colon_offset(line)
    if idx is None or align_colon:
        return idx
    rest: str = line[idx + 1 :]
    gap: int = len(rest) - len(rest.lstrip())
    return idx + gap - 1


def resolve_target_column(lines: Iterable[str], additional_spaces: int, align_colon: bool) -> int:
    """Return the alignment column for a group of declaration lines.

    The column is the furthest *natural* colon offset plus ``additional_spaces``.
    It never falls left of a line that is already placed further right, since
    padding is only ever added. Both rules together make alignment a fixed point:
    running it again on its own output changes nothing.

    Args:
        lines (Iterable[str]): Raw member lines of one group.
        additional_spaces (int): Extra padding added to the furthest colon.
        align_colon (bool): True when padding goes before the colon.

    Returns:
        int: The target column.
    """
    members: list[str] = list(lines)
    natural: int = furthest_colon_offset(natural_line(line) for line in members)
    current: list[int] = [
        off for off in (alignment_offset(line, align_colon) for line in members) if off is not None
    ]
    return max(natural + additional_spaces, max(current, default=0))
