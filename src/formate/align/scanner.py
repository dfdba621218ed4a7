# topmark:header:start
#
#   project      : Formate
#   file         : scanner.py
#   file_relpath : src/formate/align/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property group detection.

A property group is a maximal contiguous run of declaration lines. Comment
lines, block comments, ignore markers and the line right after an ignore marker
neither join nor break a run; any other non-declaration line (blank line,
selector, closing brace, at-rule) closes it.

The scan is a single left-to-right pass. All scan state lives in a `ScanState`
instance that is threaded explicitly through `scan_line`, which keeps the state
machine testable one line at a time. For each line the rules are evaluated in
this order:

1. the previous line was an ignore marker: skip this line;
2. ignore marker: remember to skip the next line;
3. ``//`` comment: skip;
4. line contains ``*/``: leave the block comment, skip;
5. line starts with ``/*`` or a block comment is open: skip;
6. declaration lines open a group (or join the open one); other lines close it.
   The last line of the document also closes an open group, and is a member
   when it is a declaration itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from formate.align.classifier import DEFAULT_CLASSIFIER
from formate.config.logging import get_logger
from formate.constants import BLOCK_COMMENT_END, BLOCK_COMMENT_START

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from formate.align.classifier import LineClassifier
    from formate.config.logging import FormateLogger

logger: FormateLogger = get_logger(__name__)


@dataclass(frozen=True)
class PropertyGroup:
    """A run of declaration lines aligned as one unit.

    Attributes:
        start (int): Index of the first declaration line of the run.
        end (int): Exclusive end index of the run.
        members (tuple[int, ...]): Indices of the declaration lines that take part
            in alignment. Skipped lines inside ``[start, end)`` are not members.
    """

    start: int
    end: int
    members: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.members)


@dataclass
class ScanState:
    """Mutable state of one scanning pass.

    Attributes:
        group_start (int | None): Start index of the open group, None when idle.
        members (list[int]): Member indices collected for the open group.
        in_block_comment (bool): True while inside a ``/* ... */`` block.
        ignore_next (bool): True when the previous line was an ignore marker.
    """

    group_start: int | None = None
    members: list[int] = field(default_factory=lambda: [])
    in_block_comment: bool = False
    ignore_next: bool = False

    @property
    def in_group(self) -> bool:
        """Return True while a group is open."""
        return self.group_start is not None

    def close_group(self, end: int) -> PropertyGroup | None:
        """Close the open group at ``end`` (exclusive) and reset to idle.

        Returns:
            PropertyGroup | None: The closed group, or None when no group was open.
        """
        if self.group_start is None:
            return None
        group = PropertyGroup(start=self.group_start, end=end, members=tuple(self.members))
        self.group_start = None
        self.members = []
        return group


def scan_line(
    state: ScanState,
    index: int,
    line: str,
    *,
    is_last: bool,
    classifier: LineClassifier = DEFAULT_CLASSIFIER,
) -> PropertyGroup | None:
    """Advance the scan by one line.

    Args:
        state (ScanState): Scan state, updated in place.
        index (int): Zero-based index of ``line`` in the document.
        line (str): The raw line.
        is_last (bool): True if ``line`` is the last line of the document.
        classifier (LineClassifier): Line classifier to use.

    Returns:
        PropertyGroup | None: The group closed by this line, if any.
    """
    if state.ignore_next:
        state.ignore_next = False
        logger.trace("line %d: ignored by marker", index)
        return None

    if classifier.is_ignore_marker_line(line):
        state.ignore_next = True
        return None

    if classifier.is_comment_line(line):
        return None

    trimmed: str = line.strip()
    if BLOCK_COMMENT_END in trimmed:
        state.in_block_comment = False
        return None

    if trimmed.startswith(BLOCK_COMMENT_START) or state.in_block_comment:
        state.in_block_comment = True
        return None

    if classifier.is_property_line(line):
        if state.group_start is None:
            state.group_start = index
        state.members.append(index)
        if is_last:
            return state.close_group(index + 1)
        return None

    # Non-declaration terminator: not a member of the group it closes.
    return state.close_group(index)


def scan_groups(
    lines: Sequence[str],
    classifier: LineClassifier | None = None,
) -> Iterator[PropertyGroup]:
    """Yield the property groups of ``lines`` in document order.

    Args:
        lines (Sequence[str]): Raw document lines.
        classifier (LineClassifier | None): Line classifier; defaults to the
            regex-based heuristic classifier.

    Yields:
        PropertyGroup: Each group, as soon as it is closed.
    """
    active: LineClassifier = classifier or DEFAULT_CLASSIFIER
    state = ScanState()
    last: int = len(lines) - 1
    for index, line in enumerate(lines):
        group: PropertyGroup | None = scan_line(
            state, index, line, is_last=index == last, classifier=active
        )
        if group is not None:
            yield group

    # The scan may end on a skipped line while a group is still open.
    trailing: PropertyGroup | None = state.close_group(len(lines))
    if trailing is not None:
        yield trailing
