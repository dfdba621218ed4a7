# topmark:header:start
#
#   project      : Formate
#   file         : classifier.py
#   file_relpath : src/formate/align/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification for stylesheet alignment.

The classifier answers three independent questions about a single line:

- is it a property declaration (``color: red;``)?
- is it a ``//`` line comment?
- is it a ``// formate-ignore`` marker?

Classification is a permissive heuristic, not a grammar. The group scanner only
depends on the `LineClassifier` protocol, so a stricter implementation can be
swapped in without touching the scanning state machine.

All predicates operate on the trimmed line, are pure, and never raise.
"""

from __future__ import annotations

import re
from typing import Final, Protocol, runtime_checkable

from formate.constants import IGNORE_DIRECTIVE, LINE_COMMENT_MARKER

# Declaration shape:
#   ([A-z]-*)*   identifier-ish key (letters and hyphens; `[A-z]` also spans `[\]^_`` and
#                the search is unanchored, so `$var`, `@var` and `-webkit-*` keys match)
#   \s*:\s*      colon with optional surrounding whitespace
#   .*;?         value and optional semicolon
#   [^,|{]$      must not end with a comma, pipe or opening brace
PROPERTY_PATTERN: Final[re.Pattern[str]] = re.compile(r"(([A-z]-*)*\s*:\s*).*;?[^,|{]$")


def is_property_line(line: str) -> bool:
    """Return True if the trimmed line looks like a property declaration.

    Selector continuations (``a:hover,``) and rule openers (``a:hover {``) are
    rejected because of their trailing character.

    Args:
        line (str): The line to classify (leading/trailing whitespace is ignored).

    Returns:
        bool: True for declaration-shaped lines, False otherwise (including ``""``).
    """
    trimmed: str = line.strip()
    if not trimmed:
        return False
    return PROPERTY_PATTERN.search(trimmed) is not None


def is_comment_line(line: str) -> bool:
    """Return True if the trimmed line starts with a ``//`` line comment."""
    return line.strip().startswith(LINE_COMMENT_MARKER)


def is_ignore_marker_line(line: str) -> bool:
    """Return True if the line is a ``// formate-ignore`` directive.

    Whitespace around the marker and between ``//`` and the directive is
    tolerated; anything after the directive token is ignored.

    Args:
        line (str): The line to classify.

    Returns:
        bool: True if the line suppresses alignment of the next line.
    """
    trimmed: str = line.strip()
    if not trimmed.startswith(LINE_COMMENT_MARKER):
        return False
    return trimmed[len(LINE_COMMENT_MARKER) :].lstrip().startswith(IGNORE_DIRECTIVE)


@runtime_checkable
class LineClassifier(Protocol):
    """Capability interface used by the group scanner to classify lines."""

    def is_property_line(self, line: str) -> bool:
        """Return True if the line is a property declaration."""
        ...

    def is_comment_line(self, line: str) -> bool:
        """Return True if the line is a line comment."""
        ...

    def is_ignore_marker_line(self, line: str) -> bool:
        """Return True if the line suppresses alignment of the following line."""
        ...


class RegexLineClassifier:
    """Default classifier backed by the module-level heuristic predicates."""

    def is_property_line(self, line: str) -> bool:
        """Return True if the line is a property declaration."""
        return is_property_line(line)

    def is_comment_line(self, line: str) -> bool:
        """Return True if the line is a line comment."""
        return is_comment_line(line)

    def is_ignore_marker_line(self, line: str) -> bool:
        """Return True if the line is an ignore marker."""
        return is_ignore_marker_line(line)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pattern={PROPERTY_PATTERN.pattern!r})"


DEFAULT_CLASSIFIER: Final[LineClassifier] = RegexLineClassifier()
