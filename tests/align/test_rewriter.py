# topmark:header:start
#
#   project      : Formate
#   file         : test_rewriter.py
#   file_relpath : tests/align/test_rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line rewriter: additive padding around the first colon."""

from __future__ import annotations

from formate.align.rewriter import align_group, insert_padding
from formate.align.scanner import PropertyGroup


def test_insert_padding_zero_is_noop() -> None:
    """Zero (or negative) padding returns the input unchanged."""
    assert insert_padding("text-align: center;", 0, True) == "text-align: center;"
    assert insert_padding("text-align: center;", -3, False) == "text-align: center;"


def test_insert_padding_before_colon() -> None:
    """Padding before the colon lines up colons."""
    assert insert_padding("text-align: center;", 5, True) == "text-align     : center;"


def test_insert_padding_after_colon() -> None:
    """Padding after the colon lines up values; the existing space is kept."""
    assert insert_padding("text-align: center;", 5, False) == "text-align:      center;"


def test_insert_padding_only_touches_first_colon() -> None:
    """Later colons (e.g. in URLs) are left alone."""
    line = "background: url(http://x/y.png);"
    assert insert_padding(line, 2, True) == "background  : url(http://x/y.png);"


def test_insert_padding_without_colon_is_noop() -> None:
    """Lines without a colon are returned unchanged."""
    assert insert_padding("}", 4, True) == "}"


def test_align_group_rewrites_members_only() -> None:
    """Non-member lines inside the group span are never touched."""
    lines = [
        "  color: red;",
        "  // note: keep",
        "  background-color: green;",
    ]
    group = PropertyGroup(start=0, end=3, members=(0, 2))
    rewritten = align_group(lines, group, 0, True)
    assert rewritten == 1
    assert lines == [
        "  color           : red;",
        "  // note: keep",
        "  background-color: green;",
    ]
