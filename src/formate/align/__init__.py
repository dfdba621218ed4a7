# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/align/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property alignment core.

Re-exports the line classifier, group scanner, column resolver and line
rewriter, together with the `vertical_align` transform built from them.
"""

from __future__ import annotations

from formate.align.aligner import vertical_align
from formate.align.classifier import (
    DEFAULT_CLASSIFIER,
    LineClassifier,
    RegexLineClassifier,
    is_comment_line,
    is_ignore_marker_line,
    is_property_line,
)
from formate.align.columns import (
    alignment_offset,
    colon_offset,
    furthest_colon_offset,
    natural_line,
    resolve_target_column,
)
from formate.align.rewriter import align_group, insert_padding
from formate.align.scanner import PropertyGroup, ScanState, scan_groups, scan_line

__all__ = [
    "DEFAULT_CLASSIFIER",
    "LineClassifier",
    "PropertyGroup",
    "RegexLineClassifier",
    "ScanState",
    "align_group",
    "alignment_offset",
    "colon_offset",
    "furthest_colon_offset",
    "insert_padding",
    "is_comment_line",
    "is_ignore_marker_line",
    "is_property_line",
    "natural_line",
    "resolve_target_column",
    "scan_groups",
    "scan_line",
    "vertical_align",
]
