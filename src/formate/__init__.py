# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate: a stylesheet formatter that vertically aligns property declarations.

The alignment core lives in `formate.align`; `formate.formatting` combines it
with a CSS beautifier into whole-document and range formatting, and
`formate.cli` exposes both on the command line.
"""

from __future__ import annotations

from formate.align import vertical_align
from formate.formatting import format_document, format_text

__all__ = ["format_document", "format_text", "vertical_align"]
