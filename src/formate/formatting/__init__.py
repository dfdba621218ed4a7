# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document formatting: beautifier collaborators and the edit-producing formatter."""

from __future__ import annotations

from formate.formatting.beautifier import (
    Beautifier,
    BeautifyOptions,
    CssBeautifier,
    PassthroughBeautifier,
    beautifier_for,
)
from formate.formatting.document import (
    TextEdit,
    TextRange,
    apply_edits,
    format_document,
    format_text,
    full_range,
)

__all__ = [
    "Beautifier",
    "BeautifyOptions",
    "CssBeautifier",
    "PassthroughBeautifier",
    "TextEdit",
    "TextRange",
    "apply_edits",
    "beautifier_for",
    "format_document",
    "format_text",
    "full_range",
]
