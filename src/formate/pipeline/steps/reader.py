# topmark:header:start
#
#   project      : Formate
#   file         : reader.py
#   file_relpath : src/formate/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load a stylesheet as UTF-8 text.

Axes written:
  - content

Sets:
  - ContentStatus: {OK, NOT_FOUND, NO_READ_PERMISSION, UNREADABLE,
                    UNICODE_DECODE_ERROR, UNSUPPORTED}

The detected newline sequence is stored on the context and the text is
normalized to ``\\n`` so the formatter only ever sees LF line endings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.file_resolver import detect_newline, is_supported
from formate.pipeline.status import Axis, ContentStatus
from formate.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)


def normalize_newlines(text: str) -> str:
    """Return ``text`` with CRLF and CR line endings converted to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class ReaderStep(BaseStep):
    """Load the file content and set `ContentStatus`."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.CONTENT)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Only read files that have not been read yet."""
        return ctx.status.content == ContentStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` and populate ``original_text`` and ``newline``."""
        if not is_supported(ctx.path):
            ctx.status.content = ContentStatus.UNSUPPORTED
            ctx.diagnostics.add_warning(f"Unsupported file type: {ctx.path}")
            return

        try:
            raw: bytes = ctx.path.read_bytes()
        except FileNotFoundError:
            ctx.status.content = ContentStatus.NOT_FOUND
            ctx.diagnostics.add_error(f"File not found: {ctx.path}")
            return
        except PermissionError:
            ctx.status.content = ContentStatus.NO_READ_PERMISSION
            ctx.diagnostics.add_error(f"Permission denied: {ctx.path}")
            return
        except OSError as e:
            ctx.status.content = ContentStatus.UNREADABLE
            ctx.diagnostics.add_error(f"Error reading {ctx.path}: {e}")
            return

        try:
            text: str = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            ctx.status.content = ContentStatus.UNICODE_DECODE_ERROR
            ctx.diagnostics.add_error(f"Cannot decode {ctx.path} as UTF-8: {e.reason}")
            return

        ctx.newline = detect_newline(text)
        ctx.original_text = normalize_newlines(text)
        ctx.status.content = ContentStatus.OK
        logger.trace("Read %d character(s) from %s (newline=%r)", len(text), ctx.path, ctx.newline)

    def hint(self, ctx: ProcessingContext) -> None:
        """Log non-OK content statuses."""
        if ctx.status.content != ContentStatus.OK:
            logger.info("%s: %s", ctx.path, ctx.status.content.value)
