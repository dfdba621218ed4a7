# topmark:header:start
#
#   project      : Formate
#   file         : writer.py
#   file_relpath : src/formate/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step: write formatted text back to disk.

Axes written:
  - write

Sets:
  - WriteStatus: {WRITTEN, SKIPPED, FAILED}

The newline sequence detected by the reader is restored on write.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.pipeline.status import Axis, ComparisonStatus, WriteStatus
from formate.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``formatted_text`` to ``ctx.path`` when it differs from the original."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.WRITE)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Write only changed files."""
        if ctx.status.comparison != ComparisonStatus.CHANGED:
            ctx.status.write = WriteStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Write the file, restoring its newline style."""
        assert ctx.formatted_text is not None
        text: str = ctx.formatted_text
        if ctx.newline != "\n":
            text = text.replace("\n", ctx.newline)
        try:
            with ctx.path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except PermissionError:
            ctx.status.write = WriteStatus.FAILED
            ctx.diagnostics.add_error(f"No write permission: {ctx.path}")
            return
        except OSError as e:
            ctx.status.write = WriteStatus.FAILED
            ctx.diagnostics.add_error(f"Error writing {ctx.path}: {e}")
            return
        ctx.status.write = WriteStatus.WRITTEN
        logger.info("Reformatted %s", ctx.path)
