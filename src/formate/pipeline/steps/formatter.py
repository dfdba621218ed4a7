# topmark:header:start
#
#   project      : Formate
#   file         : formatter.py
#   file_relpath : src/formate/pipeline/steps/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter step: beautify and align the file content.

Axes written:
  - format

Sets:
  - FormatStatus: {FORMATTED, DISABLED, SKIPPED, FAILED}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.formatting import format_text
from formate.pipeline.status import Axis, ContentStatus, FormatStatus
from formate.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.formatting import Beautifier
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)


class FormatterStep(BaseStep):
    """Run `format_text` on the file content.

    Args:
        beautifier (Beautifier | None): Beautifier override; selected from the
            context's config when None.
    """

    def __init__(self, beautifier: Beautifier | None = None) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.FORMAT)
        self.beautifier: Beautifier | None = beautifier

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Format only files that were read successfully."""
        if ctx.status.content != ContentStatus.OK or ctx.original_text is None:
            ctx.status.format = FormatStatus.SKIPPED
            return False
        if not ctx.config.enable:
            ctx.status.format = FormatStatus.DISABLED
            ctx.diagnostics.add_info("Formatting disabled by configuration")
            ctx.formatted_text = ctx.original_text
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Populate ``ctx.formatted_text``.

        Errors raised by the beautifier are recorded as an ERROR diagnostic and
        ``FormatStatus.FAILED``; the file is left untouched.
        """
        assert ctx.original_text is not None
        try:
            ctx.formatted_text = format_text(
                ctx.original_text, ctx.config, beautifier=self.beautifier
            )
        except Exception as e:
            logger.error("Formatting %s failed: %s", ctx.path, e)
            ctx.status.format = FormatStatus.FAILED
            ctx.diagnostics.add_error(f"Formatting failed: {e}")
            return
        ctx.status.format = FormatStatus.FORMATTED
