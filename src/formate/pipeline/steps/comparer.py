# topmark:header:start
#
#   project      : Formate
#   file         : comparer.py
#   file_relpath : src/formate/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comparer step: decide whether formatting changes the file.

Axes written:
  - comparison

Sets:
  - ComparisonStatus: {CHANGED, UNCHANGED, SKIPPED}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.pipeline.status import Axis, ComparisonStatus, FormatStatus
from formate.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)


class ComparerStep(BaseStep):
    """Compare ``formatted_text`` with ``original_text``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.COMPARISON)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Compare only when the formatter produced text."""
        if ctx.status.format not in (FormatStatus.FORMATTED, FormatStatus.DISABLED):
            ctx.status.comparison = ComparisonStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Set ``ComparisonStatus.CHANGED`` or ``UNCHANGED``."""
        if ctx.formatted_text == ctx.original_text:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
        else:
            ctx.status.comparison = ComparisonStatus.CHANGED
        logger.debug("%s: %s", ctx.path, ctx.status.comparison.value)
