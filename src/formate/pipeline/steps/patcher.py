# topmark:header:start
#
#   project      : Formate
#   file         : patcher.py
#   file_relpath : src/formate/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patch (diff) generation step.

Compares the original and formatted text and stores a unified diff on the
context. This step performs no I/O; the CLI decides how to display diffs.

Axes written:
  - comparison (normalized to UNCHANGED when the diff turns out empty)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.pipeline.status import Axis, ComparisonStatus
from formate.pipeline.steps.base import BaseStep
from formate.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext

logger: FormateLogger = get_logger(__name__)


class PatcherStep(BaseStep):
    """Attach a unified diff to changed files."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis=Axis.COMPARISON)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Diff only files the comparer flagged as changed."""
        return ctx.status.comparison == ComparisonStatus.CHANGED

    def run(self, ctx: ProcessingContext) -> None:
        """Populate ``ctx.diff``."""
        assert ctx.original_text is not None and ctx.formatted_text is not None
        patch_lines: list[str] = make_patch(
            ctx.original_text,
            ctx.formatted_text,
            fromfile=f"{ctx.path} (current)",
            tofile=f"{ctx.path} (formatted)",
        )
        if not patch_lines:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
            ctx.diff = None
            return
        ctx.diff = "".join(patch_lines)
        logger.trace("Patch (rendered):\n%s", render_patch(patch_lines))
