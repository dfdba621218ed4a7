# topmark:header:start
#
#   project      : Formate
#   file         : base.py
#   file_relpath : src/formate/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formate.config.logging import get_logger

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger
    from formate.pipeline.context import ProcessingContext
    from formate.pipeline.status import Axis

logger: FormateLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs.
        axis (Axis): The status axis this step writes.
    """

    name: str
    axis: Axis

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.debug("Pipeline step %s - running on %s", self.name, ctx.path)
            self.run(ctx)
        else:
            logger.debug("Pipeline step %s may not proceed on %s", self.name, ctx.path)
        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context (default: True)."""
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: ProcessingContext) -> None:
        """Log advisory information about the step's result (optional)."""
        pass
