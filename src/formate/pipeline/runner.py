# topmark:header:start
#
#   project      : Formate
#   file         : runner.py
#   file_relpath : src/formate/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a pipeline over one file or a list of files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.config.logging import get_logger
from formate.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from formate.config import Config
    from formate.config.logging import FormateLogger
    from formate.pipeline.steps.base import BaseStep

logger: FormateLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def run_files(
    files: Iterable[Path], config: Config, steps: Sequence[BaseStep]
) -> list[ProcessingContext]:
    """Run ``steps`` over every file and return the contexts in input order."""
    results: list[ProcessingContext] = []
    for path in files:
        logger.debug("Processing %s", path)
        results.append(run(ProcessingContext.bootstrap(path=path, config=config), steps))
    return results
