# topmark:header:start
#
#   project      : Formate
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for pipeline tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from formate.pipeline import ProcessingContext, run

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from formate.config import Config
    from formate.pipeline.steps import BaseStep

UNALIGNED: Final[str] = "a {\n    color: red;\n    background-color: blue;\n}\n"


def run_steps(path: Path, config: Config, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Bootstrap a context for ``path`` and run ``steps`` over it."""
    return run(ProcessingContext.bootstrap(path=path, config=config), steps)
