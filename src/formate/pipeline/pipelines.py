# topmark:header:start
#
#   project      : Formate
#   file         : pipelines.py
#   file_relpath : src/formate/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

- ``CHECK``: read → format → compare
- ``CHECK_PATCH``: CHECK + patch
- ``APPLY``: CHECK + write
- ``APPLY_PATCH``: CHECK + patch → write
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from formate.pipeline.steps import (
    BaseStep,
    ComparerStep,
    FormatterStep,
    PatcherStep,
    ReaderStep,
    WriterStep,
)

CHECK: Final[tuple[BaseStep, ...]] = (
    ReaderStep(),
    FormatterStep(),
    ComparerStep(),
)

CHECK_PATCH: Final[tuple[BaseStep, ...]] = CHECK + (PatcherStep(),)

APPLY: Final[tuple[BaseStep, ...]] = CHECK + (WriterStep(),)

APPLY_PATCH: Final[tuple[BaseStep, ...]] = CHECK_PATCH + (WriterStep(),)


class Pipeline(Enum):
    """Registry of named pipelines."""

    CHECK = "check"
    CHECK_PATCH = "check_patch"
    APPLY = "apply"
    APPLY_PATCH = "apply_patch"

    @property
    def steps(self) -> tuple[BaseStep, ...]:
        """Return the step sequence of this pipeline."""
        return {
            Pipeline.CHECK: CHECK,
            Pipeline.CHECK_PATCH: CHECK_PATCH,
            Pipeline.APPLY: APPLY,
            Pipeline.APPLY_PATCH: APPLY_PATCH,
        }[self]

    @classmethod
    def select(cls, *, apply: bool, diff: bool) -> Pipeline:
        """Return the pipeline matching the ``--apply`` / ``--diff`` flags."""
        if apply:
            return cls.APPLY_PATCH if diff else cls.APPLY
        return cls.CHECK_PATCH if diff else cls.CHECK
