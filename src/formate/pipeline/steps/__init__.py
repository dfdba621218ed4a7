# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class-based pipeline steps."""

from __future__ import annotations

from formate.pipeline.steps.base import BaseStep
from formate.pipeline.steps.comparer import ComparerStep
from formate.pipeline.steps.formatter import FormatterStep
from formate.pipeline.steps.patcher import PatcherStep
from formate.pipeline.steps.reader import ReaderStep
from formate.pipeline.steps.writer import WriterStep

__all__ = [
    "BaseStep",
    "ComparerStep",
    "FormatterStep",
    "PatcherStep",
    "ReaderStep",
    "WriterStep",
]
