# topmark:header:start
#
#   project      : Formate
#   file         : __init__.py
#   file_relpath : src/formate/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing pipeline: read, format, compare, diff and write stylesheets."""

from __future__ import annotations

from formate.pipeline.context import ProcessingContext, ProcessingStatus
from formate.pipeline.pipelines import Pipeline
from formate.pipeline.runner import run, run_files
from formate.pipeline.status import (
    ComparisonStatus,
    ContentStatus,
    FormatStatus,
    WriteStatus,
)

__all__ = [
    "ComparisonStatus",
    "ContentStatus",
    "FormatStatus",
    "Pipeline",
    "ProcessingContext",
    "ProcessingStatus",
    "WriteStatus",
    "run",
    "run_files",
]
