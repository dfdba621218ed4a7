# topmark:header:start
#
#   project      : Formate
#   file         : test_steps.py
#   file_relpath : tests/pipeline/test_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter, comparer, patcher and writer steps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.core.diagnostics import DiagnosticLevel
from formate.formatting import format_text
from formate.pipeline import ComparisonStatus, FormatStatus, WriteStatus
from formate.pipeline.pipelines import APPLY, APPLY_PATCH, CHECK, CHECK_PATCH
from formate.pipeline.steps import ComparerStep, FormatterStep, ReaderStep
from tests.conftest import FailingBeautifier, make_config, mark_pipeline
from tests.pipeline.conftest import UNALIGNED, run_steps

if TYPE_CHECKING:
    from pathlib import Path


@mark_pipeline
def test_check_detects_unaligned_file(tmp_path: Path) -> None:
    """Misaligned declarations are reported as CHANGED; nothing is written."""
    f = tmp_path / "a.css"
    f.write_text(UNALIGNED, encoding="utf-8")
    config = make_config(beautify=False)
    ctx = run_steps(f, config, CHECK)
    assert ctx.status.format == FormatStatus.FORMATTED
    assert ctx.would_change
    assert ctx.formatted_text == format_text(UNALIGNED, config)
    assert ctx.status.write == WriteStatus.PENDING
    assert ctx.diff is None
    assert f.read_text(encoding="utf-8") == UNALIGNED


@mark_pipeline
def test_check_already_aligned_is_unchanged(tmp_path: Path) -> None:
    """Formatting an aligned file is a no-op."""
    config = make_config(beautify=False)
    f = tmp_path / "a.css"
    f.write_text(format_text(UNALIGNED, config), encoding="utf-8")
    ctx = run_steps(f, config, CHECK_PATCH)
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED
    assert ctx.diff is None
    assert ctx.format_summary() == f"{f}: already formatted"


@mark_pipeline
def test_disabled_formatting_is_unchanged(tmp_path: Path) -> None:
    """With ``enable = false`` the text passes through untouched."""
    f = tmp_path / "a.css"
    f.write_text(UNALIGNED, encoding="utf-8")
    ctx = run_steps(f, make_config(enable=False), CHECK)
    assert ctx.status.format == FormatStatus.DISABLED
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED
    assert ctx.summary_status() == FormatStatus.DISABLED
    assert [d.level for d in ctx.diagnostics] == [DiagnosticLevel.INFO]
    assert not ctx.has_errors


@mark_pipeline
def test_beautifier_failure_is_recorded(tmp_path: Path) -> None:
    """A crashing beautifier marks the file FAILED and skips the comparison."""
    f = tmp_path / "a.css"
    f.write_text(UNALIGNED, encoding="utf-8")
    steps = (ReaderStep(), FormatterStep(beautifier=FailingBeautifier()), ComparerStep())
    ctx = run_steps(f, make_config(), steps)
    assert ctx.status.format == FormatStatus.FAILED
    assert ctx.status.comparison == ComparisonStatus.SKIPPED
    assert ctx.has_errors
    assert "beautifier exploded" in ctx.diagnostics[0].message


@mark_pipeline
def test_formatter_skips_unread_files(tmp_path: Path) -> None:
    """Files that could not be read are never formatted."""
    ctx = run_steps(tmp_path / "missing.css", make_config(), CHECK)
    assert ctx.status.format == FormatStatus.SKIPPED
    assert ctx.status.comparison == ComparisonStatus.SKIPPED


@mark_pipeline
def test_patcher_attaches_unified_diff(tmp_path: Path) -> None:
    """CHECK_PATCH stores a unified diff labelled with the file path."""
    f = tmp_path / "a.css"
    f.write_text(UNALIGNED, encoding="utf-8")
    ctx = run_steps(f, make_config(beautify=False), CHECK_PATCH)
    assert ctx.diff is not None
    assert f"--- {f} (current)" in ctx.diff
    assert f"+++ {f} (formatted)" in ctx.diff
    assert "-    color: red;" in ctx.diff


@mark_pipeline
def test_apply_writes_and_is_idempotent(tmp_path: Path) -> None:
    """APPLY rewrites the file; a second run finds nothing left to do."""
    config = make_config(beautify=False)
    f = tmp_path / "a.less"
    f.write_text(UNALIGNED, encoding="utf-8")

    first = run_steps(f, config, APPLY)
    assert first.status.write == WriteStatus.WRITTEN
    assert first.summary_status() == WriteStatus.WRITTEN
    assert f.read_text(encoding="utf-8") == format_text(UNALIGNED, config)

    second = run_steps(f, config, APPLY_PATCH)
    assert second.status.comparison == ComparisonStatus.UNCHANGED
    assert second.status.write == WriteStatus.SKIPPED


@mark_pipeline
def test_apply_restores_crlf(tmp_path: Path) -> None:
    """Files keep their CRLF line endings after being rewritten."""
    config = make_config(beautify=False)
    f = tmp_path / "a.css"
    f.write_bytes(UNALIGNED.replace("\n", "\r\n").encode("utf-8"))
    run_steps(f, config, APPLY)
    expected = format_text(UNALIGNED, config).replace("\n", "\r\n")
    assert f.read_bytes() == expected.encode("utf-8")
