# topmark:header:start
#
#   project      : Formate
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline selection and multi-file runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formate.pipeline import ComparisonStatus, ContentStatus, Pipeline, run_files
from formate.pipeline.pipelines import APPLY, APPLY_PATCH, CHECK, CHECK_PATCH
from tests.conftest import make_config, mark_pipeline, parametrize
from tests.pipeline.conftest import UNALIGNED

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    "apply, diff, expected",
    [
        (False, False, Pipeline.CHECK),
        (False, True, Pipeline.CHECK_PATCH),
        (True, False, Pipeline.APPLY),
        (True, True, Pipeline.APPLY_PATCH),
    ],
)
def test_select(apply: bool, diff: bool, expected: Pipeline) -> None:
    """Flags map onto the four named pipelines."""
    assert Pipeline.select(apply=apply, diff=diff) is expected


def test_pipeline_steps() -> None:
    """Each variant exposes its step tuple; writing always comes last."""
    assert Pipeline.CHECK.steps is CHECK
    assert Pipeline.CHECK_PATCH.steps is CHECK_PATCH
    assert Pipeline.APPLY.steps[-1].name == "WriterStep"
    assert [s.name for s in APPLY_PATCH] == [
        "ReaderStep",
        "FormatterStep",
        "ComparerStep",
        "PatcherStep",
        "WriterStep",
    ]
    assert APPLY[: len(CHECK)] == CHECK


@mark_pipeline
def test_run_files_keeps_order(tmp_path: Path) -> None:
    """Results come back in input order, one context per file."""
    config = make_config(beautify=False)
    a = tmp_path / "a.css"
    b = tmp_path / "b.css"
    a.write_text(UNALIGNED, encoding="utf-8")
    b.write_text("b {\n    color: red;\n}\n", encoding="utf-8")
    missing = tmp_path / "c.css"

    results = run_files([b, missing, a], config, CHECK)

    assert [r.path for r in results] == [b, missing, a]
    assert results[0].status.comparison == ComparisonStatus.UNCHANGED
    assert results[1].status.content == ContentStatus.NOT_FOUND
    assert results[2].status.comparison == ComparisonStatus.CHANGED
