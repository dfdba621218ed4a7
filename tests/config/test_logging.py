# topmark:header:start
#
#   project      : Formate
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging: TRACE level and ``FORMATE_LOG_LEVEL`` parsing."""

from __future__ import annotations

import logging

import pytest

from formate.config.logging import TRACE_LEVEL, get_logger, resolve_env_log_level
from formate.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("15", 15),
        ("verbose", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    """Level names are case-insensitive; numbers pass through; unknown names are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    """``trace()`` emits records at the TRACE level."""
    logger = get_logger("formate.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="formate.tests.trace"):
        logger.trace("aligned %d line(s)", 3)
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE_LEVEL, "aligned 3 line(s)")]
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
