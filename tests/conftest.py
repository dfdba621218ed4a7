# topmark:header:start
#
#   project      : Formate
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Formate test suite.

This file provides typed wrappers around pytest marks, global fixtures, and the
logging configuration used during test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `formate.config.MutableConfig`, then `freeze()` it into a
    `formate.config.Config`. To tweak a frozen `Config`, call `Config.thaw()`,
    edit the builder and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from formate.config import MutableConfig, logging
from formate.constants import LOG_LEVEL_ENV_VAR
from formate.formatting import BeautifyOptions

if TYPE_CHECKING:
    from pathlib import Path

    from formate.config import Config

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings from leaking into tests.

    Removes ``FORMATE_LOG_LEVEL`` (avoids DEBUG/TRACE noise) and the color
    variables (keeps CLI output plain).
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failing tests show detailed output."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an isolated project directory and return it.

    The directory holds an empty ``formate.toml`` so config discovery stops
    there instead of walking up into the real file system.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "formate.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


class UpperBeautifier:
    """Test beautifier that upper-cases its input and records the options it got."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, BeautifyOptions]] = []

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        self.calls.append((text, options))
        return text.upper()


class FailingBeautifier:
    """Test beautifier that always raises."""

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        raise RuntimeError("beautifier exploded")


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder initialized from defaults, with ``overrides`` applied."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
