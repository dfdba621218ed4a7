# topmark:header:start
#
#   project      : Formate
#   file         : test_config_and_version.py
#   file_relpath : tests/cli/test_config_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `config` subcommands, `version` and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from formate.config.loaders import load_defaults_dict
from formate.constants import FORMATE_VERSION, TOML_BLOCK_END, TOML_BLOCK_START
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _parse(output: str) -> dict[str, Any]:
    return tomlkit.parse(output).unwrap()


@mark_cli
def test_config_defaults() -> None:
    """``config defaults`` prints the built-in table as valid TOML."""
    result = run_cli(["config", "defaults"])
    assert_SUCCESS(result)
    assert _parse(result.output) == load_defaults_dict()


@mark_cli
def test_config_defaults_pyproject_verbose() -> None:
    """``--pyproject`` nests the table; ``-v`` adds the banner and markers."""
    result = run_cli(["-v", "config", "defaults", "--pyproject"])
    assert_SUCCESS(result)
    assert TOML_BLOCK_START in result.output
    assert TOML_BLOCK_END in result.output
    start = result.output.index(TOML_BLOCK_START) + len(TOML_BLOCK_START)
    body = result.output[start : result.output.index(TOML_BLOCK_END)]
    assert _parse(body)["tool"]["formate"] == load_defaults_dict()


@mark_cli
def test_config_dump_merges_file_and_overrides(isolation: Path) -> None:
    """``config dump`` shows project settings with CLI overrides on top."""
    (isolation / "formate.toml").write_text(
        "[alignment]\nadditional_spaces = 3\nalign_colon = false\n", encoding="utf-8"
    )
    result = run_cli(["config", "dump", "--additional-spaces", "1", "--exclude", "dist/"])
    assert_SUCCESS(result)
    dumped = _parse(result.output)
    assert dumped["alignment"]["additional_spaces"] == 1
    assert dumped["alignment"]["align_colon"] is False
    assert dumped["files"]["exclude_patterns"] == ["dist/"]


@mark_cli
def test_config_dump_warns_on_unknown_keys(isolation: Path) -> None:
    """Unknown keys are reported as warnings and the dump still succeeds."""
    (isolation / "formate.toml").write_text("colour = true\n", encoding="utf-8")
    result = run_cli(["config", "dump"])
    assert_SUCCESS(result)
    assert "unknown key 'colour' ignored" in result.output


@mark_cli
def test_version() -> None:
    """``version`` prints the installed version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == FORMATE_VERSION


@mark_cli
def test_group_without_command_shows_help() -> None:
    """Running ``formate`` alone prints a hint and the help text."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "check" in result.output and "format" in result.output
