# topmark:header:start
#
#   project      : Formate
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config loaders: TOML parsing, ``[tool.formate]`` extraction and discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from formate.config import MutableConfig
from formate.config.loaders import (
    discover_config_file,
    extract_formate_table,
    nest_under_tool_section,
    read_config_file,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_extract_table_from_pyproject() -> None:
    """``[tool.formate]`` is located inside a pyproject document."""
    data = {"tool": {"formate": {"enable": False}, "other": {}}}
    assert extract_formate_table(data, is_pyproject=True) == {"enable": False}
    assert extract_formate_table({"tool": {}}, is_pyproject=True) is None
    assert extract_formate_table({"enable": True}, is_pyproject=False) == {"enable": True}


def test_read_config_file_handles_malformed_toml(tmp_path: Path) -> None:
    """Malformed TOML is logged and reported as None."""
    bad = tmp_path / "formate.toml"
    bad.write_text("enable = = true\n", encoding="utf-8")
    assert read_config_file(bad) is None


def test_discovery_prefers_formate_toml(tmp_path: Path) -> None:
    """In one directory ``formate.toml`` wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text("[tool.formate]\nenable = true\n", encoding="utf-8")
    (tmp_path / "formate.toml").write_text("enable = false\n", encoding="utf-8")
    assert discover_config_file(tmp_path) == (tmp_path / "formate.toml").resolve()


def test_discovery_walks_up_and_skips_foreign_pyproject(tmp_path: Path) -> None:
    """A pyproject without ``[tool.formate]`` is skipped in favour of a parent config."""
    (tmp_path / "formate.toml").write_text("[alignment]\nadditional_spaces = 3\n", encoding="utf-8")
    sub = tmp_path / "pkg" / "styles"
    sub.mkdir(parents=True)
    (tmp_path / "pkg" / "pyproject.toml").write_text("[project]\nname='x'\n", encoding="utf-8")
    assert discover_config_file(sub) == (tmp_path / "formate.toml").resolve()


def test_load_merged_layers_project_and_extra_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Extra config files are merged after the discovered project file."""
    (tmp_path / "formate.toml").write_text(
        "[alignment]\nadditional_spaces = 3\nalign_colon = false\n", encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text("[alignment]\nadditional_spaces = 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    config = MutableConfig.load_merged(extra_config_files=[extra]).freeze()
    assert config.additional_spaces == 1
    assert not config.align_colon
    assert len(config.config_files) == 2

    isolated = MutableConfig.load_merged(use_project_config=False).freeze()
    assert isolated.additional_spaces == 0
    assert isolated.config_files == ()


def test_to_toml_and_tool_nesting() -> None:
    """Serialization drops None values and can nest under ``[tool.formate]``."""
    text = to_toml({"enable": True, "alignment": {"additional_spaces": 2, "x": None}})
    assert "enable = true" in text
    assert "additional_spaces = 2" in text
    assert "x =" not in text
    nested = to_toml(nest_under_tool_section({"enable": False}))
    assert "[tool.formate]" in nested
