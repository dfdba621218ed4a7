# topmark:header:start
#
#   project      : Formate
#   file         : test_file_resolver.py
#   file_relpath : tests/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File resolution: expansion, include/exclude filtering and file types."""

from __future__ import annotations

from pathlib import Path

from formate.file_resolver import detect_newline, is_supported, resolve_file_list
from formate.filetypes import get_file_type_registry, resolve_file_type
from tests.conftest import make_config, parametrize


def _tree(root: Path) -> None:
    for rel in ("a.css", "b.scss", "notes.txt", "sub/c.less", "sub/d.sass", "vendor/e.css"):
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("a {}\n", encoding="utf-8")


def _names(files: list[Path]) -> list[str]:
    return [p.as_posix() for p in files]


def test_directory_expands_to_supported_files(isolation: Path) -> None:
    """Directories are walked recursively and only stylesheets are kept, sorted."""
    _tree(isolation)
    files, missing = resolve_file_list(["."], make_config())
    assert _names(files) == ["a.css", "b.scss", "sub/c.less", "sub/d.sass", "vendor/e.css"]
    assert missing == []


def test_exclude_and_include_patterns(isolation: Path) -> None:
    """Include patterns intersect, exclude patterns subtract."""
    _tree(isolation)
    files, _ = resolve_file_list(["."], make_config(exclude_patterns=["vendor/"]))
    assert "vendor/e.css" not in _names(files)

    files, _ = resolve_file_list(["."], make_config(include_patterns=["sub/**"]))
    assert _names(files) == ["sub/c.less", "sub/d.sass"]


def test_glob_and_file_type_filter(isolation: Path) -> None:
    """Globs expand relative to the CWD; file types narrow the result."""
    _tree(isolation)
    files, _ = resolve_file_list(["**/*.css"], make_config())
    assert _names(files) == ["a.css", "vendor/e.css"]

    files, _ = resolve_file_list(["."], make_config(), file_types=["less"])
    assert _names(files) == ["sub/c.less"]


def test_missing_paths_are_reported(isolation: Path) -> None:
    """Literal paths that do not exist are returned separately."""
    _tree(isolation)
    files, missing = resolve_file_list(["a.css", "nope.css"], make_config())
    assert _names(files) == ["a.css"]
    assert missing == [Path("nope.css")]


def test_explicit_unsupported_file_is_dropped(isolation: Path) -> None:
    """Naming a non-stylesheet explicitly does not bypass the type filter."""
    _tree(isolation)
    files, missing = resolve_file_list(["notes.txt"], make_config())
    assert files == [] and missing == []


@parametrize(
    "name, expected",
    [
        ("x.css", "css"),
        ("x.LESS", "less"),
        ("x.scss", "scss"),
        ("x.sass", "sass"),
        ("x.styl", None),
        ("css", None),
    ],
)
def test_resolve_file_type(name: str, expected: str | None) -> None:
    """Extensions map case-insensitively onto the stylesheet registry."""
    ft = resolve_file_type(Path(name))
    assert (ft.name if ft else None) == expected
    assert is_supported(Path(name)) is (expected is not None)


def test_registry_names() -> None:
    """The registry covers the four stylesheet dialects."""
    assert sorted(get_file_type_registry()) == ["css", "less", "sass", "scss"]


@parametrize(
    "text, expected",
    [
        ("a\nb\r\n", "\n"),
        ("a\r\nb\n", "\r\n"),
        ("a\rb", "\r"),
        ("no newline", "\n"),
    ],
)
def test_detect_newline(text: str, expected: str) -> None:
    """The first newline sequence wins; LF is the fallback."""
    assert detect_newline(text) == expected
