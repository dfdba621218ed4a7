# topmark:header:start
#
#   project      : Formate
#   file         : file_resolver.py
#   file_relpath : src/formate/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for Formate based on config, paths, and filters.

This module expands positional arguments (files, directories and globs), applies
include/exclude patterns, and keeps only supported stylesheet files. Globs are
expanded relative to the current working directory. The result is a
deterministic, sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from formate.config.logging import get_logger
from formate.filetypes import get_file_type_registry, resolve_file_type

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from formate.config import Config
    from formate.config.logging import FormateLogger
    from formate.filetypes import FileType

logger: FormateLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(p: Path) -> list[Path]:
    """Expand a base path into a list of files and directories.

    Globs are expanded relative to the current working directory, directories
    recursively; a missing path expands to nothing.
    """
    if "*" in str(p):
        return list(Path(".").glob(str(p)))
    if p.is_dir():
        return list(p.rglob("*"))
    if p.is_file():
        return [p]
    return []


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    file_types: Sequence[str] = (),
    base: Path | None = None,
) -> tuple[list[Path], list[Path]]:
    """Return the stylesheet files to process and the literal paths that were missing.

    The resolver implements these semantics:
      1. **Candidate set**: expand positional paths (files, directories recursively, globs).
      2. **File-only**: only existing files are kept.
      3. **Include intersection**: with include patterns, keep files matching any of them.
      4. **Exclude subtraction**: drop files matching any exclude pattern.
      5. **File type filter**: keep supported stylesheets, optionally restricted to
         ``file_types``.
      6. Return a **sorted** list for deterministic output.

    Explicitly named files go through the same filters as expanded ones.

    Args:
        paths (Iterable[str | Path]): Positional paths and globs.
        config (Config): Supplies ``include_patterns`` and ``exclude_patterns``.
        file_types (Sequence[str]): Optional file type names to restrict to.
        base (Path | None): Directory patterns are matched against (default: CWD).

    Returns:
        tuple[list[Path], list[Path]]: ``(files, missing)``.
    """
    workspace_root: Path = base or Path.cwd()
    candidate_set: set[Path] = set()
    missing: list[Path] = []

    for raw in paths:
        p = Path(raw)
        expanded: list[Path] = expand_path(p)
        candidate_set.update(expanded)
        if "*" in str(p):
            if not expanded:
                logger.warning("No matches for glob pattern: %s", p)
        elif not p.exists():
            logger.warning("No such file or directory: %s", p)
            missing.append(p)

    candidate_set = {p for p in candidate_set if p.is_file()}

    if config.include_patterns:
        spec_inc: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.include_patterns)
        candidate_set = {
            p for p in candidate_set if spec_inc.match_file(_rel_for_match(p, workspace_root))
        }

    if config.exclude_patterns:
        spec_exc: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.exclude_patterns)
        candidate_set = {
            p for p in candidate_set if not spec_exc.match_file(_rel_for_match(p, workspace_root))
        }

    registry: dict[str, FileType] = get_file_type_registry()
    unknown: list[str] = sorted(t for t in file_types if t not in registry)
    if unknown:
        logger.warning("Unknown file types specified: %s", ", ".join(unknown))
    selected: list[FileType] = [registry[t] for t in file_types if t in registry] or list(
        registry.values()
    )

    files: list[Path] = sorted(
        p for p in candidate_set if any(ft.matches(p) for ft in selected)
    )
    skipped: int = len(candidate_set) - len(files)
    if skipped:
        logger.debug("Skipped %d file(s) that are not supported stylesheets", skipped)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files, missing


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence used in ``text``.

    Returns ``"\r\n"``, ``"\n"`` or ``"\r"``; falls back to ``"\n"`` when the text
    has no line break.
    """
    for i, ch in enumerate(text):
        if ch == "\r":
            return "\r\n" if text[i + 1 : i + 2] == "\n" else "\r"
        if ch == "\n":
            return "\n"
    return "\n"


def is_supported(path: Path) -> bool:
    """Return True if ``path`` is a supported stylesheet."""
    return resolve_file_type(path) is not None
