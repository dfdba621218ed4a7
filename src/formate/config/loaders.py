# topmark:header:start
#
#   project      : Formate
#   file         : loaders.py
#   file_relpath : src/formate/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading Formate configuration from:
- the runtime defaults (defined in code, no I/O),
- on-disk TOML files (``formate.toml`` / ``[tool.formate]`` in ``pyproject.toml``),

and for discovering the nearest project configuration file.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from formate.config.keys import Toml
from formate.config.logging import get_logger
from formate.constants import FORMATE_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from formate.config.logging import FormateLogger

TomlTable = dict[str, Any]

logger: FormateLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Formate's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. The values mirror the
    defaults of the Formate editor settings.

    Returns:
        TomlTable: A new dict so callers can mutate it safely.
    """
    return {
        Toml.KEY_ENABLE: True,
        Toml.SECTION_ALIGNMENT: {
            Toml.KEY_VERTICAL_ALIGN_PROPERTIES: True,
            Toml.KEY_ADDITIONAL_SPACES: 0,
            Toml.KEY_ALIGN_COLON: True,
        },
        Toml.SECTION_BEAUTIFIER: {
            Toml.KEY_BEAUTIFIER_ENABLED: True,
            Toml.KEY_INSERT_SPACES: True,
            Toml.KEY_TAB_SIZE: 4,
            Toml.KEY_NEWLINE_BETWEEN_RULES: True,
        },
        Toml.SECTION_FILES: {
            Toml.KEY_INCLUDE_PATTERNS: [],
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        OSError: If the file cannot be read.
        TomlkitParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_formate_table(data: Mapping[str, Any], *, is_pyproject: bool) -> TomlTable | None:
    """Return the Formate table of a parsed TOML document.

    Args:
        data (Mapping[str, Any]): Parsed TOML document.
        is_pyproject (bool): If True, look up ``[tool.formate]``; otherwise the
            whole document is the Formate table.

    Returns:
        TomlTable | None: The Formate settings, or None if ``pyproject.toml`` has
            no ``[tool.formate]`` table.
    """
    if not is_pyproject:
        return dict(data)
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = cast("Mapping[str, Any]", node)[part]
    return dict(cast("Mapping[str, Any]", node)) if isinstance(node, Mapping) else None


def read_config_file(path: Path) -> TomlTable | None:
    """Read the Formate table from ``path``, logging (not raising) on failure.

    Args:
        path (Path): ``formate.toml``, ``pyproject.toml`` or any TOML file holding
            top-level Formate settings.

    Returns:
        TomlTable | None: The Formate table, or None when the file is unreadable,
            malformed, or a ``pyproject.toml`` without ``[tool.formate]``.
    """
    try:
        data: TomlTable = load_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None
    return extract_formate_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest project configuration file.

    Walks from ``start`` (default: CWD) up to the filesystem root. In each
    directory ``formate.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it has a ``[tool.formate]`` table.

    Args:
        start (Path | None): Directory to start from.

    Returns:
        Path | None: The configuration file, or None if none was found.
    """
    here: Path = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate: Path = directory / FORMATE_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and read_config_file(pyproject) is not None:
            logger.debug("Discovered [tool.formate] in %s", pyproject)
            return pyproject
    logger.debug("No config file found from %s upwards", here)
    return None


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string.

    ``None`` values are dropped since TOML has no null.
    """
    cleaned: dict[str, Any] = {
        k: (
            {ik: iv for ik, iv in cast("Mapping[str, Any]", v).items() if iv is not None}
            if isinstance(v, Mapping)
            else v
        )
        for k, v in toml_dict.items()
        if v is not None
    }
    return tomlkit.dumps(cleaned)


def nest_under_tool_section(toml_dict: Mapping[str, Any]) -> TomlTable:
    """Return ``toml_dict`` nested under ``[tool.formate]`` for ``pyproject.toml`` output."""
    return {"tool": {"formate": dict(toml_dict)}}
