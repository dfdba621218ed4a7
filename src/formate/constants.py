# topmark:header:start
#
#   project      : Formate
#   file         : constants.py
#   file_relpath : src/formate/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formate Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FORMATE_VERSION: str = get_version("formate")

# Configuration file names, in discovery order within a single directory:
FORMATE_TOML_NAME: str = "formate.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.formate"

# In-text directive: suppresses alignment for the line that follows it.
LINE_COMMENT_MARKER: str = "//"
IGNORE_DIRECTIVE: str = "formate-ignore"

BLOCK_COMMENT_START: str = "/*"
BLOCK_COMMENT_END: str = "*/"

LOG_LEVEL_ENV_VAR: str = "FORMATE_LOG_LEVEL"

TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="
