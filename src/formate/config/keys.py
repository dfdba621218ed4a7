# topmark:header:start
#
#   project      : Formate
#   file         : keys.py
#   file_relpath : src/formate/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Formate configuration.

This module defines the authoritative string constants used when reading,
writing, and validating Formate configuration from TOML sources
(``formate.toml`` and ``[tool.formate]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Formate configuration.

    The ordering of constants mirrors the defaults returned by
    `formate.config.loaders.load_defaults_dict`.
    """

    # Root
    KEY_ENABLE: Final[str] = "enable"

    # [alignment]
    SECTION_ALIGNMENT: Final[str] = "alignment"

    KEY_VERTICAL_ALIGN_PROPERTIES: Final[str] = "vertical_align_properties"
    KEY_ADDITIONAL_SPACES: Final[str] = "additional_spaces"
    KEY_ALIGN_COLON: Final[str] = "align_colon"

    # [beautifier]
    SECTION_BEAUTIFIER: Final[str] = "beautifier"

    KEY_BEAUTIFIER_ENABLED: Final[str] = "enabled"
    KEY_INSERT_SPACES: Final[str] = "insert_spaces"
    KEY_TAB_SIZE: Final[str] = "tab_size"
    KEY_NEWLINE_BETWEEN_RULES: Final[str] = "newline_between_rules"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ENABLE,
            SECTION_ALIGNMENT,
            SECTION_BEAUTIFIER,
            SECTION_FILES,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_ALIGNMENT: frozenset(
            {
                KEY_VERTICAL_ALIGN_PROPERTIES,
                KEY_ADDITIONAL_SPACES,
                KEY_ALIGN_COLON,
            }
        ),
        SECTION_BEAUTIFIER: frozenset(
            {
                KEY_BEAUTIFIER_ENABLED,
                KEY_INSERT_SPACES,
                KEY_TAB_SIZE,
                KEY_NEWLINE_BETWEEN_RULES,
            }
        ),
        SECTION_FILES: frozenset(
            {
                KEY_INCLUDE_PATTERNS,
                KEY_EXCLUDE_PATTERNS,
            }
        ),
    }
