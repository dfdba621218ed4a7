# topmark:header:start
#
#   project      : Formate
#   file         : color.py
#   file_relpath : src/formate/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for the Formate CLI.

Click-free helpers deciding whether ANSI styling is emitted, based on the
``--color`` / ``--no-color`` flags, the environment and the output stream.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True if program output should carry ANSI colors.

    An explicit ``--color always|never`` wins. Otherwise ``FORCE_COLOR`` (any value
    but ``"0"``) turns color on and ``NO_COLOR`` turns it off; failing both, color
    follows whether stdout is a terminal (``stdout_isatty`` overrides the check).
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
