# topmark:header:start
#
#   project      : Formate
#   file         : beautifier.py
#   file_relpath : src/formate/formatting/beautifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Beautifier collaborators.

Formate does not indent, place braces or insert newlines itself: that is the
job of a generic CSS beautifier which runs *before* property alignment. The
formatter only depends on the small `Beautifier` protocol; `CssBeautifier`
adapts the ``cssbeautifier`` package (the Python port of js-beautify) and
`PassthroughBeautifier` leaves the text untouched for alignment-only runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, cast, runtime_checkable

import cssbeautifier

from formate.config.logging import get_logger

if TYPE_CHECKING:
    from formate.config import Config
    from formate.config.logging import FormateLogger

logger: FormateLogger = get_logger(__name__)


@dataclass(frozen=True)
class BeautifyOptions:
    """Editor-style formatting options handed to the beautifier.

    Attributes:
        insert_spaces (bool): Indent with spaces (True) or a tab (False).
        tab_size (int): Number of spaces per indent level when ``insert_spaces``.
        newline_between_rules (bool): Separate rules with a blank line.
    """

    insert_spaces: bool = True
    tab_size: int = 4
    newline_between_rules: bool = True

    @property
    def indent_char(self) -> str:
        """Return the indent character (space or tab)."""
        return " " if self.insert_spaces else "\t"

    @property
    def indent_size(self) -> int:
        """Return the number of indent characters per level (one when indenting with tabs)."""
        return self.tab_size if self.insert_spaces else 1

    @classmethod
    def from_config(cls, config: Config) -> BeautifyOptions:
        """Build options from a frozen `Config`."""
        return cls(
            insert_spaces=config.insert_spaces,
            tab_size=config.tab_size,
            newline_between_rules=config.newline_between_rules,
        )


@runtime_checkable
class Beautifier(Protocol):
    """Minimal interface of a stylesheet beautifier."""

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        """Return ``text`` re-indented according to ``options``."""
        ...


class CssBeautifier:
    """`Beautifier` backed by ``cssbeautifier``."""

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        """Beautify ``text`` with ``cssbeautifier``.

        Args:
            text (str): Stylesheet source (CSS, LESS, SCSS or SASS).
            options (BeautifyOptions): Indentation and rule spacing options.

        Returns:
            str: The beautified text.
        """
        opts: Any = cssbeautifier.default_options()
        opts.indent_char = options.indent_char
        opts.indent_size = options.indent_size
        opts.newline_between_rules = options.newline_between_rules
        logger.debug(
            "cssbeautifier: indent_char=%r indent_size=%d newline_between_rules=%s",
            options.indent_char,
            options.indent_size,
            options.newline_between_rules,
        )
        return cast("str", cssbeautifier.beautify(text, opts))


class PassthroughBeautifier:
    """`Beautifier` that returns its input unchanged."""

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        """Return ``text`` as is."""
        return text


def beautifier_for(config: Config) -> Beautifier:
    """Return the beautifier selected by ``config``."""
    return CssBeautifier() if config.beautify else PassthroughBeautifier()
