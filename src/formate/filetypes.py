# topmark:header:start
#
#   project      : Formate
#   file         : filetypes.py
#   file_relpath : src/formate/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stylesheet file types handled by Formate.

Each `FileType` matches files by extension. The registry is a plain mapping
from the type name (``css``, ``less``, ``scss``, ``sass``) to its definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class FileType:
    """A stylesheet language recognized by file extension.

    Attributes:
        name (str): Stable identifier (used by ``--file-type`` filters).
        extensions (tuple[str, ...]): Lower-case extensions including the dot.
        description (str): Human-readable description.
    """

    name: str
    extensions: tuple[str, ...]
    description: str

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` has one of this type's extensions."""
        return path.suffix.lower() in self.extensions


STYLESHEET_FILE_TYPES: Final[tuple[FileType, ...]] = (
    FileType(name="css", extensions=(".css",), description="Cascading Style Sheets (CSS)"),
    FileType(name="less", extensions=(".less",), description="Less stylesheets (*.less)"),
    FileType(name="scss", extensions=(".scss",), description="Sass SCSS syntax (*.scss)"),
    FileType(name="sass", extensions=(".sass",), description="Sass indented syntax (*.sass)"),
)


def get_file_type_registry() -> dict[str, FileType]:
    """Return a fresh name → `FileType` mapping of the supported stylesheet types."""
    return {ft.name: ft for ft in STYLESHEET_FILE_TYPES}


def resolve_file_type(path: Path) -> FileType | None:
    """Return the file type matching ``path``, or None for unsupported files."""
    for ft in STYLESHEET_FILE_TYPES:
        if ft.matches(path):
            return ft
    return None
