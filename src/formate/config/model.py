# topmark:header:start
#
#   project      : Formate
#   file         : model.py
#   file_relpath : src/formate/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the formatter and pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. runtime defaults (`load_defaults_dict`),
    2. the discovered project file (``formate.toml`` or ``[tool.formate]``),
    3. extra config files passed explicitly,
    4. CLI / API overrides.

Validation never raises: problems are collected as diagnostics and the
offending value keeps its previous (lower layer) value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from formate.config.keys import Toml
from formate.config.loaders import (
    discover_config_file,
    load_defaults_dict,
    read_config_file,
)
from formate.config.logging import get_logger
from formate.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from formate.config.loaders import TomlTable
    from formate.config.logging import FormateLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: FormateLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Formate.

    Attributes:
        enable (bool): Master switch; when False formatting produces no edits.
        vertical_align_properties (bool): Run property alignment after beautifying.
        additional_spaces (int): Extra padding added to the furthest colon of a group.
        align_colon (bool): Pad before the colon (True) or after it (False).
        beautify (bool): Run the CSS beautifier before aligning.
        insert_spaces (bool): Indent with spaces (True) or tabs (False).
        tab_size (int): Indent width when indenting with spaces.
        newline_between_rules (bool): Ask the beautifier for blank lines between rules.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns of files to keep.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns of files to drop.
        config_files (tuple[Path, ...]): Configuration files merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings or errors from loading/merging.
    """

    enable: bool
    vertical_align_properties: bool
    additional_spaces: int
    align_colon: bool

    beautify: bool
    insert_spaces: bool
    tab_size: int
    newline_between_rules: bool

    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]

    config_files: tuple[Path, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_errors(self) -> bool:
        """Return True if any ERROR diagnostic was collected."""
        return DiagnosticLog(self.diagnostics).has_errors

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            enable=self.enable,
            vertical_align_properties=self.vertical_align_properties,
            additional_spaces=self.additional_spaces,
            align_colon=self.align_colon,
            beautify=self.beautify,
            insert_spaces=self.insert_spaces,
            tab_size=self.tab_size,
            newline_between_rules=self.newline_between_rules,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict (same shape as the defaults)."""
        return {
            Toml.KEY_ENABLE: self.enable,
            Toml.SECTION_ALIGNMENT: {
                Toml.KEY_VERTICAL_ALIGN_PROPERTIES: self.vertical_align_properties,
                Toml.KEY_ADDITIONAL_SPACES: self.additional_spaces,
                Toml.KEY_ALIGN_COLON: self.align_colon,
            },
            Toml.SECTION_BEAUTIFIER: {
                Toml.KEY_BEAUTIFIER_ENABLED: self.beautify,
                Toml.KEY_INSERT_SPACES: self.insert_spaces,
                Toml.KEY_TAB_SIZE: self.tab_size,
                Toml.KEY_NEWLINE_BETWEEN_RULES: self.newline_between_rules,
            },
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE_PATTERNS: list(self.include_patterns),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Start from `MutableConfig.from_defaults`, layer TOML tables with
    `merge_toml` (or files with `merge_file`), apply CLI/API overrides with
    `apply_overrides`, then `freeze` into an immutable `Config`.
    """

    enable: bool = True
    vertical_align_properties: bool = True
    additional_spaces: int = 0
    align_colon: bool = True

    beautify: bool = True
    insert_spaces: bool = True
    tab_size: int = 4
    newline_between_rules: bool = True

    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Construction ----------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder initialized from the runtime defaults."""
        draft = cls()
        draft.merge_toml(load_defaults_dict(), source="<defaults>")
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        extra_config_files: Iterable[Path] = (),
        use_project_config: bool = True,
        start: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from defaults, the discovered project file and extra files.

        Args:
            extra_config_files (Iterable[Path]): Files merged after the project file,
                in order.
            use_project_config (bool): Discover and merge the nearest project file.
            start (Path | None): Directory to start discovery from (default: CWD).

        Returns:
            MutableConfig: The merged draft (CLI/API overrides not applied yet).
        """
        draft: MutableConfig = cls.from_defaults()
        if use_project_config:
            found: Path | None = discover_config_file(start)
            if found is not None:
                draft.merge_file(found)
        for path in extra_config_files:
            draft.merge_file(path)
        return draft

    # ---------------------------- Merging ----------------------------

    def merge_file(self, path: Path) -> MutableConfig:
        """Merge the Formate table of ``path`` into this draft.

        Unreadable or malformed files are recorded as ERROR diagnostics.
        """
        table: TomlTable | None = read_config_file(path)
        if table is None:
            if path.name == "pyproject.toml" and path.is_file():
                self.diagnostics.add_warning(f"{path}: no [tool.formate] table found")
            else:
                self.diagnostics.add_error(f"{path}: cannot read configuration")
            return self
        self.config_files.append(path)
        return self.merge_toml(table, source=str(path))

    def merge_toml(self, table: Mapping[str, Any], *, source: str) -> MutableConfig:
        """Merge a Formate TOML table into this draft, validating every value.

        Args:
            table (Mapping[str, Any]): Top-level Formate table.
            source (str): Label used in diagnostics (file path or ``<defaults>``).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key in table:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                self.diagnostics.add_warning(f"{source}: unknown key '{key}' ignored")

        enable: bool | None = self._get_bool(table, Toml.KEY_ENABLE, source)
        if enable is not None:
            self.enable = enable

        alignment: Mapping[str, Any] = self._get_section(table, Toml.SECTION_ALIGNMENT, source)
        value_b: bool | None = self._get_bool(
            alignment, Toml.KEY_VERTICAL_ALIGN_PROPERTIES, source
        )
        if value_b is not None:
            self.vertical_align_properties = value_b
        value_i: int | None = self._get_int(
            alignment, Toml.KEY_ADDITIONAL_SPACES, source, minimum=0
        )
        if value_i is not None:
            self.additional_spaces = value_i
        value_b = self._get_bool(alignment, Toml.KEY_ALIGN_COLON, source)
        if value_b is not None:
            self.align_colon = value_b

        beautifier: Mapping[str, Any] = self._get_section(table, Toml.SECTION_BEAUTIFIER, source)
        value_b = self._get_bool(beautifier, Toml.KEY_BEAUTIFIER_ENABLED, source)
        if value_b is not None:
            self.beautify = value_b
        value_b = self._get_bool(beautifier, Toml.KEY_INSERT_SPACES, source)
        if value_b is not None:
            self.insert_spaces = value_b
        value_i = self._get_int(beautifier, Toml.KEY_TAB_SIZE, source, minimum=1)
        if value_i is not None:
            self.tab_size = value_i
        value_b = self._get_bool(beautifier, Toml.KEY_NEWLINE_BETWEEN_RULES, source)
        if value_b is not None:
            self.newline_between_rules = value_b

        files: Mapping[str, Any] = self._get_section(table, Toml.SECTION_FILES, source)
        patterns: list[str] | None = self._get_str_list(files, Toml.KEY_INCLUDE_PATTERNS, source)
        if patterns is not None:
            self.include_patterns = patterns
        patterns = self._get_str_list(files, Toml.KEY_EXCLUDE_PATTERNS, source)
        if patterns is not None:
            self.exclude_patterns = patterns

        logger.debug("Merged configuration from %s", source)
        return self

    def apply_overrides(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides; ``None`` (or missing) values leave settings untouched.

        Recognized keys match the `Config` attribute names.
        """
        for name in (
            "enable",
            "vertical_align_properties",
            "align_colon",
            "beautify",
            "insert_spaces",
            "newline_between_rules",
        ):
            value: Any = args.get(name)
            if value is not None:
                setattr(self, name, bool(value))

        spaces: Any = args.get("additional_spaces")
        if spaces is not None:
            if isinstance(spaces, int) and spaces >= 0:
                self.additional_spaces = spaces
            else:
                self.diagnostics.add_error(
                    f"additional_spaces must be a non-negative integer, got {spaces!r}"
                )
        tab_size: Any = args.get("tab_size")
        if tab_size is not None:
            if isinstance(tab_size, int) and tab_size >= 1:
                self.tab_size = tab_size
            else:
                self.diagnostics.add_error(f"tab_size must be a positive integer, got {tab_size!r}")

        include: Any = args.get("include_patterns")
        if include:
            self.include_patterns.extend(include)
        exclude: Any = args.get("exclude_patterns")
        if exclude:
            self.exclude_patterns.extend(exclude)
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot of this draft."""
        return Config(
            enable=self.enable,
            vertical_align_properties=self.vertical_align_properties,
            additional_spaces=self.additional_spaces,
            align_colon=self.align_colon,
            beautify=self.beautify,
            insert_spaces=self.insert_spaces,
            tab_size=self.tab_size,
            newline_between_rules=self.newline_between_rules,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # ---------------------------- Value getters ----------------------------

    def _get_section(self, table: Mapping[str, Any], name: str, source: str) -> Mapping[str, Any]:
        section: Any = table.get(name)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            self.diagnostics.add_error(f"{source}: [{name}] must be a table")
            return {}
        section_map: Mapping[str, Any] = cast("Mapping[str, Any]", section)
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(name, frozenset())
        for key in section_map:
            if key not in allowed:
                self.diagnostics.add_warning(f"{source}: unknown key '{name}.{key}' ignored")
        return section_map

    def _get_bool(self, table: Mapping[str, Any], key: str, source: str) -> bool | None:
        value: Any = table.get(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            self.diagnostics.add_error(f"{source}: '{key}' must be a boolean, got {value!r}")
            return None
        return value

    def _get_int(
        self, table: Mapping[str, Any], key: str, source: str, *, minimum: int
    ) -> int | None:
        value: Any = table.get(key)
        if value is None:
            return None
        # bool is a subclass of int; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            self.diagnostics.add_error(f"{source}: '{key}' must be an integer, got {value!r}")
            return None
        if value < minimum:
            self.diagnostics.add_error(f"{source}: '{key}' must be >= {minimum}, got {value}")
            return None
        return value

    def _get_str_list(self, table: Mapping[str, Any], key: str, source: str) -> list[str] | None:
        value: Any = table.get(key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(
            isinstance(v, str) for v in cast("list[Any]", value)
        ):
            self.diagnostics.add_error(f"{source}: '{key}' must be a list of strings")
            return None
        return list(cast("list[str]", value))
