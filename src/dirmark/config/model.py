# topmark:header:start
#
#   project      : DirMark
#   file         : model.py
#   file_relpath : src/dirmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `DirectoryConfig`: an immutable, runtime snapshot used by the renderer.
    - `MutableDirectoryConfig`: a mutable builder used during discovery/merge;
      it can be frozen into `DirectoryConfig` and thawed back for edits.

Layering (lowest to highest precedence):
    1. Runtime defaults (`load_defaults_dict`).
    2. The user's ``dirmark.toml`` (``[directory]`` table).
    3. CLI/API overrides (`MutableDirectoryConfig.apply_args`).

Bad values never fail a render: the checked getters record a warning in the
builder's `DiagnosticLog` and the value from the previous layer is kept.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from dirmark.config.io import (
    as_toml_table,
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    get_uint_value_or_none_checked,
    load_defaults_dict,
    load_toml_dict,
)
from dirmark.config.keys import Toml
from dirmark.config.logging import get_logger
from dirmark.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from dirmark.config.io import TomlTable
    from dirmark.config.logging import DirmarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DirmarkLogger = get_logger(__name__)

CONFIG_FILE_NAME: Final[str] = "dirmark.toml"
CONFIG_ENV_VAR: Final[str] = "DIRMARK_CONFIG"


def default_config_path(env: Mapping[str, str] | None = None) -> Path | None:
    """Return the configuration file to use when none is given explicitly.

    Precedence: ``$DIRMARK_CONFIG``, then ``$XDG_CONFIG_HOME/dirmark.toml``
    (``~/.config/dirmark.toml`` when unset). Returns None when the XDG
    location does not exist; an explicit ``$DIRMARK_CONFIG`` is returned as is.
    """
    environ: Mapping[str, str] = os.environ if env is None else env
    explicit: str | None = environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    xdg: str | None = environ.get("XDG_CONFIG_HOME")
    try:
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
    except RuntimeError:
        # No home directory: no user config to discover.
        return None
    candidate: Path = base / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class DirectoryConfig:
    """Immutable runtime configuration for the directory segment.

    Attributes:
        truncation_length (int): Trailing components to show; 0 never truncates.
        fish_style_pwd_dir_length (int): Grapheme clusters kept per elided
            component; 0 renders the elided head as an ellipsis.
        use_logical_path (bool): Prefer the shell's logical path over the
            physical path reported by the OS.
        truncate_to_repo (bool): Contract the repository root to its folder name
            when the current directory is inside a repository.
        style (str): Opaque style token for the rendered value.
        prefix (str): Text shown before the rendered value.
        suffix (str): Text shown after the rendered value.
        config_files (tuple[Path, ...]): Config files that contributed values.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    truncation_length: int = 3
    fish_style_pwd_dir_length: int = 0
    use_logical_path: bool = True
    truncate_to_repo: bool = True
    style: str = "bold cyan"
    prefix: str = "in "
    suffix: str = ""
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @classmethod
    def from_defaults(cls) -> DirectoryConfig:
        """Return the configuration built from runtime defaults only."""
        return MutableDirectoryConfig.from_defaults().freeze()

    def thaw(self) -> MutableDirectoryConfig:
        """Return a mutable copy of this configuration."""
        return MutableDirectoryConfig(
            truncation_length=self.truncation_length,
            fish_style_pwd_dir_length=self.fish_style_pwd_dir_length,
            use_logical_path=self.use_logical_path,
            truncate_to_repo=self.truncate_to_repo,
            style=self.style,
            prefix=self.prefix,
            suffix=self.suffix,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-compatible dict."""
        return {
            Toml.SECTION_DIRECTORY: {
                Toml.KEY_TRUNCATION_LENGTH: self.truncation_length,
                Toml.KEY_FISH_STYLE_PWD_DIR_LENGTH: self.fish_style_pwd_dir_length,
                Toml.KEY_USE_LOGICAL_PATH: self.use_logical_path,
                Toml.KEY_TRUNCATE_TO_REPO: self.truncate_to_repo,
                Toml.KEY_STYLE: self.style,
                Toml.KEY_PREFIX: self.prefix,
                Toml.KEY_SUFFIX: self.suffix,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableDirectoryConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `freeze` replaces it with the
    built-in default.
    """

    truncation_length: int | None = None
    fish_style_pwd_dir_length: int | None = None
    use_logical_path: bool | None = None
    truncate_to_repo: bool | None = None
    style: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableDirectoryConfig:
        """Return a builder seeded with the runtime defaults."""
        draft = cls()
        draft.apply_table(load_defaults_dict(), where="<defaults>")
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableDirectoryConfig:
        """Return a builder holding only the values found in ``path``."""
        draft = cls()
        draft.apply_toml_file(path)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        no_config: bool = False,
        args: ArgsLike | None = None,
        env: Mapping[str, str] | None = None,
    ) -> MutableDirectoryConfig:
        """Build the effective configuration from all layers.

        Args:
            config_path (Path | None): Explicit config file; skips discovery.
            no_config (bool): Ignore discovered config files (explicit ones still apply).
            args (ArgsLike | None): CLI/API overrides, keyed like the TOML keys.
            env (Mapping[str, str] | None): Environment used for discovery.

        Returns:
            MutableDirectoryConfig: The merged draft; call `freeze` to use it.
        """
        draft = cls.from_defaults()

        path: Path | None = config_path
        if path is None and not no_config:
            path = default_config_path(env)
        if path is not None:
            # Each file is its own layer, overlaid on the defaults
            draft.merge_with(cls.from_toml_file(path))

        if args:
            draft.apply_args(args)
        return draft

    def apply_toml_file(self, path: Path) -> MutableDirectoryConfig:
        """Merge the ``[directory]`` table of a TOML file into this builder."""
        logger.debug("Loading config file %s", path)
        if not path.is_file():
            logger.warning("Config file not found: %s", path)
            self.diagnostics.add_warning(f"Config file not found: {path}")
            return self
        data: TomlTable = load_toml_dict(path, diagnostics=self.diagnostics)
        self.config_files.append(path)
        return self.apply_table(data, where=str(path))

    def apply_table(self, data: TomlTable, *, where: str) -> MutableDirectoryConfig:
        """Merge a parsed TOML document into this builder.

        Args:
            data (TomlTable): Parsed TOML document (top-level table).
            where (str): Source label used in diagnostics.

        Returns:
            MutableDirectoryConfig: ``self``, for chaining.
        """
        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                logger.warning("Unknown top-level key %r in %s", key, where)
                self.diagnostics.add_warning(f"Unknown top-level key {key!r} in {where}")

        raw_section: Any = data.get(Toml.SECTION_DIRECTORY)
        if raw_section is None:
            if data:
                logger.info("No [%s] table in %s", Toml.SECTION_DIRECTORY, where)
                self.diagnostics.add_info(f"No [{Toml.SECTION_DIRECTORY}] table in {where}")
            return self
        section: TomlTable | None = as_toml_table(raw_section)
        if section is None:
            logger.warning("Expected table for [%s] in %s", Toml.SECTION_DIRECTORY, where)
            self.diagnostics.add_warning(
                f"Expected table for [{Toml.SECTION_DIRECTORY}] in {where}"
            )
            return self

        loc: str = f"{where}:{Toml.SECTION_DIRECTORY}"
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS[Toml.SECTION_DIRECTORY]
        for key in section:
            if key not in allowed:
                logger.warning("Unknown key %r in %s", key, loc)
                self.diagnostics.add_warning(f"Unknown key {key!r} in {loc}")

        self._merge_values(section, where=loc)
        return self

    def apply_args(self, args: ArgsLike) -> MutableDirectoryConfig:
        """Merge CLI/API overrides; ``None`` values are ignored."""
        self._merge_values(dict(args), where="<args>")
        return self

    def _merge_values(self, table: TomlTable, *, where: str) -> None:
        uint_keys: dict[str, str] = {
            Toml.KEY_TRUNCATION_LENGTH: "truncation_length",
            Toml.KEY_FISH_STYLE_PWD_DIR_LENGTH: "fish_style_pwd_dir_length",
        }
        bool_keys: dict[str, str] = {
            Toml.KEY_USE_LOGICAL_PATH: "use_logical_path",
            Toml.KEY_TRUNCATE_TO_REPO: "truncate_to_repo",
        }
        str_keys: dict[str, str] = {
            Toml.KEY_STYLE: "style",
            Toml.KEY_PREFIX: "prefix",
            Toml.KEY_SUFFIX: "suffix",
        }

        for key, attr in uint_keys.items():
            n = get_uint_value_or_none_checked(
                table, key, where=where, diagnostics=self.diagnostics
            )
            if n is not None:
                setattr(self, attr, n)
        for key, attr in bool_keys.items():
            b = get_bool_value_or_none_checked(
                table, key, where=where, diagnostics=self.diagnostics
            )
            if b is not None:
                setattr(self, attr, b)
        for key, attr in str_keys.items():
            s = get_string_value_or_none_checked(
                table, key, where=where, diagnostics=self.diagnostics
            )
            if s is not None:
                setattr(self, attr, s)

    def merge_with(self, other: MutableDirectoryConfig) -> MutableDirectoryConfig:
        """Overlay the values set in ``other`` onto this builder.

        Args:
            other (MutableDirectoryConfig): Higher-precedence layer.

        Returns:
            MutableDirectoryConfig: ``self``, for chaining.
        """
        for attr in (
            "truncation_length",
            "fish_style_pwd_dir_length",
            "use_logical_path",
            "truncate_to_repo",
            "style",
            "prefix",
            "suffix",
        ):
            value = getattr(other, attr)
            if value is not None:
                setattr(self, attr, value)
        self.config_files.extend(other.config_files)
        self.diagnostics.items.extend(other.diagnostics.items)
        return self

    def freeze(self) -> DirectoryConfig:
        """Return an immutable `DirectoryConfig`, filling unset fields with defaults."""
        base = DirectoryConfig()
        return DirectoryConfig(
            truncation_length=(
                base.truncation_length
                if self.truncation_length is None
                else self.truncation_length
            ),
            fish_style_pwd_dir_length=(
                base.fish_style_pwd_dir_length
                if self.fish_style_pwd_dir_length is None
                else self.fish_style_pwd_dir_length
            ),
            use_logical_path=(
                base.use_logical_path if self.use_logical_path is None else self.use_logical_path
            ),
            truncate_to_repo=(
                base.truncate_to_repo if self.truncate_to_repo is None else self.truncate_to_repo
            ),
            style=base.style if self.style is None else self.style,
            prefix=base.prefix if self.prefix is None else self.prefix,
            suffix=base.suffix if self.suffix is None else self.suffix,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics.items),
        )
