# topmark:header:start
#
#   project      : DirMark
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model, layering and discovery."""

from __future__ import annotations

from pathlib import Path

from dirmark.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DirectoryConfig,
    MutableDirectoryConfig,
    default_config_path,
)
from dirmark.diagnostic import DiagnosticLevel


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Built-in defaults match the documented values."""
    config: DirectoryConfig = DirectoryConfig.from_defaults()
    assert config.truncation_length == 3
    assert config.fish_style_pwd_dir_length == 0
    assert config.use_logical_path is True
    assert config.truncate_to_repo is True
    assert config.style == "bold cyan"
    assert config.prefix == "in "
    assert config.suffix == ""
    assert config.diagnostics == ()


def test_empty_builder_freezes_to_defaults() -> None:
    """Unset fields are filled with the built-in defaults."""
    assert MutableDirectoryConfig().freeze() == DirectoryConfig()


def test_toml_file_overrides_defaults(tmp_path: Path) -> None:
    """Values in ``[directory]`` override the defaults; others are kept."""
    path: Path = _write(
        tmp_path / CONFIG_FILE_NAME,
        '[directory]\ntruncation_length = 1\nfish_style_pwd_dir_length = 2\nstyle = "red"\n',
    )
    config = MutableDirectoryConfig.load_merged(config_path=path).freeze()
    assert config.truncation_length == 1
    assert config.fish_style_pwd_dir_length == 2
    assert config.style == "red"
    assert config.prefix == "in "
    assert config.config_files == (path,)


def test_args_override_toml_file(tmp_path: Path) -> None:
    """CLI/API overrides win over the config file; `None` means "not given"."""
    path: Path = _write(tmp_path / CONFIG_FILE_NAME, "[directory]\ntruncation_length = 1\n")
    config = MutableDirectoryConfig.load_merged(
        config_path=path,
        args={"truncation_length": 4, "style": None, "use_logical_path": False},
    ).freeze()
    assert config.truncation_length == 4
    assert config.style == "bold cyan"
    assert config.use_logical_path is False


def test_wrong_types_are_diagnosed_and_ignored(tmp_path: Path) -> None:
    """Bad values keep the previous layer's value and record warnings."""
    path: Path = _write(
        tmp_path / CONFIG_FILE_NAME,
        '[directory]\ntruncation_length = -2\nuse_logical_path = "yes"\nprefix = 7\n',
    )
    config = MutableDirectoryConfig.load_merged(config_path=path).freeze()
    assert config.truncation_length == 3
    assert config.use_logical_path is True
    assert config.prefix == "in "
    assert len(config.diagnostics) == 3
    assert all(d.level == DiagnosticLevel.WARNING for d in config.diagnostics)


def test_unknown_keys_are_diagnosed(tmp_path: Path) -> None:
    """Unknown sections and keys produce warnings but do not fail."""
    path: Path = _write(
        tmp_path / CONFIG_FILE_NAME,
        "[git_branch]\nsymbol = 1\n\n[directory]\ntruncation_lenght = 2\n",
    )
    config = MutableDirectoryConfig.load_merged(config_path=path).freeze()
    messages: list[str] = [d.message for d in config.diagnostics]
    assert any("git_branch" in m for m in messages)
    assert any("truncation_lenght" in m for m in messages)
    assert config.truncation_length == 3


def test_non_table_section_is_diagnosed() -> None:
    """``directory = 3`` is not a table."""
    draft = MutableDirectoryConfig.from_defaults()
    draft.apply_table({"directory": 3}, where="inline")
    assert draft.diagnostics.has_warning()
    assert draft.freeze().truncation_length == 3


def test_missing_config_file_is_diagnosed(tmp_path: Path) -> None:
    """A missing file is recorded as a warning and contributes nothing."""
    draft = MutableDirectoryConfig.from_defaults().apply_toml_file(tmp_path / "absent.toml")
    config: DirectoryConfig = draft.freeze()
    assert config.config_files == ()
    assert config.diagnostics[0].message.startswith("Config file not found")


def test_freeze_thaw_round_trip() -> None:
    """Thawing and freezing again yields an equal configuration."""
    config = DirectoryConfig(truncation_length=7, style="none", suffix="]")
    assert config.thaw().freeze() == config


def test_thaw_returns_independent_builder() -> None:
    """Edits on a thawed builder do not affect the frozen original."""
    config = DirectoryConfig.from_defaults()
    draft: MutableDirectoryConfig = config.thaw()
    draft.truncation_length = 0
    assert config.truncation_length == 3
    assert draft.freeze().truncation_length == 0


def test_merge_with_overlays_set_values(tmp_path: Path) -> None:
    """Only values set in the higher layer are copied."""
    path: Path = _write(tmp_path / CONFIG_FILE_NAME, '[directory]\nsuffix = " "\n')
    base = MutableDirectoryConfig.from_defaults()
    base.merge_with(MutableDirectoryConfig.from_toml_file(path))
    config: DirectoryConfig = base.freeze()
    assert config.suffix == " "
    assert config.prefix == "in "
    assert config.config_files == (path,)


def test_load_merged_layers_the_config_file(tmp_path: Path) -> None:
    """Loading a file is the same as merging its own layer over the defaults."""
    path: Path = _write(
        tmp_path / CONFIG_FILE_NAME, '[directory]\nsuffix = "]"\ntruncation_length = -1\n'
    )
    layered = MutableDirectoryConfig.from_defaults()
    layered.merge_with(MutableDirectoryConfig.from_toml_file(path))

    config: DirectoryConfig = MutableDirectoryConfig.load_merged(config_path=path).freeze()
    assert config == layered.freeze()
    assert config.suffix == "]"
    assert config.truncation_length == 3
    assert len(config.diagnostics) == 1


def test_to_toml_dict_lists_every_key() -> None:
    """The exported table holds every configuration key."""
    table = DirectoryConfig.from_defaults().to_toml_dict()
    assert set(table["directory"]) == {
        "truncation_length",
        "fish_style_pwd_dir_length",
        "use_logical_path",
        "truncate_to_repo",
        "style",
        "prefix",
        "suffix",
    }


# --- Discovery ---


def test_default_config_path_prefers_env_var(tmp_path: Path) -> None:
    """``DIRMARK_CONFIG`` is returned as is, even if it does not exist."""
    target: Path = tmp_path / "custom.toml"
    assert default_config_path({CONFIG_ENV_VAR: str(target)}) == target


def test_default_config_path_uses_xdg_config_home(tmp_path: Path) -> None:
    """``$XDG_CONFIG_HOME/dirmark.toml`` is used when present."""
    candidate: Path = _write(tmp_path / CONFIG_FILE_NAME, "")
    assert default_config_path({"XDG_CONFIG_HOME": str(tmp_path)}) == candidate


def test_default_config_path_none_when_absent(tmp_path: Path) -> None:
    """No file at the XDG location means no config."""
    assert default_config_path({"XDG_CONFIG_HOME": str(tmp_path)}) is None


def test_load_merged_no_config_skips_discovery(isolated_environment: Path) -> None:
    """``no_config`` ignores a discovered file."""
    _write(isolated_environment / CONFIG_FILE_NAME, "[directory]\ntruncation_length = 9\n")
    assert MutableDirectoryConfig.load_merged().freeze().truncation_length == 9
    assert MutableDirectoryConfig.load_merged(no_config=True).freeze().truncation_length == 3


def test_malformed_config_file_is_an_error_diagnostic(tmp_path: Path) -> None:
    """Invalid TOML contributes nothing and records an error."""
    path: Path = _write(tmp_path / CONFIG_FILE_NAME, "[directory\nstyle = ")
    draft = MutableDirectoryConfig.from_defaults().apply_toml_file(path)
    assert draft.diagnostics.has_error()
    assert draft.freeze().style == "bold cyan"


def test_file_without_directory_table_is_an_info_diagnostic(tmp_path: Path) -> None:
    """A document without ``[directory]`` is noted but not a warning."""
    path: Path = _write(tmp_path / CONFIG_FILE_NAME, "[directory_old]\nstyle = 1\n")
    config = MutableDirectoryConfig.load_merged(config_path=path).freeze()
    levels: set[DiagnosticLevel] = {d.level for d in config.diagnostics}
    assert levels == {DiagnosticLevel.INFO, DiagnosticLevel.WARNING}
    assert not any(d.level == DiagnosticLevel.ERROR for d in config.diagnostics)
