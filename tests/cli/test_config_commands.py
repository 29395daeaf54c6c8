# topmark:header:start
#
#   project      : DirMark
#   file         : test_config_commands.py
#   file_relpath : tests/cli/test_config_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `dump-config`, `show-defaults` and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from dirmark.constants import TOML_BLOCK_END, TOML_BLOCK_START
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _toml_block(output: str) -> dict[str, Any]:
    """Return the TOML document between the BEGIN/END markers."""
    start: int = output.index(TOML_BLOCK_START) + len(TOML_BLOCK_START)
    end: int = output.index(TOML_BLOCK_END)
    return tomlkit.parse(output[start:end]).unwrap()


@mark_cli
def test_show_defaults_prints_default_toml() -> None:
    """The defaults parse back into the built-in values."""
    result = run_cli(["show-defaults"])
    assert_SUCCESS(result)
    data: dict[str, Any] = tomlkit.parse(result.stdout).unwrap()
    assert data["directory"]["truncation_length"] == 3
    assert data["directory"]["style"] == "bold cyan"
    assert data["directory"]["prefix"] == "in "


@mark_cli
def test_show_defaults_verbose_banner() -> None:
    """With ``-v`` a heading precedes the TOML."""
    result = run_cli(["-v", "show-defaults"])
    assert_SUCCESS(result)
    assert result.stdout.startswith("Default DirMark Configuration (TOML):")


@mark_cli
def test_dump_config_defaults_only() -> None:
    """Without config files the dump equals the defaults."""
    result = run_cli(["dump-config"])
    assert_SUCCESS(result)
    data: dict[str, Any] = _toml_block(result.stdout)
    assert data["directory"]["fish_style_pwd_dir_length"] == 0
    assert data["directory"]["use_logical_path"] is True


@mark_cli
def test_dump_config_merges_file(tmp_path: Path) -> None:
    """Values from ``--config`` appear in the dump."""
    config: Path = tmp_path / "dirmark.toml"
    config.write_text('[directory]\nfish_style_pwd_dir_length = 1\nsuffix = " "\n', "utf-8")

    result = run_cli(["-v", "dump-config", "--config", str(config)])
    assert_SUCCESS(result)
    data: dict[str, Any] = _toml_block(result.stdout)
    assert data["directory"]["fish_style_pwd_dir_length"] == 1
    assert data["directory"]["suffix"] == " "
    assert str(config) in result.stdout


@mark_cli
def test_dump_config_missing_file(tmp_path: Path) -> None:
    """A missing ``--config`` file is a configuration error."""
    result = run_cli(["dump-config", "--config", str(tmp_path / "absent.toml")])
    assert_CONFIG_ERROR(result)
    assert "Config file not found" in result.output


@mark_cli
def test_group_without_command_prints_help() -> None:
    """Invoking the bare group prints a hint and the help text."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "dirmark render" in result.stdout
    assert "dump-config" in result.stdout


@mark_cli
def test_dump_config_reports_malformed_file(tmp_path: Path) -> None:
    """Parse errors are reported on stderr; the dump falls back to defaults."""
    config: Path = tmp_path / "dirmark.toml"
    config.write_text("[directory\nstyle = ", "utf-8")

    result = run_cli(["dump-config", "--config", str(config)])
    assert_SUCCESS(result)
    assert "[error] Invalid TOML" in result.stderr
    assert _toml_block(result.stdout)["directory"]["style"] == "bold cyan"


@mark_cli
def test_quiet_suppresses_diagnostics(tmp_path: Path) -> None:
    """``-q`` hides configuration diagnostics."""
    config: Path = tmp_path / "dirmark.toml"
    config.write_text("[directory]\ntruncation_length = -1\n", "utf-8")

    result = run_cli(["-q", "dump-config", "--config", str(config)])
    assert_SUCCESS(result)
    assert result.stderr == ""
