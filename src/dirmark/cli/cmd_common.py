# topmark:header:start
#
#   project      : DirMark
#   file         : cmd_common.py
#   file_relpath : src/dirmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reading the shared state placed on ``ctx.obj`` by the group, resolving the
effective configuration, and reporting configuration diagnostics.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dirmark.cli.console import ClickConsole
from dirmark.cli.errors import DirmarkConfigError
from dirmark.config import MutableDirectoryConfig, default_config_path
from dirmark.config.logging import get_logger
from dirmark.diagnostic import DiagnosticLevel

if TYPE_CHECKING:
    from dirmark.cli.console_api import ConsoleLike
    from dirmark.config import ArgsLike, DirectoryConfig
    from dirmark.config.logging import DirmarkLogger

logger: DirmarkLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    obj: object = ctx.obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored by the group, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def resolve_config_path(config_path: str | None, *, no_config: bool) -> Path | None:
    """Return the config file to load, or None when no file applies.

    An explicit ``--config`` wins; otherwise discovery (``$DIRMARK_CONFIG``,
    then ``$XDG_CONFIG_HOME/dirmark.toml``) runs unless ``no_config`` is set.

    Raises:
        DirmarkConfigError: If an explicitly named file (``--config`` or
            ``$DIRMARK_CONFIG``) does not exist.
    """
    path: Path | None
    if config_path is not None:
        path = Path(config_path)
    elif no_config:
        return None
    else:
        path = default_config_path()

    if path is not None and not path.is_file():
        raise DirmarkConfigError(f"Config file not found: {path}")
    return path


def build_config(
    *,
    config_path: str | None,
    no_config: bool,
    overrides: ArgsLike | None = None,
) -> DirectoryConfig:
    """Build the effective configuration: defaults, config file, then overrides.

    Args:
        config_path (str | None): Value of ``--config``.
        no_config (bool): Value of ``--no-config``.
        overrides (ArgsLike | None): CLI overrides keyed like the TOML keys;
            ``None`` values are ignored.

    Returns:
        DirectoryConfig: The frozen configuration.
    """
    path: Path | None = resolve_config_path(config_path, no_config=no_config)
    draft = MutableDirectoryConfig.load_merged(
        config_path=path,
        no_config=True,
        args=overrides,
    )
    config: DirectoryConfig = draft.freeze()
    logger.trace("Effective config: %s", config)
    return config


def report_diagnostics(console: ConsoleLike, config: DirectoryConfig, *, verbosity: int) -> None:
    """Print configuration diagnostics to stderr unless output is quiet."""
    if verbosity < 0:
        return
    for diagnostic in config.diagnostics:
        text: str = f"[{diagnostic.level.value}] {diagnostic.message}"
        if diagnostic.level == DiagnosticLevel.ERROR:
            console.error(text)
        else:
            console.warn(text)
