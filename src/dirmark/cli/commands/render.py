# topmark:header:start
#
#   project      : DirMark
#   file         : render.py
#   file_relpath : src/dirmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark `render` command.

Renders the current directory as a prompt segment: ``prefix``, the styled
path, then ``suffix``. With ``--format json`` the segment is emitted as a
JSON object instead, for prompt frameworks that apply styling themselves.

Environment:
    PWD: Logical working directory (unless ``--path`` is given).
    DIRMARK_REPO_ROOT: Repository root (unless ``--repo-root`` is given).
    DIRMARK_SHELL: Shell name (unless ``--shell`` is given).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource

from dirmark.cli.cli_types import EnumChoiceParam, OutputFormat
from dirmark.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    report_diagnostics,
)
from dirmark.cli.errors import DirmarkConfigError, DirmarkError, DirmarkUsageError
from dirmark.cli.options import common_config_options
from dirmark.config.keys import Toml
from dirmark.config.logging import get_logger
from dirmark.directory import HomeDirectoryNotFoundError, RenderContext, render_directory
from dirmark.paths import NotAbsolutePathError
from dirmark.rendering.style import colorize

if TYPE_CHECKING:
    from dirmark.cli.console_api import ConsoleLike
    from dirmark.config import DirectoryConfig
    from dirmark.config.logging import DirmarkLogger
    from dirmark.directory import DirectorySegment

logger: DirmarkLogger = get_logger(__name__)


def _explicit(ctx: click.Context, name: str, value: Any) -> Any:
    """Return ``value`` if the option was given on the command line, else None."""
    if ctx.get_parameter_source(name) == ParameterSource.DEFAULT:
        return None
    return value


@click.command(
    name="render",
    help="Render the current directory as a prompt segment.",
)
@click.option(
    "--path",
    "path",
    metavar="DIR",
    default=None,
    help="Directory to render (default: $PWD, then the process working directory).",
)
@click.option(
    "--home",
    "home",
    metavar="DIR",
    default=None,
    help="Home directory contracted to '~' (default: the user's home).",
)
@click.option(
    "--repo-root",
    "repo_root",
    metavar="DIR",
    default=None,
    help="Root of the enclosing repository (default: $DIRMARK_REPO_ROOT).",
)
@click.option(
    "--shell",
    "shell",
    default=None,
    help="Invoking shell; bash, zsh and fish always get '/' separators (default: $DIRMARK_SHELL).",
)
@common_config_options
@click.option(
    "--truncation-length",
    "truncation_length",
    type=click.IntRange(min=0),
    default=None,
    help="Number of trailing components to keep (0 disables truncation).",
)
@click.option(
    "--fish-style-length",
    "fish_style_length",
    type=click.IntRange(min=0),
    default=None,
    help="Abbreviate elided components to this many characters (0 shows an ellipsis).",
)
@click.option(
    "--logical/--physical",
    "use_logical_path",
    default=True,
    help="Render the shell's logical path or the resolved physical path.",
)
@click.option(
    "--truncate-to-repo/--no-truncate-to-repo",
    "truncate_to_repo",
    default=True,
    help="Contract the repository root to its folder name.",
)
@click.option(
    "--style",
    "style",
    default=None,
    help="Style for the rendered path, e.g. 'bold cyan' or 'bg:blue white'.",
)
@click.option(
    "--windows/--posix",
    "windows",
    default=False,
    help="Parse paths with the Windows or POSIX grammar (default: the host's).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--no-newline",
    "no_newline",
    is_flag=True,
    help="Do not print a trailing newline.",
)
def render_command(
    *,
    path: str | None,
    home: str | None,
    repo_root: str | None,
    shell: str | None,
    config_path: str | None,
    no_config: bool,
    truncation_length: int | None,
    fish_style_length: int | None,
    use_logical_path: bool,
    truncate_to_repo: bool,
    style: str | None,
    windows: bool,
    output_format: OutputFormat | None,
    no_newline: bool,
) -> None:
    """Render the current directory.

    Builds the effective configuration (defaults, config file, CLI overrides),
    resolves the environment into a `RenderContext` and prints the segment.

    Raises:
        DirmarkUsageError: If a given directory is not absolute.
        DirmarkConfigError: If the config file or home directory is missing.
        DirmarkError: If the working directory cannot be determined.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    overrides: dict[str, Any] = {
        Toml.KEY_TRUNCATION_LENGTH: truncation_length,
        Toml.KEY_FISH_STYLE_PWD_DIR_LENGTH: fish_style_length,
        Toml.KEY_USE_LOGICAL_PATH: _explicit(ctx, "use_logical_path", use_logical_path),
        Toml.KEY_TRUNCATE_TO_REPO: _explicit(ctx, "truncate_to_repo", truncate_to_repo),
        Toml.KEY_STYLE: style,
    }
    config: DirectoryConfig = build_config(
        config_path=config_path,
        no_config=no_config,
        overrides=overrides,
    )
    report_diagnostics(console, config, verbosity=vlevel)

    try:
        context = RenderContext.from_environment(
            current_dir=path,
            home_dir=home,
            repo_root=repo_root,
            shell=shell,
            windows=_explicit(ctx, "windows", windows),
        )
    except HomeDirectoryNotFoundError as exc:
        raise DirmarkConfigError(str(exc)) from exc
    except FileNotFoundError as exc:
        raise DirmarkError(str(exc)) from exc
    logger.debug("Render context: %s", context)

    try:
        segment: DirectorySegment = render_directory(context, config)
    except NotAbsolutePathError as exc:
        raise DirmarkUsageError(str(exc)) from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(segment.to_dict(), ensure_ascii=False), nl=not no_newline)
        return

    value: str = colorize(segment.value, segment.style, enable_color=console.enable_color)
    console.print(f"{segment.prefix}{value}{segment.suffix}", nl=not no_newline)
