# topmark:header:start
#
#   project      : DirMark
#   file         : show_defaults.py
#   file_relpath : src/dirmark/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark `show-defaults` command.

Displays the built-in default configuration as TOML. Intended as a reference
for users writing their own ``dirmark.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dirmark.cli.cmd_common import get_console, get_effective_verbosity
from dirmark.config.io import load_defaults_dict, to_toml

if TYPE_CHECKING:
    from dirmark.cli.console_api import ConsoleLike


@click.command(
    name="show-defaults",
    help="Display the built-in default DirMark configuration.",
)
def show_defaults_command() -> None:
    """Display the built-in default configuration."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(
            console.styled(
                "Default DirMark Configuration (TOML):",
                bold=True,
                underline=True,
            )
        )

    console.print(console.styled(to_toml(load_defaults_dict()).rstrip("\n"), fg="cyan"))
