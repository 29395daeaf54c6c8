# topmark:header:start
#
#   project      : DirMark
#   file         : dump_config.py
#   file_relpath : src/dirmark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark `dump-config` command.

Emits the effective DirMark configuration as TOML after applying defaults,
the config file and any CLI overrides. The output is wrapped between
`# === BEGIN ===` and `# === END ===` markers for easy parsing in tests or
tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dirmark.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    report_diagnostics,
)
from dirmark.cli.options import common_config_options
from dirmark.config.io import to_toml
from dirmark.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from dirmark.cli.console_api import ConsoleLike
    from dirmark.config import DirectoryConfig


@click.command(
    name="dump-config",
    help="Dump the final merged DirMark configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@common_config_options
def dump_config_command(
    *,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        config_path: Explicit config file (``--config``).
        no_config: If True, skip config file discovery.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: DirectoryConfig = build_config(config_path=config_path, no_config=no_config)
    report_diagnostics(console, config, verbosity=vlevel)

    if vlevel > 0:
        console.print(console.styled("DirMark Config Dump:", bold=True, underline=True))
        sources: str = ", ".join(str(p) for p in config.config_files) or "<defaults only>"
        console.print(console.styled(f"# Sources: {sources}", dim=True))

    console.print(console.styled(TOML_BLOCK_START, fg="cyan", dim=True))
    console.print(console.styled(to_toml(config.to_toml_dict()).rstrip("\n"), fg="cyan"))
    console.print(console.styled(TOML_BLOCK_END, fg="cyan", dim=True))
