# topmark:header:start
#
#   project      : DirMark
#   file         : version.py
#   file_relpath : src/dirmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark `version` command.

Prints the current DirMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dirmark.cli.cli_types import EnumChoiceParam, OutputFormat
from dirmark.cli.cmd_common import get_console, get_effective_verbosity
from dirmark.constants import DIRMARK_VERSION
from dirmark.utils.version import pep440_to_semver

if TYPE_CHECKING:
    from dirmark.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DirMark.",
)
@click.option(
    "--semver",
    is_flag=True,
    default=False,
    help="Render the version as SemVer instead of PEP 440 (maps rc→-rc.N, dev→-dev.N).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(
    *,
    output_format: OutputFormat | None = None,
    semver: bool = False,
) -> None:
    """Show the current version of DirMark.

    Args:
        output_format (OutputFormat | None): Optional output format (default or json).
        semver (bool): Return version identifier in `semver` if True, PEP440 (default) if False.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    version_text: str = DIRMARK_VERSION
    if semver:
        try:
            version_text = pep440_to_semver(DIRMARK_VERSION)
        except ValueError as exc:
            # Fall back to raw version; if verbose, surface the reason.
            if vlevel > 0:
                console.warn(f"[warn] {exc}")

    scheme: str = "semver" if semver else "pep440"
    if (output_format or OutputFormat.DEFAULT) == OutputFormat.JSON:
        console.print(json.dumps({"version": version_text, "format": scheme}))
    elif vlevel > 0:
        console.print(console.styled(f"DirMark version ({scheme}):", bold=True, underline=True))
        console.print(f"    {console.styled(version_text, bold=True)}")
    else:
        console.print(console.styled(version_text, bold=True))
