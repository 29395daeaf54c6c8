# topmark:header:start
#
#   project      : DirMark
#   file         : errors.py
#   file_relpath : src/dirmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for DirMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dirmark.cli.exit_codes import ExitCode


class DirmarkError(click.ClickException):
    """Base class for all DirMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class DirmarkUsageError(DirmarkError):
    """Error for command-line invocation errors (invalid flags/args, relative paths)."""

    exit_code = ExitCode.USAGE_ERROR


class DirmarkConfigError(DirmarkError):
    """Error for configuration errors (missing config file, no home directory)."""

    exit_code = ExitCode.CONFIG_ERROR
