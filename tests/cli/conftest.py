# topmark:header:start
#
#   project      : DirMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DirMark through Click's test runner.

Assertions on rendered output use ``result.stdout`` so that configuration
warnings and logs written to stderr never leak into the checked text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from dirmark.cli.exit_codes import ExitCode
from dirmark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render"]``.
        env (Mapping[str, str | None] | None): Extra environment for the invocation;
            a ``None`` value removes the variable.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["render", "--path", "/usr/bin"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    args: list[str] = [argv] if isinstance(argv, str) else list(argv or [])
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *args], env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
