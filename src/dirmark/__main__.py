# topmark:header:start
#
#   project      : DirMark
#   file         : __main__.py
#   file_relpath : src/dirmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DirMark via ``python -m dirmark``.

It delegates directly to :func:`dirmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how DirMark is launched.

Examples:
    Render the current directory using the module interface::

        python -m dirmark render
"""

from __future__ import annotations

from dirmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
