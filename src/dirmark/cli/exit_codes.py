# topmark:header:start
#
#   project      : DirMark
#   file         : exit_codes.py
#   file_relpath : src/dirmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for DirMark CLI.

DirMark aligns with the BSD `sysexits` convention so that shells and other
tooling can interpret failures consistently. A prompt integration usually only
needs to know whether rendering succeeded; the specific codes help when
debugging a broken prompt.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for DirMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, relative
            paths). Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (missing config file, no home
            directory). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
