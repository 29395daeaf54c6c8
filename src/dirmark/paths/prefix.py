# topmark:header:start
#
#   project      : DirMark
#   file         : prefix.py
#   file_relpath : src/dirmark/paths/prefix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render platform prefixes and pick the output separator.

Drive letters follow the separator style: ``c:`` for ``\\`` and ``/c`` for
``/``, which is how POSIX shells on Windows (Git Bash, MSYS) spell drives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, assert_never

from dirmark.paths.components import Prefix, PrefixKind, RootDir

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dirmark.paths.components import RootComponent

POSIX_SEPARATOR: Final[str] = "/"
WINDOWS_SEPARATOR: Final[str] = "\\"

# Shells that expect POSIX separators even on a Windows host.
POSIX_SHELLS: Final[frozenset[str]] = frozenset({"bash", "zsh", "fish"})


def get_separator(shell: str | None, *, windows: bool) -> str:
    """Return the separator used to render paths.

    Args:
        shell (str | None): Name of the invoking shell, if known.
        windows (bool): Whether the path uses the Windows grammar.

    Returns:
        str: ``/`` for POSIX shells and POSIX paths, ``\\`` otherwise.
    """
    if shell and shell.strip().lower() in POSIX_SHELLS:
        return POSIX_SEPARATOR
    return WINDOWS_SEPARATOR if windows else POSIX_SEPARATOR


def format_windows_prefix(prefix: Prefix, separator: str) -> str:
    """Render a Windows prefix in the given separator style."""
    match prefix.kind:
        case PrefixKind.DISK | PrefixKind.VERBATIM_DISK:
            letter: str = prefix.disk.lower()
            if separator.startswith(POSIX_SEPARATOR):
                return f"/{letter}"
            return f"{letter}:"
        case PrefixKind.UNC | PrefixKind.VERBATIM_UNC:
            return f"{separator}{separator}{prefix.server}{separator}{prefix.share}"
        case PrefixKind.VERBATIM | PrefixKind.DEVICE_NS:
            return prefix.text
        case _:
            assert_never(prefix.kind)


def format_prefix(root: Iterable[RootComponent], separator: str) -> str:
    """Render the root group of a path.

    Args:
        root (Iterable[RootComponent]): Prefix and/or root directory components.
        separator (str): Target separator.

    Returns:
        str: The rendered prefix; the separator alone for a POSIX root.
    """
    out: list[str] = []
    for component in root:
        match component:
            case Prefix():
                out.append(format_windows_prefix(component, separator))
            case RootDir():
                out.append(separator)
            case _:
                assert_never(component)
    return "".join(out)
