# topmark:header:start
#
#   project      : DirMark
#   file         : decompose.py
#   file_relpath : src/dirmark/paths/decompose.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split absolute paths into typed components.

Two grammars are supported:

POSIX:
    The path must start with ``/``. Empty segments and ``.`` are dropped,
    ``..`` becomes `ParentDir`.

Windows:
    The path must start with a prefix. Recognized prefixes:

    ============================  ==================
    ``\\\\?\\UNC\\server\\share``  `VERBATIM_UNC`
    ``\\\\?\\C:``                  `VERBATIM_DISK`
    ``\\\\?\\pictures``            `VERBATIM`
    ``\\\\.\\COM1``                `DEVICE_NS`
    ``\\\\server\\share``          `UNC`
    ``C:``                         `DISK`
    ============================  ==================

    Both ``\\`` and ``/`` separate components, except after a verbatim
    (``\\\\?\\``) prefix where only ``\\`` does and ``.`` is kept as `CurDir`.
    A `RootDir` follows the prefix when a separator is present, and implicitly
    for non-verbatim UNC and device prefixes.

Only absolute paths are accepted. A relative path (``src/app``, ``C:foo``,
``\\foo`` on Windows) or an empty string raises `NotAbsolutePathError`.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dirmark.config.logging import get_logger
from dirmark.paths.components import (
    CurDir,
    Normal,
    NotAbsolutePathError,
    ParentDir,
    PathComponents,
    Prefix,
    PrefixKind,
    RootDir,
)

if TYPE_CHECKING:
    from dirmark.config.logging import DirmarkLogger
    from dirmark.paths.components import BodyComponent, RootComponent

logger: DirmarkLogger = get_logger(__name__)

_WINDOWS_SEPARATORS = "\\/"
_VERBATIM_SEPARATORS = "\\"


def host_uses_windows_paths() -> bool:
    """Return True when the running interpreter uses the Windows path grammar."""
    return os.name == "nt"


def _split_first(text: str, separators: str) -> tuple[str, str]:
    """Split ``text`` at the first separator; the separator is dropped."""
    for i, ch in enumerate(text):
        if ch in separators:
            return text[:i], text[i + 1 :]
    return text, ""


def _parse_windows_prefix(path: str) -> tuple[Prefix | None, str]:
    """Return the prefix of a Windows path and the unparsed remainder.

    The remainder keeps its leading separator (if any) so that the caller can
    detect a physical root.
    """
    if path.startswith("\\\\?\\"):
        rest = path[4:]
        if rest[:4].upper() == "UNC\\":
            server, rest = _split_first(rest[4:], _VERBATIM_SEPARATORS)
            share, tail = _split_first(rest, _VERBATIM_SEPARATORS)
            remainder = "\\" + tail if len(share) < len(rest) else ""
            return Prefix.for_unc(server, share, verbatim=True), remainder
        if len(rest) >= 2 and rest[1] == ":" and rest[0].isascii() and rest[0].isalpha():
            if len(rest) == 2 or rest[2] == "\\":
                return Prefix.for_disk(rest[0], verbatim=True), rest[2:]
        text, tail = _split_first(rest, _VERBATIM_SEPARATORS)
        remainder = "\\" + tail if len(text) < len(rest) else ""
        return Prefix(kind=PrefixKind.VERBATIM, text=text), remainder

    if len(path) >= 2 and path[0] in _WINDOWS_SEPARATORS and path[1] in _WINDOWS_SEPARATORS:
        rest = path[2:]
        if len(rest) >= 2 and rest[0] == "." and rest[1] in _WINDOWS_SEPARATORS:
            text, tail = _split_first(rest[2:], _WINDOWS_SEPARATORS)
            remainder = "\\" + tail if len(text) < len(rest) - 2 else ""
            return Prefix(kind=PrefixKind.DEVICE_NS, text=text), remainder
        server, rest = _split_first(rest, _WINDOWS_SEPARATORS)
        if server:
            share, tail = _split_first(rest, _WINDOWS_SEPARATORS)
            remainder = "\\" + tail if len(share) < len(rest) else ""
            return Prefix.for_unc(server, share), remainder

    if len(path) >= 2 and path[1] == ":" and path[0].isascii() and path[0].isalpha():
        return Prefix.for_disk(path[0]), path[2:]

    return None, path


def _split_body(remainder: str, separators: str, *, keep_cur_dir: bool) -> list[BodyComponent]:
    body: list[BodyComponent] = []
    segment: list[str] = []

    def flush() -> None:
        text = "".join(segment)
        segment.clear()
        if not text:
            return
        if text == ".":
            if keep_cur_dir:
                body.append(CurDir())
            return
        if text == "..":
            body.append(ParentDir())
            return
        body.append(Normal(text))

    for ch in remainder:
        if ch in separators:
            flush()
        else:
            segment.append(ch)
    flush()
    return body


def _decompose_posix(path: str) -> PathComponents:
    if not path.startswith("/"):
        raise NotAbsolutePathError(f"Not an absolute POSIX path: {path!r}")
    body = _split_body(path, "/", keep_cur_dir=False)
    return PathComponents(root=(RootDir(),), body=tuple(body))


def _decompose_windows(path: str) -> PathComponents:
    prefix, remainder = _parse_windows_prefix(path)
    if prefix is None:
        raise NotAbsolutePathError(f"Not an absolute Windows path: {path!r}")

    separators = _VERBATIM_SEPARATORS if prefix.kind.is_verbatim else _WINDOWS_SEPARATORS
    physical_root: bool = bool(remainder) and remainder[0] in separators
    if not physical_root and not prefix.kind.has_implicit_root:
        # `C:foo` is relative to the current directory of drive C.
        raise NotAbsolutePathError(f"Drive-relative Windows path: {path!r}")

    root: list[RootComponent] = [prefix]
    if physical_root or (prefix.kind.has_implicit_root and not prefix.kind.is_verbatim):
        root.append(RootDir())

    body = _split_body(remainder, separators, keep_cur_dir=prefix.kind.is_verbatim)
    return PathComponents(root=tuple(root), body=tuple(body))


def decompose(path: str | os.PathLike[str], *, windows: bool | None = None) -> PathComponents:
    """Decompose an absolute path into typed components.

    Args:
        path (str | os.PathLike[str]): Absolute path to split.
        windows (bool | None): Use the Windows grammar when True, POSIX when False,
            and the host's grammar when None.

    Returns:
        PathComponents: The root group and body components, in original order.

    Raises:
        NotAbsolutePathError: If ``path`` is empty or not absolute.
    """
    text: str = os.fspath(path)
    if not text:
        raise NotAbsolutePathError("Cannot decompose an empty path")
    if windows is None:
        windows = host_uses_windows_paths()

    parts = _decompose_windows(text) if windows else _decompose_posix(text)
    logger.trace("Decomposed %r -> root=%r body=%r", text, parts.root, parts.body)
    return parts


def split_root(
    path: str | os.PathLike[str], *, windows: bool | None = None
) -> tuple[tuple[RootComponent, ...], tuple[BodyComponent, ...]]:
    """Return ``(prefix_components, body_components)`` for an absolute path.

    Convenience wrapper around `decompose` for callers that only need the split.
    """
    parts = decompose(path, windows=windows)
    return parts.root, parts.body
