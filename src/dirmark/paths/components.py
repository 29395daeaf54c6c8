# topmark:header:start
#
#   project      : DirMark
#   file         : components.py
#   file_relpath : src/dirmark/paths/components.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed path components.

A decomposed path is an ordered tuple of tagged variants:

- root group (always first, at most once): `Prefix`, `RootDir`
- body: `CurDir`, `ParentDir`, `Normal`

Each variant is its own frozen dataclass so that ``match`` statements over the
`RootComponent` and `BodyComponent` unions are exhaustive and checkable with
`typing.assert_never`, rather than relying on an unreachable fallback branch.

Invariants:
    - Root components only appear before any body component.
    - `Normal.text` never contains a path separator and is never empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias, assert_never


class NotAbsolutePathError(ValueError):
    """Raised when a relative or empty path reaches the decomposer.

    Decomposition is only defined for absolute paths; callers are responsible
    for resolving the working directory before rendering.
    """


class PrefixKind(str, Enum):
    """Windows path prefix flavors."""

    # \\?\pictures
    VERBATIM = "verbatim"
    # \\?\UNC\server\share
    VERBATIM_UNC = "verbatim_unc"
    # \\?\C:
    VERBATIM_DISK = "verbatim_disk"
    # \\.\COM1
    DEVICE_NS = "device_ns"
    # \\server\share
    UNC = "unc"
    # C:
    DISK = "disk"

    @property
    def is_verbatim(self) -> bool:
        """Return True for ``\\\\?\\`` prefixes (no separator normalization)."""
        return self in (PrefixKind.VERBATIM, PrefixKind.VERBATIM_UNC, PrefixKind.VERBATIM_DISK)

    @property
    def has_implicit_root(self) -> bool:
        """Return True when the prefix denotes a root even without a trailing separator."""
        return self is not PrefixKind.DISK


@dataclass(frozen=True, slots=True)
class Prefix:
    """Platform prefix of a Windows path.

    Attributes:
        kind (PrefixKind): Prefix flavor.
        disk (str): Upper-cased drive letter for `DISK` / `VERBATIM_DISK`.
        server (str): Server name for `UNC` / `VERBATIM_UNC`.
        share (str): Share name for `UNC` / `VERBATIM_UNC`.
        text (str): Embedded text for `VERBATIM` / `DEVICE_NS`.
    """

    kind: PrefixKind
    disk: str = ""
    server: str = ""
    share: str = ""
    text: str = ""

    @classmethod
    def for_disk(cls, letter: str, *, verbatim: bool = False) -> Prefix:
        """Return a drive prefix; drive letters compare case-insensitively."""
        kind = PrefixKind.VERBATIM_DISK if verbatim else PrefixKind.DISK
        return cls(kind=kind, disk=letter.upper())

    @classmethod
    def for_unc(cls, server: str, share: str, *, verbatim: bool = False) -> Prefix:
        """Return a UNC share prefix."""
        kind = PrefixKind.VERBATIM_UNC if verbatim else PrefixKind.UNC
        return cls(kind=kind, server=server, share=share)


@dataclass(frozen=True, slots=True)
class RootDir:
    """The root separator (``/`` on POSIX, ``\\`` after a Windows prefix)."""


@dataclass(frozen=True, slots=True)
class CurDir:
    """A ``.`` component (only preserved inside verbatim paths)."""


@dataclass(frozen=True, slots=True)
class ParentDir:
    """A ``..`` component."""


@dataclass(frozen=True, slots=True)
class Normal:
    """A regular named path segment."""

    text: str


RootComponent: TypeAlias = Prefix | RootDir
BodyComponent: TypeAlias = CurDir | ParentDir | Normal
Component: TypeAlias = RootComponent | BodyComponent


def component_text(component: BodyComponent) -> str:
    """Return the display text of a body component."""
    match component:
        case CurDir():
            return "."
        case ParentDir():
            return ".."
        case Normal(text=text):
            return text
        case _:
            assert_never(component)


@dataclass(frozen=True, slots=True)
class PathComponents:
    """Decomposed path: an optional root group followed by body components.

    A contracted path (e.g. ``~/src``) has no root group; its first body
    component is the contraction token.

    Attributes:
        root (tuple[RootComponent, ...]): Prefix and/or root directory components.
        body (tuple[BodyComponent, ...]): Remaining components in original order.
    """

    root: tuple[RootComponent, ...] = ()
    body: tuple[BodyComponent, ...] = ()

    @property
    def components(self) -> tuple[Component, ...]:
        """Return all components in order, root group first."""
        return (*self.root, *self.body)

    def __len__(self) -> int:
        return len(self.root) + len(self.body)

    def starts_with(self, other: PathComponents) -> bool:
        """Return True if ``other`` is a component-wise prefix of this path.

        Matching is done on whole components, so ``/home/bob2`` does not start
        with ``/home/bob``.
        """
        if self.root != other.root:
            return False
        n: int = len(other.body)
        return self.body[:n] == other.body

    def last_name(self) -> str | None:
        """Return the text of the last `Normal` component, if the path ends with one."""
        if self.body and isinstance(self.body[-1], Normal):
            return self.body[-1].text
        return None
