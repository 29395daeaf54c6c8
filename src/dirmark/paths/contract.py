# topmark:header:start
#
#   project      : DirMark
#   file         : contract.py
#   file_relpath : src/dirmark/paths/contract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Contract a known ancestor directory into a symbolic token.

The replacement is applied only when the full path *is* the top-level path or
lies below it. The test compares decomposed components, never raw strings, so
``/home/bob2`` is left alone when contracting ``/home/bob``.

Contracted paths carry no root group: ``/home/bob/src`` contracted under
``/home/bob`` with token ``~`` becomes the body ``(Normal("~"), Normal("src"))``.
Contracting an already contracted path is therefore a no-op.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dirmark.config.logging import get_logger
from dirmark.paths.components import Normal, PathComponents
from dirmark.paths.decompose import decompose

if TYPE_CHECKING:
    from dirmark.config.logging import DirmarkLogger

logger: DirmarkLogger = get_logger(__name__)

PathLike = str | os.PathLike[str] | PathComponents


def as_components(path: PathLike, *, windows: bool | None = None) -> PathComponents:
    """Return ``path`` as `PathComponents`, decomposing strings and path objects."""
    if isinstance(path, PathComponents):
        return path
    return decompose(path, windows=windows)


def is_within(
    full_path: PathLike,
    top_level_path: PathLike,
    *,
    windows: bool | None = None,
) -> bool:
    """Return True if ``full_path`` equals or descends from ``top_level_path``."""
    full = as_components(full_path, windows=windows)
    top = as_components(top_level_path, windows=windows)
    return full.starts_with(top)


def contract(
    full_path: PathLike,
    top_level_path: PathLike,
    token: str,
    *,
    windows: bool | None = None,
) -> PathComponents:
    """Replace ``top_level_path`` at the start of ``full_path`` with ``token``.

    Args:
        full_path (PathLike): Path to contract.
        top_level_path (PathLike): Ancestor to replace (e.g. the home directory).
        token (str): Replacement text (e.g. ``"~"`` or a repository name).
        windows (bool | None): Path grammar for string inputs; host grammar when None.

    Returns:
        PathComponents: ``token`` followed by the remaining components when
        ``full_path`` is within ``top_level_path``; otherwise ``full_path``
        unchanged.

    Raises:
        ValueError: If ``token`` is empty.
    """
    if not token:
        raise ValueError("Contraction token must not be empty")

    full = as_components(full_path, windows=windows)
    top = as_components(top_level_path, windows=windows)

    if not full.starts_with(top):
        logger.trace("No contraction: %r is not within %r", full, top)
        return full

    remaining = full.body[len(top.body) :]
    contracted = PathComponents(root=(), body=(Normal(token), *remaining))
    logger.debug("Contracted %d component(s) into %r", len(top), token)
    return contracted
