# topmark:header:start
#
#   project      : DirMark
#   file         : truncate.py
#   file_relpath : src/dirmark/paths/truncate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Limit the number of trailing path components shown."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def truncate(components: Sequence[T], length: int) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Split ``components`` into ``(elided_head, shown_tail)``.

    A ``length`` of 0 disables truncation. Otherwise the tail holds the last
    ``min(length, len(components))`` components. Both halves keep their
    original order.

    Args:
        components (Sequence[T]): Body components, left to right.
        length (int): Maximum number of trailing components to show.

    Returns:
        tuple[tuple[T, ...], tuple[T, ...]]: The elided head and the shown tail.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(f"Truncation length must be >= 0 (got {length})")

    items: tuple[T, ...] = tuple(components)
    if length == 0 or length >= len(items):
        return (), items

    first_shown: int = len(items) - length
    return items[:first_shown], items[first_shown:]
