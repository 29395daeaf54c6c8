# topmark:header:start
#
#   project      : DirMark
#   file         : test_truncate.py
#   file_relpath : tests/paths/test_truncate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for splitting path bodies into an elided head and a shown tail."""

from __future__ import annotations

import pytest

from dirmark.paths import truncate
from tests.conftest import parametrize

ITEMS: tuple[str, ...] = ("a", "b", "c", "d", "e")


@parametrize(
    "length, head, tail",
    [
        (0, (), ITEMS),
        (1, ("a", "b", "c", "d"), ("e",)),
        (3, ("a", "b"), ("c", "d", "e")),
        (5, (), ITEMS),
        (9, (), ITEMS),
    ],
)
def test_truncate_splits_head_and_tail(
    length: int, head: tuple[str, ...], tail: tuple[str, ...]
) -> None:
    """The tail holds the last ``min(length, n)`` items; 0 disables truncation."""
    assert truncate(ITEMS, length) == (head, tail)


def test_truncate_empty_sequence() -> None:
    """Nothing to elide in an empty body."""
    assert truncate((), 3) == ((), ())


def test_truncate_preserves_duplicates_and_order() -> None:
    """Equal components are kept in their original positions."""
    head, tail = truncate(["C++", "C++", "C++"], 1)
    assert head == ("C++", "C++")
    assert tail == ("C++",)


def test_truncate_rejects_negative_length() -> None:
    """Negative lengths are a programming error."""
    with pytest.raises(ValueError):
        truncate(ITEMS, -1)
