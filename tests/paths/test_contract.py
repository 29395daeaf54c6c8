# topmark:header:start
#
#   project      : DirMark
#   file         : test_contract.py
#   file_relpath : tests/paths/test_contract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for contracting a known ancestor directory into a token."""

from __future__ import annotations

import pytest

from dirmark.paths import (
    Normal,
    ParentDir,
    PathComponents,
    contract,
    decompose,
    is_within,
)


def test_contract_home_directory() -> None:
    """The home directory is replaced by the token; the rest is kept in order."""
    out: PathComponents = contract(
        "/Users/astronaut/schematics/rocket", "/Users/astronaut", "~", windows=False
    )
    assert out.root == ()
    assert out.body == (Normal("~"), Normal("schematics"), Normal("rocket"))


def test_contract_exact_match_yields_token_only() -> None:
    """A path equal to the top-level path contracts to the token alone."""
    out: PathComponents = contract("/home/bob", "/home/bob", "~", windows=False)
    assert out == PathComponents(root=(), body=(Normal("~"),))


def test_contract_outside_is_unchanged() -> None:
    """Paths outside the top-level path are returned as decomposed."""
    full: PathComponents = decompose("/var/log", windows=False)
    assert contract(full, "/home/bob", "~", windows=False) == full


def test_contract_matches_whole_components_only() -> None:
    """``/home/bob2`` does not start with ``/home/bob``."""
    full: PathComponents = decompose("/home/bob2/src", windows=False)
    assert contract(full, "/home/bob", "~", windows=False) == full
    assert not is_within(full, "/home/bob", windows=False)


def test_contract_is_idempotent() -> None:
    """Contracting an already contracted path is a no-op."""
    once: PathComponents = contract("/home/bob/src", "/home/bob", "~", windows=False)
    twice: PathComponents = contract(once, "/home/bob", "~", windows=False)
    assert twice == once


def test_contract_keeps_parent_dir_components() -> None:
    """``..`` after the top-level path is not normalized away."""
    out: PathComponents = contract("/home/bob/../alice", "/home/bob", "~", windows=False)
    assert out.body == (Normal("~"), ParentDir(), Normal("alice"))


def test_contract_repository_root() -> None:
    """A repository root contracts to its folder name."""
    out: PathComponents = contract(
        "/Users/astronaut/dev/rocket-controls/src",
        "/Users/astronaut/dev/rocket-controls",
        "rocket-controls",
        windows=False,
    )
    assert out.body == (Normal("rocket-controls"), Normal("src"))


def test_contract_windows_drive_case_insensitive() -> None:
    """Drive letters match regardless of case."""
    out: PathComponents = contract(
        "c:\\Users\\astronaut\\schematics", "C:\\Users\\astronaut", "~", windows=True
    )
    assert out.body == (Normal("~"), Normal("schematics"))


def test_contract_windows_different_drive_is_unchanged() -> None:
    """A path on another drive is never contracted."""
    full: PathComponents = decompose("D:\\Users\\astronaut", windows=True)
    assert contract(full, "C:\\Users\\astronaut", "~", windows=True) == full


def test_contract_rejects_empty_token() -> None:
    """An empty token would make the contraction invisible."""
    with pytest.raises(ValueError, match="token"):
        contract("/home/bob", "/home/bob", "", windows=False)


def test_is_within_root_contains_everything() -> None:
    """Every absolute POSIX path lies within ``/``."""
    assert is_within("/etc/hosts", "/", windows=False)
    assert is_within("/", "/", windows=False)
    assert not is_within("/", "/etc", windows=False)
