# topmark:header:start
#
#   project      : DirMark
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and PEP 440 to SemVer conversion."""

from __future__ import annotations

import json
import re
from typing import Any

import pytest
from packaging.version import InvalidVersion, Version

from dirmark.constants import DIRMARK_VERSION
from dirmark.utils.version import pep440_to_semver
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

_SEMVER_RE = re.compile(
    r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*)?(?:\+[0-9A-Za-z.-]+)?$"
)


@mark_cli
def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["version"])
    assert_SUCCESS(result)

    out: str = result.stdout.strip()
    assert out == DIRMARK_VERSION
    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


@mark_cli
def test_version_with_semver_flag_outputs_semver() -> None:
    """It should output the SemVer-rendered version string with --semver."""
    result = run_cli(["version", "--semver"])
    assert_SUCCESS(result)

    out: str = result.stdout.strip()
    assert out == pep440_to_semver(DIRMARK_VERSION)
    assert _SEMVER_RE.fullmatch(out) is not None


@mark_cli
@parametrize("use_semver", [False, True])
def test_version_json_format(use_semver: bool) -> None:
    """`version --format json` returns parseable JSON naming the version scheme."""
    args: list[str] = ["version", "--format", "json"]
    if use_semver:
        args.append("--semver")

    result = run_cli(args)
    assert_SUCCESS(result)

    payload: dict[str, Any] = json.loads(result.stdout)
    if use_semver:
        assert payload == {"version": pep440_to_semver(DIRMARK_VERSION), "format": "semver"}
    else:
        assert payload == {"version": DIRMARK_VERSION, "format": "pep440"}


@mark_cli
def test_version_verbose_shows_banner() -> None:
    """With ``-v`` a heading precedes the version."""
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert "DirMark version (pep440):" in result.stdout
    assert DIRMARK_VERSION in result.stdout


@parametrize(
    "pep440, semver",
    [
        ("1.2.3", "1.2.3"),
        ("1.2", "1.2.0"),
        ("1.2.3rc1", "1.2.3-rc.1"),
        ("1.2.3a2", "1.2.3-alpha.2"),
        ("1.2.3b4", "1.2.3-beta.4"),
        ("1.2.3.dev5", "1.2.3-dev.5"),
        ("1.2.3rc1.dev2", "1.2.3-rc.1.dev.2"),
        ("1.2.3+local.7", "1.2.3+local.7"),
    ],
)
def test_pep440_to_semver(pep440: str, semver: str) -> None:
    """Pre-release, dev and local segments map onto SemVer."""
    assert pep440_to_semver(pep440) == semver


@parametrize("version", ["1.2.3.post1", "1!1.2.3", "1.2.3.4", "not-a-version"])
def test_pep440_to_semver_rejects_unmappable_versions(version: str) -> None:
    """Post releases, epochs and four-part releases have no SemVer form."""
    with pytest.raises(ValueError):
        pep440_to_semver(version)
