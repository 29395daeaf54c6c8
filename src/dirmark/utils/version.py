# topmark:header:start
#
#   project      : DirMark
#   file         : version.py
#   file_relpath : src/dirmark/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version utilities for DirMark."""

from __future__ import annotations

from typing import Final

from packaging.version import InvalidVersion, Version

_PRE_LABELS: Final[dict[str, str]] = {"a": "alpha", "b": "beta", "rc": "rc"}


def pep440_to_semver(pep440_version: str) -> str:
    """Convert a PEP 440 version to SemVer.

    Maps:
      rcN  -> -rc.N
      aN   -> -alpha.N
      bN   -> -beta.N
      devN -> -dev.N (after any pre-release)
      +local kept as-is

    Args:
        pep440_version (str): The version in PEP 440 format.

    Returns:
        str: The version in SemVer format.

    Raises:
        ValueError: If the version is not valid PEP 440, has an epoch, more
            than three release components, or is a post release.
    """
    try:
        parsed = Version(pep440_version)
    except InvalidVersion as exc:
        raise ValueError(f"Not a recognized PEP 440 version: {pep440_version!r}") from exc

    if parsed.is_postrelease:
        raise ValueError(f"Post-releases are not valid SemVer: {pep440_version!r}")
    if parsed.epoch:
        raise ValueError(f"Epochs are not valid SemVer: {pep440_version!r}")
    if len(parsed.release) > 3:
        raise ValueError(f"SemVer allows three release components: {pep440_version!r}")

    major, minor, patch = (*parsed.release, 0, 0)[:3]
    pre: str = ""
    if parsed.pre is not None:
        label, number = parsed.pre
        pre = f"-{_PRE_LABELS[label]}.{number}"
    dev: str = f"{'.' if pre else '-'}dev.{parsed.dev}" if parsed.dev is not None else ""
    local: str = f"+{parsed.local}" if parsed.local else ""
    return f"{major}.{minor}.{patch}{pre}{dev}{local}"
