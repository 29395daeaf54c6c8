# topmark:header:start
#
#   project      : DirMark
#   file         : keys.py
#   file_relpath : src/dirmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DirMark configuration.

Keys defined here represent the *external configuration API* of
``dirmark.toml``. Renaming or removing a key is a breaking change.
CLI option names are kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DirMark configuration."""

    # [directory]
    SECTION_DIRECTORY: Final[str] = "directory"

    KEY_TRUNCATION_LENGTH: Final[str] = "truncation_length"
    KEY_FISH_STYLE_PWD_DIR_LENGTH: Final[str] = "fish_style_pwd_dir_length"
    KEY_USE_LOGICAL_PATH: Final[str] = "use_logical_path"
    KEY_TRUNCATE_TO_REPO: Final[str] = "truncate_to_repo"
    KEY_STYLE: Final[str] = "style"
    KEY_PREFIX: Final[str] = "prefix"
    KEY_SUFFIX: Final[str] = "suffix"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({SECTION_DIRECTORY})

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_DIRECTORY: frozenset(
            {
                KEY_TRUNCATION_LENGTH,
                KEY_FISH_STYLE_PWD_DIR_LENGTH,
                KEY_USE_LOGICAL_PATH,
                KEY_TRUNCATE_TO_REPO,
                KEY_STYLE,
                KEY_PREFIX,
                KEY_SUFFIX,
            }
        ),
    }
