# topmark:header:start
#
#   project      : DirMark
#   file         : __init__.py
#   file_relpath : src/dirmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark configuration: defaults, TOML loading, and the runtime config model.

Build configs with `MutableDirectoryConfig` (mutable), then `freeze()` into a
`DirectoryConfig` for rendering. Do not mutate a frozen `DirectoryConfig`;
call `DirectoryConfig.thaw()`, edit, then `freeze()` again.
"""

from __future__ import annotations

from dirmark.config.model import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    ArgsLike,
    DirectoryConfig,
    MutableDirectoryConfig,
    default_config_path,
)

__all__: list[str] = [
    "ArgsLike",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "DirectoryConfig",
    "MutableDirectoryConfig",
    "default_config_path",
]
