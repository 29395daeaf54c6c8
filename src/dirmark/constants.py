# topmark:header:start
#
#   project      : DirMark
#   file         : constants.py
#   file_relpath : src/dirmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DIRMARK_VERSION: str = get_version("dirmark")

TOML_BLOCK_START: str = "# === BEGIN ==="
TOML_BLOCK_END: str = "# === END ==="
