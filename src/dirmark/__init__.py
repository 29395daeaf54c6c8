# topmark:header:start
#
#   project      : DirMark
#   file         : __init__.py
#   file_relpath : src/dirmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DirMark package.

DirMark renders the current working directory as a compact prompt segment:
home and repository roots are contracted, long paths are truncated, and
elided components can be abbreviated fish-style. It exposes both a CLI and a
small typed API (`dirmark.directory.render_directory`).
"""

from __future__ import annotations
