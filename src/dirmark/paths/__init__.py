# topmark:header:start
#
#   project      : DirMark
#   file         : __init__.py
#   file_relpath : src/dirmark/paths/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure path transformations used to render the directory segment.

Stages, in order:

1. `decompose`: split an absolute path into a root group and body.
2. `contract`: replace a known ancestor with a token.
3. `format_prefix`: render drive/UNC/root prefixes.
4. `truncate`: split the body into an elided head and a shown tail.
5. `abbreviate_head`: fish-style rendering of the elided head.

`format_path` composes stages 3-5. None of these functions perform I/O.
"""

from __future__ import annotations

from .components import (
    BodyComponent,
    Component,
    CurDir,
    Normal,
    NotAbsolutePathError,
    ParentDir,
    PathComponents,
    Prefix,
    PrefixKind,
    RootComponent,
    RootDir,
    component_text,
)
from .contract import as_components, contract, is_within
from .decompose import decompose, host_uses_windows_paths, split_root
from .fish import abbreviate_component, abbreviate_head, abbreviate_text, graphemes
from .format import ELLIPSIS, format_path
from .prefix import POSIX_SEPARATOR, WINDOWS_SEPARATOR, format_prefix, get_separator
from .truncate import truncate

__all__: list[str] = [
    "BodyComponent",
    "Component",
    "CurDir",
    "ELLIPSIS",
    "Normal",
    "NotAbsolutePathError",
    "POSIX_SEPARATOR",
    "ParentDir",
    "PathComponents",
    "Prefix",
    "PrefixKind",
    "RootComponent",
    "RootDir",
    "WINDOWS_SEPARATOR",
    "abbreviate_component",
    "abbreviate_head",
    "abbreviate_text",
    "as_components",
    "component_text",
    "contract",
    "decompose",
    "format_path",
    "format_prefix",
    "get_separator",
    "graphemes",
    "host_uses_windows_paths",
    "is_within",
    "split_root",
    "truncate",
]
