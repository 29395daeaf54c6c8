# topmark:header:start
#
#   project      : DirMark
#   file         : format.py
#   file_relpath : src/dirmark/paths/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble the displayed path from decomposed components.

The rendered string is::

    <prefix> <elided head> <shown tail>

where the elided head is either an ellipsis followed by a separator or, in
fish style, the abbreviated components followed by a separator.
"""

from __future__ import annotations

from typing import Final

from dirmark.config.logging import DirmarkLogger, get_logger
from dirmark.paths.components import PathComponents, component_text
from dirmark.paths.fish import abbreviate_head
from dirmark.paths.prefix import format_prefix
from dirmark.paths.truncate import truncate

logger: DirmarkLogger = get_logger(__name__)

ELLIPSIS: Final[str] = "…"


def format_path(
    path: PathComponents,
    *,
    separator: str,
    truncation_length: int = 0,
    fish_style_length: int = 0,
) -> str:
    """Render ``path`` with truncation and optional fish-style abbreviation.

    Args:
        path (PathComponents): Decomposed (and possibly contracted) path.
        separator (str): Separator placed between components.
        truncation_length (int): Trailing components to show; 0 shows all.
        fish_style_length (int): When > 0, abbreviate the elided head to this
            many grapheme clusters per component instead of using an ellipsis.

    Returns:
        str: The display string.
    """
    result: str = format_prefix(path.root, separator)

    head, tail = truncate(path.body, truncation_length)
    if head:
        if fish_style_length > 0:
            result += abbreviate_head(head, fish_style_length, separator)
        else:
            result += ELLIPSIS + separator
        logger.debug("Elided %d component(s), showing %d", len(head), len(tail))

    result += separator.join(component_text(c) for c in tail)
    return result
