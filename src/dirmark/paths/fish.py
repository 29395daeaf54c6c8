# topmark:header:start
#
#   project      : DirMark
#   file         : fish.py
#   file_relpath : src/dirmark/paths/fish.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fish-style abbreviation of elided path components.

Instead of collapsing the elided head of a path into an ellipsis, each
component is shortened to its first few *grapheme clusters*, the way the fish
shell renders ``prompt_pwd``::

    ~/starship/engines/booster/rocket  ->  ~/s/engines/booster/rocket
    ~/.starship/engines/booster/rocket ->  ~/.s/engines/booster/rocket

Clusters are found with the extended grapheme cluster pattern (``\\X``) of the
`regex` package, so combining sequences such as ``a̐`` and CJK characters are
never split.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import regex

from dirmark.config.logging import get_logger
from dirmark.paths.components import Normal, component_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dirmark.config.logging import DirmarkLogger
    from dirmark.paths.components import BodyComponent

logger: DirmarkLogger = get_logger(__name__)

_GRAPHEME_RE: regex.Pattern[str] = regex.compile(r"\X")

HIDDEN_DIR_MARKER: str = "."


def graphemes(text: str) -> list[str]:
    """Return the extended grapheme clusters of ``text``."""
    return _GRAPHEME_RE.findall(text)


def abbreviate_text(text: str, length: int) -> str:
    """Keep the first ``length`` grapheme clusters of ``text``.

    A leading ``.`` does not count against ``length``.
    """
    clusters: list[str] = graphemes(text)
    if len(clusters) <= length:
        return text
    if text.startswith(HIDDEN_DIR_MARKER):
        return "".join(clusters[: length + 1])
    return "".join(clusters[:length])


def abbreviate_component(component: BodyComponent, length: int) -> str:
    """Return the abbreviated display text of a single body component.

    `CurDir` and `ParentDir` render verbatim as ``.`` and ``..``.
    """
    if isinstance(component, Normal):
        return abbreviate_text(component.text, length)
    return component_text(component)


def abbreviate_head(head: Iterable[BodyComponent], length: int, separator: str) -> str:
    """Render the elided head of a path in fish style.

    Args:
        head (Iterable[BodyComponent]): Elided components, left to right.
        length (int): Grapheme clusters kept per component (must be > 0).
        separator (str): Separator used to join the components.

    Returns:
        str: The abbreviated components joined by ``separator``, followed by a
        trailing ``separator``; an empty string for an empty head.

    Raises:
        ValueError: If ``length`` is not positive.
    """
    if length <= 0:
        raise ValueError(f"Fish-style length must be > 0 (got {length})")

    parts: list[str] = [abbreviate_component(c, length) for c in head]
    if not parts:
        return ""
    logger.trace("Fish-style head: %r", parts)
    return separator.join(parts) + separator
