# topmark:header:start
#
#   project      : DirMark
#   file         : style.py
#   file_relpath : src/dirmark/rendering/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Translate style tokens into `yachalk` styles.

The rendering core treats ``style`` as an opaque token. This module gives it
meaning for terminal output. A style string is a whitespace-separated list of:

- colour names: ``red``, ``bright-red``, ``purple`` (alias of ``magenta``), ...
- modifiers: ``bold``, ``dimmed``, ``italic``, ``underline``, ``inverted``,
  ``strikethrough``, ``hidden``
- explicit targets: ``fg:<colour>``, ``bg:<colour>``
- hex colours: ``#rrggbb`` (also ``fg:#rrggbb`` and ``bg:#rrggbb``)
- ``none``: no styling at all

Unknown words are logged and ignored.

Example:
    ```python
    colorize("~/src", "bold cyan")      # bold cyan "~/src"
    colorize("~/src", "bg:blue white")  # white on blue
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Protocol

from yachalk import chalk

from dirmark.config.logging import get_logger

if TYPE_CHECKING:
    from dirmark.config.logging import DirmarkLogger

logger: DirmarkLogger = get_logger(__name__)


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join the provided arguments into a display string."""
        ...


NO_STYLE: Final[str] = "none"

# Style token word -> yachalk attribute name
_MODIFIERS: Final[dict[str, str]] = {
    "bold": "bold",
    "dimmed": "dim",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "inverted": "inverse",
    "inverse": "inverse",
    "strikethrough": "strikethrough",
    "hidden": "hidden",
}

_COLORS: Final[dict[str, str]] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "purple": "magenta",
    "cyan": "cyan",
    "white": "white",
    "gray": "gray",
    "grey": "gray",
}


def _color_attr(name: str, *, background: bool) -> str | None:
    """Return the yachalk attribute for a colour name, or None if unknown."""
    bright: bool = False
    key: str = name
    if key.startswith("bright-"):
        bright, key = True, key.removeprefix("bright-")
    base: str | None = _COLORS.get(key)
    if base is None:
        return None
    attr: str = f"{base}_bright" if bright and base != "gray" else base
    return f"bg_{attr}" if background else attr


def _parse_hex(value: str) -> tuple[int, int, int] | None:
    digits: str = value.removeprefix("#")
    if len(digits) != 6:
        return None
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        return None


def _apply_word(builder: Any, word: str) -> Any | None:
    """Return ``builder`` extended with one style word, or None if the word is unknown."""
    background: bool = False
    token: str = word
    if token.startswith("bg:"):
        background, token = True, token.removeprefix("bg:")
    elif token.startswith("fg:"):
        token = token.removeprefix("fg:")

    if token.startswith("#"):
        rgb = _parse_hex(token)
        if rgb is None:
            return None
        return builder.bg_rgb(*rgb) if background else builder.rgb(*rgb)

    if not background and token in _MODIFIERS:
        return getattr(builder, _MODIFIERS[token])

    attr: str | None = _color_attr(token, background=background)
    if attr is None:
        return None
    return getattr(builder, attr)


def build_style(style: str) -> Colorizer | None:
    """Build a `yachalk` builder for a style string.

    Args:
        style (str): Whitespace-separated style words.

    Returns:
        Colorizer | None: The chalk builder, or None when the style applies nothing.
    """
    words: list[str] = style.lower().split()
    if not words or NO_STYLE in words:
        return None

    builder: Any | None = None
    for word in words:
        current: Any = chalk if builder is None else builder
        extended: Any | None = _apply_word(current, word)
        if extended is None:
            logger.warning("Ignoring unknown style word %r in %r", word, style)
            continue
        builder = extended
    return builder


def colorize(text: str, style: str, *, enable_color: bool = True) -> str:
    """Return ``text`` decorated with ``style``.

    Args:
        text (str): Text to decorate.
        style (str): Style string (see module docstring).
        enable_color (bool): When False, ``text`` is returned unchanged.

    Returns:
        str: The styled text.
    """
    if not enable_color:
        return text
    builder: Colorizer | None = build_style(style)
    if builder is None:
        return text
    return builder(text)
