# topmark:header:start
#
#   project      : DirMark
#   file         : io.py
#   file_relpath : src/dirmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for DirMark configuration.

This module centralizes **pure** helpers for reading and writing TOML used by
DirMark's configuration layer. Keeping these utilities separate avoids import
cycles and keeps the model classes small and focused.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load the user's ``dirmark.toml`` (``load_toml_dict``).
    3. Read values with the checked getters, which record a warning in a
       `DiagnosticLog` instead of failing on a bad value.
    4. Serialize back to TOML when needed (``to_toml``).

Parsing and rendering both use `tomlkit`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dirmark.config.keys import Toml
from dirmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from dirmark.config.logging import DirmarkLogger
    from dirmark.diagnostic.model import DiagnosticLog

logger: DirmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "as_toml_table",
    "get_bool_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_uint_value_or_none_checked",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]


# --- Type guards / narrowers ---


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict``.
    """
    return isinstance(val, dict)


def as_toml_table(obj: object) -> TomlTable | None:
    """Return the object as a TOML table when possible, otherwise ``None``."""
    return obj if is_toml_table(obj) else None


# --- TOML file I/O ---


def load_defaults_dict() -> TomlTable:
    """Return DirMark's **runtime defaults** as a Python dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.SECTION_DIRECTORY: {
            Toml.KEY_TRUNCATION_LENGTH: 3,
            Toml.KEY_FISH_STYLE_PWD_DIR_LENGTH: 0,
            Toml.KEY_USE_LOGICAL_PATH: True,
            Toml.KEY_TRUNCATE_TO_REPO: True,
            Toml.KEY_STYLE: "bold cyan",
            Toml.KEY_PREFIX: "in ",
            Toml.KEY_SUFFIX: "",
        },
    }


def load_toml_dict(path: Path, *, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``dirmark.toml``).
        diagnostics: When given, read and parse failures are recorded as errors.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if diagnostics is not None:
            diagnostics.add_error(f"Cannot read {path}: {e}")
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if diagnostics is not None:
            diagnostics.add_error(f"Invalid TOML in {path}: {e}")
        return {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings (TOML has no `null`)."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): The TOML mapping to serialize.

    Returns:
        str: The TOML document text.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return tomlkit.dumps(cleaned)


# --- Schema/shape validation helpers (checked) ---


def _warn_type(
    expected: str,
    loc: str,
    value: object,
    *,
    diagnostics: DiagnosticLog,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(
        f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
    )


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`.

    Ints, floats and bools are **not** coerced.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn_type("string", f"{where}.{key}", value, diagnostics=diagnostics)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn_type("bool", f"{where}.{key}", value, diagnostics=diagnostics)
    return None


def get_uint_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional non-negative int value, warning on anything else.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Negative integers are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        _warn_type("non-negative int", loc, value, diagnostics=diagnostics)
        return None

    if value < 0:
        logger.warning("Expected non-negative int in %s, got %d", loc, value)
        diagnostics.add_warning(f"Expected non-negative int in {loc}, got {value}")
        return None

    return value
