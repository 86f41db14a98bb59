# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers that parse and normalise JSHint configuration documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Final

import json5

from ..errors import ConfigParseError
from .models import Fragment

EXTENDS_KEY: Final[str] = "extends"
GLOBALS_KEYS: Final[frozenset[str]] = frozenset({"globals", "predef"})
_BOOLEAN_STRINGS: Final[dict[str, bool]] = {"true": True, "false": False}


def is_true(value: Any) -> bool:
    """Return ``True`` for the boolean ``True`` and the string ``"true"``."""

    return value is True or value == "true"


def normalise_option_value(value: Any) -> Any:
    """Convert ``"true"``/``"false"`` strings to booleans, leave other values alone."""

    if isinstance(value, str) and value in _BOOLEAN_STRINGS:
        return _BOOLEAN_STRINGS[value]
    return value


def normalise_globals(value: Any) -> dict[str, bool]:
    """Return a ``name -> assignable`` mapping for a ``globals``/``predef`` entry.

    The array form marks every listed name assignable. The object form maps each
    name through :func:`is_true`. Any other shape declares nothing.

    Args:
        value: Raw ``globals`` or ``predef`` value from a configuration file.

    Returns:
        dict[str, bool]: Normalised globals.
    """

    if isinstance(value, Mapping):
        return {str(name): is_true(flag) for name, flag in value.items()}
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return {str(name): True for name in value}
    return {}


def parse_relaxed_json(text: str, path: Path) -> dict[str, Any]:
    """Parse a JSON document that may contain comments and trailing commas.

    Args:
        text: Raw file contents.
        path: File the contents came from, used for error reporting.

    Returns:
        dict[str, Any]: Parsed top-level object.

    Raises:
        ConfigParseError: If the text cannot be parsed as relaxed JSON (including
            documents nested too deeply for the parser) or is not an object.
    """

    try:
        document = json5.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ConfigParseError(f"Could not parse JSON at: {path}", path=path) from exc
    if not isinstance(document, dict):
        raise ConfigParseError(f"Could not parse JSON at: {path}", path=path)
    return document


def split_fragment(document: Mapping[str, Any], path: Path) -> Fragment:
    """Split a parsed document into options and globals.

    ``extends`` is not interpreted here; callers resolve it first and pass the
    remaining keys.

    Args:
        document: Parsed configuration object.
        path: File the document was read from.

    Returns:
        Fragment: Fragment holding this document's own keys.
    """

    options: dict[str, Any] = {}
    globals_: dict[str, bool] = {}
    for key, value in document.items():
        if key == EXTENDS_KEY:
            continue
        if key in GLOBALS_KEYS:
            globals_.update(normalise_globals(value))
        else:
            options[key] = normalise_option_value(value)
    return Fragment(options=options, globals=globals_, origin=(path,))


__all__ = [
    "EXTENDS_KEY",
    "GLOBALS_KEYS",
    "is_true",
    "normalise_globals",
    "normalise_option_value",
    "parse_relaxed_json",
    "split_fragment",
]
