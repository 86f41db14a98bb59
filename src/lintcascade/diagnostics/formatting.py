# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordering and rendering of engine diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from .models import DiagnosticRecord, ExtractedRegion

SEPARATOR: Final[str] = " :: "
PLACEHOLDERS: Final[tuple[str, ...]] = ("{a}", "{b}", "{c}", "{d}")


def sort_key(record: DiagnosticRecord) -> tuple[int, int, int]:
    """Return the ordering key: positionless last, then line, then character."""

    if not record.has_position:
        return (1, 0, 0)
    return (0, record.line or 0, record.character or 0)


def sort_records(records: Iterable[DiagnosticRecord]) -> list[DiagnosticRecord]:
    """Return ``records`` in reporting order."""

    return sorted(records, key=sort_key)


def _stringify(value: Any) -> str:
    """Render a captured template value the way JavaScript string conversion would."""

    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)


def render_message(record: DiagnosticRecord) -> str | None:
    """Return the human-readable message for ``record``.

    Records without a template carry nothing renderable and yield ``None``.
    When the engine supplied all four captured values, ``null`` included, each
    placeholder is replaced once, left to right. Otherwise the engine's
    ``reason`` is used as is.

    Args:
        record: Engine finding to render.

    Returns:
        str | None: Rendered message, or ``None`` when the record is skipped.
    """

    if record.raw is None:
        return None
    if not record.has_template_values:
        return record.reason or ""
    message = record.raw
    for placeholder, value in zip(PLACEHOLDERS, record.template_values, strict=True):
        message = message.replace(placeholder, _stringify(value), 1)
    return message


def format_line(record: DiagnosticRecord, message: str, region: ExtractedRegion) -> str:
    """Return the ``line :: character :: message`` output line for ``record``."""

    line = (record.line or 0) + region.line_offset
    character = (record.character or 0) + region.char_offset
    return SEPARATOR.join((str(line), str(character), message))


__all__ = ["PLACEHOLDERS", "SEPARATOR", "format_line", "render_message", "sort_key", "sort_records"]
