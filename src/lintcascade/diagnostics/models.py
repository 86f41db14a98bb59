# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing engine findings and lintable regions."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

TemplateValue: TypeAlias = Any
TEMPLATE_FIELDS: frozenset[str] = frozenset({"a", "b", "c", "d"})


class DiagnosticRecord(BaseModel):
    """One finding reported by the lint engine.

    ``raw`` is the message template with ``{a}`` .. ``{d}`` placeholders and
    ``reason`` the engine's pre-rendered message. JSHint's "too many errors"
    sentinel arrives as an empty record.
    """

    model_config = ConfigDict(frozen=True)

    line: int | None = None
    character: int | None = None
    reason: str | None = None
    raw: str | None = None
    code: str | None = None
    a: TemplateValue = None
    b: TemplateValue = None
    c: TemplateValue = None
    d: TemplateValue = None

    @property
    def has_position(self) -> bool:
        """Return ``True`` when the engine localised the finding."""
        return bool(self.line)

    @property
    def template_values(self) -> tuple[TemplateValue, ...]:
        """Return the ``a`` .. ``d`` captured values in placeholder order."""
        return (self.a, self.b, self.c, self.d)

    @property
    def has_template_values(self) -> bool:
        """Return ``True`` when the engine supplied all of ``a`` .. ``d``.

        An explicit ``null`` counts as supplied; only omitted values are absent.
        """
        return TEMPLATE_FIELDS <= self.model_fields_set


class ExtractedRegion(BaseModel):
    """Contiguous span of lintable text and its position in the document."""

    model_config = ConfigDict(frozen=True)

    text: str
    line_offset: int = Field(default=0, ge=0)
    char_offset: int = Field(default=0, ge=0)


__all__ = ["DiagnosticRecord", "ExtractedRegion", "TEMPLATE_FIELDS", "TemplateValue"]
