# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markup-aware diagnostic pipeline."""

from __future__ import annotations

from .extraction import extract_regions, is_markup, iter_script_regions
from .formatting import SEPARATOR, format_line, render_message, sort_key, sort_records
from .models import DiagnosticRecord, ExtractedRegion
from .pipeline import DiagnosticPipeline

__all__ = [
    "DiagnosticPipeline",
    "DiagnosticRecord",
    "ExtractedRegion",
    "SEPARATOR",
    "extract_regions",
    "format_line",
    "is_markup",
    "iter_script_regions",
    "render_message",
    "sort_key",
    "sort_records",
]
