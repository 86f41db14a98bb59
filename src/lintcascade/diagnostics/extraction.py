# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract lintable script regions from plain or markup documents."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Final

from .models import ExtractedRegion

# A leading byte order mark counts as whitespace, as it does for JavaScript.
_MARKUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\s\ufeff]*<")
_SCRIPT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"<script[^>]*>(.*?)</script\s*>",
    re.IGNORECASE | re.DOTALL,
)


def is_markup(text: str) -> bool:
    """Return ``True`` when the first non-whitespace character is ``<``."""

    return _MARKUP_PATTERN.match(text) is not None


def iter_script_regions(document: str) -> Iterator[ExtractedRegion]:
    """Yield every ``<script>`` body in ``document`` in document order.

    The line offset of a region is the number of line breaks before the first
    occurrence of its exact text in the document.

    Args:
        document: Markup text to scan.

    Yields:
        ExtractedRegion: Script body with its line offset.
    """

    for match in _SCRIPT_PATTERN.finditer(document):
        text = match.group(1)
        prefix = document[: document.index(text)]
        yield ExtractedRegion(text=text, line_offset=prefix.count("\n"))


def extract_regions(document: str) -> list[ExtractedRegion]:
    """Return the regions of ``document`` that should be linted.

    Markup documents contribute one region per embedded script; anything else
    is a single region with zero offsets.
    """

    if is_markup(document):
        return list(iter_script_regions(document))
    return [ExtractedRegion(text=document)]


__all__ = ["extract_regions", "is_markup", "iter_script_regions"]
