# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across the lintcascade package."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .diagnostics.models import DiagnosticRecord


class LintCascadeError(Exception):
    """Base class for every error raised by lintcascade."""


class ConfigError(LintCascadeError):
    """Raised when configuration input is invalid."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigParseError(ConfigError):
    """Raised when a configuration file exists but cannot be parsed."""


class ConfigReadError(ConfigError):
    """Raised when a configuration file cannot be checked or read."""


class LintEngineError(LintCascadeError):
    """Raised when the lint engine fails while processing a region.

    The engine may have produced diagnostics before failing; those are kept on
    :attr:`records` so callers can still report them.
    """

    def __init__(self, message: str, *, records: Sequence[DiagnosticRecord] = ()) -> None:
        super().__init__(message)
        self.records = tuple(records)


class SourceReadError(LintCascadeError):
    """Raised when the file to lint cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read source file at: {path} ({reason})")
        self.path = path


__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "LintCascadeError",
    "LintEngineError",
    "SourceReadError",
]
