# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cascading JSHint configuration resolver and markup-aware diagnostic runner."""

from __future__ import annotations

from .config import ConfigResolver, Configuration
from .diagnostics import DiagnosticPipeline, DiagnosticRecord, ExtractedRegion
from .engine import JshintEngine, LintEngine
from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    LintCascadeError,
    LintEngineError,
    SourceReadError,
)
from .runner import run_lint

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigResolver",
    "Configuration",
    "DiagnosticPipeline",
    "DiagnosticRecord",
    "ExtractedRegion",
    "JshintEngine",
    "LintCascadeError",
    "LintEngine",
    "LintEngineError",
    "SourceReadError",
    "__version__",
    "run_lint",
]
