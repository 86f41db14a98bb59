# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint engine interface and the JSHint adapter."""

from __future__ import annotations

from .base import LintEngine
from .jshint import BRIDGE_SCRIPT, JshintEngine, parse_records

__all__ = ["BRIDGE_SCRIPT", "JshintEngine", "LintEngine", "parse_records"]
