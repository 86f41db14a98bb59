# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration resolution for JSHint runs."""

from __future__ import annotations

from .loader import ConfigResolver, candidate_locations, resolve_configuration
from .models import AppliedSource, Configuration, Fragment, ResolutionResult
from .sources import (
    JSHINTRC_NAME,
    MAX_EXTENDS_DEPTH,
    PACKAGE_CONFIG_KEY,
    PACKAGE_MANIFEST_NAME,
    JshintrcSource,
    PackageManifestSource,
)
from .utils import is_true, normalise_globals, normalise_option_value, parse_relaxed_json

__all__ = [
    "AppliedSource",
    "ConfigResolver",
    "Configuration",
    "Fragment",
    "JSHINTRC_NAME",
    "JshintrcSource",
    "MAX_EXTENDS_DEPTH",
    "PACKAGE_CONFIG_KEY",
    "PACKAGE_MANIFEST_NAME",
    "PackageManifestSource",
    "ResolutionResult",
    "candidate_locations",
    "is_true",
    "normalise_globals",
    "normalise_option_value",
    "parse_relaxed_json",
    "resolve_configuration",
]
