# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models produced by the cascade resolver."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

OptionValue: TypeAlias = Any
SourceKind: TypeAlias = Literal["defaults", "jshintrc", "package"]


class Fragment(BaseModel):
    """One configuration file split into options and globals.

    ``extends`` has already been resolved when a fragment is constructed by a
    source; ``origin`` lists every file that contributed, base first.
    """

    model_config = ConfigDict(frozen=True)

    options: dict[str, OptionValue] = Field(default_factory=dict)
    globals: dict[str, bool] = Field(default_factory=dict)
    origin: tuple[Path, ...] = Field(default_factory=tuple)

    def overlay(self, other: Fragment) -> Fragment:
        """Return a fragment where ``other`` takes precedence over ``self``.

        Options are replaced key by key. Globals are merged so names declared
        only by ``self`` survive.

        Args:
            other: Fragment with higher precedence.

        Returns:
            Fragment: Combined fragment.
        """

        return Fragment(
            options={**self.options, **other.options},
            globals={**self.globals, **other.globals},
            origin=(*self.origin, *other.origin),
        )


class Configuration(BaseModel):
    """Effective ``(options, globals)`` pair handed to the lint engine."""

    model_config = ConfigDict(validate_assignment=True)

    options: dict[str, OptionValue] = Field(default_factory=dict)
    globals: dict[str, bool] = Field(default_factory=dict)

    def apply(self, fragment: Fragment) -> Configuration:
        """Return a copy of the configuration with ``fragment`` applied on top."""

        return Configuration(
            options={**self.options, **fragment.options},
            globals={**self.globals, **fragment.globals},
        )


class AppliedSource(BaseModel):
    """Record describing a fragment that was merged into the configuration."""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind
    path: Path
    description: str = ""
    files: tuple[Path, ...] = Field(default_factory=tuple)


class ResolutionResult(BaseModel):
    """Container bundling a resolved configuration with provenance metadata."""

    configuration: Configuration = Field(default_factory=Configuration)
    sources: list[AppliedSource] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


__all__ = [
    "AppliedSource",
    "Configuration",
    "Fragment",
    "OptionValue",
    "ResolutionResult",
    "SourceKind",
]
