# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cascading configuration lookup with ``extends`` support and traceability."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from ..errors import ConfigError
from ..logging import warn
from ..paths import user_home
from .models import AppliedSource, Configuration, Fragment, ResolutionResult
from .sources import JSHINTRC_NAME, PACKAGE_MANIFEST_NAME, JshintrcSource, PackageManifestSource


def candidate_locations(source_file: Path, *, home: Path | None) -> tuple[Path, ...]:
    """Return the directories searched for configuration, nearest first.

    The walk starts at the directory holding ``source_file``, climbs through
    every ancestor up to the filesystem root and ends at ``home``. Symlinks
    are not followed, so a linked project sees the ancestors it is reached through.

    Args:
        source_file: Path of the file being linted.
        home: User home directory, or ``None`` when it cannot be determined.

    Returns:
        tuple[Path, ...]: Ordered candidate directories.
    """

    start = Path(os.path.abspath(source_file)).parent
    locations = [start, *start.parents]
    if home is not None:
        locations.append(home)
    return tuple(locations)


class ConfigResolver:
    """Resolve the effective JSHint configuration for a source file.

    Tool-level defaults from the plugin directory are applied first. The nearest
    ``.jshintrc`` or ``package.json`` with a ``jshintConfig`` key is applied on
    top, and the walk stops there. Errors reading individual files never
    escape: they are logged and the file is treated as absent.
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        reporter: Callable[[str], None] | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            env: Environment used to locate the home directory.
            reporter: Callback receiving logged failures. Defaults to
                :func:`lintcascade.logging.warn`.
        """

        self._env = env
        self._reporter = reporter or warn

    def resolve(self, source_file_path: Path, plugin_home_dir: Path | None) -> Configuration:
        """Return the effective configuration for ``source_file_path``."""

        return self.resolve_with_trace(source_file_path, plugin_home_dir).configuration

    def resolve_with_trace(self, source_file_path: Path, plugin_home_dir: Path | None) -> ResolutionResult:
        """Return the effective configuration with provenance metadata.

        Args:
            source_file_path: Original path of the file being linted.
            plugin_home_dir: Directory holding the tool-level ``.jshintrc``.

        Returns:
            ResolutionResult: Configuration, applied sources and logged warnings.
        """

        result = ResolutionResult()

        def report(error: ConfigError) -> None:
            message = str(error)
            result.warnings.append(message)
            self._reporter(message)

        if plugin_home_dir is not None:
            defaults = JshintrcSource(plugin_home_dir / JSHINTRC_NAME, kind="defaults")
            if (fragment := self._load(defaults, report)) is not None:
                self._apply(result, defaults, fragment)

        home = user_home(self._env)
        for directory in candidate_locations(source_file_path, home=home):
            if self._probe(directory, result, report):
                break
        return result

    def _probe(
        self,
        directory: Path,
        result: ResolutionResult,
        report: Callable[[ConfigError], None],
    ) -> bool:
        """Apply the first usable fragment found in ``directory``.

        Returns:
            bool: ``True`` when a fragment was applied and the walk should stop.
        """

        for source in (
            JshintrcSource(directory / JSHINTRC_NAME),
            PackageManifestSource(directory / PACKAGE_MANIFEST_NAME),
        ):
            fragment = self._load(source, report)
            if fragment is not None:
                self._apply(result, source, fragment)
                return True
        return False

    @staticmethod
    def _load(source: JshintrcSource, report: Callable[[ConfigError], None]) -> Fragment | None:
        try:
            if not source.exists():
                return None
            return source.load(report=report)
        except ConfigError as exc:
            report(exc)
            return None

    @staticmethod
    def _apply(result: ResolutionResult, source: JshintrcSource, fragment: Fragment) -> None:
        result.configuration = result.configuration.apply(fragment)
        result.sources.append(
            AppliedSource(
                kind=source.kind,
                path=source.path,
                description=source.describe(),
                files=fragment.origin,
            ),
        )


def resolve_configuration(source_file_path: Path, plugin_home_dir: Path | None) -> Configuration:
    """Resolve configuration for ``source_file_path`` using the process environment."""

    return ConfigResolver().resolve(source_file_path, plugin_home_dir)


__all__ = ["ConfigResolver", "candidate_locations", "resolve_configuration"]
