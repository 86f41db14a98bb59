# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (``.jshintrc`` and ``package.json``)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Final

from ..errors import ConfigError, ConfigParseError, ConfigReadError
from .models import Fragment, SourceKind
from .utils import EXTENDS_KEY, parse_relaxed_json, split_fragment

JSHINTRC_NAME: Final[str] = ".jshintrc"
PACKAGE_MANIFEST_NAME: Final[str] = "package.json"
PACKAGE_CONFIG_KEY: Final[str] = "jshintConfig"
MAX_EXTENDS_DEPTH: Final[int] = 16

ErrorReporter = Callable[[ConfigError], None]


def _ignore(_error: ConfigError) -> None:
    return None


class JshintrcSource:
    """Load a dedicated ``.jshintrc`` file, following its ``extends`` chain."""

    kind: SourceKind = "jshintrc"

    def __init__(self, path: Path, *, kind: SourceKind | None = None) -> None:
        self.path = path
        if kind is not None:
            self.kind = kind

    def exists(self) -> bool:
        """Return whether the backing file is present.

        Raises:
            ConfigReadError: If the existence check itself fails.
        """

        try:
            return self.path.exists()
        except OSError as exc:
            raise ConfigReadError(f"Could not read config at: {self.path}", path=self.path) from exc

    def load(self, *, report: ErrorReporter = _ignore) -> Fragment | None:
        """Return the resolved fragment, or ``None`` when the file holds no configuration.

        Failures inside the ``extends`` chain are passed to ``report`` and the
        failing link contributes nothing. Failures of this file itself raise.

        Args:
            report: Callback receiving recoverable errors from base files.

        Returns:
            Fragment | None: Fragment with ``extends`` resolved.

        Raises:
            ConfigParseError: If this file cannot be parsed.
            ConfigReadError: If this file cannot be read.
        """

        document = self._read(self.path)
        document = self.select(document)
        if document is None:
            return None
        return _resolve_extends(document, self.path, (_chain_key(self.path),), report)

    def select(self, document: dict[str, Any]) -> dict[str, Any] | None:
        """Return the part of ``document`` that holds the configuration."""

        return document

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(f"Could not read config at: {path}", path=path) from exc
        return parse_relaxed_json(text, path)

    def describe(self) -> str:
        """Return a human-readable description of the source."""

        label = "tool defaults" if self.kind == "defaults" else JSHINTRC_NAME
        return f"{label} ({self.path})"


class PackageManifestSource(JshintrcSource):
    """Read configuration nested under ``jshintConfig`` in ``package.json``."""

    kind: SourceKind = "package"

    def select(self, document: dict[str, Any]) -> dict[str, Any] | None:
        nested = document.get(PACKAGE_CONFIG_KEY)
        if not isinstance(nested, dict):
            return None
        return nested

    def describe(self) -> str:
        return f"{PACKAGE_MANIFEST_NAME} ({self.path})"


def _chain_key(path: Path) -> Path:
    return path.resolve()


def _resolve_extends(
    document: dict[str, Any],
    path: Path,
    stack: tuple[Path, ...],
    report: ErrorReporter,
) -> Fragment:
    """Return ``document`` merged over the fragments it extends.

    Args:
        document: Parsed configuration object read from ``path``.
        path: File that ``document`` came from.
        stack: Resolved paths already on the ``extends`` chain, outermost first.
        report: Callback receiving recoverable errors from base files.

    Returns:
        Fragment: ``document``'s keys layered over its base fragments.

    Raises:
        ConfigParseError: If ``extends`` is not a string path.
    """

    local = split_fragment(document, path)
    base_ref = document.get(EXTENDS_KEY)
    if base_ref is None:
        return local
    if not isinstance(base_ref, str):
        raise ConfigParseError(f"Could not parse JSON at: {path}", path=path)

    base_path = Path(base_ref)
    if not base_path.is_absolute():
        base_path = path.parent / base_path
    try:
        base = _load_base(base_path, stack)
        base_fragment = _resolve_extends(base, base_path, (*stack, _chain_key(base_path)), report)
    except ConfigError as exc:
        report(exc)
        return local
    return base_fragment.overlay(local)


def _load_base(path: Path, stack: tuple[Path, ...]) -> dict[str, Any]:
    key = _chain_key(path)
    if key in stack:
        chain = " -> ".join(str(entry) for entry in (*stack, key))
        raise ConfigParseError(f"Could not parse JSON at: {path} (circular extends: {chain})", path=path)
    if len(stack) >= MAX_EXTENDS_DEPTH:
        raise ConfigParseError(
            f"Could not parse JSON at: {path} (extends deeper than {MAX_EXTENDS_DEPTH} levels)",
            path=path,
        )
    return JshintrcSource._read(path)


__all__ = [
    "ErrorReporter",
    "JSHINTRC_NAME",
    "JshintrcSource",
    "MAX_EXTENDS_DEPTH",
    "PACKAGE_CONFIG_KEY",
    "PACKAGE_MANIFEST_NAME",
    "PackageManifestSource",
]
