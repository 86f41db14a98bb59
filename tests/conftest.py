# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

from lintcascade.diagnostics import DiagnosticRecord

Responder = Callable[[str], Any]


class ScriptedEngine:
    """In-process lint engine returning canned records per region text."""

    name = "Scripted"

    def __init__(self, responder: Responder | Mapping[str, Any] | None = None) -> None:
        self._responder = responder or {}
        self.calls: list[tuple[str, dict[str, Any], dict[str, bool]]] = []

    def lint(
        self,
        text: str,
        options: Mapping[str, Any],
        globals_: Mapping[str, bool],
    ) -> Sequence[DiagnosticRecord]:
        self.calls.append((text, dict(options), dict(globals_)))
        if callable(self._responder):
            outcome = self._responder(text)
        else:
            outcome = self._responder.get(text, [])
        if isinstance(outcome, BaseException):
            raise outcome
        return list(outcome)


@pytest.fixture
def scripted_engine() -> type[ScriptedEngine]:
    """Return the scripted engine class so tests can configure responses."""
    return ScriptedEngine


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every home-directory variable at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("HOMEDRIVE", "HOMEPATH", "USERPROFILE"):
        monkeypatch.delenv(name, raising=False)
    return home


def undefined_record(name: str, *, line: int = 1, character: int = 1) -> DiagnosticRecord:
    """Return a record shaped like JSHint's W117 finding for ``name``."""
    return DiagnosticRecord(
        line=line,
        character=character,
        code="W117",
        raw="'{a}' is not defined.",
        reason=f"'{name}' is not defined.",
        a=name,
    )


@pytest.fixture
def make_undefined() -> Callable[..., DiagnosticRecord]:
    return undefined_record
