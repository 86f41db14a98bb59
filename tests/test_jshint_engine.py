# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Node-backed JSHint adapter."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import pytest

from lintcascade.diagnostics import DiagnosticRecord
from lintcascade.engine import BRIDGE_SCRIPT, JshintEngine, LintEngine, parse_records
from lintcascade.engine import jshint as jshint_module
from lintcascade.errors import LintEngineError


class _FakeRunner:
    def __init__(self, *, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.calls: list[dict[str, Any]] = []

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append({"args": list(args), **kwargs})
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.stdout, stderr=self.stderr)


def _response(errors: list[Any], failure: str | None = None) -> str:
    return json.dumps({"errors": errors, "failure": failure})


def _install(monkeypatch: pytest.MonkeyPatch, runner: _FakeRunner) -> _FakeRunner:
    monkeypatch.setattr(jshint_module, "run_command", runner)
    return runner


def test_bridge_script_ships_with_package() -> None:
    assert BRIDGE_SCRIPT.is_file()
    assert BRIDGE_SCRIPT.suffix == ".js"


def test_engine_satisfies_protocol() -> None:
    assert isinstance(JshintEngine(), LintEngine)


def test_lint_sends_request_and_parses_records(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    error = {
        "line": 1,
        "character": 9,
        "reason": "'y' is not defined.",
        "raw": "'{a}' is not defined.",
        "code": "W117",
        "a": "y",
    }
    runner = _install(monkeypatch, _FakeRunner(stdout=_response([error, None])))
    engine = JshintEngine(node="/usr/bin/node", module="jshint", timeout=5.0, cwd=tmp_path)

    records = engine.lint("var x = y", {"undef": True}, {"jQuery": False})

    assert records == [
        DiagnosticRecord(
            line=1,
            character=9,
            reason="'y' is not defined.",
            raw="'{a}' is not defined.",
            code="W117",
            a="y",
        ),
        DiagnosticRecord(),
    ]
    call = runner.calls[0]
    assert call["args"] == ["/usr/bin/node", str(BRIDGE_SCRIPT)]
    assert call["cwd"] == tmp_path
    assert call["timeout"] == 5.0
    assert json.loads(call["input_text"]) == {
        "source": "var x = y",
        "options": {"undef": True},
        "globals": {"jQuery": False},
        "module": "jshint",
    }


def test_reported_failure_raises_with_partial_records(monkeypatch: pytest.MonkeyPatch) -> None:
    partial = {"line": 2, "character": 1, "raw": "Missing semicolon.", "reason": "Missing semicolon."}
    _install(monkeypatch, _FakeRunner(stdout=_response([partial], failure="Unexpected token")))

    with pytest.raises(LintEngineError) as excinfo:
        JshintEngine().lint("x(", {}, {})

    assert str(excinfo.value) == "JSHint failed: Unexpected token"
    assert [record.line for record in excinfo.value.records] == [2]


def test_unreadable_output_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, _FakeRunner(stdout="Error: Cannot find module", stderr="boom", returncode=1))

    with pytest.raises(LintEngineError, match="unreadable output: boom"):
        JshintEngine().lint("x", {}, {})


def test_non_zero_exit_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, _FakeRunner(stdout=_response([]), stderr="killed", returncode=124))

    with pytest.raises(LintEngineError, match="killed") as excinfo:
        JshintEngine().lint("x", {}, {})

    assert excinfo.value.records == ()


def test_missing_node_raises_engine_error() -> None:
    engine = JshintEngine(node="lintcascade-no-such-node-binary")

    with pytest.raises(LintEngineError, match="Could not start JSHint"):
        engine.lint("x", {}, {})


def test_parse_records_tolerates_odd_entries() -> None:
    records = parse_records([None, "text", {"line": "oops"}, {"line": 3, "character": 4, "extra": 1}])

    assert records[:3] == [DiagnosticRecord(), DiagnosticRecord(), DiagnosticRecord()]
    assert records[3] == DiagnosticRecord(line=3, character=4)
    assert parse_records({"not": "a list"}) == []


def test_parse_records_keeps_null_template_values_distinct_from_missing_ones() -> None:
    supplied, omitted = parse_records(
        [
            {"line": 1, "raw": "{a}{b}{c}{d}", "reason": "r", "a": "x", "b": None, "c": None, "d": None},
            {"line": 1, "raw": "{a}{b}{c}{d}", "reason": "r", "a": "x"},
        ],
    )

    assert supplied.has_template_values
    assert not omitted.has_template_values
