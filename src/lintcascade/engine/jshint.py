# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSHint adapter that runs the npm ``jshint`` package through Node."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..diagnostics.models import DiagnosticRecord
from ..errors import LintEngineError
from ..process_utils import run_command

BRIDGE_SCRIPT: Final[Path] = Path(__file__).resolve().with_name("jshint_bridge.js")
DEFAULT_NODE: Final[str] = "node"
DEFAULT_MODULE: Final[str] = "jshint"
DEFAULT_TIMEOUT: Final[float] = 30.0


def parse_records(payload: Any) -> list[DiagnosticRecord]:
    """Convert the bridge's ``errors`` array into diagnostic records.

    ``null`` entries and entries that do not validate become empty records so
    they sort last and are skipped when rendering.

    Args:
        payload: Decoded ``errors`` value from the bridge.

    Returns:
        list[DiagnosticRecord]: Records in the engine's order.
    """

    if not isinstance(payload, list):
        return []
    records: list[DiagnosticRecord] = []
    for entry in payload:
        if not isinstance(entry, dict):
            records.append(DiagnosticRecord())
            continue
        try:
            records.append(DiagnosticRecord.model_validate(entry))
        except ValidationError:
            records.append(DiagnosticRecord())
    return records


class JshintEngine:
    """Lint JavaScript by piping a request into ``node jshint_bridge.js``."""

    name = "JSHint"

    def __init__(
        self,
        *,
        node: str = DEFAULT_NODE,
        module: str = DEFAULT_MODULE,
        bridge: Path = BRIDGE_SCRIPT,
        timeout: float | None = DEFAULT_TIMEOUT,
        cwd: Path | None = None,
    ) -> None:
        """Initialise the adapter.

        Args:
            node: Node executable name or path.
            module: Module specifier of the JSHint package to load.
            bridge: Bridge script executed by Node.
            timeout: Seconds allowed per invocation.
            cwd: Working directory; a ``node_modules/jshint`` below it is preferred.
        """

        self._node = node
        self._module = module
        self._bridge = bridge
        self._timeout = timeout
        self._cwd = cwd

    def lint(
        self,
        text: str,
        options: Mapping[str, Any],
        globals_: Mapping[str, bool],
    ) -> Sequence[DiagnosticRecord]:
        request = json.dumps(
            {
                "source": text,
                "options": dict(options),
                "globals": dict(globals_),
                "module": self._module,
            },
        )
        try:
            completed = run_command(
                [self._node, str(self._bridge)],
                cwd=self._cwd,
                input_text=request,
                timeout=self._timeout,
            )
        except OSError as exc:
            raise LintEngineError(f"Could not start {self.name}: {exc}") from exc

        try:
            response = json.loads(completed.stdout or "")
        except json.JSONDecodeError as exc:
            detail = (completed.stderr or "").strip() or "no output"
            raise LintEngineError(f"{self.name} returned unreadable output: {detail}") from exc
        if not isinstance(response, dict):
            raise LintEngineError(f"{self.name} returned unreadable output")

        records = parse_records(response.get("errors"))
        failure = response.get("failure")
        if failure:
            raise LintEngineError(f"{self.name} failed: {failure}", records=records)
        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exit status {completed.returncode}"
            raise LintEngineError(f"{self.name} failed: {detail}", records=records)
        return records


__all__ = ["BRIDGE_SCRIPT", "JshintEngine", "parse_records"]
