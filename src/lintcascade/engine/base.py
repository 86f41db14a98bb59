# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interface the diagnostic pipeline uses to talk to a lint engine."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from ..diagnostics.models import DiagnosticRecord


@runtime_checkable
class LintEngine(Protocol):
    """Lint a block of source text with the given options and globals."""

    name: str
    """Human-readable engine name used in log messages."""

    @abstractmethod
    def lint(
        self,
        text: str,
        options: Mapping[str, Any],
        globals_: Mapping[str, bool],
    ) -> Sequence[DiagnosticRecord]:
        """Return the engine's findings for ``text`` in the engine's own order.

        Args:
            text: Source text to lint.
            options: Effective engine options.
            globals_: Declared globals mapped to their assignable flag.

        Returns:
            Sequence[DiagnosticRecord]: Findings reported by the engine.

        Raises:
            LintEngineError: If the engine fails. Findings produced before the
                failure are available on the exception.
        """


__all__ = ["LintEngine"]
