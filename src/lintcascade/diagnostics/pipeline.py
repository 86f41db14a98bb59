# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive the lint engine over extracted regions and emit formatted diagnostics."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from ..errors import LintEngineError
from ..logging import plain, warn
from .extraction import extract_regions
from .formatting import format_line, render_message, sort_records
from .models import DiagnosticRecord, ExtractedRegion

if TYPE_CHECKING:
    from ..config.models import Configuration
    from ..engine.base import LintEngine


class DiagnosticPipeline:
    """Lint each region of a document and write ``line :: character :: message`` lines.

    Regions are processed strictly in document order. A region whose engine
    invocation fails still reports the findings produced before the failure
    and never prevents later regions from being linted.
    """

    def __init__(
        self,
        engine: LintEngine,
        *,
        emit: Callable[[str], None] = plain,
        reporter: Callable[[str], None] = warn,
    ) -> None:
        """Initialise the pipeline.

        Args:
            engine: Lint engine invoked once per region.
            emit: Callback receiving each formatted diagnostic line.
            reporter: Callback receiving engine failure messages.
        """

        self._engine = engine
        self._emit = emit
        self._reporter = reporter

    def run(self, source_text: str, configuration: Configuration) -> list[str]:
        """Lint ``source_text`` and return the emitted lines in output order.

        Args:
            source_text: Full document contents.
            configuration: Effective options and globals.

        Returns:
            list[str]: Diagnostic lines, already passed to ``emit``.
        """

        lines: list[str] = []
        for region in extract_regions(source_text):
            lines.extend(self.lint_region(region, configuration))
        return lines

    def lint_region(self, region: ExtractedRegion, configuration: Configuration) -> list[str]:
        """Lint one region and emit its diagnostics translated to document positions."""

        lines: list[str] = []
        for record in sort_records(self._collect(region, configuration)):
            message = render_message(record)
            if message is None:
                continue
            line = format_line(record, message, region)
            self._emit(line)
            lines.append(line)
        return lines

    def _collect(self, region: ExtractedRegion, configuration: Configuration) -> Sequence[DiagnosticRecord]:
        try:
            return self._engine.lint(region.text, configuration.options, configuration.globals)
        except LintEngineError as exc:
            self._reporter(str(exc))
            return exc.records
        except Exception as exc:  # engine crashes never abort the run
            self._reporter(f"{self._engine.name} failed: {exc}")
            return ()


__all__ = ["DiagnosticPipeline"]
