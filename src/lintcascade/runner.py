# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Glue that resolves configuration, reads the source and runs the pipeline."""

from __future__ import annotations

import json
from functools import partial
from pathlib import Path
from typing import Final

from .config import ConfigResolver, Configuration
from .diagnostics import DiagnosticPipeline
from .engine import JshintEngine, LintEngine
from .errors import SourceReadError
from .logging import plain, warn
from .settings import RunnerSettings

GLOBALS_BANNER: Final[str] = "Using JSHint globals: "
OPTIONS_BANNER: Final[str] = "Using JSHint options: "
OUTPUT_BANNER: Final[str] = "*** JSHint output ***"


def read_source(path: Path) -> str:
    """Return the text of the file to lint.

    Undecodable bytes are replaced rather than rejected.

    Raises:
        SourceReadError: If the file cannot be read.
    """

    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc


def format_banners(configuration: Configuration) -> tuple[str, str]:
    """Return the globals and options banner lines for ``configuration``."""

    globals_json = json.dumps(configuration.globals, separators=(",", ":"), ensure_ascii=False)
    options_json = json.dumps(configuration.options, indent=2, ensure_ascii=False)
    return f"{GLOBALS_BANNER}{globals_json}", f"{OPTIONS_BANNER}{options_json}"


def run_lint(
    temp_path: Path,
    file_path: Path | None = None,
    *,
    settings: RunnerSettings | None = None,
    engine: LintEngine | None = None,
) -> list[str]:
    """Lint ``temp_path`` using the configuration that applies to ``file_path``.

    Args:
        temp_path: File holding the source to lint.
        file_path: Original location of the source, used for the config
            cascade. Defaults to ``temp_path``.
        settings: Run settings. Defaults to :class:`RunnerSettings` defaults.
        engine: Engine override. Defaults to :class:`JshintEngine`.

    Returns:
        list[str]: Diagnostic lines written to stdout. Empty when the source
        could not be read.
    """

    settings = settings or RunnerSettings()
    origin = file_path if file_path is not None else temp_path
    reporter = partial(warn, use_color=settings.color)

    configuration = ConfigResolver(reporter=reporter).resolve(origin, settings.plugin_dir)
    for banner in format_banners(configuration):
        plain(banner)

    try:
        source = read_source(temp_path)
    except SourceReadError:
        return []

    plain(OUTPUT_BANNER)
    if engine is None:
        engine = JshintEngine(
            node=settings.node,
            module=settings.jshint_module,
            timeout=settings.timeout,
            cwd=origin.parent.resolve(),
        )
    return DiagnosticPipeline(engine, reporter=reporter).run(source, configuration)


__all__ = ["GLOBALS_BANNER", "OPTIONS_BANNER", "OUTPUT_BANNER", "format_banners", "read_source", "run_lint"]
