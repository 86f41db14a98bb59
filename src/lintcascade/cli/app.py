# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing the ``lint`` and ``config`` commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from ..config import ConfigResolver
from ..logging import plain
from ..paths import default_plugin_dir
from ..runner import run_lint
from ..settings import MODULE_ENV, NODE_ENV, PLUGIN_DIR_ENV, TIMEOUT_ENV, RunnerSettings

app = typer.Typer(
    help="Resolve cascading JSHint configuration and lint a file.",
    no_args_is_help=True,
    add_completion=False,
)

PluginDirOption = Annotated[
    Path | None,
    typer.Option(
        "--plugin-dir",
        envvar=PLUGIN_DIR_ENV,
        help="Directory whose .jshintrc supplies tool-level defaults.",
        file_okay=False,
    ),
]


@app.command("lint")
def lint_command(
    temp_path: Annotated[Path, typer.Argument(help="File holding the source to lint.")],
    file_path: Annotated[
        Path | None,
        typer.Argument(help="Original path of the source; seeds the configuration cascade."),
    ] = None,
    plugin_dir: PluginDirOption = None,
    node: Annotated[str, typer.Option("--node", envvar=NODE_ENV, help="Node executable.")] = "node",
    jshint_module: Annotated[
        str,
        typer.Option("--jshint-module", envvar=MODULE_ENV, help="Module specifier used to load JSHint."),
    ] = "jshint",
    timeout: Annotated[
        float,
        typer.Option("--timeout", envvar=TIMEOUT_ENV, min=0.1, help="Seconds allowed per lint invocation."),
    ] = 30.0,
    color: Annotated[
        bool | None,
        typer.Option("--color/--no-color", help="Colour logged warnings (auto-detected by default)."),
    ] = None,
) -> None:
    """Lint TEMP_PATH and print ``line :: character :: message`` diagnostics."""

    settings = RunnerSettings(
        plugin_dir=plugin_dir if plugin_dir is not None else default_plugin_dir(),
        node=node,
        jshint_module=jshint_module,
        timeout=timeout,
        color=color,
    )
    run_lint(temp_path, file_path, settings=settings)


@app.command("config")
def config_command(
    file_path: Annotated[Path, typer.Argument(help="Source path whose configuration should be resolved.")],
    plugin_dir: PluginDirOption = None,
    trace: Annotated[bool, typer.Option("--trace/--no-trace", help="Include applied sources and warnings.")] = False,
) -> None:
    """Print the effective configuration for FILE_PATH as JSON."""

    resolver = ConfigResolver(reporter=lambda _message: None)
    result = resolver.resolve_with_trace(
        file_path,
        plugin_dir if plugin_dir is not None else default_plugin_dir(),
    )
    payload: dict[str, Any] = result.configuration.model_dump(mode="json")
    if trace:
        payload["sources"] = [source.model_dump(mode="json") for source in result.sources]
        payload["warnings"] = list(result.warnings)
    plain(json.dumps(payload, indent=2, ensure_ascii=False))
    if result.warnings and not trace:
        plain("\n# Warnings")
        for message in result.warnings:
            plain(f"- {message}")


__all__ = ["app", "config_command", "lint_command"]
