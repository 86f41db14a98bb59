# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings controlling a single lint run."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .engine.jshint import DEFAULT_MODULE, DEFAULT_NODE, DEFAULT_TIMEOUT
from .paths import default_plugin_dir

PLUGIN_DIR_ENV: Final[str] = "LINTCASCADE_HOME"
NODE_ENV: Final[str] = "LINTCASCADE_NODE"
MODULE_ENV: Final[str] = "LINTCASCADE_JSHINT_MODULE"
TIMEOUT_ENV: Final[str] = "LINTCASCADE_TIMEOUT"


class RunnerSettings(BaseModel):
    """Validated options for :func:`lintcascade.runner.run_lint`."""

    model_config = ConfigDict(frozen=True)

    plugin_dir: Path | None = Field(default_factory=default_plugin_dir)
    node: str = Field(default=DEFAULT_NODE, min_length=1)
    jshint_module: str = Field(default=DEFAULT_MODULE, min_length=1)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, gt=0)
    color: bool | None = None


__all__ = [
    "MODULE_ENV",
    "NODE_ENV",
    "PLUGIN_DIR_ENV",
    "RunnerSettings",
    "TIMEOUT_ENV",
]
