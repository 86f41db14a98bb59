# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Path helpers for locating the user's home and the installed package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent


def user_home(env: Mapping[str, str] | None = None) -> Path | None:
    """Return the user's home directory from the environment.

    ``HOME`` wins, then ``HOMEDRIVE`` joined with ``HOMEPATH``, then
    ``USERPROFILE``.

    Args:
        env: Environment mapping to consult. Defaults to ``os.environ``.

    Returns:
        Path | None: Home directory, or ``None`` when no variable is set.
    """

    environ = os.environ if env is None else env
    if home := environ.get("HOME"):
        return Path(home)
    drive, home_path = environ.get("HOMEDRIVE"), environ.get("HOMEPATH")
    if drive and home_path:
        return Path(drive + home_path)
    if profile := environ.get("USERPROFILE"):
        return Path(profile)
    return None


def default_plugin_dir() -> Path:
    """Return the directory whose ``.jshintrc`` supplies tool-level defaults."""

    return PACKAGE_ROOT


__all__ = ["PACKAGE_ROOT", "default_plugin_dir", "user_home"]
