# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour support.

Every helper writes one line to the shared console on stdout. Editor
integrations read that stream line by line, so messages are never wrapped and
colour is only applied when stdout is a terminal.
"""

from __future__ import annotations

from rich.text import Text

from .runtime.console.manager import detect_tty, get_console_manager


def _print_line(msg: str, *, style: str | None, use_color: bool | None = None) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def plain(msg: str) -> None:
    """Emit ``msg`` verbatim without any prefix or styling.

    The line bypasses Rich rendering so tabs and control characters reach the
    stream unchanged.
    """

    console = get_console_manager().get(color=False)
    console.file.write(f"{msg}\n")


def warn(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    _print_line(msg, style="yellow", use_color=use_color)


__all__ = ["plain", "warn"]
