"""Shared UI utilities: status pill colors and activity log lines."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from simple_bank.theming.style import COLOR_MUTED, STATUS_COLORS


def color_for_status(level: Optional[str]) -> str:
    """
    Return the pill background for a footer status level.

    Args:
        level: One of OK, INFO, WARN, ERR (case-insensitive).

    Returns:
        The level's color, or the muted color for unknown levels.
    """
    if not level:
        return COLOR_MUTED
    return STATUS_COLORS.get(str(level).upper(), COLOR_MUTED)


def format_log_line(msg: str, now: Optional[datetime] = None) -> str:
    """Activity log line: "[HH:MM:SS] msg" followed by a newline."""
    timestamp = (now or datetime.now()).strftime("%H:%M:%S")
    return f"[{timestamp}] {msg}\n"
