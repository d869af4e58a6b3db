"""Tests for UI utility functions (no windows are created)."""

from datetime import datetime

from simple_bank.theming.style import COLOR_BAD, COLOR_GOOD, COLOR_INFO, COLOR_MUTED, COLOR_WARN
from simple_bank.ui.utils import color_for_status, format_log_line


def test_color_for_status_levels() -> None:
    """Each footer level maps to its pill color."""
    assert color_for_status("OK") == COLOR_GOOD
    assert color_for_status("INFO") == COLOR_INFO
    assert color_for_status("WARN") == COLOR_WARN
    assert color_for_status("ERR") == COLOR_BAD


def test_color_for_status_case_insensitive() -> None:
    assert color_for_status("warn") == COLOR_WARN


def test_color_for_status_unknown_or_empty() -> None:
    """Unknown levels fall back to the muted color."""
    assert color_for_status("???") == COLOR_MUTED
    assert color_for_status("") == COLOR_MUTED
    assert color_for_status(None) == COLOR_MUTED


def test_format_log_line() -> None:
    line = format_log_line("Created account A1", now=datetime(2024, 1, 1, 9, 5, 7))
    assert line == "[09:05:07] Created account A1\n"


def test_format_log_line_defaults_to_now() -> None:
    line = format_log_line("x")
    assert line.startswith("[") and line.endswith("] x\n")
