"""Centralized theming and typography for the Simple Bank UI."""

from __future__ import annotations

import tkinter as tk
import ttkbootstrap as tb

from simple_bank.config.constants import STATUS_ERR, STATUS_INFO, STATUS_OK, STATUS_WARN

# Slate palette
COLOR_BG = "#0F172A"
COLOR_PANEL = "#111827"
COLOR_CARD = "#111C33"
COLOR_BORDER = "#22304A"
COLOR_TEXT = "#E5E7EB"
COLOR_MUTED = "#9CA3AF"
COLOR_GOOD = "#22C55E"
COLOR_WARN = "#F59E0B"
COLOR_BAD = "#EF4444"
COLOR_INFO = "#60A5FA"
COLOR_HEADER = "#2563EB"
COLOR_SELECTION = "#1D4ED8"
COLOR_TABLE_HEADING = "#0B1220"

# Footer status pill background per level
STATUS_COLORS = {
    STATUS_OK: COLOR_GOOD,
    STATUS_INFO: COLOR_INFO,
    STATUS_WARN: COLOR_WARN,
    STATUS_ERR: COLOR_BAD,
}

FONT_FAMILY = "Segoe UI"
FONT_DEFAULT = (FONT_FAMILY, 13)  # Tuple so Tk doesn't split the family name
FONT_TITLE = (FONT_FAMILY, 20, "bold")
FONT_SUBTITLE = (FONT_FAMILY, 13)
FONT_SECTION = (FONT_FAMILY, 12, "bold")
FONT_TILE_VALUE = (FONT_FAMILY, 14, "bold")
FONT_MONO = ("Consolas", 13)

SPACING_SMALL = 4
SPACING_MEDIUM = 10
SPACING_LARGE = 14
PADDING = 14

SIDEBAR_WIDTH = 260
SIDEBAR_BUTTON_WIDTH = 22
TABLE_ROW_HEIGHT = 30


def setup_styles(root: tk.Misc) -> tb.Style:
    """Apply the slate palette to sidebar buttons, the accounts table and scrollbars.

    The theme itself is chosen when BankingApp creates its tb.Window; root is
    accepted so callers can style from the window that owns the widgets.
    """
    style = tb.Style()
    try:
        style.configure("Vertical.TScrollbar", troughcolor=COLOR_PANEL, width=10, arrowsize=0)
        style.map("Vertical.TScrollbar", background=[("active", COLOR_BORDER)])
        style.configure("TButton", padding=(16, 10), font=(FONT_FAMILY, 13, "bold"))
        style.configure(
            "Accounts.Treeview",
            rowheight=TABLE_ROW_HEIGHT,
            font=FONT_DEFAULT,
            background=COLOR_PANEL,
            fieldbackground=COLOR_PANEL,
            foreground=COLOR_TEXT,
        )
        style.configure(
            "Accounts.Treeview.Heading",
            font=(FONT_FAMILY, 13, "bold"),
            background=COLOR_TABLE_HEADING,
            foreground=COLOR_TEXT,
        )
        style.map("Accounts.Treeview", background=[("selected", COLOR_SELECTION)])
    except tk.TclError:
        # Older Tk builds reject some of these options; keep the theme defaults.
        pass
    return style
