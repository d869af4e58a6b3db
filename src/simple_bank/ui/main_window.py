"""Main application window for Simple Bank.

Header, action sidebar, account selector with info tiles, accounts table,
activity log and status footer. All account state lives in the
AccountLedger passed in; the window only renders it.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import W, messagebox, ttk
from typing import Optional

import ttkbootstrap as tb
from ttkbootstrap.constants import DANGER, INFO, PRIMARY, SECONDARY, SUCCESS, WARNING

from simple_bank.config.constants import (
    APP_TITLE,
    DEFAULT_THEME,
    EMPTY_FIELD,
    HEADER_SUBTITLE,
    HEADER_TITLE,
    MSG_ACCOUNT_NOT_FOUND,
    MSG_NO_ACCOUNTS,
    MSG_SELECT_ACCOUNT,
    STATUS_ERR,
    STATUS_INFO,
    STATUS_OK,
    STATUS_WARN,
    TABLE_COLUMNS,
    WINDOW_GEOMETRY,
    ZERO,
)
from simple_bank.models.core import Account
from simple_bank.services.formatting import account_rows, format_currency
from simple_bank.services.ledger import AccountLedger
from simple_bank.theming.style import (
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_HEADER,
    COLOR_MUTED,
    COLOR_PANEL,
    COLOR_TEXT,
    FONT_DEFAULT,
    FONT_SECTION,
    FONT_SUBTITLE,
    FONT_TILE_VALUE,
    FONT_TITLE,
    PADDING,
    SIDEBAR_BUTTON_WIDTH,
    SIDEBAR_WIDTH,
    SPACING_MEDIUM,
    SPACING_SMALL,
    setup_styles,
)
from simple_bank.ui import dialogs as ui_dialogs
from simple_bank.ui.utils import color_for_status, format_log_line


class BankingApp(tb.Window):
    """Main application window for managing in-memory bank accounts."""

    def __init__(self, ledger: Optional[AccountLedger] = None, themename: str = DEFAULT_THEME):
        """Initialize the application."""
        super().__init__(themename=themename)
        self.title(APP_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.resizable(False, False)
        self.configure(background=COLOR_BG)

        # Data State
        self.ledger = ledger if ledger is not None else AccountLedger()

        setup_styles(self)

        self.create_widgets()
        self.refresh_accounts_ui()

    # --- Layout ---

    def _card(self, parent: tk.Misc) -> tk.Frame:
        """Bordered panel used for sidebar, top bar, table and footer."""
        return tk.Frame(parent, bg=COLOR_CARD, highlightbackground=COLOR_BORDER, highlightthickness=1)

    def _label(self, parent: tk.Misc, text: str, font=FONT_DEFAULT, fg: str = COLOR_TEXT, bg: str = COLOR_CARD) -> tk.Label:
        return tk.Label(parent, text=text, font=font, fg=fg, bg=bg)

    def create_widgets(self):
        """Create header, sidebar and content area."""
        self.create_menu_bar()
        self.create_header()

        body = tk.Frame(self, bg=COLOR_BG)
        body.pack(fill="both", expand=True, padx=PADDING, pady=PADDING)

        self.create_sidebar(body)

        content = tk.Frame(body, bg=COLOR_BG)
        content.pack(side="left", fill="both", expand=True, padx=(PADDING, 0))
        self.create_top_bar(content)
        self.create_footer(content)
        self.create_log_panel(content)
        self.create_accounts_table(content)

    def create_menu_bar(self):
        """Create menu bar with File and Help menus."""
        menubar = tk.Menu(self)
        self.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="Create Account...", command=self.create_account_dialog)
        file_menu.add_command(label="View All Accounts", command=self.show_all_accounts_dialog)
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self.destroy)

        help_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="About", command=self.show_about)

    def create_header(self):
        """Title banner."""
        header = tk.Frame(self, bg=COLOR_HEADER, height=78)
        header.pack(fill="x", padx=PADDING, pady=(PADDING, 0))
        header.pack_propagate(False)
        inner = tk.Frame(header, bg=COLOR_HEADER)
        inner.pack(anchor=W, padx=16, pady=12)
        tk.Label(inner, text=HEADER_TITLE, font=FONT_TITLE, fg="white", bg=COLOR_HEADER).pack(anchor=W)
        tk.Label(inner, text=HEADER_SUBTITLE, font=FONT_SUBTITLE, fg="#E0F2FE", bg=COLOR_HEADER).pack(
            anchor=W, pady=(SPACING_SMALL, 0)
        )

    def create_sidebar(self, parent: tk.Misc):
        """ACTIONS column with one button per operation."""
        sidebar = self._card(parent)
        sidebar.configure(width=SIDEBAR_WIDTH)
        sidebar.pack(side="left", fill="y")
        sidebar.pack_propagate(False)

        inner = tk.Frame(sidebar, bg=COLOR_CARD)
        inner.pack(fill="both", expand=True, padx=PADDING, pady=PADDING)
        self._label(inner, "ACTIONS", font=FONT_SECTION, fg=COLOR_MUTED).pack(anchor=W, pady=(0, 12))

        actions = (
            ("Create Account", self.create_account_dialog, INFO),
            ("Deposit", self.deposit_dialog, PRIMARY),
            ("Withdraw", self.withdraw_dialog, WARNING),
            ("Check Balance", self.check_balance, SECONDARY),
            ("View All", self.show_all_accounts_dialog, SUCCESS),
            ("Exit", self.destroy, DANGER),
        )
        for text, command, style in actions:
            tb.Button(inner, text=text, command=command, bootstyle=style, width=SIDEBAR_BUTTON_WIDTH).pack(
                fill="x", pady=(0, SPACING_MEDIUM)
            )

    def create_top_bar(self, parent: tk.Misc):
        """Account selector, Refresh button and the selected account's info tiles."""
        top = self._card(parent)
        top.pack(fill="x")
        inner = tk.Frame(top, bg=COLOR_CARD)
        inner.pack(fill="x", padx=12, pady=12)

        selector = tk.Frame(inner, bg=COLOR_CARD)
        selector.pack(side="left")
        self._label(selector, "Select Account:", fg=COLOR_MUTED).pack(side="left", padx=(0, SPACING_MEDIUM))
        self.account_var = tb.StringVar()
        self.account_combo = ttk.Combobox(selector, textvariable=self.account_var, state="readonly", width=18)
        self.account_combo.pack(side="left", padx=(0, SPACING_MEDIUM))
        self.account_combo.bind("<<ComboboxSelected>>", lambda e: self.update_selected_account_details())
        tb.Button(selector, text="Refresh", command=self.refresh_accounts_ui, bootstyle=SECONDARY).pack(side="left")

        tiles = tk.Frame(inner, bg=COLOR_CARD)
        tiles.pack(side="left", fill="x", expand=True, padx=(PADDING, 0))
        self.acc_value = self._info_tile(tiles, "Account No.", 0)
        self.name_value = self._info_tile(tiles, "Name", 1)
        self.bal_value = self._info_tile(tiles, "Balance", 2)

    def _info_tile(self, parent: tk.Misc, title: str, column: int) -> tk.Label:
        tile = tk.Frame(parent, bg=COLOR_CARD)
        tile.grid(row=0, column=column, sticky="ew", padx=(0, SPACING_MEDIUM))
        parent.grid_columnconfigure(column, weight=1)
        self._label(tile, title, font=FONT_SECTION, fg=COLOR_MUTED).pack(anchor=W)
        value = self._label(tile, EMPTY_FIELD, font=FONT_TILE_VALUE)
        value.pack(anchor=W, pady=(SPACING_SMALL, 0))
        return value

    def create_accounts_table(self, parent: tk.Misc):
        """Read-only ACCOUNTS table; row selection drives the account selector."""
        card = self._card(parent)
        card.pack(fill="both", expand=True, pady=(PADDING, 0))
        inner = tk.Frame(card, bg=COLOR_CARD)
        inner.pack(fill="both", expand=True, padx=12, pady=12)
        self._label(inner, "ACCOUNTS", font=FONT_SECTION, fg=COLOR_MUTED).pack(anchor=W, pady=(0, SPACING_SMALL))

        table_frame = tk.Frame(inner, bg=COLOR_PANEL)
        table_frame.pack(fill="both", expand=True)
        self.accounts_tree = ttk.Treeview(
            table_frame, columns=TABLE_COLUMNS, show="headings", height=8, style="Accounts.Treeview"
        )
        for col in TABLE_COLUMNS:
            self.accounts_tree.heading(col, text=col)
            anchor = tk.E if col == "Balance" else W
            self.accounts_tree.column(col, width=180, anchor=anchor)

        vsb = ttk.Scrollbar(table_frame, orient="vertical", command=self.accounts_tree.yview)
        self.accounts_tree.configure(yscrollcommand=vsb.set)
        self.accounts_tree.pack(side="left", fill="both", expand=True)
        vsb.pack(side="right", fill="y")
        self.accounts_tree.bind("<<TreeviewSelect>>", self._on_table_select)

    def create_log_panel(self, parent: tk.Misc):
        """Activity Log panel below the table."""
        card = self._card(parent)
        card.pack(side="bottom", fill="x", pady=(PADDING, 0))
        inner = tk.Frame(card, bg=COLOR_CARD)
        inner.pack(fill="both", expand=True, padx=12, pady=8)
        self._label(inner, "ACTIVITY LOG", font=FONT_SECTION, fg=COLOR_MUTED).pack(anchor=W)
        self.log_text = tk.Text(inner, height=4, state="disabled", background=COLOR_PANEL,
                                foreground=COLOR_TEXT, wrap=tk.WORD, relief="flat")
        log_vsb = ttk.Scrollbar(inner, orient="vertical", command=self.log_text.yview)
        self.log_text.configure(yscrollcommand=log_vsb.set)
        self.log_text.pack(side="left", fill="both", expand=True)
        log_vsb.pack(side="right", fill="y")

    def create_footer(self, parent: tk.Misc):
        """Status message plus colored pill."""
        footer = self._card(parent)
        footer.pack(side="bottom", fill="x", pady=(PADDING, 0))
        inner = tk.Frame(footer, bg=COLOR_CARD)
        inner.pack(fill="x", padx=12, pady=10)
        self.status_label = self._label(inner, "Ready.")
        self.status_label.pack(side="left")
        self.status_pill = tk.Label(inner, text=f" {STATUS_OK} ", font=FONT_SECTION, fg="white",
                                    bg=color_for_status(STATUS_OK), padx=10, pady=4)
        self.status_pill.pack(side="right")

    # --- State rendering ---

    def set_status(self, msg: str, level: str = STATUS_OK, pill_color: Optional[str] = None):
        """Update footer message and pill (text is the level, color from level unless given)."""
        self.status_label.config(text=msg)
        self.status_pill.config(text=f" {level} ", bg=pill_color or color_for_status(level))

    def log_activity(self, msg: str):
        """Log activity message."""
        self.log_text.config(state="normal")
        self.log_text.insert(tk.END, format_log_line(msg))
        self.log_text.see(tk.END)
        self.log_text.config(state="disabled")

    def _clear_details(self):
        self.acc_value.config(text=EMPTY_FIELD)
        self.name_value.config(text=EMPTY_FIELD)
        self.bal_value.config(text=format_currency(ZERO))

    def refresh_accounts_ui(self):
        """Reload selector and table from the ledger, keeping the selection when possible."""
        previous = self.account_var.get()
        numbers = self.ledger.account_numbers()
        self.account_combo.configure(values=numbers)

        self.accounts_tree.delete(*self.accounts_tree.get_children())
        for row in account_rows(self.ledger.list_accounts()):
            # iid = account number so selection can be mapped back without a lookup table
            self.accounts_tree.insert("", tk.END, iid=row[0], values=row)

        if numbers:
            self.account_var.set(previous if previous in self.ledger else numbers[0])
            self.update_selected_account_details()
            self.set_status(f"Loaded {len(numbers)} account(s).", STATUS_OK)
        else:
            self.account_var.set("")
            self._clear_details()
            self.set_status(MSG_NO_ACCOUNTS, STATUS_INFO, pill_color=color_for_status(STATUS_WARN))

    def update_selected_account_details(self):
        """Fill the info tiles for the selected account and highlight its table row."""
        account = self.ledger.find_account(self.account_var.get())
        if account is None:
            self._clear_details()
            return
        self.acc_value.config(text=account.account_number)
        self.name_value.config(text=account.name)
        self.bal_value.config(text=format_currency(account.balance))

        if self.accounts_tree.exists(account.account_number) and \
                self.accounts_tree.selection() != (account.account_number,):
            self.accounts_tree.selection_set(account.account_number)
            self.accounts_tree.see(account.account_number)

    def _on_table_select(self, event=None):
        selection = self.accounts_tree.selection()
        if not selection or selection[0] == self.account_var.get():
            return
        self.account_var.set(selection[0])
        self.update_selected_account_details()

    def select_account(self, account_number: str):
        """Make account_number the current selection."""
        self.account_var.set(account_number)
        self.update_selected_account_details()

    def get_selected_account_or_warn(self) -> Optional[Account]:
        """Return the selected account, or warn the user and return None."""
        account_number = self.account_var.get().strip()
        if not account_number:
            messagebox.showwarning("No Account Selected", MSG_SELECT_ACCOUNT, parent=self)
            self.set_status("Select an account before doing transactions.", STATUS_WARN)
            return None
        account = self.ledger.find_account(account_number)
        if account is None:
            messagebox.showerror("Error", MSG_ACCOUNT_NOT_FOUND, parent=self)
            self.log_activity(f"Account {account_number} not found; refreshing")
            self.refresh_accounts_ui()
            self.set_status("Account not found. Refreshing.", STATUS_ERR)
            return None
        return account

    # --- Actions (delegated to ui.dialogs) ---

    def create_account_dialog(self):
        """Show dialog to create a new account."""
        ui_dialogs.create_account_dialog(self)

    def deposit_dialog(self):
        """Prompt for a deposit into the selected account."""
        ui_dialogs.deposit_dialog(self)

    def withdraw_dialog(self):
        """Prompt for a withdrawal from the selected account."""
        ui_dialogs.withdraw_dialog(self)

    def check_balance(self):
        """Show the selected account's balance."""
        ui_dialogs.check_balance(self)

    def show_all_accounts_dialog(self):
        """Show every account in a read-only report."""
        ui_dialogs.show_all_accounts_dialog(self)

    def show_about(self):
        """Show about dialog."""
        ui_dialogs.show_about(self)


def main(themename: str = DEFAULT_THEME) -> None:
    """Create the window on an empty ledger and run mainloop."""
    app = BankingApp(themename=themename)
    app.mainloop()
