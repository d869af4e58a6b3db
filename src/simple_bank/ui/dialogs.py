"""Dialog windows for Simple Bank: create account, deposit/withdraw, balance, all accounts, about."""

from __future__ import annotations

import tkinter as tk
from decimal import Decimal
from tkinter import EW, W, messagebox, ttk
from typing import Callable

import ttkbootstrap as tb
from ttkbootstrap.constants import SUCCESS

from simple_bank.config.constants import (
    MSG_NO_ACCOUNTS_TO_SHOW,
    STATUS_ERR,
    STATUS_INFO,
    STATUS_OK,
    STATUS_WARN,
)
from simple_bank.errors import (
    DuplicateAccountError,
    LedgerError,
    NotFoundError,
    ValidationError,
)
from simple_bank.services.formatting import (
    format_accounts_report,
    format_balance_message,
    format_currency,
)
from simple_bank.services.ledger import parse_amount
from simple_bank.theming.style import (
    COLOR_PANEL,
    COLOR_TEXT,
    FONT_DEFAULT,
    FONT_MONO,
    PADDING,
    SPACING_LARGE,
    SPACING_MEDIUM,
)
from simple_bank.ui.utils import color_for_status


def _modal(app, title: str, geometry: str) -> tk.Toplevel:
    dialog = tk.Toplevel(app)
    dialog.title(title)
    dialog.geometry(geometry)
    dialog.transient(app)
    dialog.grab_set()
    return dialog


def show_about(app) -> None:
    """Show about dialog."""
    messagebox.showinfo(
        "About",
        "Simple Banking Application\n\nCreate accounts, deposit, withdraw, and view balances.\n"
        "Accounts are kept in memory for this session only.",
        parent=app,
    )


def create_account_dialog(app) -> None:
    """Show dialog to create a new account."""
    dialog = _modal(app, "Create Account", "420x230")

    frame = tb.Frame(dialog, padding=PADDING)
    frame.pack(fill="both", expand=True)

    fields = (("Account No.:", ""), ("Name:", ""), ("Initial Balance:", "0"))
    variables = []
    for row, (label, default) in enumerate(fields):
        tk.Label(frame, text=label, font=FONT_DEFAULT).grid(row=row, column=0, sticky=W, pady=SPACING_MEDIUM)
        var = tb.StringVar(value=default)
        tb.Entry(frame, textvariable=var, width=28, font=FONT_DEFAULT).grid(
            row=row, column=1, sticky=EW, pady=SPACING_MEDIUM, padx=SPACING_MEDIUM
        )
        variables.append(var)
    acc_no_var, name_var, balance_var = variables
    frame.grid_columnconfigure(1, weight=1)

    def create_account():
        try:
            account = app.ledger.create_account(acc_no_var.get(), name_var.get(), balance_var.get())
        except DuplicateAccountError as e:
            messagebox.showerror("Duplicate", str(e), parent=dialog)
            app.set_status("Create failed: duplicate account no.", STATUS_ERR)
            app.log_activity(f"Create account failed: {e}")
            return
        except ValidationError as e:
            if not acc_no_var.get().strip() or not name_var.get().strip():
                messagebox.showwarning("Missing", str(e), parent=dialog)
                app.set_status("Create failed: missing fields.", STATUS_WARN)
            else:
                messagebox.showerror("Invalid Input", str(e), parent=dialog)
                app.set_status("Create failed: invalid balance.", STATUS_ERR)
            app.log_activity(f"Create account failed: {e}")
            return

        dialog.destroy()
        app.refresh_accounts_ui()
        app.select_account(account.account_number)
        app.set_status(f"Account created: {account.account_number}", STATUS_OK)
        app.log_activity(
            f"Created account {account.account_number} ({account.name}) "
            f"with {format_currency(account.balance)}"
        )

    btn_frame = tb.Frame(frame)
    btn_frame.grid(row=len(fields), column=0, columnspan=2, pady=SPACING_LARGE)
    tb.Button(btn_frame, text="Create", command=create_account, bootstyle=SUCCESS).pack(
        side="left", padx=SPACING_MEDIUM
    )
    tb.Button(btn_frame, text="Cancel", command=dialog.destroy).pack(side="left", padx=SPACING_MEDIUM)


def _amount_dialog(app, verb: str, apply: Callable[[str, Decimal], Decimal]) -> None:
    """Prompt for an amount for the selected account and apply it through the ledger.

    verb is the dialog title and prefixes messages ("Deposit" -> "Deposited ₱x", "Deposit failed: ...").
    """
    account = app.get_selected_account_or_warn()
    if account is None:
        return

    dialog = _modal(app, verb, "380x170")
    frame = tb.Frame(dialog, padding=PADDING)
    frame.pack(fill="both", expand=True)

    tk.Label(
        frame, text=f"{verb} amount for {account.account_number} ({account.name}):", font=FONT_DEFAULT
    ).pack(anchor=W, pady=(0, SPACING_MEDIUM))
    amount_var = tb.StringVar()
    entry = tb.Entry(frame, textvariable=amount_var, width=28, font=FONT_DEFAULT)
    entry.pack(fill="x")
    entry.focus_set()

    def submit(event=None):
        try:
            amount = parse_amount(amount_var.get())
        except ValidationError as e:
            messagebox.showerror("Invalid Input", str(e), parent=dialog)
            app.set_status(f"{verb} failed: invalid input.", STATUS_ERR)
            app.log_activity(f"{verb} failed: {e}")
            return
        try:
            new_balance = apply(account.account_number, amount)
        except NotFoundError as e:
            dialog.destroy()
            messagebox.showerror("Error", str(e), parent=app)
            app.refresh_accounts_ui()
            app.set_status(f"{verb} failed: {e}", STATUS_ERR)
            app.log_activity(f"{verb} failed: {e}")
            return
        except LedgerError as e:
            messagebox.showerror("Error", str(e), parent=dialog)
            app.set_status(f"{verb} failed: {e}", STATUS_ERR)
            app.log_activity(f"{verb} of {format_currency(amount)} on {account.account_number} rejected: {e}")
            return

        dialog.destroy()
        past = "Deposited" if verb == "Deposit" else "Withdrew"
        messagebox.showinfo("Success", f"{past} {format_currency(amount)}", parent=app)
        app.refresh_accounts_ui()
        app.set_status(f"{verb} successful.", STATUS_OK)
        app.log_activity(
            f"{past} {format_currency(amount)} on {account.account_number}; "
            f"balance {format_currency(new_balance)}"
        )

    entry.bind("<Return>", submit)
    btn_frame = tb.Frame(frame)
    btn_frame.pack(pady=SPACING_LARGE)
    tb.Button(btn_frame, text="OK", command=submit, bootstyle=SUCCESS).pack(side="left", padx=SPACING_MEDIUM)
    tb.Button(btn_frame, text="Cancel", command=dialog.destroy).pack(side="left", padx=SPACING_MEDIUM)


def deposit_dialog(app) -> None:
    """Show dialog to deposit into the selected account."""
    _amount_dialog(app, "Deposit", app.ledger.deposit)


def withdraw_dialog(app) -> None:
    """Show dialog to withdraw from the selected account."""
    _amount_dialog(app, "Withdraw", app.ledger.withdraw)


def check_balance(app) -> None:
    """Show the selected account's number, name and balance."""
    account = app.get_selected_account_or_warn()
    if account is None:
        return
    messagebox.showinfo("Balance", format_balance_message(account), parent=app)
    app.set_status("Balance checked.", STATUS_INFO)
    app.update_selected_account_details()
    app.log_activity(f"Checked balance of {account.account_number}")


def show_all_accounts_dialog(app) -> None:
    """Show all accounts in a read-only, scrollable text report."""
    accounts = app.ledger.list_accounts()
    if not accounts:
        messagebox.showinfo("Info", MSG_NO_ACCOUNTS_TO_SHOW, parent=app)
        app.set_status(MSG_NO_ACCOUNTS_TO_SHOW, STATUS_INFO, pill_color=color_for_status(STATUS_WARN))
        return

    dialog = _modal(app, "All Accounts", "520x380")
    frame = tb.Frame(dialog, padding=PADDING)
    frame.pack(fill="both", expand=True)

    text_frame = tb.Frame(frame)
    text_frame.pack(fill="both", expand=True)
    area = tk.Text(text_frame, height=16, width=46, font=FONT_MONO, background=COLOR_PANEL,
                   foreground=COLOR_TEXT, padx=10, pady=10, wrap=tk.NONE)
    area.insert("1.0", format_accounts_report(accounts))
    area.config(state="disabled")
    vsb = ttk.Scrollbar(text_frame, orient="vertical", command=area.yview)
    area.configure(yscrollcommand=vsb.set)
    area.pack(side="left", fill="both", expand=True)
    vsb.pack(side="right", fill="y")

    tb.Button(frame, text="Close", command=dialog.destroy).pack(pady=(SPACING_MEDIUM, 0))
    app.set_status("Displayed all accounts.", STATUS_OK)
    app.log_activity(f"Viewed all accounts ({len(accounts)})")
