"""Global configuration constants for Simple Bank.

These values are intentionally free of any UI / Tkinter concerns so they
can be reused by the ledger service, tests, and the desktop application.
"""

from __future__ import annotations

from decimal import Decimal

# --- Application window ---
APP_TITLE = "Simple Banking Application (Pro GUI)"
HEADER_TITLE = "Simple Banking Application"
HEADER_SUBTITLE = "Create accounts, deposit, withdraw, and view balances"
WINDOW_GEOMETRY = "980x620"
DEFAULT_THEME = "darkly"

# --- Money ---
CURRENCY_SYMBOL = "₱"  # Philippine peso sign
ZERO = Decimal("0.00")

# Accounts table (Account No., Name, Balance)
TABLE_COLUMNS = ("Account No.", "Name", "Balance")

# Placeholder shown in the info tiles when no account is selected
EMPTY_FIELD = "—"

# Status pill levels shown in the footer
STATUS_OK = "OK"
STATUS_INFO = "INFO"
STATUS_WARN = "WARN"
STATUS_ERR = "ERR"

# --- User-facing messages ---
MSG_FIELDS_REQUIRED = "Account number and name are required."
MSG_DUPLICATE_ACCOUNT = "Account number already exists."
MSG_INVALID_INITIAL_BALANCE = "Initial balance must be a non-negative number."
MSG_INVALID_NUMBER = "Enter a valid number."
MSG_AMOUNT_TOO_LARGE = "Amount is too large."
MSG_DEPOSIT_NOT_POSITIVE = "Deposit must be greater than 0."
MSG_WITHDRAW_NOT_POSITIVE = "Withdraw must be greater than 0."
MSG_INSUFFICIENT_BALANCE = "Insufficient balance."
MSG_ACCOUNT_NOT_FOUND = "Selected account not found."
MSG_SELECT_ACCOUNT = "Please select an account first."
MSG_NO_ACCOUNTS = "No accounts yet. Create an account to begin."
MSG_NO_ACCOUNTS_TO_SHOW = "No accounts to show."
