"""UI package for Simple Bank: main window and dialogs."""

__all__ = ["BankingApp"]


def __getattr__(name: str):
    """Lazy-load BankingApp so ui.utils can be used without creating windows."""
    if name == "BankingApp":
        from simple_bank.ui.main_window import BankingApp
        return BankingApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
