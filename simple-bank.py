"""
Simple Banking Application

Launch the desktop app from a source checkout without installing it.
"""

import sys
from pathlib import Path

_src = Path(__file__).resolve().parent / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from simple_bank.app import main  # noqa: E402

if __name__ == "__main__":
    main()
