"""Main entry point for running kalkulator_pratt as a module.

This allows running Kalkulator Pratt with:
    python -m kalkulator_pratt
    python -m kalkulator_pratt --health-check
    python -m kalkulator_pratt -e "2+2"
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
