#!/usr/bin/env python3
"""
Kalkulator Pratt - arithmetic expression calculator

Thin wrapper that delegates all functionality to the kalkulator_pratt
package, for running from a source checkout without installing.

Usage:
    python kalkulator.py                    # Interactive REPL
    python kalkulator.py -e "2+2"           # Evaluate expression
    python kalkulator.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Kalkulator Pratt.

    Delegates to the kalkulator_pratt.cli module, which handles argument
    parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from kalkulator_pratt.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import kalkulator_pratt: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
