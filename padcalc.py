#!/usr/bin/env python3
"""
Padcalc - Keypad Calculator

Main entry point for the Padcalc desktop calculator.
This file serves as a thin wrapper that delegates all functionality
to the padcalc_pkg package.

Usage:
    python padcalc.py                       # Open the calculator window
    python padcalc.py -e "12+3"             # Evaluate expression
    python padcalc.py --help                # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Padcalc.

    Delegates all functionality to the padcalc_pkg.cli module,
    which handles argument parsing, the window loop, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from padcalc_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import padcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1
    return main_entry(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
