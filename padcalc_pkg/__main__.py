"""Main entry point for running padcalc_pkg as a module.

This allows running Padcalc with:
    python -m padcalc_pkg
    python -m padcalc_pkg --health-check
    python -m padcalc_pkg -e "2+2"

This is equivalent to running:
    python -m padcalc_pkg.cli
    python padcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
