"""Centralized configuration for Padcalc.

This module defines:
- Window geometry and keypad grid constants
- Colors used by the renderer
- Font and frame-rate settings
- The evaluator's error token and output precision

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with PADCALC_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("padcalc")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Window geometry
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 550
WINDOW_TITLE = os.getenv("PADCALC_WINDOW_TITLE", "Padcalc")

# Keypad grid
BUTTON_WIDTH = 80
BUTTON_HEIGHT = 80
BUTTON_MARGIN = 10
GRID_ORIGIN_X = 20
GRID_ORIGIN_Y = 150
GRID_COLUMNS = 4

# Text anchors (pixel positions)
INPUT_TEXT_POS = (20, 50)
RESULT_TEXT_POS = (20, 100)
LABEL_OFFSET = (30, 30)

# Colors (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BUTTON_FILL = (200, 200, 200)

# Font: None means pygame's bundled default font
FONT_PATH = os.getenv("PADCALC_FONT_PATH") or None
FONT_SIZE = int(os.getenv("PADCALC_FONT_SIZE", "24"))

# Main loop
FRAME_DELAY_MS = int(os.getenv("PADCALC_FRAME_DELAY_MS", "16"))

# Logging
LOG_LEVEL = os.getenv("PADCALC_LOG_LEVEL", "INFO")

# Evaluator
ERROR_TOKEN = "Err"
OUTPUT_DECIMALS = 6
SUPPORTED_OPERATORS = ("+", "-", "*", "/")
