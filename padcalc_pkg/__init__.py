"""Padcalc package: keypad calculator with evaluator, controller, and pygame front end."""

__all__ = [
    "config",
    "evaluator",
    "layout",
    "controller",
    "rendering",
    "app",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
]

import os as _os

# Keep pygame's import banner out of --eval / --format json output
_os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
