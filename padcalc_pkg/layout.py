"""Keypad layout: the fixed button catalog and its grid geometry."""

from __future__ import annotations

from .config import (
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    BUTTON_WIDTH,
    GRID_COLUMNS,
    GRID_ORIGIN_X,
    GRID_ORIGIN_Y,
)
from .types import ButtonSpec, Rect

# Row-major, top to bottom
BUTTON_LABELS = (
    "7", "8", "9", "/",
    "4", "5", "6", "*",
    "1", "2", "3", "-",
    "C", "0", "=", "+",
)

DIGIT_LABELS = frozenset("0123456789")
OPERATOR_LABELS = frozenset("+-*/")
EVALUATE_LABEL = "="
CLEAR_LABEL = "C"


def button_region(index: int) -> Rect:
    """Return the hit region of the button at ``index`` in the catalog.

    Args:
        index: Catalog position, 0 to 15

    Raises:
        IndexError: If ``index`` is outside the catalog
    """
    if not 0 <= index < len(BUTTON_LABELS):
        raise IndexError(f"Button index out of range: {index}")
    column = index % GRID_COLUMNS
    row = index // GRID_COLUMNS
    return Rect(
        GRID_ORIGIN_X + column * (BUTTON_WIDTH + BUTTON_MARGIN),
        GRID_ORIGIN_Y + row * (BUTTON_HEIGHT + BUTTON_MARGIN),
        BUTTON_WIDTH,
        BUTTON_HEIGHT,
    )


def build_buttons() -> tuple[ButtonSpec, ...]:
    """Build the full keypad catalog in label order."""
    return tuple(
        ButtonSpec(label, button_region(i)) for i, label in enumerate(BUTTON_LABELS)
    )
