"""Input/state controller: maps keypad presses to state transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .evaluator import evaluate_expression
from .layout import (
    CLEAR_LABEL,
    DIGIT_LABELS,
    EVALUATE_LABEL,
    OPERATOR_LABELS,
    build_buttons,
)
from .logging_config import get_logger
from .types import ButtonSpec

logger = get_logger("controller")


@dataclass
class AppState:
    """Everything the event handler and renderer need between frames."""

    buttons: tuple[ButtonSpec, ...] = field(default_factory=build_buttons)
    input_buffer: str = ""
    result_text: str = ""


def new_state(buttons: Optional[Sequence[ButtonSpec]] = None) -> AppState:
    """Create a fresh state with empty input and result."""
    if buttons is None:
        return AppState()
    return AppState(buttons=tuple(buttons))


def press_button(state: AppState, label: str) -> None:
    """Apply the transition for one key press.

    Digits and operators are appended to the input buffer, ``C`` clears both
    the input and the result, and ``=`` evaluates the input into the result
    while leaving the input in place.

    Raises:
        ValueError: If ``label`` is not a keypad label
    """
    if label in DIGIT_LABELS or label in OPERATOR_LABELS:
        state.input_buffer += label
    elif label == CLEAR_LABEL:
        state.input_buffer = ""
        state.result_text = ""
    elif label == EVALUATE_LABEL:
        state.result_text = evaluate_expression(state.input_buffer)
        logger.info("Evaluated %r -> %s", state.input_buffer, state.result_text)
    else:
        raise ValueError(f"Unknown button label: {label!r}")


def resolve_click(
    buttons: Sequence[ButtonSpec], x: int, y: int
) -> Optional[ButtonSpec]:
    """Return the first button whose region contains (x, y), or None."""
    for button in buttons:
        if button.rect.contains(x, y):
            return button
    return None


def handle_click(state: AppState, x: int, y: int) -> Optional[ButtonSpec]:
    """Route a pointer press to the button under it.

    Returns:
        The pressed button, or None if the click missed every button
    """
    button = resolve_click(state.buttons, x, y)
    if button is None:
        logger.debug("Click at (%d, %d) hit no button", x, y)
        return None
    logger.debug("Click at (%d, %d) pressed %r", x, y, button.label)
    press_button(state, button.label)
    return button
