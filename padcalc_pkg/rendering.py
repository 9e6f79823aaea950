"""Frame rendering onto a drawing canvas.

``render_frame`` only needs a canvas with five primitives (clear, fill_rect,
stroke_rect, draw_text, present). ``PygameCanvas`` provides them on top of a
pygame surface and font; tests can pass any object with the same methods.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from .config import (
    BLACK,
    BUTTON_FILL,
    INPUT_TEXT_POS,
    LABEL_OFFSET,
    RESULT_TEXT_POS,
    WHITE,
)
from .controller import AppState
from .types import Rect

Color = tuple[int, int, int]


class Canvas(Protocol):
    def clear(self, color: Color) -> None: ...

    def fill_rect(self, rect: Rect, color: Color) -> None: ...

    def stroke_rect(self, rect: Rect, color: Color) -> None: ...

    def draw_text(self, text: str, x: int, y: int) -> None: ...

    def present(self) -> None: ...


class PygameCanvas:
    """Canvas backed by a pygame display surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font):
        self.surface = surface
        self.font = font

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_rect(self, rect: Rect, color: Color) -> None:
        pygame.draw.rect(self.surface, color, _to_pygame_rect(rect))

    def stroke_rect(self, rect: Rect, color: Color) -> None:
        pygame.draw.rect(self.surface, color, _to_pygame_rect(rect), width=1)

    def draw_text(self, text: str, x: int, y: int) -> None:
        rendered = self.font.render(text, True, BLACK)
        self.surface.blit(rendered, (x, y))

    def present(self) -> None:
        pygame.display.flip()


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.width, rect.height)


def render_frame(canvas: Canvas, state: AppState) -> None:
    """Draw the input line, result line and keypad, then present the frame."""
    canvas.clear(WHITE)

    canvas.draw_text("Input: " + state.input_buffer, *INPUT_TEXT_POS)
    canvas.draw_text("Result: " + state.result_text, *RESULT_TEXT_POS)

    for button in state.buttons:
        canvas.fill_rect(button.rect, BUTTON_FILL)
        canvas.stroke_rect(button.rect, BLACK)
        canvas.draw_text(
            button.label,
            button.rect.x + LABEL_OFFSET[0],
            button.rect.y + LABEL_OFFSET[1],
        )

    canvas.present()
