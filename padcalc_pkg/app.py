"""Window setup and the main event loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from . import config
from .controller import AppState, handle_click, new_state
from .logging_config import get_logger
from .rendering import PygameCanvas, render_frame
from .types import StartupError

logger = get_logger("app")

# Left, middle, right
POINTER_BUTTONS = (1, 2, 3)


@dataclass
class AppSettings:
    """Runtime settings for one window session."""

    font_path: Optional[str] = config.FONT_PATH
    font_size: int = config.FONT_SIZE
    frame_delay_ms: int = config.FRAME_DELAY_MS
    window_title: str = config.WINDOW_TITLE


def init_display(settings: AppSettings) -> PygameCanvas:
    """Initialize pygame, open the window and load the font.

    Raises:
        StartupError: If the display or the font cannot be initialized
    """
    try:
        pygame.display.init()
        pygame.font.init()
    except pygame.error as e:
        raise StartupError(f"pygame initialization failed: {e}", code="INIT_FAILED") from e

    try:
        surface = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    except pygame.error as e:
        raise StartupError(f"Window creation failed: {e}", code="WINDOW_FAILED") from e
    pygame.display.set_caption(settings.window_title)

    try:
        font = pygame.font.Font(settings.font_path, settings.font_size)
    except (pygame.error, OSError) as e:
        raise StartupError(
            f"Font loading failed ({settings.font_path or 'default font'}): {e}",
            code="FONT_FAILED",
        ) from e

    logger.info(
        "Window %dx%d ready, font %s at %dpt",
        config.SCREEN_WIDTH,
        config.SCREEN_HEIGHT,
        settings.font_path or "default",
        settings.font_size,
    )
    return PygameCanvas(surface, font)


def process_events(state: AppState, events) -> bool:
    """Apply a batch of pygame events to ``state``.

    Returns:
        False once a quit event has been seen, True otherwise
    """
    for event in events:
        if event.type == pygame.QUIT:
            logger.info("Quit requested")
            return False
        # Wheel scrolls also arrive as button 4/5 presses
        if event.type == pygame.MOUSEBUTTONDOWN and event.button in POINTER_BUTTONS:
            handle_click(state, *event.pos)
    return True


def run(settings: Optional[AppSettings] = None) -> int:
    """Open the calculator window and run until the user closes it.

    Returns:
        Exit code (0 on normal shutdown)

    Raises:
        StartupError: If initialization fails before the loop starts
    """
    if settings is None:
        settings = AppSettings()

    try:
        canvas = init_display(settings)
        state = new_state()

        running = True
        while running:
            running = process_events(state, pygame.event.get())
            if running:
                render_frame(canvas, state)
                pygame.time.delay(settings.frame_delay_ms)
    finally:
        pygame.quit()
    return 0
