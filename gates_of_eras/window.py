"""The game window and its drawing surface."""

from __future__ import annotations

import os
from typing import Sequence

import pygame

WINDOW_TITLE = "Gates of Eras"
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_TEST_RECT = (100, 100, 200, 200)


class WindowError(Exception):
    """Raised when the game window cannot be created or used."""


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def centered_position(display_bounds: Sequence[int], width: int, height: int) -> tuple[int, int]:
    """Top-left corner that centres a ``width`` x ``height`` window on a display."""
    x, y, w, h = display_bounds
    return x + _half(w - width), y + _half(h - height)


class GameWindow:
    """A window opened on a chosen display, with simple drawing helpers."""

    def __init__(self) -> None:
        self._surface: pygame.Surface | None = None

    def __enter__(self) -> GameWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def surface(self) -> pygame.Surface:
        if self._surface is None:
            raise WindowError("window has not been created")
        return self._surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def create(
        self, display_index: int, width: int, height: int, fullscreen: bool = False
    ) -> pygame.Surface:
        """Open the window centred on display ``display_index``."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise WindowError(f"couldn't initialize video: {exc}") from exc
        displays = pygame.display.get_desktop_sizes()
        if not 0 <= display_index < len(displays):
            raise WindowError(f"no display with index {display_index}")
        os.environ["SDL_VIDEO_CENTERED"] = "1"
        flags = pygame.FULLSCREEN if fullscreen else 0
        try:
            surface = pygame.display.set_mode((width, height), flags, display=display_index)
        except pygame.error as exc:
            raise WindowError(f"couldn't create window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._surface = surface
        return surface

    def clear(self) -> None:
        """Fill the window with black."""
        self.surface.fill(_BLACK)

    def present(self) -> None:
        """Show what has been drawn."""
        self.surface
        pygame.display.flip()

    def draw_test_rect(self) -> None:
        """Draw a fixed red square, useful to check the window works."""
        self.surface.fill(_RED, pygame.Rect(_TEST_RECT))

    def close(self) -> None:
        """Destroy the window."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()