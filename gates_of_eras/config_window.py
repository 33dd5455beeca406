"""The launcher window where the player picks a display and fullscreen mode."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import pygame

from .settings import DEFAULT_CONFIG_FILE, GameConfig, load_config, save_config

log = logging.getLogger(__name__)

WINDOW_TITLE = "Game Configuration"
WINDOW_SIZE = (600, 600)
FONT_PATH = "../assets/fonts/roboto-regular.ttf"
FONT_SIZE = 18
TITLE_FONT_PATH = "../assets/fonts/ruritania.ttf"
TITLE_FONT_SIZE = 42
FRAME_DELAY_MS = 16

_BACKGROUND = (50, 50, 50)
_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BUTTON = (70, 70, 150)
_BUTTON_HOVER = (100, 100, 200)

_FULLSCREEN_RECT = pygame.Rect(50, 350, 20, 20)


def _display_rect(index: int) -> pygame.Rect:
    return pygame.Rect(50, 100 + index * 30, 20, 20)


def _contains(rect: pygame.Rect, x: int, y: int) -> bool:
    """Hit test that includes the right and bottom edges."""
    return rect.x <= x <= rect.x + rect.w and rect.y <= y <= rect.y + rect.h


def _launcher_defaults() -> GameConfig:
    return GameConfig(display_index=0, fullscreen=True, width=1280, height=720)


@dataclass
class DisplayOption:
    """A monitor the game can be opened on."""

    index: int
    name: str
    bounds: tuple[int, int, int, int]


@dataclass
class Button:
    """A clickable labelled rectangle."""

    rect: pygame.Rect
    text: str
    selected: bool = False


def detect_displays() -> list[DisplayOption]:
    """List the connected displays with their sizes."""
    pygame.display.init()
    return [
        DisplayOption(index, f"Display {index}", (0, 0, w, h))
        for index, (w, h) in enumerate(pygame.display.get_desktop_sizes())
    ]


@dataclass
class ConfigScreen:
    """State and drawing of the configuration screen."""

    displays: list[DisplayOption]
    config: GameConfig = field(default_factory=_launcher_defaults)
    path: str | Path = DEFAULT_CONFIG_FILE
    buttons: list[Button] = field(
        default_factory=lambda: [
            Button(pygame.Rect(300, 500, 200, 50), "Start Game"),
            Button(pygame.Rect(50, 500, 200, 50), "Exit"),
        ]
    )
    running: bool = True
    saved: bool = False

    def __post_init__(self) -> None:
        self.displays = list(self.displays)
        if not 0 <= self.config.display_index < len(self.displays):
            self.config.display_index = 0

    @property
    def start_button(self) -> Button:
        return self.buttons[0]

    @property
    def exit_button(self) -> Button:
        return self.buttons[1]

    def handle_motion(self, x: int, y: int) -> None:
        """Highlight the button under the pointer."""
        for button in self.buttons:
            button.selected = _contains(button.rect, x, y)

    def handle_click(self, x: int, y: int) -> None:
        """Act on a mouse press at ``(x, y)``."""
        if self.start_button.selected:
            save_config(self.config, self.path)
            self.saved = True
            self.running = False
        elif self.exit_button.selected:
            self.running = False

        for option_index in range(len(self.displays)):
            if _contains(_display_rect(option_index), x, y):
                self.config.display_index = option_index

        if _contains(_FULLSCREEN_RECT, x, y):
            self.config.fullscreen = not self.config.fullscreen

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self.handle_motion(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.handle_click(*event.pos)

    @staticmethod
    def _text(
        surface: pygame.Surface,
        font: pygame.font.Font | None,
        text: str,
        pos: tuple[int, int],
        color: tuple[int, int, int],
    ) -> None:
        if font is None:
            return
        surface.blit(font.render(text, False, color), pos)

    def render(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font | None,
        title_font: pygame.font.Font | None,
    ) -> None:
        """Draw the whole screen onto ``surface``."""
        surface.fill(_BACKGROUND)
        self._text(surface, title_font, WINDOW_TITLE, (WINDOW_SIZE[0] // 4 - 25, 5), _RED)

        self._text(surface, font, "Select Display:", (50, 70), _WHITE)
        for display in self.displays:
            rect = _display_rect(display.index)
            if self.config.display_index == display.index:
                pygame.draw.rect(surface, _GREEN, rect)
            pygame.draw.rect(surface, _WHITE, rect, 1)
            _, _, w, h = display.bounds
            self._text(surface, font, f"{display.name} ({w}x{h})", (80, rect.y), _WHITE)

        if self.config.fullscreen:
            pygame.draw.rect(surface, _GREEN, _FULLSCREEN_RECT)
        pygame.draw.rect(surface, _WHITE, _FULLSCREEN_RECT, 1)
        self._text(surface, font, "Fullscreen", (80, 350), _WHITE)

        for button in self.buttons:
            pygame.draw.rect(surface, _BUTTON_HOVER if button.selected else _BUTTON, button.rect)
            pygame.draw.rect(surface, _WHITE, button.rect, 1)
            text_width = len(button.text) * 10
            text_x = button.rect.x + (button.rect.w - text_width) // 2
            text_y = button.rect.y + (button.rect.h - 18) // 2
            self._text(surface, font, button.text, (text_x, text_y), _WHITE)


def _open_font(path: str, size: int) -> pygame.font.Font | None:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        log.error("Failed to load font %s: %s", path, exc)
        return None


def run_config_window(path: str | Path = DEFAULT_CONFIG_FILE) -> bool:
    """Show the configuration screen; return True if the player chose to start."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        log.error("Video could not initialize: %s", exc)
        return False

    try:
        config = load_config(path, _launcher_defaults())
    except OSError:
        config = _launcher_defaults()

    screen = ConfigScreen(detect_displays(), config, path)

    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
    except pygame.error as exc:
        log.error("Window could not be created: %s", exc)
        pygame.display.quit()
        return False
    pygame.display.set_caption(WINDOW_TITLE)

    font = title_font = None
    try:
        pygame.font.init()
    except pygame.error as exc:
        log.error("Font system could not initialize: %s", exc)
    else:
        font = _open_font(FONT_PATH, FONT_SIZE)
        title_font = _open_font(TITLE_FONT_PATH, TITLE_FONT_SIZE)

    try:
        while screen.running:
            for event in pygame.event.get():
                screen._handle_event(event)
            screen.render(surface, font, title_font)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.font.quit()
        pygame.display.quit()

    return screen.saved