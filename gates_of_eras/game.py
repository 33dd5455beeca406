"""The main game loop and the program's entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import pygame

from .config_window import run_config_window
from .settings import DEFAULT_CONFIG_FILE, GameConfig, load_config
from .tilemap import Tilemap, TilemapError
from .window import GameWindow, WindowError

log = logging.getLogger(__name__)

TILESET_PATH = "../assets/map/tileset.png"
MAP_PATH = "../assets/map/map.txt"
TILE_SIZE = 32


class Game:
    """Opens the game window, loads the map and runs the main loop."""

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        tileset_path: str | Path = TILESET_PATH,
        map_path: str | Path = MAP_PATH,
        tile_size: int = TILE_SIZE,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.tileset_path = tileset_path
        self.map_path = map_path
        self.tile_size = tile_size
        self.window = GameWindow()
        self.tilemap = Tilemap()
        self.running = True

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def initialize(self) -> None:
        """Create the window and load the tileset and map.

        Raises ``WindowError`` or ``TilemapError`` when a step fails.
        """
        cfg = self.config
        self.window.create(cfg.display_index, cfg.width, cfg.height, cfg.fullscreen)
        self.tilemap.load_tileset(self.tileset_path, self.tile_size)
        self.tilemap.load_map(self.map_path)

    def handle_events(self) -> bool:
        """Process pending events; return whether the game keeps running."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key == pygame.K_ESCAPE:
                self.running = False
        return self.running

    def run(self) -> None:
        """Draw frames until the player quits."""
        while self.running:
            self.handle_events()
            self.window.clear()
            self.tilemap.render(self.window.surface)
            self.window.present()

    def close(self) -> None:
        """Release the window and shut pygame down."""
        self.window.close()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Show the launcher, then run the game with the chosen settings."""
    parser = argparse.ArgumentParser(prog="gates-of-eras", description="Run the game.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if not run_config_window(DEFAULT_CONFIG_FILE):
        return 0

    try:
        config = load_config(DEFAULT_CONFIG_FILE)
    except OSError:
        config = GameConfig()

    with Game(config) as game:
        try:
            game.initialize()
        except (WindowError, TilemapError) as exc:
            log.error("%s", exc)
            return -1
        game.run()
    return 0