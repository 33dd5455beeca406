"""Tile map storage, file format and camera-aware rendering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import pygame

Rect = tuple[int, int, int, int]

_MIN_SCALE = 0.1


class TilemapError(Exception):
    """Raised when a tileset or map file cannot be read or written."""


@dataclass(frozen=True)
class TilePlacement:
    """Where one tile is taken from in the tileset and drawn on screen."""

    tile_id: int
    source: Rect
    dest: Rect


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _cdiv(a, b)


class Tilemap:
    """A grid of tile ids drawn from a tileset image through a camera."""

    def __init__(self, tile_size: int = 32) -> None:
        self.tileset: pygame.Surface | None = None
        self.tile_size = tile_size
        self.tiles_per_row = 0
        self.camera_scale = 1.0
        self.camera_x = 0
        self.camera_y = 0
        self._data: list[list[int]] = []
        self._width = 0
        self._height = 0

    @property
    def map_width(self) -> int:
        return self._width

    @property
    def map_height(self) -> int:
        return self._height

    def load_tileset(self, path: str | Path, tile_size: int) -> None:
        """Load the tileset image and set the tile size."""
        if tile_size <= 0:
            raise ValueError("tile size must be positive")
        self.tileset = None
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError, FileNotFoundError) as exc:
            raise TilemapError(f"failed to load tileset {path}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self.tileset = image
        self.tile_size = tile_size
        self.tiles_per_row = image.get_width() // tile_size

    def _reset(self, width: int, height: int, fill: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid map size {width}x{height}")
        self._width = width
        self._height = height
        self._data = [[fill] * width for _ in range(height)]

    def load_map(self, path: str | Path) -> None:
        """Read a map: width and height, then that many whitespace-separated ids.

        Values past the end of the file, or past an unreadable token, are 0.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise TilemapError(f"failed to open map file: {path}") from exc

        def numbers() -> Iterator[int]:
            for token in text.split():
                try:
                    yield int(token)
                except ValueError:
                    return

        values = numbers()
        width = next(values, 0)
        height = next(values, 0)
        if width < 0 or height < 0:
            raise TilemapError(f"invalid map size {width}x{height} in {path}")
        self._reset(width, height, 0)
        for row in self._data:
            for x in range(width):
                row[x] = next(values, 0)

    def create_empty_map(self, width: int, height: int, default_tile: int = 0) -> None:
        """Replace the map with one filled with ``default_tile``."""
        self._reset(width, height, default_tile)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_tile(self, x: int, y: int) -> int:
        """Return the tile id at ``(x, y)``, or -1 outside the map."""
        return self._data[y][x] if self._in_bounds(x, y) else -1

    def set_tile(self, x: int, y: int, tile_id: int) -> None:
        """Set the tile at ``(x, y)``; positions outside the map are ignored."""
        if self._in_bounds(x, y):
            self._data[y][x] = tile_id

    def set_scale(self, scale: float) -> None:
        """Set the zoom factor, never below 0.1."""
        self.camera_scale = scale if scale > _MIN_SCALE else _MIN_SCALE

    def move_camera(self, x: int, y: int) -> None:
        """Place the camera's top-left corner in world pixels."""
        self.camera_x = int(x)
        self.camera_y = int(y)

    def visible_tiles(self, window_width: int, window_height: int) -> Iterator[TilePlacement]:
        """Yield the placements of every tile that falls inside the window."""
        if self.tileset is None or self._width == 0 or self._height == 0:
            return
        scaled = int(self.tile_size * self.camera_scale)
        if scaled <= 0 or self.tiles_per_row <= 0:
            return
        cx, cy = self.camera_x, self.camera_y
        start_x = max(0, _cdiv(cx, scaled))
        start_y = max(0, _cdiv(cy, scaled))
        end_x = min(self._width, _cdiv(cx + window_width, scaled) + 1)
        end_y = min(self._height, _cdiv(cy + window_height, scaled) + 1)
        size = self.tile_size
        for y in range(start_y, end_y):
            row = self._data[y]
            for x in range(start_x, end_x):
                tile_id = row[x]
                if tile_id == -1:
                    continue
                source = (
                    _cmod(tile_id, self.tiles_per_row) * size,
                    _cdiv(tile_id, self.tiles_per_row) * size,
                    size,
                    size,
                )
                dest = (x * scaled - cx, y * scaled - cy, scaled, scaled)
                yield TilePlacement(tile_id, source, dest)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the visible part of the map onto ``surface``."""
        if self.tileset is None:
            return
        bounds = self.tileset.get_rect()
        width, height = surface.get_size()
        for placement in self.visible_tiles(width, height):
            area = pygame.Rect(placement.source).clip(bounds)
            if area.width == 0 or area.height == 0:
                continue
            dx, dy, dw, dh = placement.dest
            if area.size == (dw, dh):
                surface.blit(self.tileset, (dx, dy), area)
            else:
                tile = pygame.transform.scale(self.tileset.subsurface(area), (dw, dh))
                surface.blit(tile, (dx, dy))

    def save_map(self, path: str | Path) -> None:
        """Write the map in the format read by :meth:`load_map`."""
        lines = [f"{self._width} {self._height}\n"]
        lines.extend("".join(f"{tile} " for tile in row) + "\n" for row in self._data)
        try:
            with open(path, "w", encoding="utf-8", newline="") as fh:
                fh.writelines(lines)
        except OSError as exc:
            raise TilemapError(f"failed to create map file: {path}") from exc