# Gates of Eras

A tile-map game built on pygame. Starting it first opens a small
configuration window where you pick the display to play on and whether to
run fullscreen; the game window then opens on that display and draws the
map.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Playing

```
gates-of-eras
```

The configuration window (600×600, titled "Game Configuration") lists the
connected displays as "Display 0", "Display 1", … with their desktop sizes.

- Click the square next to a display to choose it.
- Click the square next to "Fullscreen" to toggle fullscreen mode.
- Click **Start Game** to save your choices and start, or **Exit** (or close
  the window) to quit without starting.

Your choices are written to `game_config.ini` in the current directory and
read back the next time the launcher opens. The file holds one `key=value`
per line; unknown keys and lines without `=` are ignored:

```
DisplayIndex=0
FullScreen=true
Width=1280
Height=720
```

`Width` and `Height` set the size of the game window. The launcher itself
only changes `DisplayIndex` and `FullScreen`; when no file exists yet it
starts from fullscreen 1280×720 on display 0. If a saved display index no
longer exists, display 0 is chosen.

While the game is running, press Escape or close the window to quit. If the
game window cannot be created or the tileset or map cannot be loaded, the
error is logged and the command exits with status -1.

## Assets

Asset paths are relative to the working directory:

- `../assets/fonts/roboto-regular.ttf` (18 pt) and
  `../assets/fonts/ruritania.ttf` (42 pt, the title) for the configuration
  window. A missing font is logged and its text is simply not drawn.
- `../assets/map/tileset.png`, a tileset of 32×32 pixel tiles.
- `../assets/map/map.txt`, the map.

A map file starts with the map's width and height, followed by one tile
number per cell, row by row, all separated by whitespace. Tile numbers index
the tileset left to right, top to bottom; `-1` leaves a cell empty. Cells
missing at the end of the file, or after a token that is not a number, are 0.

```
4 2
0 1 1 0
2 -1 -1 2
```

## Using the pieces

The modules can also be used on their own.

`gates_of_eras.settings` — `GameConfig` (defaults: display 0, windowed,
800×600), `load_config(path, defaults)` and `save_config(config, path)`.
`load_config` raises `OSError` if the file cannot be opened and `ValueError`
for a bad number.

```python
from gates_of_eras.settings import GameConfig, load_config, save_config

config = load_config("game_config.ini", GameConfig())
config.width, config.height = 1024, 768
save_config(config, "game_config.ini")
```

`gates_of_eras.tilemap` — `Tilemap` stores the grid and draws it through a
camera:

```python
from gates_of_eras.tilemap import Tilemap

tilemap = Tilemap()
tilemap.create_empty_map(10, 8, 0)
tilemap.set_tile(2, 3, 5)
tilemap.get_tile(2, 3)      # 5
tilemap.get_tile(50, 50)    # -1, outside the map
tilemap.save_map("level.txt")
tilemap.load_map("level.txt")
```

`set_scale(scale)` zooms (never below 0.1) and `move_camera(x, y)` places the
camera's top-left corner in world pixels. After `load_tileset(path,
tile_size)`, `visible_tiles(window_width, window_height)` yields a
`TilePlacement` (`tile_id`, `source` and `dest` rectangles) for every tile
inside the window, and `render(surface)` draws them onto a pygame surface.
File errors raise `TilemapError`.

`gates_of_eras.window` — `GameWindow` opens a window centred on a chosen
display (`create(display_index, width, height, fullscreen)`), with `clear()`,
`present()`, `draw_test_rect()` and `close()`; it is also a context manager.
`centered_position(display_bounds, width, height)` computes the top-left
corner that centres a window on a display. Failures raise `WindowError`.

`gates_of_eras.config_window` — `ConfigScreen` holds the launcher's state
(`handle_motion(x, y)`, `handle_click(x, y)`, `render(surface, font,
title_font)`), `detect_displays()` lists the displays as `DisplayOption`
values, and `run_config_window(path)` shows the launcher and returns `True`
if the player chose Start Game.

`gates_of_eras.game` — `Game(config, tileset_path=..., map_path=...,
tile_size=...)` with `initialize()`, `handle_events()`, `run()` and
`close()`, and `main()`, the function behind the `gates-of-eras` command.

## What it does not do

The game loop only shows the map: there are no units, no player input other
than quitting, and no scrolling or zooming while playing (the camera stays at
the top-left corner at scale 1). There is no map editor; maps are written by
hand or with `Tilemap.save_map`.