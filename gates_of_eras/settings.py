"""Reading and writing the ``key=value`` game configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_CONFIG_FILE = "game_config.ini"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass
class GameConfig:
    """Display settings used to open the game window."""

    display_index: int = 0
    fullscreen: bool = False
    width: int = 800
    height: int = 600


def _parse_int(text: str) -> int:
    """Parse a leading integer the way the config format expects.

    Leading whitespace is skipped and anything after the digits is ignored;
    text with no leading integer, or one outside 32-bit range, is an error.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer value: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer value out of range: {text!r}")
    return value


def load_config(
    path: str | Path = DEFAULT_CONFIG_FILE, defaults: GameConfig | None = None
) -> GameConfig:
    """Read a config file, starting from ``defaults`` for missing keys.

    Raises ``OSError`` if the file cannot be opened and ``ValueError`` if a
    numeric value cannot be parsed.
    """
    config = replace(defaults) if defaults is not None else GameConfig()
    text = Path(path).read_text(encoding="utf-8")
    for line in text.split("\n"):
        key, sep, value = line.partition("=")
        if not sep:
            continue
        if key == "DisplayIndex":
            config.display_index = _parse_int(value)
        elif key == "FullScreen":
            config.fullscreen = value == "true"
        elif key == "Width":
            config.width = _parse_int(value)
        elif key == "Height":
            config.height = _parse_int(value)
    return config


def save_config(config: GameConfig, path: str | Path = DEFAULT_CONFIG_FILE) -> None:
    """Write ``config`` to ``path`` in ``key=value`` form."""
    lines = [
        f"DisplayIndex={config.display_index}",
        f"FullScreen={'true' if config.fullscreen else 'false'}",
        f"Width={config.width}",
        f"Height={config.height}",
    ]
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write("".join(line + "\n" for line in lines))