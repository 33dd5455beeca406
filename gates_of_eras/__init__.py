"""A pygame tile-map game with a launcher window for choosing the display and fullscreen mode."""

__version__ = "0.1.0"