"""A small 2D game platform layer: input, logging, file helpers and a pygame game loop."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "files",
    "game",
    "gldebug",
    "input",
    "logs",
    "monitors",
    "strings",
]