"""The game itself: a square moved with the arrow keys, saved between runs."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

from .files import read_entire_file, write_entire_file
from .input import Input, Key
from .logs import log

RECT_SIZE = 100
SPEED = 100.0

_LAYOUT = struct.Struct("<2f")


@dataclass
class GameData:
    """State that is written to disk when the game closes."""

    x: float = 100.0
    y: float = 100.0

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(self.x, self.y)

    @classmethod
    def from_bytes(cls, data: bytes) -> GameData:
        if len(data) < _LAYOUT.size:
            raise ValueError(f"need {_LAYOUT.size} bytes, got {len(data)}")
        x, y = _LAYOUT.unpack_from(data)
        return cls(x, y)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class Game:
    """Runs the per-frame logic and keeps the saved data."""

    save_path: Path | str = "gameData.data"
    data: GameData = field(default_factory=GameData)

    def __init__(self, save_path: Path | str = "gameData.data"):
        self.save_path = save_path
        self.data = GameData()

    def init(self) -> bool:
        """Load the saved data if there is any; a missing save keeps the defaults."""
        try:
            self.data = GameData.from_bytes(read_entire_file(self.save_path, _LAYOUT.size))
        except (OSError, ValueError):
            pass
        log("Init")
        return True

    def logic(self, delta_time: float, input: Input, width: int, height: int) -> bool:
        """Move the square from the arrow keys and keep it inside the window."""
        step = delta_time * SPEED
        if input.is_button_held(Key.LEFT):
            self.data.x -= step
        if input.is_button_held(Key.RIGHT):
            self.data.x += step
        if input.is_button_held(Key.UP):
            self.data.y -= step
        if input.is_button_held(Key.DOWN):
            self.data.y += step

        self.data.x = _clamp(self.data.x, 0, width - RECT_SIZE)
        self.data.y = _clamp(self.data.y, 0, height - RECT_SIZE)
        return True

    def close(self) -> bool:
        """Save the data; returns False if the file could not be written."""
        try:
            write_entire_file(self.save_path, self.data.to_bytes())
        except OSError:
            return False
        return True