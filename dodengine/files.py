"""Whole-file helpers used for saving and loading game data."""

import os
from pathlib import Path

PathLike = str | os.PathLike


def write_entire_file(name: PathLike, data: bytes) -> None:
    """Replace the contents of ``name`` with ``data``."""
    with open(name, "wb") as f:
        f.write(data)


def append_to_file(name: PathLike, data: bytes) -> None:
    """Append ``data`` to ``name``, creating the file if needed."""
    with open(name, "ab") as f:
        f.write(data)


def read_entire_file(name: PathLike, size: int | None = None) -> bytes:
    """Read the whole file, or at most ``size`` bytes of it."""
    if size is not None and size < 0:
        raise ValueError("size must not be negative")
    with open(name, "rb") as f:
        return f.read() if size is None else f.read(size)


def read_entire_text(name: PathLike) -> str:
    """Read the whole file as UTF-8 text, keeping line endings as they are."""
    with open(name, "rb") as f:
        return f.read().decode("utf-8")


def get_file_size(name: PathLike) -> int:
    """Size of ``name`` in bytes, or 0 if it cannot be opened."""
    try:
        return Path(name).stat().st_size
    except OSError:
        return 0