"""Choosing the monitor that a window overlaps the most."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    width: int
    height: int


def overlap_area(a: Rect, b: Rect) -> int:
    """Area shared by two rectangles, 0 when they do not overlap."""
    dx = max(0, min(a.x + a.width, b.x + b.width) - max(a.x, b.x))
    dy = max(0, min(a.y + a.height, b.y + b.height) - max(a.y, b.y))
    return dx * dy


R = TypeVar("R", bound=Rect)


def current_monitor(window: Rect, monitors: Iterable[R]) -> R | None:
    """The first monitor with the largest overlap with ``window``, or None if none overlaps."""
    best = None
    best_overlap = 0
    for monitor in monitors:
        overlap = overlap_area(window, monitor)
        if overlap > best_overlap:
            best_overlap = overlap
            best = monitor
    return best