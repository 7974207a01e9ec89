# geometry.py - axis-aligned bounds shared by the sun and mountain layers
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def as_tuple(self) -> Rect:
        return (self.x, self.y, self.width, self.height)


def lerp_range(v: float, a0: float, a1: float, b0: float, b1: float) -> float:
    """Map ``v`` from ``[a0, a1]`` onto ``[b0, b1]`` without clamping."""
    return b0 + (v - a0) * (b1 - b0) / (a1 - a0)


Polygon = List[Point]
