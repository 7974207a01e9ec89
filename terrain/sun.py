# sun.py - randomized sun disc near the top-right skyline
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from config import (
    SUN_BASE_SIZE,
    SUN_SIZE_RANGE,
    SUN_Y_RANGE,
    SUN_SATURATION_SCALE,
    SUN_BRIGHTNESS_SCALE,
)
from .geometry import Bounds
from .palette import HSB


@dataclass(frozen=True)
class SunDraws:
    """Random factors taken once per session; geometry is re-derived from them."""

    size_factor: float   # U(0.1, 0.3)
    x_factor: float      # U(0, 1)
    y_factor: float      # U(-0.2, 0.5)

    @classmethod
    def draw(cls, rng: random.Random) -> "SunDraws":
        return cls(
            size_factor=rng.uniform(*SUN_SIZE_RANGE),
            x_factor=rng.uniform(0.0, 1.0),
            y_factor=rng.uniform(*SUN_Y_RANGE),
        )


@dataclass(frozen=True)
class Sun:
    """Sun disc; ``bounds.x``/``bounds.y`` is the centre, width == height == diameter."""

    bounds: Bounds
    fill: HSB

    @property
    def size(self) -> float:
        return self.bounds.width

    def ellipse_rect(self) -> Tuple[float, float, float, float]:
        """Bounding box of the disc in top-left/size form."""
        b = self.bounds
        return (b.x - b.width / 2.0, b.y - b.height / 2.0, b.width, b.height)


def sun_color(top: HSB) -> HSB:
    # brighter than the gradient bottom so it reads as a light source
    return top.scaled(SUN_SATURATION_SCALE, SUN_BRIGHTNESS_SCALE)


def place_sun(top: HSB, viewport: Tuple[int, int], draws: SunDraws) -> Sun:
    """Position and size the sun for ``viewport``.

    ``x`` is biased to the right half and may run past the right edge;
    a negative ``y`` lets the disc poke above the canvas.
    """
    width, _ = viewport
    size = SUN_BASE_SIZE + width * draws.size_factor
    x = width / 2.0 + (size / 4.0 + width / 2.0) * draws.x_factor
    y = size * draws.y_factor
    return Sun(bounds=Bounds(x, y, size, size), fill=sun_color(top))
