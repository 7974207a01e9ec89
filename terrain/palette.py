# palette.py - HSB colors in a 0..255 space and sky palette derivation
from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass
from typing import Tuple

from config import (
    CHANNEL_MAX,
    TOP_SATURATION,
    TOP_BRIGHTNESS,
    BOTTOM_SATURATION_SCALE,
    BOTTOM_BRIGHTNESS_SCALE,
)

RGB = Tuple[int, int, int]


def clamp(v: float, lo: float = 0.0, hi: float = CHANNEL_MAX) -> float:
    return max(lo, min(hi, v))


@dataclass(frozen=True)
class HSB:
    """Hue/saturation/brightness triple, every channel in ``[0, 255]``.

    Construct through :meth:`of` when the inputs may be out of range; the
    plain constructor stores values as given.
    """

    hue: float
    saturation: float
    brightness: float

    @classmethod
    def of(cls, hue: float, saturation: float, brightness: float) -> "HSB":
        return cls(clamp(float(hue)), clamp(float(saturation)), clamp(float(brightness)))

    def scaled(self, saturation: float = 1.0, brightness: float = 1.0) -> "HSB":
        """Same hue, channels multiplied then clamped."""
        return HSB.of(self.hue, self.saturation * saturation, self.brightness * brightness)

    def to_rgb(self) -> RGB:
        r, g, b = colorsys.hsv_to_rgb(
            self.hue / CHANNEL_MAX,
            self.saturation / CHANNEL_MAX,
            self.brightness / CHANNEL_MAX,
        )
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


@dataclass(frozen=True)
class Palette:
    top: HSB
    bottom: HSB


def derive_top_color(hue: float) -> HSB:
    return HSB.of(hue, TOP_SATURATION, TOP_BRIGHTNESS)


def derive_bottom_color(top: HSB) -> HSB:
    return top.scaled(BOTTOM_SATURATION_SCALE, BOTTOM_BRIGHTNESS_SCALE)


def random_hue(rng: random.Random) -> float:
    return rng.uniform(0.0, CHANNEL_MAX)


def derive_palette(hue: float) -> Palette:
    """Build the sky palette from a base hue."""
    top = derive_top_color(hue)
    return Palette(top=top, bottom=derive_bottom_color(top))
