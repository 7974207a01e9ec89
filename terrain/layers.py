# layers.py - per-layer height envelope, color and noise window
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from config import (
    LAYER_HEIGHT_SPAN,
    LAYER_JUMP_EXPONENT,
    LAYER_JUMP_CAP,
    JAGGEDNESS_RANGE,
    NOISE_JITTER_SPAN,
)
from .geometry import Bounds, lerp_range
from .palette import HSB


@dataclass(frozen=True)
class LayerDraws:
    """Random values taken once per layer and kept across resizes."""

    exponent: float      # r ~ U(3.3, 4.0) for the height jump
    jaggedness: float    # U(5, 10), width of the noise window
    jitter: float        # U(0, 1), fraction of the half-width window shift

    @classmethod
    def draw(cls, rng: random.Random) -> "LayerDraws":
        return cls(
            exponent=rng.uniform(*LAYER_JUMP_EXPONENT),
            jaggedness=rng.uniform(*JAGGEDNESS_RANGE),
            jitter=rng.uniform(0.0, 1.0),
        )


@dataclass(frozen=True)
class Layer:
    """One mountain range.  Index 0 is the frontmost (nearest, tallest)."""

    index: int
    bounds: Bounds
    fill: HSB
    jaggedness: float
    start_noise: float
    end_noise: float

    @property
    def max_height(self) -> float:
        return self.bounds.height


def layer_max_height(index: int, count: int, viewport_height: float, exponent: float) -> float:
    """Height envelope of layer ``index``.

    A linear share of ``H - 0.4H`` plus ``min(index**exponent, cap)``; the
    second term spaces successive ridgelines unevenly.
    """
    h = (index + 1) / count * (viewport_height * LAYER_HEIGHT_SPAN)
    h += min(index ** exponent, LAYER_JUMP_CAP)
    return h


def layer_color(index: int, count: int, top: HSB) -> HSB:
    # Brightness intentionally follows the saturation source as well.
    s = lerp_range(index, 0, count, 0, top.saturation)
    return HSB.of(top.hue, s, s)


def noise_window(index: int, viewport_width: float, draws: LayerDraws) -> Tuple[float, float]:
    """Return ``(start, end)`` in noise space.

    Each layer is offset by ``index * width`` so layers read disjoint
    stretches of the field for any width >= 20.
    """
    start = index * viewport_width + draws.jitter * viewport_width * NOISE_JITTER_SPAN
    return start, start + draws.jaggedness


def build_layer(index: int, count: int, top: HSB,
                viewport: Tuple[int, int], draws: LayerDraws) -> Layer:
    width, height = viewport
    max_h = layer_max_height(index, count, height, draws.exponent)
    start, end = noise_window(index, width, draws)
    return Layer(
        index=index,
        bounds=Bounds(0.0, height - max_h, float(width), max_h),
        fill=layer_color(index, count, top),
        jaggedness=draws.jaggedness,
        start_noise=start,
        end_noise=end,
    )


def draw_layers(rng: random.Random, count: int) -> List[LayerDraws]:
    return [LayerDraws.draw(rng) for _ in range(count)]


def build_layers(top: HSB, viewport: Tuple[int, int],
                 draws: Sequence[LayerDraws]) -> Tuple[Layer, ...]:
    count = len(draws)
    return tuple(build_layer(i, count, top, viewport, d) for i, d in enumerate(draws))
