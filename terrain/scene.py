# scene.py - the scene aggregate and its construction/resize entry points
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from config import LandscapeConfig, DEFAULT_LAYER_COUNT
from .layers import Layer, LayerDraws, build_layers, draw_layers
from .noise import CoherentNoise
from .palette import HSB, Palette, derive_palette, random_hue
from .silhouette import build_silhouette
from .geometry import Polygon
from .sun import Sun, SunDraws, place_sun

logger = logging.getLogger(__name__)

Viewport = Tuple[int, int]


@dataclass(frozen=True)
class Scene:
    """Everything needed to draw one landscape.

    ``sun_draws`` and ``layer_draws`` hold the random values taken at
    startup; ``sun`` and ``layers`` are derived from them for the current
    ``viewport``.  Layers are ordered front-to-back (index 0 first).
    """

    viewport: Viewport
    seed: int
    palette: Palette
    sun: Sun
    layers: Tuple[Layer, ...]
    noise: CoherentNoise
    sun_draws: SunDraws
    layer_draws: Tuple[LayerDraws, ...]

    def __post_init__(self) -> None:
        w, h = self.viewport
        if w <= 0 or h <= 0:
            raise ValueError(f"viewport must be positive, got {w}x{h}")
        if not self.layers:
            raise ValueError("a scene needs at least one layer")
        if len(self.layers) != len(self.layer_draws):
            raise ValueError("layers and layer_draws length mismatch")

    @property
    def width(self) -> int:
        return self.viewport[0]

    @property
    def height(self) -> int:
        return self.viewport[1]

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    @property
    def frontmost_color(self) -> HSB:
        """Fill of layer 0; hosts may paint surrounding chrome with it."""
        return self.layers[0].fill

    @property
    def bottom_color(self) -> HSB:
        return self.palette.bottom

    def silhouette(self, index: int) -> Polygon:
        return build_silhouette(self.layers[index], self.noise, self.height)

    def summary(self) -> str:
        top = self.palette.top
        return (f"seed={self.seed} viewport={self.width}x{self.height} "
                f"hue={top.hue:.1f} layers={self.layer_count}")


def _check_viewport(viewport: Viewport) -> Viewport:
    w, h = int(viewport[0]), int(viewport[1])
    if w <= 0 or h <= 0:
        raise ValueError(f"viewport must be positive, got {w}x{h}")
    return w, h


def initialize(viewport: Viewport,
               layer_count: int = DEFAULT_LAYER_COUNT,
               seed: Optional[int] = None,
               hue: Optional[float] = None,
               config: Optional[LandscapeConfig] = None) -> Scene:
    """Create a scene for ``viewport``.

    All randomness derives from ``seed``: the top hue (unless ``hue`` is
    given), the sun factors, the per-layer draws and the noise table.
    ``config`` supplies noise octaves/falloff; explicit arguments win.
    """
    viewport = _check_viewport(viewport)
    if layer_count < 1:
        raise ValueError(f"layer_count must be >= 1, got {layer_count}")
    cfg = config or LandscapeConfig()
    if seed is None:
        seed = int(np.random.randint(0, 2**31 - 1))

    rng = random.Random(seed)
    drawn_hue = random_hue(rng)
    palette = derive_palette(drawn_hue if hue is None else hue)
    sun_draws = SunDraws.draw(rng)
    layer_draws = tuple(draw_layers(rng, layer_count))
    noise = CoherentNoise(seed, octaves=cfg.noise_octaves, falloff=cfg.noise_falloff)

    scene = Scene(
        viewport=viewport,
        seed=seed,
        palette=palette,
        sun=place_sun(palette.top, viewport, sun_draws),
        layers=build_layers(palette.top, viewport, layer_draws),
        noise=noise,
        sun_draws=sun_draws,
        layer_draws=layer_draws,
    )
    logger.info("scene initialized: %s", scene.summary())
    return scene


def initialize_from_config(config: LandscapeConfig) -> Scene:
    return initialize(config.viewport, layer_count=config.layer_count,
                      seed=config.seed, hue=config.hue, config=config)


def on_resize(scene: Scene, new_size: Viewport) -> Scene:
    """Regenerate viewport-dependent geometry.

    Palette, noise table and every random draw are kept; sun placement,
    layer bounds and noise windows (which depend on width) are re-derived,
    so resizing back to the original size restores the original scene.
    """
    viewport = _check_viewport(new_size)
    if viewport == scene.viewport:
        return scene
    top = scene.palette.top
    resized = Scene(
        viewport=viewport,
        seed=scene.seed,
        palette=scene.palette,
        sun=place_sun(top, viewport, scene.sun_draws),
        layers=build_layers(top, viewport, scene.layer_draws),
        noise=scene.noise,
        sun_draws=scene.sun_draws,
        layer_draws=scene.layer_draws,
    )
    logger.debug("scene resized %dx%d -> %dx%d", scene.width, scene.height, *viewport)
    return resized
