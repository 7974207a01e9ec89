# compositor.py - back-to-front composition of sky, sun and mountain layers
from __future__ import annotations

import logging
from typing import Any, Iterator, List, NamedTuple, Tuple

from config import GRADIENT_BOTTOM_STOP
from terrain.scene import Scene

logger = logging.getLogger(__name__)


class DrawOp(NamedTuple):
    kind: str       # "gradient" | "ellipse" | "polygon"
    label: str      # "sky", "sun" or "layer<index>"
    args: Tuple[Any, ...]


def sky_stops(scene: Scene) -> List[Tuple[float, Tuple[int, int, int]]]:
    return [
        (0.0, scene.palette.top.to_rgb()),
        (GRADIENT_BOTTOM_STOP, scene.palette.bottom.to_rgb()),
    ]


def iter_frame(scene: Scene) -> Iterator[DrawOp]:
    """Yield the frame's draw operations in paint order.

    Sky first, then the sun, then layers from the highest index down to 0
    so nearer ranges cover the ones behind them and the sun.
    """
    full = (0.0, 0.0, float(scene.width), float(scene.height))
    yield DrawOp("gradient", "sky", (full, sky_stops(scene)))
    yield DrawOp("ellipse", "sun", (scene.sun.ellipse_rect(), scene.sun.fill.to_rgb()))
    for layer in reversed(scene.layers):
        yield DrawOp("polygon", f"layer{layer.index}",
                     (scene.silhouette(layer.index), layer.fill.to_rgb()))


def frame_plan(scene: Scene) -> List[DrawOp]:
    return list(iter_frame(scene))


def render_frame(scene: Scene, surface) -> None:
    """Draw one full frame of ``scene`` onto ``surface``."""
    for op in iter_frame(scene):
        if op.kind == "gradient":
            surface.fill_gradient(*op.args)
        elif op.kind == "ellipse":
            surface.fill_ellipse(*op.args)
        elif op.kind == "polygon":
            surface.fill_polygon(*op.args)
        else:  # pragma: no cover - iter_frame only yields the kinds above
            raise ValueError(f"unknown draw op {op.kind!r}")


def render_image(scene: Scene):
    """Render ``scene`` into a new Pillow image."""
    from .surfaces import ImageSurface

    surf = ImageSurface(scene.width, scene.height, background=scene.frontmost_color.to_rgb())
    render_frame(scene, surf)
    logger.debug("rendered %dx%d image", scene.width, scene.height)
    return surf.image
