# silhouette.py - closed ridgeline polygon for one mountain layer
from __future__ import annotations

import numpy as np

from config import SILHOUETTE_OVERSCAN, ANCHOR_LEFT_X
from .geometry import Polygon
from .layers import Layer
from .noise import CoherentNoise


def sample_columns(layer: Layer) -> np.ndarray:
    """Integer pixel columns ``1 .. W+19`` (overscan past the right edge)."""
    width = int(layer.bounds.width)
    return np.arange(1, width + SILHOUETTE_OVERSCAN, dtype=np.int64)


def ridge_heights(layer: Layer, noise: CoherentNoise, columns: np.ndarray) -> np.ndarray:
    """Height above the baseline for each column, in ``[0, max_height]``."""
    width = layer.bounds.width
    nx = layer.start_noise + columns / width * (layer.end_noise - layer.start_noise)
    return layer.max_height * noise.sample_many(nx)


def build_silhouette(layer: Layer, noise: CoherentNoise, viewport_height: float) -> Polygon:
    """Return the fill polygon for ``layer``.

    Starts at the off-canvas anchor ``(-20, H)``, walks every sampled
    column, and ends at ``(W+21, H)`` so the fill always reaches below the
    viewport whatever the noise values are.
    """
    columns = sample_columns(layer)
    ys = viewport_height - ridge_heights(layer, noise, columns)
    right_anchor = int(layer.bounds.width) + SILHOUETTE_OVERSCAN + 1

    points: Polygon = [(float(ANCHOR_LEFT_X), float(viewport_height))]
    points.extend(zip(columns.astype(float).tolist(), ys.tolist()))
    points.append((float(right_anchor), float(viewport_height)))
    return points
