"""
Landscape tuning knobs.
Safe to tweak without touching generation code.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from safe_parse import to_float, to_int

logger = logging.getLogger(__name__)

# Color space: every HSB channel lives in [0, CHANNEL_MAX]
CHANNEL_MAX: float = 255.0

# Sky palette
TOP_SATURATION: float = 115.0
TOP_BRIGHTNESS: float = 150.0
BOTTOM_SATURATION_SCALE: float = 0.9
BOTTOM_BRIGHTNESS_SCALE: float = 1.5
GRADIENT_BOTTOM_STOP: float = 0.4     # fraction of viewport height where the bottom color is reached

# Sun
SUN_BASE_SIZE: float = 50.0
SUN_SIZE_RANGE: Tuple[float, float] = (0.1, 0.3)     # fraction of viewport width added to the base size
SUN_Y_RANGE: Tuple[float, float] = (-0.2, 0.5)       # fraction of sun size; negative pokes above the top edge
SUN_SATURATION_SCALE: float = 0.9
SUN_BRIGHTNESS_SCALE: float = 1.6

# Mountain layers
LAYER_HEIGHT_SPAN: float = 0.6        # share of viewport height split between layers (H - 0.4H)
LAYER_JUMP_EXPONENT: Tuple[float, float] = (3.3, 4.0)
LAYER_JUMP_CAP: float = 100.0         # px, cap on the super-linear height boost
JAGGEDNESS_RANGE: Tuple[float, float] = (5.0, 10.0)  # 5 is smooth, 10 is rugged
NOISE_JITTER_SPAN: float = 0.5        # fraction of viewport width a layer window may shift

# Silhouette
SILHOUETTE_OVERSCAN: int = 20         # px sampled past the right edge
ANCHOR_LEFT_X: int = -20

# Noise field
NOISE_OCTAVES: int = 4
NOISE_FALLOFF: float = 0.5

# Defaults for the host window
DEFAULT_LAYER_COUNT: int = 6
DEFAULT_VIEWPORT: Tuple[int, int] = (1280, 720)
DEFAULT_FPS: int = 30


@dataclass(frozen=True)
class LandscapeConfig:
    """Runtime settings for scene generation and the host loop."""

    layer_count: int = DEFAULT_LAYER_COUNT
    width: int = DEFAULT_VIEWPORT[0]
    height: int = DEFAULT_VIEWPORT[1]
    fps: int = DEFAULT_FPS
    noise_octaves: int = NOISE_OCTAVES
    noise_falloff: float = NOISE_FALLOFF
    seed: Optional[int] = None
    hue: Optional[float] = None

    def __post_init__(self) -> None:
        if self.layer_count < 1:
            raise ValueError(f"layer_count must be >= 1, got {self.layer_count}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def viewport(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def with_overrides(self, **kwargs: Any) -> "LandscapeConfig":
        """Return a copy with every non-``None`` keyword applied."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **changes) if changes else self


_FLOAT_FIELDS = {"noise_falloff", "hue"}
_OPTIONAL_FIELDS = {"seed", "hue"}


def config_from_dict(data: Dict[str, Any], base: Optional[LandscapeConfig] = None) -> LandscapeConfig:
    """Overlay ``data`` on ``base`` (or the defaults).

    Unknown keys are ignored with a warning; malformed numbers fall back to
    the base value through :mod:`safe_parse`.  ``null`` clears ``seed`` and
    ``hue`` and keeps the base value for every other field.
    """
    base = base or LandscapeConfig()
    known = {f.name for f in fields(LandscapeConfig)}
    changes: Dict[str, Any] = {}
    for key, raw in data.items():
        if key not in known:
            logger.warning("config: ignoring unknown key %r", key)
            continue
        current = getattr(base, key)
        if raw is None and key in _OPTIONAL_FIELDS:
            changes[key] = None
        elif key in _FLOAT_FIELDS:
            changes[key] = to_float(raw, default=current)
        else:
            changes[key] = to_int(raw, default=current)
    return replace(base, **changes)


def load_config(path: Union[str, Path], base: Optional[LandscapeConfig] = None) -> LandscapeConfig:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    cfg = config_from_dict(data, base)
    logger.info("loaded config from %s", path)
    return cfg
