# terrain/__init__.py
# Package init for landscape generation modules

from .noise import CoherentNoise
from .geometry import Bounds, lerp_range
from .palette import HSB, Palette, derive_top_color, derive_bottom_color, derive_palette, clamp
from .sun import Sun, SunDraws, place_sun, sun_color
from .layers import Layer, LayerDraws, build_layer, build_layers, layer_max_height, noise_window
from .silhouette import build_silhouette
from .scene import Scene, initialize, initialize_from_config, on_resize

__all__ = [
    "CoherentNoise",
    "Bounds", "lerp_range",
    "HSB", "Palette", "derive_top_color", "derive_bottom_color", "derive_palette", "clamp",
    "Sun", "SunDraws", "place_sun", "sun_color",
    "Layer", "LayerDraws", "build_layer", "build_layers", "layer_max_height", "noise_window",
    "build_silhouette",
    "Scene", "initialize", "initialize_from_config", "on_resize",
]
