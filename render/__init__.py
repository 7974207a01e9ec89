# render/__init__.py
# Package init for rendering modules

from .compositor import DrawOp, frame_plan, iter_frame, render_frame, render_image, sky_stops
from .surfaces import ImageSurface, PygameSurface, RecordingSurface, gradient_rows

__all__ = [
    "DrawOp", "frame_plan", "iter_frame", "render_frame", "render_image", "sky_stops",
    "ImageSurface", "PygameSurface", "RecordingSurface", "gradient_rows",
]
