# surfaces.py - drawing surfaces the compositor can target
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

RGB = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]
Stop = Tuple[float, RGB]
Point = Tuple[float, float]


def gradient_rows(height: int, stops: Sequence[Stop]) -> np.ndarray:
    """Per-row RGB colors for a vertical gradient, shape ``(height, 3)``.

    ``stops`` are ``(offset, rgb)`` with offsets in ``[0, 1]``; rows before the
    first or after the last stop hold that stop's color.
    """
    if not stops:
        raise ValueError("gradient needs at least one stop")
    stops = sorted(stops, key=lambda s: s[0])
    offsets = np.array([s[0] for s in stops], dtype=np.float64)
    colors = np.array([s[1] for s in stops], dtype=np.float64)
    t = (np.arange(height, dtype=np.float64) + 0.5) / max(height, 1)
    out = np.empty((height, 3), dtype=np.float64)
    for c in range(3):
        out[:, c] = np.interp(t, offsets, colors[:, c])
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


class ImageSurface:
    """Pillow-backed surface for headless export."""

    def __init__(self, width: int, height: int, background: RGB = (0, 0, 0)) -> None:
        self.image = Image.new("RGB", (int(width), int(height)), background)
        self._draw = ImageDraw.Draw(self.image)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        x, y, w, h = rect
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], fill=tuple(color))

    def fill_gradient(self, rect: Rect, stops: Sequence[Stop]) -> None:
        x, y, w, h = (int(round(v)) for v in rect)
        if w <= 0 or h <= 0:
            return
        rows = gradient_rows(h, stops)
        block = np.repeat(rows[:, None, :], w, axis=1)
        self.image.paste(Image.fromarray(block, "RGB"), (x, y))

    def fill_ellipse(self, rect: Rect, color: RGB) -> None:
        x, y, w, h = rect
        self._draw.ellipse([x, y, x + w, y + h], fill=tuple(color))

    def fill_polygon(self, points: Sequence[Point], color: RGB) -> None:
        self._draw.polygon([tuple(p) for p in points], fill=tuple(color))

    def save(self, path: str) -> None:
        self.image.save(path)


class PygameSurface:
    """Wraps a ``pygame.Surface`` (the window or an off-screen buffer)."""

    def __init__(self, surface: Any) -> None:
        import pygame
        self._pg = pygame
        self.surface = surface

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        self.surface.fill(color, self._pg.Rect(*(int(round(v)) for v in rect)))

    def fill_gradient(self, rect: Rect, stops: Sequence[Stop]) -> None:
        x, y, w, h = (int(round(v)) for v in rect)
        if w <= 0 or h <= 0:
            return
        rows = gradient_rows(h, stops)
        # one horizontal span per row
        for i, color in enumerate(rows):
            self.surface.fill(tuple(int(c) for c in color), self._pg.Rect(x, y + i, w, 1))

    def fill_ellipse(self, rect: Rect, color: RGB) -> None:
        self._pg.draw.ellipse(self.surface, color, self._pg.Rect(*(int(round(v)) for v in rect)))

    def fill_polygon(self, points: Sequence[Point], color: RGB) -> None:
        self._pg.draw.polygon(self.surface, color, points)


class RecordingSurface:
    """Records draw calls as tuples instead of drawing; used by tests and ``describe``."""

    def __init__(self, width: int, height: int) -> None:
        self._size = (int(width), int(height))
        self.calls: List[Tuple[Any, ...]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        self.calls.append(("rect", tuple(rect), tuple(color)))

    def fill_gradient(self, rect: Rect, stops: Sequence[Stop]) -> None:
        self.calls.append(("gradient", tuple(rect), tuple((o, tuple(c)) for o, c in stops)))

    def fill_ellipse(self, rect: Rect, color: RGB) -> None:
        self.calls.append(("ellipse", tuple(rect), tuple(color)))

    def fill_polygon(self, points: Sequence[Point], color: RGB) -> None:
        self.calls.append(("polygon", tuple(tuple(p) for p in points), tuple(color)))

    def kinds(self) -> List[str]:
        return [c[0] for c in self.calls]

    def clear(self) -> None:
        self.calls.clear()
