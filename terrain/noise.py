# noise.py - seeded 1D/2D value-noise FBM for ridgelines
from __future__ import annotations

from typing import Union

import numpy as np

LATTICE_BITS = 12
LATTICE_SIZE = 1 << LATTICE_BITS          # 4096 lattice values
LATTICE_MASK = LATTICE_SIZE - 1
Y_WRAP = 16                               # row stride used to fold 2D into the table

ArrayLike = Union[float, np.ndarray]


def _smooth(t: np.ndarray) -> np.ndarray:
    # 3t^2 - 2t^3, zero slope at lattice points
    return t * t * (3.0 - 2.0 * t)


class CoherentNoise:
    """Continuous pseudo-random scalar field with values in ``[0, 1]``.

    A single table of ``LATTICE_SIZE`` uniform values is drawn from ``seed``
    at construction; nothing changes afterwards, so the same coordinate
    always returns the same value.  Each octave doubles the frequency and
    scales the amplitude by ``falloff``; the sum is divided by the total
    amplitude so the result never leaves ``[0, 1]``.

    Lattice indices wrap with a mask, so large coordinates (``layer_count *
    viewport_width`` and beyond) stay continuous: neighbouring integers map
    to neighbouring table slots, including across the wrap point.
    """

    def __init__(self, seed: int = 0, octaves: int = 4, falloff: float = 0.5) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        if not 0.0 < falloff <= 1.0:
            raise ValueError("falloff must be in (0, 1]")
        self.seed = int(seed)
        self.octaves = int(octaves)
        self.falloff = float(falloff)
        rng = np.random.default_rng(self.seed)
        self._table = rng.random(LATTICE_SIZE)
        amps = self.falloff ** np.arange(self.octaves)
        self._amps = amps
        self._amp_total = float(amps.sum())

    def _octave(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        xi = np.floor(x)
        yi = np.floor(y)
        xf = _smooth(x - xi)
        yf = _smooth(y - yi)
        xi = xi.astype(np.int64)
        yi = yi.astype(np.int64)

        base = xi + yi * Y_WRAP
        v00 = self._table[base & LATTICE_MASK]
        v10 = self._table[(base + 1) & LATTICE_MASK]
        v01 = self._table[(base + Y_WRAP) & LATTICE_MASK]
        v11 = self._table[(base + Y_WRAP + 1) & LATTICE_MASK]

        top = v00 + (v10 - v00) * xf
        bot = v01 + (v11 - v01) * xf
        return top + (bot - top) * yf

    def sample_many(self, xs: ArrayLike, ys: ArrayLike = 0.0) -> np.ndarray:
        """Vectorised sampling; ``xs`` and ``ys`` broadcast against each other."""
        x = np.asarray(xs, dtype=np.float64)
        y = np.asarray(ys, dtype=np.float64)
        x, y = np.broadcast_arrays(x, y)
        out = np.zeros(x.shape, dtype=np.float64)
        freq = 1.0
        for amp in self._amps:
            out += amp * self._octave(x * freq, y * freq)
            freq *= 2.0
        out /= self._amp_total
        return np.clip(out, 0.0, 1.0)

    def sample(self, x: float, y: float = 0.0) -> float:
        return float(self.sample_many(x, y))

    __call__ = sample
