"""
Seedable 2D lattice noise for terrain heights.

Integer lattice points are hashed to pseudo-random values in [-1, 1],
blended with a cosine ease curve and summed over octaves. The final value
is rescaled to the 0-255 height range.

Hash arithmetic keeps only the low 31 bits of every intermediate result,
which is what wrapping 32- or 64-bit integer arithmetic followed by the
0x7fffffff mask produces.
"""

import math
from typing import Optional

import numpy as np
import structlog

from .height_supplier import HeightSupplier
from ..utils.random import EntropySource, resolve_entropy

logger = structlog.get_logger()

NOISE_X = 1619
NOISE_Y = 31337
NOISE_SEED = 1013

MASK_31 = 0x7FFFFFFF

MIN_HEIGHT = 0.0
MAX_HEIGHT = 255.0


def find_noise(ix: int, iy: int, seed: int) -> float:
    """Hash an integer lattice point to a value in [-1, 1]."""
    n = (NOISE_X * ix + NOISE_Y * iy + NOISE_SEED * seed) & MASK_31
    n = (n >> 13) ^ n
    n = (n * (n * n * 60493 + 19990303) + 1376312589) & MASK_31
    return 1.0 - n / 1073741824.0


def interpolate(a: float, b: float, t: float) -> float:
    """Cosine interpolation between a (t = 0) and b (t = 1)."""
    f = (1.0 - math.cos(t * math.pi)) * 0.5
    return a * (1.0 - f) + b * f


def lattice_noise(x: float, y: float, seed: int) -> float:
    """
    Blend the hashed values of the four lattice points next to (x, y).

    Lattice coordinates truncate toward zero, so for negative inputs the
    fractional offsets are negative.
    """
    lattice_x = math.trunc(x)
    lattice_y = math.trunc(y)

    s = find_noise(lattice_x, lattice_y, seed)
    t = find_noise(lattice_x + 1, lattice_y, seed)
    u = find_noise(lattice_x, lattice_y + 1, seed)
    v = find_noise(lattice_x + 1, lattice_y + 1, seed)

    i1 = interpolate(s, t, x - lattice_x)
    i2 = interpolate(u, v, x - lattice_x)

    return interpolate(i1, i2, y - lattice_y)


def _find_noise_array(ix: np.ndarray, iy: np.ndarray, seed: int) -> np.ndarray:
    """Vectorized find_noise; uint64 overflow wraps, the mask keeps the low bits."""
    seed_term = (NOISE_SEED * seed) & MASK_31
    n = (NOISE_X * ix.astype(np.int64) + NOISE_Y * iy.astype(np.int64) + seed_term) & MASK_31
    n = n.astype(np.uint64)
    n = (n >> np.uint64(13)) ^ n
    n = (n * (n * n * np.uint64(60493) + np.uint64(19990303)) + np.uint64(1376312589)) & np.uint64(MASK_31)
    return 1.0 - n.astype(np.float64) / 1073741824.0


def _interpolate_array(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    f = (1.0 - np.cos(t * np.pi)) * 0.5
    return a * (1.0 - f) + b * f


def _lattice_noise_array(x: np.ndarray, y: np.ndarray, seed: int) -> np.ndarray:
    lattice_x = np.trunc(x)
    lattice_y = np.trunc(y)
    ix = lattice_x.astype(np.int64)
    iy = lattice_y.astype(np.int64)

    s = _find_noise_array(ix, iy, seed)
    t = _find_noise_array(ix + 1, iy, seed)
    u = _find_noise_array(ix, iy + 1, seed)
    v = _find_noise_array(ix + 1, iy + 1, seed)

    i1 = _interpolate_array(s, t, x - lattice_x)
    i2 = _interpolate_array(u, v, x - lattice_x)

    return _interpolate_array(i1, i2, y - lattice_y)


class PerlinNoiseGenerator(HeightSupplier):
    """
    Coherent noise height supplier.

    The octave loop runs over range(octaves - 1), so the default of two
    octaves evaluates a single octave (a = 0). Pass octaves=3 or more for
    multi-octave noise; octaves=1 sums nothing and gives a flat 128.
    """

    def __init__(
        self,
        seed: int,
        octaves: int = 2,
        persistence: float = 0.5,
        zoom: float = 6.0,
    ):
        """
        Initialize the noise generator.

        Args:
            seed: Noise seed, fixed for the generator's lifetime
            octaves: Nominal octave count (effective count is octaves - 1)
            persistence: Amplitude multiplier per octave
            zoom: Coordinate divisor; larger values give smoother terrain
        """
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")
        if zoom == 0:
            raise ValueError("zoom must be non-zero")

        self._seed = int(seed)
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.zoom = float(zoom)

    @property
    def seed(self) -> int:
        return self._seed

    def value_for(self, x: int, y: int) -> float:
        """
        Calculate the height value for lattice point (x, y).

        Args:
            x: Grid x coordinate
            y: Grid y coordinate

        Returns:
            Height in [0, 255]
        """
        getnoise = 0.0
        for a in range(self.octaves - 1):
            frequency = 2.0 ** a
            amplitude = self.persistence ** a
            getnoise += lattice_noise(
                x * frequency / self.zoom, y / self.zoom * frequency, self._seed
            ) * amplitude

        value = getnoise * 128.0 + 128.0
        if value > MAX_HEIGHT:
            value = MAX_HEIGHT
        elif value < MIN_HEIGHT:
            value = MIN_HEIGHT
        return value

    def evaluate(self, x: int, y: int) -> float:
        return self.value_for(x, y)

    def sample_grid(self, width: int, length: int) -> np.ndarray:
        """Vectorized value_for over the (length + 1, width + 1) lattice, indexed [y, x]."""
        xs, ys = np.meshgrid(
            np.arange(width + 1, dtype=np.float64),
            np.arange(length + 1, dtype=np.float64),
        )

        getnoise = np.zeros_like(xs)
        for a in range(self.octaves - 1):
            frequency = 2.0 ** a
            amplitude = self.persistence ** a
            getnoise += _lattice_noise_array(
                xs * frequency / self.zoom, ys / self.zoom * frequency, self._seed
            ) * amplitude

        return np.clip(getnoise * 128.0 + 128.0, MIN_HEIGHT, MAX_HEIGHT)

    def __repr__(self) -> str:
        return (
            f"PerlinNoiseGenerator(seed={self._seed}, octaves={self.octaves}, "
            f"persistence={self.persistence}, zoom={self.zoom})"
        )


def new_generator(
    seed: Optional[int] = None,
    entropy: Optional[EntropySource] = None,
    **options,
) -> PerlinNoiseGenerator:
    """
    Create a noise generator, drawing a seed when none is given.

    Args:
        seed: Explicit seed, or None to draw one
        entropy: Source for the drawn seed; system entropy if omitted
        **options: octaves, persistence, zoom

    Returns:
        PerlinNoiseGenerator
    """
    if seed is None:
        seed = resolve_entropy(entropy).draw_seed()
        logger.debug("Drew noise seed", seed=seed)
    return PerlinNoiseGenerator(seed, **options)
