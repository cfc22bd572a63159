"""Synthetic pixel buffers shared by the unit tests."""

import numpy as np

from ascii_art.pixels import PixelBuffer


def solid(width, height, rgb):
    return PixelBuffer.from_rgb(width, height, [rgb] * (width * height))


def from_gray_rows(rows):
    """Rows of 0..255 ints -> opaque gray PixelBuffer."""
    arr = np.array(rows, dtype=np.uint8)
    return PixelBuffer.from_array(np.stack([arr, arr, arr], axis=2))


def noise(width, height, seed=0):
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8))
