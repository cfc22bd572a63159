#!/usr/bin/env python3
# ascii_art/rendering/dither_mode.py
"""
Dithering renderers: Floyd-Steinberg and Atkinson error diffusion, and
4x4 Bayer ordered dithering.

Error diffusion works on a float32 grayscale scratch buffer owned by a single
render call. Pixels are visited in strict row-major order and each one pushes
its quantisation error into neighbours that have not been visited yet, so the
value left in a cell after the pass is exactly its quantised level.
Arithmetic is done in double precision and stored back as float32.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ascii_art.luminance import grayscale
from ascii_art.options import RenderOptions
from ascii_art.pixels import PixelBuffer
from ascii_art.ramps import glyph_index, glyph_indices
from ascii_art.rendering.ramp_mode import grid_to_text
from ascii_art.sampler import sample

__all__ = [
    "BAYER_4X4",
    "FLOYD_STEINBERG_TAPS",
    "ATKINSON_TAPS",
    "diffuse_error",
    "floyd_steinberg",
    "atkinson",
    "bayer",
    "FloydRenderer",
    "BayerRenderer",
    "AtkinsonRenderer",
]

# (dx, dy, numerator, denominator)
Tap = Tuple[int, int, int, int]

FLOYD_STEINBERG_TAPS: Sequence[Tap] = (
    (1, 0, 7, 16),
    (-1, 1, 3, 16),
    (0, 1, 5, 16),
    (1, 1, 1, 16),
)

# Each neighbour gets the full eighth; two eighths are dropped on purpose.
ATKINSON_TAPS: Sequence[Tap] = (
    (1, 0, 1, 1),
    (2, 0, 1, 1),
    (-1, 1, 1, 1),
    (0, 1, 1, 1),
    (1, 1, 1, 1),
    (0, 2, 1, 1),
)

BAYER_4X4 = np.array(
    [
        [0, 8, 2, 10],
        [12, 4, 14, 6],
        [3, 11, 1, 9],
        [15, 7, 13, 5],
    ],
    dtype=np.float64,
)


def diffuse_error(buf: np.ndarray, width: int, height: int, x: int, y: int,
                  error: float, taps: Sequence[Tap]) -> None:
    """Add error * num / den to each in-bounds tap of (x, y). Out-of-bounds taps are skipped."""
    for dx, dy, num, den in taps:
        nx = x + dx
        ny = y + dy
        if nx < 0 or nx >= width or ny >= height:
            continue
        j = ny * width + nx
        buf[j] = float(buf[j]) + error * num / den


def floyd_steinberg(buf: np.ndarray, width: int, height: int, levels: int) -> np.ndarray:
    """Quantise buf (flat float32, row-major) in place to `levels` even steps."""
    top = levels - 1
    step = 255 / top
    for y in range(height):
        for x in range(width):
            i = y * width + x
            old = float(buf[i])
            new = math.floor(old / 255 * top + 0.5) * step
            buf[i] = new
            diffuse_error(buf, width, height, x, y, old - new, FLOYD_STEINBERG_TAPS)
    return buf


def atkinson(buf: np.ndarray, width: int, height: int) -> np.ndarray:
    """Binary-quantise buf (flat float32, row-major) in place, Atkinson style."""
    for y in range(height):
        for x in range(width):
            i = y * width + x
            old = float(buf[i])
            new = 255.0 if old > 128 else 0.0
            buf[i] = new
            diffuse_error(buf, width, height, x, y, (old - new) / 8, ATKINSON_TAPS)
    return buf


def bayer(gray: np.ndarray) -> np.ndarray:
    """Shift each cell by its Bayer threshold and clamp into [0, 255]. No state."""
    h, w = gray.shape
    ys = np.arange(h) % 4
    xs = np.arange(w) % 4
    threshold = (BAYER_4X4[ys[:, None], xs[None, :]] / 16) * 255
    return np.clip(gray + (threshold - 128), 0, 255)


def _scratch(grid: PixelBuffer) -> np.ndarray:
    return grayscale(grid.as_array()).astype(np.float32).reshape(-1)


def _quantised_text(buf: np.ndarray, width: int, ramp: str) -> str:
    ramp_len = len(ramp)
    chars = np.array([ramp[glyph_index(float(v), ramp_len)] for v in buf])
    return grid_to_text(chars.reshape(-1, width))


class FloydRenderer:
    name = "floyd"

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        grid = sample(pixels, options)
        buf = floyd_steinberg(_scratch(grid), grid.width, grid.height, options.ramp_len)
        return _quantised_text(buf, grid.width, options.ramp)


class BayerRenderer:
    name = "bayer"

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        grid = sample(pixels, options)
        adjusted = bayer(grayscale(grid.as_array()))
        glyphs = np.array(list(options.ramp))
        return grid_to_text(glyphs[glyph_indices(adjusted, options.ramp_len)])


class AtkinsonRenderer:
    name = "atkinson"

    def render(self, pixels: PixelBuffer, options: RenderOptions) -> str:
        grid = sample(pixels, options)
        buf = atkinson(_scratch(grid), grid.width, grid.height)
        return _quantised_text(buf, grid.width, options.ramp)
